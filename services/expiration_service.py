"""
Expiration Service - classifies pantry items by days until expiry.

This service is pure Python with no Streamlit dependencies.

Buckets (days counted from today at 00:00, rounded up):
    days < 0        Expired
    0 <= days <= 3  Critical
    4 <= days <= 7  Warning
    days > 7        Good
"""

import logging
import math
from dataclasses import dataclass
from datetime import date, datetime, time
from enum import Enum
from typing import Iterable, Optional, Union

from models import Ingredient

logger = logging.getLogger(__name__)

CRITICAL_DAYS = 3
WARNING_DAYS = 7
SECONDS_PER_DAY = 86400


class ExpirationStatus(Enum):
    """Expiration bucket with its badge colors (background, text)."""

    EXPIRED = ("Expired", "#dc2626", "#ffffff")
    CRITICAL = ("Critical", "#ea580c", "#ffffff")
    WARNING = ("Warning", "#ca8a04", "#000000")
    GOOD = ("Good", "#16a34a", "#ffffff")

    def __init__(self, label: str, background: str, foreground: str):
        self.label = label
        self.background = background
        self.foreground = foreground


# Stat card titles, in display order
STATUS_CARD_TITLES = {
    ExpirationStatus.EXPIRED: "Expired",
    ExpirationStatus.CRITICAL: f"Critical (≤{CRITICAL_DAYS}d)",
    ExpirationStatus.WARNING: f"Warning (≤{WARNING_DAYS}d)",
    ExpirationStatus.GOOD: "Good",
}


@dataclass
class ExpirationRow:
    """View-ready row for the expiration table."""
    id: Optional[str]
    name: str
    quantity: str
    expiration_date: str
    status: ExpirationStatus
    days_left: int
    days_left_label: str


DateLike = Union[date, datetime, str]


def parse_expiration(value: DateLike) -> Optional[datetime]:
    """
    Parse an expiration value into a naive local datetime.

    Accepts ISO strings ("2024-06-18", "2024-06-18T09:30:00Z"), dates and
    datetimes. Values carrying a UTC offset are converted to local time
    first. Returns None for blank or unparseable input.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        return datetime.combine(value, time.min)
    elif not value or not isinstance(value, str):
        return None
    else:
        try:
            parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
        except ValueError:
            return None

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone()
    return parsed.replace(tzinfo=None)


def _midnight(today: Optional[DateLike]) -> datetime:
    if today is None:
        return datetime.combine(date.today(), time.min)
    parsed = parse_expiration(today)
    if parsed is None:
        raise ValueError(f"Invalid reference date: {today!r}")
    return datetime.combine(parsed.date(), time.min)


def days_until(expiration: DateLike, today: Optional[DateLike] = None) -> int:
    """
    Whole days from today (at 00:00) until ``expiration``, rounded up.

    Raises:
        ValueError: If ``expiration`` cannot be parsed
    """
    expires_at = parse_expiration(expiration)
    if expires_at is None:
        raise ValueError(f"Invalid expiration date: {expiration!r}")

    delta = expires_at - _midnight(today)
    return math.ceil(delta.total_seconds() / SECONDS_PER_DAY)


def status_for_days(diff_days: int) -> ExpirationStatus:
    """Map a day difference onto its bucket."""
    if diff_days < 0:
        return ExpirationStatus.EXPIRED
    if diff_days <= CRITICAL_DAYS:
        return ExpirationStatus.CRITICAL
    if diff_days <= WARNING_DAYS:
        return ExpirationStatus.WARNING
    return ExpirationStatus.GOOD


def classify(expiration: DateLike, today: Optional[DateLike] = None) -> ExpirationStatus:
    """Bucket an expiration date relative to today."""
    return status_for_days(days_until(expiration, today))


def days_left_label(diff_days: int) -> str:
    if diff_days < 0:
        return f"{abs(diff_days)} days ago"
    if diff_days == 0:
        return "Today"
    return f"{diff_days} days"


def format_date(value: DateLike) -> str:
    """Short display form of an expiration date; falls back to the raw value."""
    parsed = parse_expiration(value)
    if parsed is None:
        return str(value or "")
    return parsed.strftime("%x")


def sort_by_expiration(ingredients: Iterable[Ingredient]) -> list[Ingredient]:
    """Soonest first. Items without a readable date go last."""
    def key(ingredient: Ingredient):
        parsed = parse_expiration(ingredient.expiration_date)
        return (parsed is None, parsed or datetime.max)

    return sorted(ingredients, key=key)


def count_by_status(
    ingredients: Iterable[Ingredient],
    today: Optional[DateLike] = None,
) -> dict[ExpirationStatus, int]:
    """Count ingredients per bucket; unreadable dates are not counted."""
    counts = {status: 0 for status in ExpirationStatus}
    for ingredient in ingredients:
        try:
            counts[classify(ingredient.expiration_date, today)] += 1
        except ValueError:
            logger.warning(
                f"Skipping {ingredient.name!r}: bad expiration date "
                f"{ingredient.expiration_date!r}"
            )
    return counts


def build_rows(
    ingredients: Iterable[Ingredient],
    today: Optional[DateLike] = None,
) -> list[ExpirationRow]:
    """Sorted table rows for the expiration page."""
    rows = []
    for ingredient in sort_by_expiration(ingredients):
        try:
            diff = days_until(ingredient.expiration_date, today)
        except ValueError:
            logger.warning(
                f"Skipping {ingredient.name!r}: bad expiration date "
                f"{ingredient.expiration_date!r}"
            )
            continue

        rows.append(ExpirationRow(
            id=ingredient.id,
            name=ingredient.name,
            quantity=ingredient.display_quantity,
            expiration_date=format_date(ingredient.expiration_date),
            status=status_for_days(diff),
            days_left=diff,
            days_left_label=days_left_label(diff),
        ))
    return rows

# tests/unit/test_expiration_service.py
import time
from datetime import date, datetime, timezone

import pytest

from models import Ingredient
from services.expiration_service import (
    ExpirationStatus,
    build_rows,
    classify,
    count_by_status,
    days_left_label,
    days_until,
    parse_expiration,
    sort_by_expiration,
    status_for_days,
)

TODAY = date(2024, 6, 10)


@pytest.fixture
def local_tz(monkeypatch):
    """Switch the process timezone (POSIX TZ string) for one test."""
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is not available on this platform")

    def use(tz):
        monkeypatch.setenv("TZ", tz)
        time.tzset()

    yield use
    monkeypatch.undo()
    time.tzset()


def _ingredient(name, expires, id_="1"):
    return Ingredient(id=id_, name=name, quantity=1, unit="pcs", expirationDate=expires)


def test_same_day_is_critical():
    assert days_until("2024-06-10", TODAY) == 0
    assert classify("2024-06-10", TODAY) is ExpirationStatus.CRITICAL


def test_eight_days_out_is_good():
    assert days_until("2024-06-18", TODAY) == 8
    assert classify("2024-06-18", TODAY) is ExpirationStatus.GOOD


def test_past_date_is_expired():
    assert days_until("2024-06-05", TODAY) == -5
    assert classify("2024-06-05", TODAY) is ExpirationStatus.EXPIRED


@pytest.mark.parametrize("diff,status", [
    (-1, ExpirationStatus.EXPIRED),
    (3, ExpirationStatus.CRITICAL),
    (4, ExpirationStatus.WARNING),
    (7, ExpirationStatus.WARNING),
    (8, ExpirationStatus.GOOD),
])
def test_bucket_boundaries(diff, status):
    assert status_for_days(diff) is status


def test_time_of_day_rounds_up():
    assert days_until("2024-06-10T09:30:00", TODAY) == 1


def test_reference_time_is_truncated_to_midnight():
    assert days_until("2024-06-12", datetime(2024, 6, 10, 23, 59)) == 2



def test_unparseable_date_raises():
    assert parse_expiration("soon") is None
    with pytest.raises(ValueError):
        days_until("soon", TODAY)


def test_days_left_label():
    assert days_left_label(-5) == "5 days ago"
    assert days_left_label(0) == "Today"
    assert days_left_label(8) == "8 days"


def test_sort_puts_unreadable_dates_last():
    items = [
        _ingredient("milk", "2024-06-20", "1"),
        _ingredient("mystery", "", "2"),
        _ingredient("eggs", "2024-06-11", "3"),
    ]
    assert [i.name for i in sort_by_expiration(items)] == ["eggs", "milk", "mystery"]


def test_count_by_status_has_every_bucket():
    counts = count_by_status([_ingredient("eggs", "2024-06-05")], TODAY)
    assert set(counts) == set(ExpirationStatus)
    assert counts[ExpirationStatus.EXPIRED] == 1
    assert counts[ExpirationStatus.GOOD] == 0


def test_count_by_status_skips_bad_dates():
    counts = count_by_status([_ingredient("mystery", "n/a")], TODAY)
    assert sum(counts.values()) == 0


def test_build_rows_are_sorted_and_labelled():
    rows = build_rows(
        [_ingredient("flour", "2024-06-30", "1"), _ingredient("milk", "2024-06-09", "2")],
        TODAY,
    )
    assert [r.name for r in rows] == ["milk", "flour"]
    assert rows[0].status is ExpirationStatus.EXPIRED
    assert rows[0].days_left_label == "1 days ago"
    assert rows[0].quantity == "1 pcs"
    assert rows[1].days_left == 20


def test_status_carries_colors():
    assert ExpirationStatus.EXPIRED.label == "Expired"
    assert ExpirationStatus.WARNING.background.startswith("#")


def test_utc_suffix_is_accepted(local_tz):
    local_tz("UTC0")
    assert parse_expiration("2024-06-18T00:00:00Z") == datetime(2024, 6, 18)


def test_utc_timestamp_is_read_in_local_time(local_tz):
    local_tz("JST-9")
    assert parse_expiration("2024-06-10T23:00:00Z") == datetime(2024, 6, 11, 8)
    assert days_until("2024-06-10T23:00:00Z", TODAY) == 2


def test_aware_datetime_is_converted(local_tz):
    local_tz("JST-9")
    expires = datetime(2024, 6, 10, 23, tzinfo=timezone.utc)
    assert parse_expiration(expires) == datetime(2024, 6, 11, 8)


def test_naive_datetime_is_kept(local_tz):
    local_tz("JST-9")
    assert parse_expiration(datetime(2024, 6, 10, 23)) == datetime(2024, 6, 10, 23)

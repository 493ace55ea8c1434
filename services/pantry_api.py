"""
Pantry API client for the household pantry backend.

The backend owns storage, identifiers and validation; this client only
maps its CRUD endpoints onto typed methods.

Endpoints used:
- /api/ingredients        GET, POST, DELETE /{id}
- /api/recipes            GET, POST, PUT /{id}, DELETE /{id}
- /api/mealplans          GET, POST, PUT /{id}, DELETE /{id}
- /api/shoppinglist       GET, POST, PUT /{id}, DELETE /{id}
- /api/notifications      GET ?days=N (ingredients expiring within N days)

Every failure (non-2xx status, network error, timeout, invalid JSON) is
logged and raised as PantryAPIError. Malformed records inside a list
response are logged and skipped so one bad row does not hide the rest.
"""

import logging
from typing import Any, Optional, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from config.settings import get_settings
from models import Ingredient, Recipe, MealPlan, ShoppingItem
from services.exceptions import PantryAPIError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class PantryAPI:
    """REST client for the pantry backend."""

    INGREDIENTS = "/api/ingredients"
    RECIPES = "/api/recipes"
    MEAL_PLANS = "/api/mealplans"
    SHOPPING_LIST = "/api/shoppinglist"
    NOTIFICATIONS = "/api/notifications"

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        settings = get_settings()
        self.base_url = (base_url or settings.api_base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.api_timeout
        self._transport = transport

    # ==========================================
    # Transport
    # ==========================================

    def _client(self) -> httpx.Client:
        return httpx.Client(
            base_url=self.base_url,
            timeout=self.timeout,
            transport=self._transport,
            headers={"Accept": "application/json"},
        )

    def _request(
        self,
        method: str,
        path: str,
        json: Any = None,
        params: Optional[dict] = None,
    ) -> httpx.Response:
        """Send a request and raise PantryAPIError on any failure."""
        try:
            with self._client() as client:
                response = client.request(method, path, json=json, params=params)
                response.raise_for_status()
            return response

        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.error(f"{method} {path} failed: {status} - {e.response.text}")
            raise PantryAPIError(
                f"{method} {path} failed",
                method=method,
                path=path,
                status_code=status,
            ) from e
        except httpx.ConnectError as e:
            logger.error(f"{method} {path}: could not connect to {self.base_url}")
            raise PantryAPIError(
                "Could not connect to the pantry API. Is the backend running?",
                method=method,
                path=path,
            ) from e
        except httpx.TimeoutException as e:
            logger.error(f"{method} {path}: timed out after {self.timeout}s")
            raise PantryAPIError(
                "The pantry API request timed out. Please try again.",
                method=method,
                path=path,
            ) from e
        except httpx.HTTPError as e:
            logger.error(f"{method} {path}: {e}")
            raise PantryAPIError(
                f"{method} {path} failed: {e}",
                method=method,
                path=path,
            ) from e

    def _json(self, response: httpx.Response, method: str, path: str) -> Any:
        try:
            return response.json()
        except ValueError as e:
            logger.error(f"{method} {path}: response is not valid JSON")
            raise PantryAPIError(
                f"{method} {path} returned an invalid response",
                method=method,
                path=path,
                status_code=response.status_code,
            ) from e

    def _get_list(
        self,
        path: str,
        model: type[ModelT],
        params: Optional[dict] = None,
    ) -> list[ModelT]:
        response = self._request("GET", path, params=params)
        data = self._json(response, "GET", path)

        if not isinstance(data, list):
            logger.warning(f"GET {path} did not return a list; treating as empty")
            return []

        items = []
        for item in data:
            try:
                items.append(model.model_validate(item))
            except ValidationError as e:
                logger.warning(f"GET {path}: skipping malformed {model.__name__}: {e}")
        return items

    def _send(
        self,
        method: str,
        path: str,
        model: type[ModelT],
        payload: dict,
    ) -> ModelT:
        response = self._request(method, path, json=payload)
        return self._parse(model, self._json(response, method, path), method, path)

    def _delete(self, path: str) -> None:
        self._request("DELETE", path)

    def _parse(self, model: type[ModelT], data: Any, method: str, path: str) -> ModelT:
        try:
            return model.model_validate(data)
        except ValidationError as e:
            logger.error(f"{method} {path}: unexpected payload: {e}")
            raise PantryAPIError(
                f"{method} {path} returned an unexpected {model.__name__}",
                method=method,
                path=path,
            ) from e

    # ==========================================
    # Ingredients
    # ==========================================

    def list_ingredients(self) -> list[Ingredient]:
        return self._get_list(self.INGREDIENTS, Ingredient)

    def create_ingredient(self, ingredient: Ingredient) -> Ingredient:
        return self._send("POST", self.INGREDIENTS, Ingredient, ingredient.to_payload())

    def delete_ingredient(self, ingredient_id: str) -> None:
        self._delete(f"{self.INGREDIENTS}/{ingredient_id}")

    def list_expiring(self, days: int) -> list[Ingredient]:
        """Ingredients the backend reports as expiring within ``days`` days."""
        return self._get_list(self.NOTIFICATIONS, Ingredient, params={"days": days})

    # ==========================================
    # Recipes
    # ==========================================

    def list_recipes(self) -> list[Recipe]:
        return self._get_list(self.RECIPES, Recipe)

    def create_recipe(self, recipe: Recipe) -> Recipe:
        return self._send("POST", self.RECIPES, Recipe, recipe.to_payload())

    def update_recipe(self, recipe: Recipe) -> Recipe:
        return self._send(
            "PUT",
            f"{self.RECIPES}/{recipe.id}",
            Recipe,
            recipe.to_payload(include_id=True),
        )

    def delete_recipe(self, recipe_id: str) -> None:
        self._delete(f"{self.RECIPES}/{recipe_id}")

    # ==========================================
    # Meal Plans
    # ==========================================

    def list_meal_plans(self) -> list[MealPlan]:
        return self._get_list(self.MEAL_PLANS, MealPlan)

    def create_meal_plan(self, payload: dict) -> MealPlan:
        """Create a slot assignment. ``payload`` is {"date": key, "recipeId": int}."""
        return self._send("POST", self.MEAL_PLANS, MealPlan, payload)

    def update_meal_plan(self, meal_plan_id: str, payload: dict) -> MealPlan:
        return self._send("PUT", f"{self.MEAL_PLANS}/{meal_plan_id}", MealPlan, payload)

    def delete_meal_plan(self, meal_plan_id: str) -> None:
        self._delete(f"{self.MEAL_PLANS}/{meal_plan_id}")

    # ==========================================
    # Shopping List
    # ==========================================

    def list_shopping_items(self) -> list[ShoppingItem]:
        return self._get_list(self.SHOPPING_LIST, ShoppingItem)

    def create_shopping_item(self, item: ShoppingItem) -> ShoppingItem:
        return self._send("POST", self.SHOPPING_LIST, ShoppingItem, item.to_payload())

    def update_shopping_item(self, item: ShoppingItem) -> ShoppingItem:
        return self._send(
            "PUT",
            f"{self.SHOPPING_LIST}/{item.id}",
            ShoppingItem,
            item.to_payload(include_id=True),
        )

    def delete_shopping_item(self, item_id: str) -> None:
        self._delete(f"{self.SHOPPING_LIST}/{item_id}")

    def clear_checked(self, items: list[ShoppingItem]) -> list[str]:
        """
        Delete every checked item.

        Failures are logged and skipped so that one bad item does not keep
        the rest on the list.

        Returns:
            Ids of the items that were actually deleted
        """
        deleted = []
        for item in items:
            if not item.checked or item.id is None:
                continue
            try:
                self.delete_shopping_item(item.id)
                deleted.append(item.id)
            except PantryAPIError as e:
                logger.warning(f"Could not clear shopping item {item.id}: {e}")
        return deleted

"""
TheMealDB connector using the public JSON API.

This connector interfaces with TheMealDB (https://www.themealdb.com) to look up
recipes and normalize them into the models used by the client.

The connector:
- Uses a requests.Session against the v1 JSON API (list.php, filter.php, search.php, lookup.php)
- Treats a null "meals" payload as an empty result, never as an error
- Projects the full records returned by search.php down to MealSummary
- Validates lookup.php records into MealDetail (including the 20 ingredient slots)
- Wraps every transport, status, JSON or validation failure in CatalogError

The base URL defaults to the public test key endpoint and can be overridden via the
MEALDB_BASE_URL environment variable (see recipes.config).
"""

import logging
from typing import Any, Dict, List, Optional

import requests
from pydantic import ValidationError

from recipes.config import CatalogConfig
from recipes.models import MealDetail, MealSummary

from .base import BaseCatalogConnector, CatalogError

logger = logging.getLogger(__name__)

USER_AGENT = "recipe-ideas/0.1"


class MealDBConnector(BaseCatalogConnector):
    """
    Connector for the TheMealDB catalog.

    Every public method issues exactly one GET request. The session is created on
    construction unless one is injected (tests pass a Mock).
    """
    source = "mealdb"

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        """
        Initialize the connector.

        Args:
            base_url: API base URL (optional, reads MEALDB_BASE_URL or uses the public default)
            timeout: Per-request timeout in seconds (optional, reads MEALDB_TIMEOUT_SECONDS)
            session: requests.Session to use (optional, a new session is created if omitted)
        """
        self.base_url = (base_url or CatalogConfig.get_base_url()).rstrip("/")
        self.timeout = timeout or CatalogConfig.get_timeout()
        self.session = session or requests.Session()
        self.session.headers.update({"User-Agent": USER_AGENT})

    def _get_meals(self, endpoint: str, params: Dict[str, str]) -> List[Dict[str, Any]]:
        """
        Call one endpoint and return the records under its "meals" key.

        Raises:
            CatalogError: On connection errors, timeouts, non-2xx responses or invalid JSON.
        """
        url = f"{self.base_url}/{endpoint}"
        logger.debug("GET %s params=%r", url, params)
        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
        except requests.exceptions.Timeout as e:
            raise CatalogError(f"Request to {endpoint} timed out after {self.timeout}s") from e
        except requests.exceptions.RequestException as e:
            raise CatalogError(f"Request to {endpoint} failed: {e}") from e
        except ValueError as e:
            raise CatalogError(f"Response from {endpoint} is not valid JSON: {e}") from e

        if not isinstance(data, dict):
            raise CatalogError(f"Unexpected response shape from {endpoint}: {type(data).__name__}")

        meals = data.get("meals")
        if meals is None:
            return []
        if isinstance(meals, str):
            # The catalog reports some empty results as a message string
            logger.debug("%s returned a message instead of records: %r", endpoint, meals)
            return []
        if not isinstance(meals, list):
            raise CatalogError(f"Unexpected 'meals' payload from {endpoint}: {type(meals).__name__}")

        return [m for m in meals if isinstance(m, dict)]

    def _to_summaries(self, endpoint: str, records: List[Dict[str, Any]]) -> List[MealSummary]:
        try:
            return [MealSummary.model_validate(record) for record in records]
        except ValidationError as e:
            raise CatalogError(f"Invalid recipe record from {endpoint}: {e}") from e

    def filter_by_ingredient(self, ingredient: str) -> List[MealSummary]:
        records = self._get_meals("filter.php", {"i": ingredient})
        return self._to_summaries("filter.php", records)

    def filter_by_category(self, category: str) -> List[MealSummary]:
        records = self._get_meals("filter.php", {"c": category})
        return self._to_summaries("filter.php", records)

    def filter_by_area(self, area: str) -> List[MealSummary]:
        records = self._get_meals("filter.php", {"a": area})
        return self._to_summaries("filter.php", records)

    def search_by_name(self, name: str) -> List[MealSummary]:
        """
        Search recipes by name; an empty name returns the whole catalog.

        search.php returns full records, which MealSummary validation projects
        down to id, name and thumbnail (extra keys are ignored).
        """
        records = self._get_meals("search.php", {"s": name})
        return self._to_summaries("search.php", records)

    def lookup(self, meal_id: str) -> Optional[MealDetail]:
        """
        Fetch the full record for one recipe.

        Returns:
            MealDetail, or None when the catalog has no record for the id.

        Raises:
            CatalogError: On transport failure or when the record fails validation.
        """
        records = self._get_meals("lookup.php", {"i": str(meal_id)})
        if not records:
            return None
        try:
            return MealDetail.model_validate(records[0])
        except ValidationError as e:
            raise CatalogError(f"Invalid recipe detail for id {meal_id}: {e}") from e

    def list_categories(self) -> List[str]:
        records = self._get_meals("list.php", {"c": "list"})
        return [str(r["strCategory"]) for r in records if r.get("strCategory")]

    def list_areas(self) -> List[str]:
        records = self._get_meals("list.php", {"a": "list"})
        return [str(r["strArea"]) for r in records if r.get("strArea")]

"""
Base connector abstract class for recipe catalog integrations.

This module defines the abstract base class that every catalog connector must implement.
It keeps the search pipeline, the detail loader and the filter option prefetch independent
of any particular catalog API, and lets tests substitute a mock connector.

All connectors must:
- Provide the three filter lookups (ingredient, category, area) returning MealSummary lists
- Provide a name search whose results are projected down to MealSummary
- Provide a lookup by id returning zero-or-one MealDetail
- Provide the category and area option lists used to populate the filter selects
- Raise CatalogError for any transport or parsing failure
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from recipes.models import MealDetail, MealSummary


class CatalogError(RuntimeError):
    """
    Exception raised when the catalog cannot be reached or its response cannot be used.

    This exception is raised when:
    - The HTTP request fails (connection error, timeout, non-2xx status)
    - The response body is not valid JSON or has an unexpected shape
    - A record fails model validation
    """


class BaseCatalogConnector(ABC):
    """
    Abstract base class for all recipe catalog connectors.

    Attributes:
        source: String identifier for the catalog (e.g., "mealdb")
    """
    source: str

    @abstractmethod
    def filter_by_ingredient(self, ingredient: str) -> List[MealSummary]:
        """Return every recipe that uses the given main ingredient."""

    @abstractmethod
    def filter_by_category(self, category: str) -> List[MealSummary]:
        """Return every recipe in the given category."""

    @abstractmethod
    def filter_by_area(self, area: str) -> List[MealSummary]:
        """Return every recipe from the given area."""

    @abstractmethod
    def search_by_name(self, name: str) -> List[MealSummary]:
        """
        Search recipes by name.

        An empty name means "all recipes". Implementations project the catalog's
        full records down to MealSummary.
        """

    @abstractmethod
    def lookup(self, meal_id: str) -> Optional[MealDetail]:
        """Return the full record for one recipe id, or None when the catalog has no such record."""

    @abstractmethod
    def list_categories(self) -> List[str]:
        """Return all distinct category names."""

    @abstractmethod
    def list_areas(self) -> List[str]:
        """Return all distinct area names."""

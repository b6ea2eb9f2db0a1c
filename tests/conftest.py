"""Shared fixtures for the recipe client tests."""

from unittest.mock import Mock

import pytest

from recipes.connectors.base import BaseCatalogConnector
from recipes.models import MealSummary


@pytest.fixture
def make_meal():
    """Factory for MealSummary records."""
    def _make(meal_id, name=None, thumbnail_url=""):
        return MealSummary(id=str(meal_id), name=name or f"Meal {meal_id}", thumbnail_url=thumbnail_url)
    return _make


@pytest.fixture
def connector():
    """Catalog connector mock; every lookup returns an empty list unless configured."""
    mock = Mock(spec=BaseCatalogConnector)
    mock.filter_by_ingredient.return_value = []
    mock.filter_by_category.return_value = []
    mock.filter_by_area.return_value = []
    mock.search_by_name.return_value = []
    mock.lookup.return_value = None
    mock.list_categories.return_value = []
    mock.list_areas.return_value = []
    return mock


class ManualScheduler:
    """Scheduler that records actions and runs them on demand."""

    def __init__(self):
        self.scheduled = []
        self.cancelled = []

    def schedule(self, delay, action):
        handle = len(self.scheduled)
        self.scheduled.append((delay, action))
        return handle

    def cancel(self, handle):
        self.cancelled.append(handle)

    def fire(self, handle):
        self.scheduled[handle][1]()


@pytest.fixture
def scheduler():
    """Manual scheduler; tests fire scheduled actions explicitly."""
    return ManualScheduler()

"""
Tests for the detail loader.

These tests verify that:
- A found record loads into the view
- A missing record and a catalog failure both end in the failure message
- A result for a superseded or closed request is discarded
"""

from recipes.connectors.base import CatalogError
from recipes.details import DETAIL_ERROR_MESSAGE, DetailLoader, DetailResult
from recipes.models import DetailStatus, MealDetail


def _detail(meal_id="52772", name="Teriyaki Chicken Casserole"):
    return MealDetail.model_validate({"idMeal": meal_id, "strMeal": name})


class TestOpen:
    """Tests for open()."""

    def test_loaded(self, connector):
        """Test a found record is shown with its name as title."""
        connector.lookup.return_value = _detail()
        loader = DetailLoader(connector)

        view = loader.open("52772")

        connector.lookup.assert_called_once_with("52772")
        assert view.status == DetailStatus.LOADED
        assert view.is_open
        assert view.title == "Teriyaki Chicken Casserole"

    def test_not_found_is_failure(self, connector):
        """Test an id with no record shows the failure message."""
        connector.lookup.return_value = None

        view = DetailLoader(connector).open("0")

        assert view.status == DetailStatus.FAILED
        assert view.error == "Could not load recipe details."
        assert view.title == "Recipe Details"

    def test_catalog_error_is_failure(self, connector):
        """Test a transport failure shows the same failure message."""
        connector.lookup.side_effect = CatalogError("offline")

        view = DetailLoader(connector).open("52772")

        assert view.status == DetailStatus.FAILED
        assert view.error == DETAIL_ERROR_MESSAGE


class TestStaleResults:
    """Tests for token guarding."""

    def test_superseded_result_discarded(self, connector):
        """Test a slow first request cannot overwrite a newer open."""
        loader = DetailLoader(connector)
        first = loader.begin("1")
        second = loader.begin("2")

        assert loader.finish(second, "2", DetailResult(_detail("2", "Second"), None)) is True
        assert loader.finish(first, "1", DetailResult(_detail("1", "First"), None)) is False
        assert loader.view.title == "Second"

    def test_result_after_close_discarded(self, connector):
        """Test a completion arriving after close leaves the overlay closed."""
        loader = DetailLoader(connector)
        token = loader.begin("1")
        assert loader.view.status == DetailStatus.LOADING

        loader.close()

        assert loader.finish(token, "1", DetailResult(_detail("1"), None)) is False
        assert loader.view.status == DetailStatus.IDLE
        assert not loader.view.is_open

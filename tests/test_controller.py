"""
Tests for the application controller.

These tests verify the user-facing transitions end to end with a mocked connector:
- Search rounds apply results, reset paging and discard stale outcomes
- Retry, Clear and mode switching
- Name-mode debounce through a manual scheduler
- Paging, favorites and the detail overlay
"""

import os
from unittest.mock import patch

import pytest

from recipes.connectors.base import CatalogError
from recipes.controller import RecipeController
from recipes.favorites import FavoritesStore
from recipes.models import DetailStatus, MealDetail, SearchMode, SearchState, SearchStatus
from recipes.scheduling import InlineScheduler
from recipes.search import SearchOutcome
from recipes.storage import InMemoryStorage


@pytest.fixture
def controller(connector, scheduler):
    return RecipeController(connector, FavoritesStore(InMemoryStorage()), scheduler=scheduler)


def _chicken_results(make_meal, count=15):
    return [make_meal(i, f"Chicken {i:02d}") for i in range(1, count + 1)]


class TestSearch:
    """Tests for search rounds."""

    def test_submit_applies_results(self, controller, connector, make_meal):
        """Test a submitted ingredient search fills results and page count."""
        connector.filter_by_ingredient.return_value = _chicken_results(make_meal)
        controller.set_query("chicken")

        controller.submit_query()

        assert controller.state.status == SearchStatus.OK
        assert len(controller.state.results) == 15
        assert controller.total_pages == 2
        assert len(controller.page_items) == 12
        assert controller.state.last_search == SearchState(mode=SearchMode.INGREDIENT, query="chicken")

    def test_ingredient_typing_does_not_search(self, controller, connector, scheduler):
        """Test typing in ingredient mode waits for submit."""
        controller.set_query("chick")

        assert scheduler.scheduled == []
        connector.filter_by_ingredient.assert_not_called()
        assert controller.state.status == SearchStatus.IDLE

    def test_search_button_after_commit_searches_once(self, controller, connector, make_meal):
        """Test committing the text and clicking Search in one rerun runs a single search."""
        connector.filter_by_ingredient.return_value = [make_meal(1, "Chicken Pie")]
        controller.set_query("chicken")
        controller.submit_query()

        assert controller.submit_query_once() is None
        connector.filter_by_ingredient.assert_called_once_with("chicken")

        controller.end_interaction()
        assert controller.submit_query_once().status == SearchStatus.OK
        assert connector.filter_by_ingredient.call_count == 2

    def test_search_button_after_name_commit_searches_once(self, connector, make_meal):
        """Test the inline name-mode auto search also counts for the Search button."""
        controller = RecipeController(connector, FavoritesStore(InMemoryStorage()), scheduler=InlineScheduler())
        controller.set_mode(SearchMode.NAME)
        controller.end_interaction()
        connector.search_by_name.reset_mock()

        controller.set_query("Pie")
        controller.submit_query_once()

        connector.search_by_name.assert_called_once_with("Pie")

    def test_search_button_with_new_inputs_searches(self, controller, connector):
        """Test changed inputs since the last search are not skipped."""
        controller.set_query("chicken")
        controller.submit_query()
        controller.set_category("Seafood")

        controller.submit_query_once()

        connector.filter_by_category.assert_called_once_with("Seafood")

    def test_search_resets_page(self, controller, connector, make_meal):
        """Test a new search returns to page 1."""
        connector.filter_by_ingredient.return_value = _chicken_results(make_meal)
        controller.set_query("chicken")
        controller.submit_query()
        controller.last_page()
        assert controller.state.page == 2

        controller.submit_query()
        assert controller.state.page == 1

    def test_stale_outcome_discarded(self, controller, make_meal):
        """Test a slower earlier round cannot overwrite a newer one."""
        first = controller.start_search(SearchState(query="beef"))
        second = controller.start_search(SearchState(query="chicken"))

        assert controller.finish_search(second, SearchOutcome(SearchStatus.OK, [make_meal(2, "Chicken")]))
        assert not controller.finish_search(first, SearchOutcome(SearchStatus.OK, [make_meal(1, "Beef")]))
        assert [m.name for m in controller.state.results] == ["Chicken"]

    def test_loading_state(self, controller, make_meal):
        """Test start_search enters loading and clears the previous results."""
        token = controller.start_search()
        controller.finish_search(token, SearchOutcome(SearchStatus.OK, [make_meal(1)]))

        controller.start_search()

        assert controller.state.loading
        assert controller.state.results == []

    def test_error_then_retry(self, controller, connector, make_meal):
        """Test Retry re-issues the failed search."""
        connector.filter_by_ingredient.side_effect = CatalogError("offline")
        controller.set_query("chicken")
        controller.submit_query()

        assert controller.state.status == SearchStatus.ERROR
        assert controller.state.message == "Something went wrong while fetching recipes. Please try again."

        connector.filter_by_ingredient.side_effect = None
        connector.filter_by_ingredient.return_value = [make_meal(1, "Chicken Pie")]
        controller.retry()

        assert controller.state.status == SearchStatus.OK
        assert connector.filter_by_ingredient.call_count == 2
        connector.filter_by_ingredient.assert_called_with("chicken")

    def test_no_matches(self, controller):
        """Test an empty result shows the no-match message."""
        controller.set_query("xyzzy")
        controller.submit_query()

        assert controller.state.status == SearchStatus.NO_MATCHES
        assert controller.state.message == "No recipes matched your criteria."

    def test_filters_do_not_search_until_submit(self, controller, connector, make_meal):
        """Test category and area selections apply on the next search."""
        connector.search_by_name.return_value = [make_meal(1, "Fish Pie")]
        connector.filter_by_category.return_value = [make_meal(1, "Fish Pie")]
        controller.set_mode(SearchMode.NAME)
        connector.search_by_name.reset_mock()

        controller.set_category("Seafood")
        connector.filter_by_category.assert_not_called()

        controller.submit_query()
        connector.search_by_name.assert_called_once_with("")
        connector.filter_by_category.assert_called_once_with("Seafood")


class TestModeAndDebounce:
    """Tests for mode switching and the name-mode debounce."""

    def test_set_mode_searches_with_new_mode(self, controller, connector):
        """Test switching mode searches immediately using the new mode."""
        controller.set_query("Arrabiata")
        controller.set_mode(SearchMode.NAME)

        connector.search_by_name.assert_called_once_with("Arrabiata")
        connector.filter_by_ingredient.assert_not_called()
        assert controller.state.search.mode == SearchMode.NAME

    def test_set_mode_accepts_value(self, controller):
        """Test the mode can be given as its string value."""
        controller.set_mode("name")
        assert controller.state.search.mode == SearchMode.NAME

    def test_name_typing_is_debounced(self, controller, connector, scheduler):
        """Test only the last keystroke of a burst searches."""
        controller.set_mode(SearchMode.NAME)
        connector.search_by_name.reset_mock()

        for text in ("A", "Ar", "Arr"):
            controller.set_query(text)

        assert controller.search_pending
        connector.search_by_name.assert_not_called()

        scheduler.fire(len(scheduler.scheduled) - 1)

        connector.search_by_name.assert_called_once_with("Arr")
        assert not controller.search_pending

    def test_submit_cancels_pending_debounce(self, controller, connector, scheduler):
        """Test Enter runs the search now and drops the pending one."""
        controller.set_mode(SearchMode.NAME)
        connector.search_by_name.reset_mock()

        controller.set_query("Pie")
        controller.submit_query()
        scheduler.fire(len(scheduler.scheduled) - 1)

        connector.search_by_name.assert_called_once_with("Pie")


class TestClear:
    """Tests for clear()."""

    def test_clear_resets_but_keeps_mode(self, controller, connector, make_meal):
        """Test Clear empties inputs and results and keeps the mode."""
        connector.search_by_name.return_value = [make_meal(1)]
        controller.set_mode(SearchMode.NAME)
        controller.set_category("Seafood")
        controller.set_area("British")

        controller.clear()

        assert controller.state.search == SearchState(mode=SearchMode.NAME)
        assert controller.state.results == []
        assert controller.state.status == SearchStatus.IDLE
        assert controller.state.last_search is None

    def test_clear_discards_in_flight_search(self, controller, make_meal):
        """Test a search finishing after Clear is not applied."""
        token = controller.start_search()
        controller.clear()

        assert not controller.finish_search(token, SearchOutcome(SearchStatus.OK, [make_meal(1)]))
        assert controller.state.status == SearchStatus.IDLE

    def test_clear_cancels_pending_debounce(self, controller, connector, scheduler):
        """Test Clear drops a pending auto search."""
        controller.set_mode(SearchMode.NAME)
        connector.search_by_name.reset_mock()
        controller.set_query("Pie")

        controller.clear()
        scheduler.fire(len(scheduler.scheduled) - 1)

        connector.search_by_name.assert_not_called()


class TestPaging:
    """Tests for page navigation."""

    def test_navigation_is_clamped(self, controller, connector, make_meal):
        """Test First/Prev/Next/Last stay within range."""
        connector.filter_by_ingredient.return_value = _chicken_results(make_meal, 30)
        controller.set_query("chicken")
        controller.submit_query()

        assert controller.prev_page() == 1
        assert controller.next_page() == 2
        assert controller.last_page() == 3
        assert controller.next_page() == 3
        assert controller.go_to_page(99) == 3
        assert controller.first_page() == 1
        assert [m.name for m in controller.page_items][0] == "Chicken 01"

    @patch.dict(os.environ, {"RESULTS_PAGE_SIZE": "5", "SEARCH_DEBOUNCE_SECONDS": "0.1"})
    def test_from_config(self, connector):
        """Test page size and debounce come from the environment."""
        controller = RecipeController.from_config(connector, FavoritesStore(InMemoryStorage()))
        assert controller.page_size == 5
        assert controller._debouncer.delay == 0.1

    def test_rejects_non_positive_page_size(self, connector):
        """Test the page size must be positive."""
        with pytest.raises(ValueError):
            RecipeController(connector, FavoritesStore(InMemoryStorage()), page_size=0)


class TestFavoritesAndDetails:
    """Tests for favorites and the detail overlay."""

    def test_toggle_favorite_from_results(self, controller, make_meal):
        """Test a result card can be favorited and unfavorited."""
        meal = make_meal(52772, "Teriyaki Chicken Casserole")

        assert controller.toggle_favorite(meal) is True
        assert controller.is_favorite("52772")
        assert controller.favorites == [meal]

        controller.clear_favorites()
        assert controller.favorites == []

    def test_favorites_survive_clear(self, controller, make_meal):
        """Test clearing the search leaves favorites alone."""
        controller.toggle_favorite(make_meal(1))
        controller.clear()
        assert controller.is_favorite("1")

    def test_open_and_escape(self, controller, connector):
        """Test details open, and Escape closes the overlay."""
        connector.lookup.return_value = MealDetail.model_validate({"idMeal": "1", "strMeal": "Pie"})

        view = controller.open_details("1")
        assert view.status == DetailStatus.LOADED

        assert controller.handle_key("Enter") is False
        assert controller.handle_key("Escape") is True
        assert not controller.detail_view.is_open
        assert controller.handle_key("Escape") is False

    def test_detail_failure_leaves_search_alone(self, controller, connector, make_meal):
        """Test a failed lookup does not touch search state."""
        connector.filter_by_ingredient.return_value = [make_meal(1)]
        connector.lookup.side_effect = CatalogError("offline")
        controller.set_query("chicken")
        controller.submit_query()

        view = controller.open_details("1")

        assert view.error == "Could not load recipe details."
        assert controller.state.status == SearchStatus.OK

    def test_load_filter_options(self, controller, connector):
        """Test option lists land in the state."""
        connector.list_categories.return_value = ["Beef"]
        connector.list_areas.return_value = ["Thai"]

        controller.load_filter_options()

        assert controller.state.categories == ["Beef"]
        assert controller.state.areas == ["Thai"]

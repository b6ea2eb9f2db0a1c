"""
Application controller for the Recipe Ideas client.

The controller owns the whole interactive state in one AppState struct and exposes
one transition method per user action. Rendering code (streamlit_app/) reads the
state and calls transitions; it never mutates the state directly.

Transitions:
- Search input: set_mode, set_query, submit_query, submit_query_once, set_category, set_area, search, retry, clear
- Paging: first_page, prev_page, next_page, last_page, go_to_page
- Favorites: toggle_favorite, clear_favorites
- Details overlay: open_details, close_details, handle_key
- Filter options: load_filter_options

Search rounds are token-guarded: start_search() issues a token and finish_search()
applies an outcome only if its token is still the newest one. A newer search or a
Clear therefore wins over any response that arrives late.
"""

import logging
import threading
from dataclasses import dataclass, field, replace
from typing import List, Optional, Union

from recipes.config import AppConfig
from recipes.connectors.base import BaseCatalogConnector
from recipes.details import DetailLoader, DetailView
from recipes.favorites import FavoritesStore
from recipes.models import MealSummary, SearchMode, SearchState, SearchStatus
from recipes.pager import DEFAULT_PAGE_SIZE, clamp_page, page_items, total_pages
from recipes.scheduling import Debouncer, RequestGenerations, TimerScheduler
from recipes.search import FilterOptions, SearchOutcome, run_search
from recipes.search import load_filter_options as fetch_filter_options

logger = logging.getLogger(__name__)

DEFAULT_DEBOUNCE_SECONDS = 0.45
CANCEL_KEY = "Escape"


@dataclass
class AppState:
    """
    Session state of the client.

    Attributes:
        search: Current inputs (mode, query, filters)
        results: Canonical result list of the last applied search
        status: Status of the last applied search (IDLE before the first search or after Clear)
        message: User-facing message for NO_MATCHES / ERROR
        page: Current 1-based results page
        categories: Category filter options
        areas: Area filter options
        last_search: Inputs of the most recently issued search (what Retry re-issues)
    """
    search: SearchState = field(default_factory=SearchState)
    results: List[MealSummary] = field(default_factory=list)
    status: SearchStatus = SearchStatus.IDLE
    message: Optional[str] = None
    page: int = 1
    categories: List[str] = field(default_factory=list)
    areas: List[str] = field(default_factory=list)
    last_search: Optional[SearchState] = None

    @property
    def loading(self) -> bool:
        return self.status == SearchStatus.LOADING


class RecipeController:
    """
    Single owner of the client state.

    Args:
        connector: Catalog connector used for searches, details and filter options
        favorites: Persisted favorites store
        scheduler: Scheduler for the name-mode debounce (default: TimerScheduler)
        page_size: Result cards per page
        debounce_seconds: Quiet period before a name-mode auto search
    """

    def __init__(
        self,
        connector: BaseCatalogConnector,
        favorites: FavoritesStore,
        scheduler=None,
        page_size: int = DEFAULT_PAGE_SIZE,
        debounce_seconds: float = DEFAULT_DEBOUNCE_SECONDS,
    ) -> None:
        if page_size <= 0:
            raise ValueError("page_size must be positive")
        self.connector = connector
        self.favorites_store = favorites
        self.page_size = page_size
        self.state = AppState()
        self.details = DetailLoader(connector)
        self._searches = RequestGenerations()
        self._debouncer = Debouncer(scheduler or TimerScheduler(), debounce_seconds)
        self._lock = threading.RLock()
        self._searched_this_interaction = False

    @classmethod
    def from_config(
        cls,
        connector: BaseCatalogConnector,
        favorites: Optional[FavoritesStore] = None,
        scheduler=None,
    ) -> "RecipeController":
        """Build a controller using page size, debounce and favorites path from the environment."""
        if favorites is None:
            favorites = FavoritesStore.from_path(AppConfig.get_favorites_path())
        return cls(
            connector,
            favorites,
            scheduler=scheduler,
            page_size=AppConfig.get_page_size(),
            debounce_seconds=AppConfig.get_debounce_seconds(),
        )

    # ------------------------------------------------------------------
    # Search input
    # ------------------------------------------------------------------

    def set_mode(self, mode: Union[SearchMode, str]) -> SearchOutcome:
        """Switch between ingredient and name search; switching searches immediately."""
        mode = SearchMode(mode)
        self._debouncer.cancel()
        with self._lock:
            self.state.search = replace(self.state.search, mode=mode)
        return self.search()

    def set_query(self, text: str) -> None:
        """Update the query text; in name mode an auto search is debounced."""
        with self._lock:
            self.state.search = replace(self.state.search, query=text or "")
            mode = self.state.search.mode
        if mode == SearchMode.NAME:
            self._debouncer.trigger(self.search)

    def submit_query(self) -> SearchOutcome:
        """Enter key or Search button."""
        self._debouncer.cancel()
        return self.search()

    def submit_query_once(self) -> Optional[SearchOutcome]:
        """
        Search button.

        Skipped when the current inputs were already searched during this
        interaction, e.g. by committing the text field in the same rerun.

        Returns:
            The outcome, or None when the search was skipped
        """
        with self._lock:
            already = self._searched_this_interaction and self.state.last_search == self.state.search
        if already:
            logger.debug("Skipping duplicate search for %r", self.state.search)
            return None
        return self.submit_query()

    def end_interaction(self) -> None:
        """Mark the end of one round of input handling (one Streamlit rerun)."""
        with self._lock:
            self._searched_this_interaction = False

    def set_category(self, category: Optional[str]) -> None:
        with self._lock:
            self.state.search = replace(self.state.search, category=category or "")

    def set_area(self, area: Optional[str]) -> None:
        with self._lock:
            self.state.search = replace(self.state.search, area=area or "")

    @property
    def search_pending(self) -> bool:
        """True while a debounced auto search is waiting to fire."""
        return self._debouncer.pending

    def start_search(self, search_state: Optional[SearchState] = None) -> int:
        """
        Enter the loading state for a search round.

        Returns:
            Token to hand to finish_search()
        """
        with self._lock:
            issued = search_state or self.state.search
            token = self._searches.issue()
            self.state.last_search = issued
            self._searched_this_interaction = True
            self.state.status = SearchStatus.LOADING
            self.state.message = None
            self.state.results = []
            self.state.page = 1
        logger.debug("Search started (token=%d): %r", token, issued)
        return token

    def finish_search(self, token: int, outcome: SearchOutcome) -> bool:
        """
        Apply a search outcome if its round is still the newest one.

        Returns:
            True if applied, False if the outcome was stale and discarded
        """
        with self._lock:
            if not self._searches.is_current(token):
                logger.debug("Discarding stale search outcome (token=%d, current=%d)",
                             token, self._searches.current)
                return False
            self.state.results = list(outcome.results)
            self.state.status = outcome.status
            self.state.message = outcome.message
            self.state.page = 1
        return True

    def search(self, search_state: Optional[SearchState] = None) -> SearchOutcome:
        """Run a search round for the given (default: current) inputs."""
        with self._lock:
            issued = search_state or self.state.search
            token = self.start_search(issued)
        outcome = run_search(self.connector, issued)
        self.finish_search(token, outcome)
        return outcome

    def retry(self) -> SearchOutcome:
        """Re-issue the most recently issued search."""
        self._debouncer.cancel()
        return self.search(self.state.last_search)

    def clear(self) -> None:
        """Reset query, filters and results; the search mode is kept."""
        self._debouncer.cancel()
        with self._lock:
            self._searches.invalidate()
            mode = self.state.search.mode
            self.state.search = SearchState(mode=mode)
            self.state.results = []
            self.state.status = SearchStatus.IDLE
            self.state.message = None
            self.state.page = 1
            self.state.last_search = None
        logger.debug("Search state cleared")

    # ------------------------------------------------------------------
    # Paging
    # ------------------------------------------------------------------

    @property
    def total_pages(self) -> int:
        return total_pages(len(self.state.results), self.page_size)

    @property
    def page_items(self) -> List[MealSummary]:
        return page_items(self.state.results, self.state.page, self.page_size)

    def go_to_page(self, page: int) -> int:
        """Jump to a page; out-of-range requests are clamped."""
        with self._lock:
            self.state.page = clamp_page(page, len(self.state.results), self.page_size)
            return self.state.page

    def first_page(self) -> int:
        return self.go_to_page(1)

    def prev_page(self) -> int:
        return self.go_to_page(self.state.page - 1)

    def next_page(self) -> int:
        return self.go_to_page(self.state.page + 1)

    def last_page(self) -> int:
        return self.go_to_page(self.total_pages)

    # ------------------------------------------------------------------
    # Favorites
    # ------------------------------------------------------------------

    @property
    def favorites(self) -> List[MealSummary]:
        return self.favorites_store.items

    def is_favorite(self, meal_id: str) -> bool:
        return self.favorites_store.is_favorite(meal_id)

    def toggle_favorite(self, meal: MealSummary) -> bool:
        return self.favorites_store.toggle(meal)

    def clear_favorites(self) -> None:
        self.favorites_store.clear()

    # ------------------------------------------------------------------
    # Details overlay
    # ------------------------------------------------------------------

    @property
    def detail_view(self) -> DetailView:
        return self.details.view

    def open_details(self, meal_id: str) -> DetailView:
        return self.details.open(meal_id)

    def close_details(self) -> None:
        self.details.close()

    def handle_key(self, key: str) -> bool:
        """
        Keyboard handling; the cancel key closes an open overlay.

        Returns:
            True if the key was handled
        """
        if key == CANCEL_KEY and self.details.view.is_open:
            self.close_details()
            return True
        return False

    # ------------------------------------------------------------------
    # Filter options
    # ------------------------------------------------------------------

    def load_filter_options(self) -> FilterOptions:
        options = fetch_filter_options(self.connector)
        with self._lock:
            self.state.categories = options.categories
            self.state.areas = options.areas
        return options

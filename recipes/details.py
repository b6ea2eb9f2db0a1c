"""
Detail Loader for the recipe overlay.

Each open runs the state machine idle -> loading -> {loaded, failed}. Opening a
new recipe supersedes the previous one: completions carry the token issued when
their request started and are applied only while that token and recipe id are
still the active ones. Closing returns to idle and discards the record.

A lookup that finds no record is a failure with a user-facing message, the same
as a transport failure. Detail failures never touch search state.
"""

import logging
from dataclasses import dataclass
from typing import NamedTuple, Optional

from recipes.connectors.base import BaseCatalogConnector, CatalogError
from recipes.models import DetailStatus, MealDetail
from recipes.scheduling import RequestGenerations

logger = logging.getLogger(__name__)

DETAIL_ERROR_MESSAGE = "Could not load recipe details."
DEFAULT_DETAIL_TITLE = "Recipe Details"


@dataclass(frozen=True)
class DetailView:
    """What the overlay shows."""
    status: DetailStatus = DetailStatus.IDLE
    meal_id: Optional[str] = None
    detail: Optional[MealDetail] = None
    error: Optional[str] = None

    @property
    def is_open(self) -> bool:
        return self.meal_id is not None

    @property
    def title(self) -> str:
        return self.detail.name if self.detail is not None else DEFAULT_DETAIL_TITLE


class DetailResult(NamedTuple):
    detail: Optional[MealDetail]
    error: Optional[str]


class DetailLoader:
    """Fetch one full recipe at a time for the overlay."""

    def __init__(self, connector: BaseCatalogConnector) -> None:
        self.connector = connector
        self.view = DetailView()
        self._generations = RequestGenerations()

    def begin(self, meal_id: str) -> int:
        """Enter the loading state for a recipe and return the request token."""
        token = self._generations.issue()
        self.view = DetailView(status=DetailStatus.LOADING, meal_id=meal_id)
        logger.debug("Loading details for %s (token=%d)", meal_id, token)
        return token

    def fetch(self, meal_id: str) -> DetailResult:
        """Look up one recipe; failures are returned, never raised."""
        try:
            detail = self.connector.lookup(meal_id)
        except CatalogError as e:
            logger.warning("Detail lookup failed for %s: %s", meal_id, e)
            return DetailResult(None, DETAIL_ERROR_MESSAGE)

        if detail is None:
            logger.info("Catalog has no record for %s", meal_id)
            return DetailResult(None, DETAIL_ERROR_MESSAGE)
        return DetailResult(detail, None)

    def finish(self, token: int, meal_id: str, result: DetailResult) -> bool:
        """
        Apply a completed lookup if it is still the active request.

        Returns:
            True if the result was applied, False if it was stale
        """
        if not self._generations.is_current(token) or self.view.meal_id != meal_id:
            logger.debug("Discarding stale detail result for %s (token=%d)", meal_id, token)
            return False

        if result.detail is not None:
            self.view = DetailView(status=DetailStatus.LOADED, meal_id=meal_id, detail=result.detail)
        else:
            self.view = DetailView(
                status=DetailStatus.FAILED,
                meal_id=meal_id,
                error=result.error or DETAIL_ERROR_MESSAGE,
            )
        return True

    def open(self, meal_id: str) -> DetailView:
        """Load a recipe synchronously and return the resulting view."""
        token = self.begin(meal_id)
        self.finish(token, meal_id, self.fetch(meal_id))
        return self.view

    def close(self) -> None:
        """Return to idle; any lookup still in flight becomes stale."""
        self._generations.invalidate()
        self.view = DetailView()

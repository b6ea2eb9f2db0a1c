"""
Search pipeline that runs one search round against the catalog.

This module provides the core search functionality that:
- Builds the independent catalog requests for the current search state
- Runs them concurrently and waits for every one of them to settle
- Combines the lists into the canonical result list (intersection, dedupe, sort)
- Converts catalog failures into an error outcome instead of raising

It also prefetches the category and area option lists used by the filter selects;
that prefetch degrades to empty lists on any failure.

Search flow: Controller.search() -> run_search() -> build_queries() -> connector (in parallel)
-> combine_results() -> SearchOutcome
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from recipes.combiner import combine_results
from recipes.connectors.base import BaseCatalogConnector, CatalogError
from recipes.models import MealSummary, SearchState, SearchStatus
from recipes.query_builder import SubQuery, build_queries, execute_query

logger = logging.getLogger(__name__)

SEARCH_ERROR_MESSAGE = "Something went wrong while fetching recipes. Please try again."
NO_MATCHES_MESSAGE = "No recipes matched your criteria."


@dataclass(frozen=True)
class SearchOutcome:
    """
    Result of one search round.

    Attributes:
        status: OK, NO_MATCHES or ERROR
        results: Canonical result list (empty unless status is OK)
        message: User-facing message for NO_MATCHES and ERROR, None otherwise
    """
    status: SearchStatus
    results: List[MealSummary] = field(default_factory=list)
    message: Optional[str] = None

    @property
    def retryable(self) -> bool:
        return self.status == SearchStatus.ERROR


@dataclass(frozen=True)
class FilterOptions:
    """Option lists for the category and area selects."""
    categories: List[str] = field(default_factory=list)
    areas: List[str] = field(default_factory=list)


def fetch_all(connector: BaseCatalogConnector, queries: Sequence[SubQuery]) -> List[List[MealSummary]]:
    """
    Run every query concurrently and return their lists in query order.

    All queries settle before this returns or raises.

    Raises:
        CatalogError: If any query failed (the first failure in query order).
    """
    if not queries:
        return []

    with ThreadPoolExecutor(max_workers=len(queries), thread_name_prefix="catalog") as pool:
        futures = [pool.submit(execute_query, connector, query) for query in queries]
        # Leaving the block waits for every future, including after a failure
        lists: List[List[MealSummary]] = []
        for query, future in zip(queries, futures):
            items = future.result()
            logger.info("Query %s=%r returned %d recipes", query.kind.value, query.value, len(items))
            lists.append(items)
    return lists


def run_search(connector: BaseCatalogConnector, state: SearchState) -> SearchOutcome:
    """
    Perform one search round.

    Args:
        connector: Catalog connector
        state: Search state to run

    Returns:
        SearchOutcome:
        - OK with the combined, deduplicated, name-sorted results
        - NO_MATCHES with NO_MATCHES_MESSAGE when the combined list is empty
        - ERROR with SEARCH_ERROR_MESSAGE when any catalog request failed
    """
    logger.info("Search request: mode=%s query=%r category=%r area=%r",
                state.mode.value, state.query, state.category, state.area)

    queries = build_queries(state)
    try:
        lists = fetch_all(connector, queries)
    except CatalogError as e:
        logger.error("Search failed for %r: %s", state, e, exc_info=True)
        return SearchOutcome(status=SearchStatus.ERROR, message=SEARCH_ERROR_MESSAGE)

    results = combine_results(lists)
    if not results:
        logger.info("Search matched no recipes")
        return SearchOutcome(status=SearchStatus.NO_MATCHES, message=NO_MATCHES_MESSAGE)

    logger.info("Search response size: %d recipes", len(results))
    return SearchOutcome(status=SearchStatus.OK, results=results)


def load_filter_options(connector: BaseCatalogConnector) -> FilterOptions:
    """
    Fetch the category and area option lists concurrently.

    Any failure yields empty option lists; the filters are optional and a failure
    here is never shown to the user.
    """
    with ThreadPoolExecutor(max_workers=2, thread_name_prefix="catalog-lists") as pool:
        categories_future = pool.submit(connector.list_categories)
        areas_future = pool.submit(connector.list_areas)
        try:
            categories = categories_future.result()
            areas = areas_future.result()
        except CatalogError as e:
            logger.warning("Could not load filter options: %s", e)
            return FilterOptions()

    logger.debug("Loaded %d categories and %d areas", len(categories), len(areas))
    return FilterOptions(categories=list(categories), areas=list(areas))

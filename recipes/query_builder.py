"""
Query building for a search round.

Translates a SearchState into the independent catalog requests that make up one
search round, and dispatches a single request to a connector.

Rules:
- The free-text query always produces exactly one request: an ingredient filter
  (ingredient mode) or a name search (name mode) with the trimmed text.
- A blank query in either mode becomes a name search for "" (the whole catalog).
- A non-empty category or area adds one filter request each, regardless of mode.
"""

import logging
from enum import Enum
from typing import List, NamedTuple

from recipes.connectors.base import BaseCatalogConnector
from recipes.models import MealSummary, SearchMode, SearchState

logger = logging.getLogger(__name__)


class QueryKind(str, Enum):
    INGREDIENT = "ingredient"
    NAME = "name"
    CATEGORY = "category"
    AREA = "area"


class SubQuery(NamedTuple):
    """One independent catalog request of a search round."""
    kind: QueryKind
    value: str


def build_queries(state: SearchState) -> List[SubQuery]:
    """
    Build the catalog requests for a search state.

    Args:
        state: Current search state

    Returns:
        List of 1-3 SubQuery items; order carries no meaning

    Examples:
        >>> build_queries(SearchState(mode=SearchMode.INGREDIENT, query="  chicken "))
        [SubQuery(kind=<QueryKind.INGREDIENT: 'ingredient'>, value='chicken')]
    """
    queries: List[SubQuery] = []

    text = (state.query or "").strip()
    if state.mode == SearchMode.INGREDIENT and text:
        queries.append(SubQuery(QueryKind.INGREDIENT, text))
    elif state.mode == SearchMode.NAME and text:
        queries.append(SubQuery(QueryKind.NAME, text))
    else:
        # Blank name search returns every recipe
        queries.append(SubQuery(QueryKind.NAME, ""))

    if state.category:
        queries.append(SubQuery(QueryKind.CATEGORY, state.category))
    if state.area:
        queries.append(SubQuery(QueryKind.AREA, state.area))

    logger.debug("Built %d queries for %r: %r", len(queries), state, queries)
    return queries


def execute_query(connector: BaseCatalogConnector, query: SubQuery) -> List[MealSummary]:
    """
    Run one SubQuery against a connector.

    Raises:
        CatalogError: Propagated from the connector.
        ValueError: If the query kind is unknown.
    """
    if query.kind == QueryKind.INGREDIENT:
        return connector.filter_by_ingredient(query.value)
    if query.kind == QueryKind.NAME:
        return connector.search_by_name(query.value)
    if query.kind == QueryKind.CATEGORY:
        return connector.filter_by_category(query.value)
    if query.kind == QueryKind.AREA:
        return connector.filter_by_area(query.value)
    raise ValueError(f"Unknown query kind: {query.kind!r}")

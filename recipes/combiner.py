"""
Result combination and sorting for search rounds.

This module turns the independent lists returned by one search round into the
canonical result list shown to the user.

Key functions:
- intersect_by_id: Keeps recipes whose id appears in every non-empty list
- dedupe_by_id: Removes repeated ids
- sort_by_name: Locale-aware alphabetical sort with a deterministic tie-break
- combine_results: The full pipeline (select/intersect, dedupe, sort)

# NOTE: intersect_by_id drops empty lists before counting how many lists an id must
    appear in. A filter that legitimately matched nothing is therefore ignored instead
    of forcing an empty result. This mirrors the behavior users already see and is
    kept on purpose; changing it would change search results.
"""

import logging
import unicodedata
from typing import Dict, List, Sequence, Set, Tuple

from recipes.models import MealSummary

logger = logging.getLogger(__name__)


def collation_key(name: str) -> Tuple[str, str]:
    """
    Sort key approximating a locale-aware comparison.

    Accents and case are ignored for the primary comparison ("Éclair" sorts with
    "eclair"); the raw name is the tie-break so ordering stays deterministic.
    """
    decomposed = unicodedata.normalize("NFKD", name or "")
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return (base.casefold().strip(), name or "")


def intersect_by_id(lists: Sequence[Sequence[MealSummary]]) -> List[MealSummary]:
    """
    Intersect result lists by recipe id.

    Empty lists are excluded from the intersection requirement. A recipe survives
    when its id is present in every remaining list; survivors keep the order of the
    first non-empty list.

    Args:
        lists: Result lists of one search round

    Returns:
        Recipes common to all non-empty lists (empty if every list is empty)
    """
    non_empty = [lst for lst in lists if lst]
    if not non_empty:
        return []

    counts: Dict[str, int] = {}
    for lst in non_empty:
        seen: Set[str] = {meal.id for meal in lst}
        for meal_id in seen:
            counts[meal_id] = counts.get(meal_id, 0) + 1

    needed = len(non_empty)
    return [meal for meal in non_empty[0] if counts.get(meal.id) == needed]


def dedupe_by_id(meals: Sequence[MealSummary]) -> List[MealSummary]:
    """Remove repeated ids, keeping the position of the first occurrence."""
    unique: Dict[str, MealSummary] = {}
    for meal in meals:
        if meal.id not in unique:
            unique[meal.id] = meal
    return list(unique.values())


def sort_by_name(meals: Sequence[MealSummary]) -> List[MealSummary]:
    """Sort recipes ascending by name using collation_key."""
    return sorted(meals, key=lambda m: collation_key(m.name))


def combine_results(lists: Sequence[Sequence[MealSummary]]) -> List[MealSummary]:
    """
    Combine the lists of one search round into the canonical result list.

    - No lists: empty result
    - One list: that list
    - Two or more: intersect_by_id
    Then deduplicate by id and sort by name.

    Examples:
        >>> a = [MealSummary(id="1", name="Pie"), MealSummary(id="2", name="Apple Tart")]
        >>> b = [MealSummary(id="2", name="Apple Tart")]
        >>> [m.name for m in combine_results([a, b])]
        ['Apple Tart']
    """
    if len(lists) == 0:
        combined: List[MealSummary] = []
    elif len(lists) == 1:
        combined = list(lists[0])
    else:
        combined = intersect_by_id(lists)

    result = sort_by_name(dedupe_by_id(combined))
    logger.debug("Combined %d lists (sizes %s) into %d results",
                 len(lists), [len(lst) for lst in lists], len(result))
    return result

"""
Sandbox script for trying a recipe search against the live catalog.

This script runs one search round (ingredient + category filter), prints the
first results page, then loads details for the first hit.

Prerequisites:
- Network access to TheMealDB (MEALDB_BASE_URL may point elsewhere in .env)

Run:
    python -m sandbox.sandbox_search
"""

from recipes.config import configure_logging
from recipes.connectors import MealDBConnector
from recipes.details import DetailLoader
from recipes.models import DetailStatus, SearchMode, SearchState, SearchStatus
from recipes.pager import DEFAULT_PAGE_SIZE, page_items, total_pages
from recipes.search import run_search


def run():
    """Run a filtered ingredient search and load the first recipe."""
    configure_logging()
    connector = MealDBConnector()
    state = SearchState(mode=SearchMode.INGREDIENT, query="chicken", category="Chicken")

    print("=" * 80)
    print("Testing Recipe Search")
    print("=" * 80)
    print(f"\nQuery: '{state.query}' (mode={state.mode.value}, category={state.category or 'All'})")
    print("\nRunning search...\n")

    outcome = run_search(connector, state)
    if outcome.status != SearchStatus.OK:
        print(f"⚠️  {outcome.message}")
        return

    pages = total_pages(len(outcome.results), DEFAULT_PAGE_SIZE)
    print(f"Results ({len(outcome.results)}), {pages} page(s)")
    print("\n=== Page 1 ===")
    for i, meal in enumerate(page_items(outcome.results, 1, DEFAULT_PAGE_SIZE), 1):
        print(f"{i:2d}. [{meal.id:>6s}] {meal.name}")

    first = outcome.results[0]
    print(f"\n=== Details: {first.name} ===")
    view = DetailLoader(connector).open(first.id)
    if view.status == DetailStatus.LOADED:
        detail = view.detail
        print(f"Category: {detail.category}  Area: {detail.area}")
        for line in detail.ingredients:
            print(f"  - {line.display}")
    else:
        print(f"⚠️  {view.error}")

    print("\n" + "=" * 80)


if __name__ == "__main__":
    run()

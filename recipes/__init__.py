"""
Core package of the Recipe Ideas client.

This package contains:
- connectors: Catalog API clients (TheMealDB)
- query_builder / combiner / pager: Search composition and pagination
- search: Concurrent search rounds and filter option prefetch
- favorites / storage: Persisted favorites
- details: Detail overlay loader
- scheduling: Debounce and request tokens
- controller: Application state and user-action transitions
"""

__version__ = "0.1.0"

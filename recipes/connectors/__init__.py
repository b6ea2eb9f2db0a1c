"""
Catalog connectors.

Each connector wraps one remote recipe catalog and normalizes its records into
the models defined in recipes.models.
"""

from .base import BaseCatalogConnector, CatalogError
from .mealdb_connector import MealDBConnector

__all__ = ["BaseCatalogConnector", "CatalogError", "MealDBConnector"]

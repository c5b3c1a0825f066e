"""MongoDB adapter — motor-backed recipe store.

Requires ``motor`` (and its ``pymongo``/``bson``)::

    pip install recipe-catalog
"""

from recipe_catalog.adapters.mongodb.store import MotorRecipeStore, connect

__all__ = ["MotorRecipeStore", "connect"]

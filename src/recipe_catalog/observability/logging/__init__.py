"""Observability – structured logging helpers."""
from recipe_catalog.observability.logging.factory import JsonLoggerFactory
from recipe_catalog.observability.logging.filters import (
    DEFAULT_SENSITIVE_FIELDS,
    SensitiveFieldsFilter,
)
from recipe_catalog.observability.logging.processors import get_logger

__all__ = [
    "DEFAULT_SENSITIVE_FIELDS",
    "JsonLoggerFactory",
    "SensitiveFieldsFilter",
    "get_logger",
]

"""Config settings – Settings base class and the catalog settings."""
from __future__ import annotations

import dataclasses
import logging
from typing import ClassVar

from recipe_catalog.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class CatalogSettings(Settings):
    """Runtime settings, read from ``RECIPES_*`` environment variables."""

    _prefix: ClassVar[str] = "RECIPES"

    mongo_uri: str
    database: str = "recipes"
    collection: str = "recipes"
    search_index: str = "recipe-name"
    max_docs: int = 100
    log_level: str = "INFO"
    log_json: bool = True

    def _validate(self) -> None:
        if not self.mongo_uri.startswith(("mongodb://", "mongodb+srv://")):
            raise InvalidSettingValueError(
                "mongo_uri", self.mongo_uri, "expected a mongodb:// or mongodb+srv:// URI"
            )
        if self.max_docs < 1:
            raise InvalidSettingValueError("max_docs", self.max_docs, "must be >= 1")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise InvalidSettingValueError("log_level", self.log_level, "unknown log level")

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level.upper())


__all__ = ["CatalogSettings", "Settings"]

"""Brickset

Read-only reports over a fixed collection of LEGO set records.
"""

__version__ = "0.1.0"

from .domain.entities import LegoSet, Dimensions, PackagingType, MAX_PIECES
from .domain.services import LegoSetQueryService, MissingThemePolicy
from .infrastructure.repositories import (
    JsonRecordLoader,
    JsonRecordRepository,
    LegoSetRepository,
    InMemoryRecordRepository,
)
from .exceptions import BricksetError, DataLoadError, ConfigurationError

__all__ = [
    # Records
    "LegoSet",
    "Dimensions",
    "PackagingType",

    # Repositories
    "JsonRecordLoader",
    "JsonRecordRepository",
    "LegoSetRepository",
    "InMemoryRecordRepository",

    # Queries
    "LegoSetQueryService",
    "MissingThemePolicy",
    "MAX_PIECES",

    # Errors
    "BricksetError",
    "DataLoadError",
    "ConfigurationError",
]

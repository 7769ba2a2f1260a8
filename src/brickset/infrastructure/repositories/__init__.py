"""
Repository Implementations - Infrastructure Layer

This package contains read-only repository implementations for record data.
"""

from .json_repository import (
    DEFAULT_DATA_FILE,
    JsonRecordLoader,
    JsonRecordRepository,
    LegoSetRepository,
)
from .memory_repository import InMemoryRecordRepository

__all__ = [
    "DEFAULT_DATA_FILE",
    "JsonRecordLoader",
    "JsonRecordRepository",
    "LegoSetRepository",
    "InMemoryRecordRepository",
]

"""Domain layer: set records, repository interface, queries and errors."""

from .entities import MAX_PIECES, Dimensions, LegoSet, PackagingType
from .repositories import RecordRepository
from .result import (
    DomainError,
    EmptyCollectionError,
    EmptyNameError,
    Failure,
    MissingThemeError,
    NotFoundError,
    Result,
    Success,
    ValidationError,
)
from .services import LegoSetQueryService, MissingThemePolicy

__all__ = [
    "Dimensions",
    "LegoSet",
    "PackagingType",
    "RecordRepository",
    "LegoSetQueryService",
    "MissingThemePolicy",
    "MAX_PIECES",
    "Result",
    "Success",
    "Failure",
    "DomainError",
    "ValidationError",
    "NotFoundError",
    "MissingThemeError",
    "EmptyCollectionError",
    "EmptyNameError",
]

"""Query side of CQRS pattern."""

from .base import Query, QueryHandler, QueryBus, QueryResult
from .set_queries import (
    CountByThemeQuery,
    DistinctThemesQuery,
    FirstNumbersQuery,
    HasThemeQuery,
    LowerCaseThemesQuery,
    MaxPiecesQuery,
    MinPiecesQuery,
    NameInitialsQuery,
    SumPiecesWithEmptyThemeQuery,
    SumPiecesWithThemeQuery,
    create_query_bus,
)

__all__ = [
    "Query",
    "QueryHandler",
    "QueryBus",
    "QueryResult",
    "CountByThemeQuery",
    "DistinctThemesQuery",
    "FirstNumbersQuery",
    "HasThemeQuery",
    "LowerCaseThemesQuery",
    "MaxPiecesQuery",
    "MinPiecesQuery",
    "NameInitialsQuery",
    "SumPiecesWithEmptyThemeQuery",
    "SumPiecesWithThemeQuery",
    "create_query_bus",
]

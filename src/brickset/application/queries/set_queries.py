"""Set report queries and their handlers."""

from dataclasses import dataclass
from typing import Dict, List, Optional

from .base import Query, QueryBus, QueryHandler
from ...domain.entities import LegoSet
from ...domain.services import LegoSetQueryService, MissingThemePolicy


@dataclass(frozen=True, slots=True, kw_only=True)
class DistinctThemesQuery(Query):
    """Themes without repetition, sorted with the absent theme first."""


@dataclass(frozen=True, slots=True, kw_only=True)
class SumPiecesWithThemeQuery(Query):
    """Total pieces over sets of one theme."""

    theme: str
    policy: MissingThemePolicy = MissingThemePolicy.EXCLUDE


@dataclass(frozen=True, slots=True, kw_only=True)
class SumPiecesWithEmptyThemeQuery(Query):
    """Total pieces over sets whose theme is empty."""

    policy: MissingThemePolicy = MissingThemePolicy.FAIL


@dataclass(frozen=True, slots=True, kw_only=True)
class MaxPiecesQuery(Query):
    """The set with the most pieces."""


@dataclass(frozen=True, slots=True, kw_only=True)
class FirstNumbersQuery(Query):
    """The first set numbers in sorted order."""

    limit: int


@dataclass(frozen=True, slots=True, kw_only=True)
class LowerCaseThemesQuery(Query):
    """Every theme lower-cased, in collection order."""

    policy: MissingThemePolicy = MissingThemePolicy.FAIL


@dataclass(frozen=True, slots=True, kw_only=True)
class HasThemeQuery(Query):
    """Whether any set carries a theme."""

    theme: str
    policy: MissingThemePolicy = MissingThemePolicy.FAIL


@dataclass(frozen=True, slots=True, kw_only=True)
class NameInitialsQuery(Query):
    """First character of every set name."""


@dataclass(frozen=True, slots=True, kw_only=True)
class MinPiecesQuery(Query):
    """The smallest piece count."""


@dataclass(frozen=True, slots=True, kw_only=True)
class CountByThemeQuery(Query):
    """Number of sets per theme."""


class _ServiceHandler:
    def __init__(self, service: LegoSetQueryService):
        self.service = service


class DistinctThemesHandler(_ServiceHandler, QueryHandler[DistinctThemesQuery, List[Optional[str]]]):
    def handle(self, query: DistinctThemesQuery) -> List[Optional[str]]:
        return self.service.distinct_themes()


class SumPiecesWithThemeHandler(_ServiceHandler, QueryHandler[SumPiecesWithThemeQuery, int]):
    def handle(self, query: SumPiecesWithThemeQuery) -> int:
        return self.service.sum_pieces_with_theme(query.theme, query.policy)


class SumPiecesWithEmptyThemeHandler(_ServiceHandler, QueryHandler[SumPiecesWithEmptyThemeQuery, int]):
    def handle(self, query: SumPiecesWithEmptyThemeQuery) -> int:
        return self.service.sum_pieces_with_empty_theme(query.policy)


class MaxPiecesHandler(_ServiceHandler, QueryHandler[MaxPiecesQuery, LegoSet]):
    def handle(self, query: MaxPiecesQuery) -> LegoSet:
        return self.service.max_by_pieces()


class FirstNumbersHandler(_ServiceHandler, QueryHandler[FirstNumbersQuery, List[Optional[str]]]):
    def handle(self, query: FirstNumbersQuery) -> List[Optional[str]]:
        return self.service.first_numbers(query.limit)


class LowerCaseThemesHandler(_ServiceHandler, QueryHandler[LowerCaseThemesQuery, List[str]]):
    def handle(self, query: LowerCaseThemesQuery) -> List[str]:
        return self.service.lower_case_themes(query.policy)


class HasThemeHandler(_ServiceHandler, QueryHandler[HasThemeQuery, bool]):
    def handle(self, query: HasThemeQuery) -> bool:
        return self.service.has_theme(query.theme, query.policy)


class NameInitialsHandler(_ServiceHandler, QueryHandler[NameInitialsQuery, List[str]]):
    def handle(self, query: NameInitialsQuery) -> List[str]:
        return self.service.name_initials()


class MinPiecesHandler(_ServiceHandler, QueryHandler[MinPiecesQuery, int]):
    def handle(self, query: MinPiecesQuery) -> int:
        return self.service.min_pieces()


class CountByThemeHandler(_ServiceHandler, QueryHandler[CountByThemeQuery, Dict[Optional[str], int]]):
    def handle(self, query: CountByThemeQuery) -> Dict[Optional[str], int]:
        return self.service.count_by_theme()


_HANDLERS = {
    DistinctThemesQuery: DistinctThemesHandler,
    SumPiecesWithThemeQuery: SumPiecesWithThemeHandler,
    SumPiecesWithEmptyThemeQuery: SumPiecesWithEmptyThemeHandler,
    MaxPiecesQuery: MaxPiecesHandler,
    FirstNumbersQuery: FirstNumbersHandler,
    LowerCaseThemesQuery: LowerCaseThemesHandler,
    HasThemeQuery: HasThemeHandler,
    NameInitialsQuery: NameInitialsHandler,
    MinPiecesQuery: MinPiecesHandler,
    CountByThemeQuery: CountByThemeHandler,
}


def create_query_bus(service: LegoSetQueryService) -> QueryBus:
    """Build a QueryBus with a handler for every set query."""
    bus = QueryBus()
    for query_type, handler_class in _HANDLERS.items():
        bus.register(query_type, handler_class(service))
    return bus

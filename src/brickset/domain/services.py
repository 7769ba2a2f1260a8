"""Set query service.

Every query is a single pass (occasionally two) over the repository snapshot
and returns a value. Nothing here prints or mutates the collection.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, List, Optional

from .entities import MAX_PIECES, LegoSet
from .repositories import RecordRepository
from .result import EmptyCollectionError, EmptyNameError, MissingThemeError, ValidationError


class MissingThemePolicy(Enum):
    """How a theme-based query treats records without a theme."""
    EXCLUDE = "exclude"
    TREAT_AS_EMPTY = "treat_as_empty"
    FAIL = "fail"


def _nulls_first(value: Optional[str]) -> tuple:
    """Sort key: None first, then strings by code point."""
    return (value is not None, value or "")


class LegoSetQueryService:
    """Read-only reports over a set repository."""

    def __init__(self, repository: RecordRepository[LegoSet]):
        self.repository = repository

    def _theme_of(self, lego_set: LegoSet, policy: MissingThemePolicy) -> Optional[str]:
        """Resolve a record's theme under the given policy.

        Returns None when the record should be skipped.
        """
        if lego_set.theme is not None:
            return lego_set.theme
        if policy is MissingThemePolicy.FAIL:
            raise MissingThemeError(lego_set.number)
        if policy is MissingThemePolicy.TREAT_AS_EMPTY:
            return ""
        return None

    def distinct_themes(self) -> List[Optional[str]]:
        """Themes without repetition, absent theme first.

        Themes compare by Unicode code point, so characters outside the BMP may
        order differently than under UTF-16 code unit comparison.
        """
        return sorted({s.theme for s in self.repository.get_all()}, key=_nulls_first)

    def sum_pieces_with_theme(
        self,
        theme: str,
        policy: MissingThemePolicy = MissingThemePolicy.EXCLUDE,
    ) -> int:
        """Sum of pieces over sets whose theme equals ``theme`` exactly."""
        total = 0
        for lego_set in self.repository.get_all():
            if self._theme_of(lego_set, policy) == theme:
                total += lego_set.pieces
        return total

    def sum_pieces_with_empty_theme(
        self,
        policy: MissingThemePolicy = MissingThemePolicy.FAIL,
    ) -> int:
        """Sum of pieces over sets whose theme is the empty string."""
        return self.sum_pieces_with_theme("", policy)

    def max_by_pieces(self) -> LegoSet:
        """The set with the most pieces; the first one wins a tie.

        Raises:
            EmptyCollectionError: If the repository holds no sets.
        """
        sets = self.repository.get_all()
        if not sets:
            raise EmptyCollectionError("No sets to take the maximum of")
        return max(sets, key=lambda s: s.pieces)

    def first_numbers(self, limit: int) -> List[Optional[str]]:
        """The first ``limit`` set numbers, absent first, then by code point."""
        if limit < 0:
            raise ValidationError(f"Limit must be non-negative, got {limit}")
        numbers = sorted((s.number for s in self.repository.get_all()), key=_nulls_first)
        return numbers[:limit]

    def lower_case_themes(
        self,
        policy: MissingThemePolicy = MissingThemePolicy.FAIL,
    ) -> List[str]:
        """Every set's theme in lower case, in collection order."""
        themes = []
        for lego_set in self.repository.get_all():
            theme = self._theme_of(lego_set, policy)
            if theme is not None:
                themes.append(theme.lower())
        return themes

    def has_theme(
        self,
        theme: str,
        policy: MissingThemePolicy = MissingThemePolicy.FAIL,
    ) -> bool:
        """Whether any set has exactly this theme.

        Under the FAIL policy every record is checked, so an absent theme
        raises even when a match exists.
        """
        found = False
        for lego_set in self.repository.get_all():
            if self._theme_of(lego_set, policy) == theme:
                found = True
                if policy is not MissingThemePolicy.FAIL:
                    break
        return found

    def name_initials(self) -> List[str]:
        """The first character of every set name, in collection order."""
        initials = []
        for lego_set in self.repository.get_all():
            if not lego_set.name:
                raise EmptyNameError(lego_set.number)
            initials.append(lego_set.name[0])
        return initials

    def min_pieces(self) -> int:
        """The smallest piece count, or MAX_PIECES for an empty collection."""
        smallest = MAX_PIECES
        for lego_set in self.repository.get_all():
            smallest = min(smallest, lego_set.pieces)
        return smallest

    def count_by_theme(self) -> Dict[Optional[str], int]:
        """Number of sets per theme, keyed in order of first appearance."""
        counts: Dict[Optional[str], int] = {}
        for lego_set in self.repository.get_all():
            counts[lego_set.theme] = counts.get(lego_set.theme, 0) + 1
        return counts

    def find_by_theme(self, theme: str) -> List[LegoSet]:
        """Sets whose theme equals ``theme``; sets without a theme never match."""
        return [s for s in self.repository.get_all() if s.theme == theme]

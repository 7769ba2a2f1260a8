"""
In-memory repository implementation.

Holds an already-built sequence of records; used for tests and for callers
that assemble sets without a data file.
"""

from typing import Generic, Iterable, Tuple, TypeVar

from ...domain.repositories import RecordRepository

T = TypeVar("T")


class InMemoryRecordRepository(RecordRepository[T], Generic[T]):
    """In-memory implementation of RecordRepository for testing and development."""

    def __init__(self, records: Iterable[T] = ()):
        self._records: Tuple[T, ...] = tuple(records)

    def get_all(self) -> Tuple[T, ...]:
        return self._records

"""Repository interfaces.

Repositories here are read-only: a collection is loaded once and then only
handed out as an immutable snapshot.
"""

from abc import ABC, abstractmethod
from typing import Generic, Tuple, TypeVar

T = TypeVar("T")


class RecordRepository(ABC, Generic[T]):
    """Read-only repository over a fixed collection of records."""

    @abstractmethod
    def get_all(self) -> Tuple[T, ...]:
        """Return every loaded record in source order."""
        pass

    def count(self) -> int:
        """Get total count of records."""
        return len(self.get_all())

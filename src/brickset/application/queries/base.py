"""Base classes for CQRS query pattern."""

import logging
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Generic, List, Optional, TypeVar
from uuid import uuid4

from ...domain.result import Failure, NotFoundError, Result, try_catch

logger = logging.getLogger(__name__)

# Type variables for generic query handling
Q = TypeVar("Q", bound="Query")
R = TypeVar("R")


@dataclass(frozen=True, slots=True)
class Query:
    """Base query class with metadata."""

    query_id: str = field(default_factory=lambda: str(uuid4()))

    def to_dict(self) -> Dict[str, Any]:
        """Convert query to dictionary for serialization."""
        return {
            "query_id": self.query_id,
            "query_type": self.__class__.__name__,
            **{
                f.name: getattr(self, f.name)
                for f in self.__dataclass_fields__.values()
                if f.name != "query_id"
            }
        }


class QueryHandler(ABC, Generic[Q, R]):
    """Abstract base class for query handlers."""

    @abstractmethod
    def handle(self, query: Q) -> R:
        """Handle the query and return results."""
        pass


@dataclass(frozen=True, slots=True)
class QueryResult(Generic[R]):
    """Result wrapper for query responses."""

    data: Optional[R] = None
    success: bool = True
    query_id: str = ""
    errors: List[str] = field(default_factory=list)
    error_type: Optional[str] = None
    execution_time_ms: Optional[float] = None
    outcome: Optional[Result[Any, Exception]] = None


class QueryBus:
    """Mediates queries to the handler registered for their type.

    Exceptions raised by a handler never escape the bus: ``execute`` returns
    them as a Failure and ``dispatch`` as a failed QueryResult.
    """

    def __init__(self):
        self._handlers: Dict[type, QueryHandler] = {}
        self._middleware: List[Callable] = []

    def register(self, query_type: type, handler: QueryHandler) -> None:
        """Register a handler for a query type."""
        self._handlers[query_type] = handler

    def register_middleware(self, middleware: Callable) -> None:
        """Register middleware for query processing pipeline."""
        self._middleware.append(middleware)

    def execute(self, query: Query) -> Result[Any, Exception]:
        """Run a query and return its outcome as a Result."""
        query_type = type(query)
        handler = self._handlers.get(query_type)
        if handler is None:
            return Failure(NotFoundError(f"No handler registered for query type: {query_type.__name__}"))

        current_handler = handler.handle
        for middleware in reversed(self._middleware):
            current_handler = middleware(current_handler)

        outcome = try_catch(lambda: current_handler(query))
        if outcome.is_failure():
            logger.info(f"{query_type.__name__} failed: {outcome.error()}")
        return outcome

    def dispatch(self, query: Query) -> QueryResult:
        """Dispatch a query to its registered handler."""
        start_time = time.perf_counter()
        outcome = self.execute(query)
        execution_time = (time.perf_counter() - start_time) * 1000

        if outcome.is_success():
            return QueryResult(
                data=outcome.value(),
                success=True,
                query_id=query.query_id,
                execution_time_ms=execution_time,
                outcome=outcome
            )

        error = outcome.error()
        return QueryResult(
            success=False,
            query_id=query.query_id,
            errors=[str(error)],
            error_type=type(error).__name__,
            execution_time_ms=execution_time,
            outcome=outcome
        )

    def get_registered_queries(self) -> List[type]:
        """Get list of registered query types."""
        return list(self._handlers.keys())

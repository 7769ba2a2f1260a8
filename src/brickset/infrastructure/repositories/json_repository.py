"""
JSON Repository Implementations.

This module loads record collections from JSON files. A file holds a single
array with one object per record; it is read once, eagerly, and the resulting
records are kept as an immutable tuple for the life of the repository.
"""

import json
import logging
from pathlib import Path
from typing import Any, Callable, Dict, Generic, List, Optional, Tuple, TypeVar, Union

from ...domain.entities import LegoSet
from ...domain.repositories import RecordRepository
from ...exceptions import DataLoadError
from ...schema import validate_set_data

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_DATA_FILE = Path(__file__).resolve().parent.parent.parent / "data" / "brickset.json"
MAX_REPORTED_ERRORS = 5


class JsonRecordLoader(Generic[T]):
    """Loads a JSON array of objects into records of type T.

    ``factory`` builds one record from one decoded object. ``validate``, when
    given, checks the whole decoded document first and returns error messages.
    """

    def __init__(
        self,
        factory: Callable[[Dict[str, Any]], T],
        validate: Optional[Callable[[Any], List[str]]] = None,
    ):
        self.factory = factory
        self.validate = validate

    def load(self, source: Union[str, Path]) -> Tuple[T, ...]:
        """Read ``source`` and build every record.

        Raises:
            DataLoadError: If the file is missing, is not valid JSON, is not an
                array, or holds an entry the factory rejects.
        """
        path = Path(source)
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except FileNotFoundError as e:
            raise DataLoadError(f"Data file does not exist: {path}") from e
        except json.JSONDecodeError as e:
            raise DataLoadError(f"Data file is not valid JSON: {path}: {e}") from e
        except OSError as e:
            raise DataLoadError(f"Could not read data file {path}: {e}") from e

        if not isinstance(data, list):
            raise DataLoadError(f"Expected a JSON array in {path}, got {type(data).__name__}")

        if self.validate is not None:
            errors = self.validate(data)
            if errors:
                shown = "; ".join(errors[:MAX_REPORTED_ERRORS])
                more = len(errors) - MAX_REPORTED_ERRORS
                suffix = f" (and {more} more)" if more > 0 else ""
                raise DataLoadError(f"Invalid data in {path}: {shown}{suffix}")

        records = []
        for index, entry in enumerate(data):
            try:
                records.append(self.factory(entry))
            except DataLoadError as e:
                raise DataLoadError(f"{path}, entry {index}: {e}") from e

        logger.info(f"Loaded {len(records)} records from {path}")
        return tuple(records)


class JsonRecordRepository(RecordRepository[T], Generic[T]):
    """Repository whose records are loaded from a JSON file at construction."""

    def __init__(self, source: Union[str, Path], loader: JsonRecordLoader[T]):
        self.source = Path(source)
        self._records = loader.load(self.source)

    def get_all(self) -> Tuple[T, ...]:
        return self._records


class LegoSetRepository(JsonRecordRepository[LegoSet]):
    """Repository of LegoSet records, by default from the bundled brickset.json."""

    def __init__(self, source: Union[str, Path, None] = None):
        super().__init__(source or DEFAULT_DATA_FILE, JsonRecordLoader(LegoSet.from_dict, validate_set_data))

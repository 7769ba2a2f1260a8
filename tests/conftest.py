"""Shared fixtures for brickset tests."""

import json

import pytest

from brickset.domain.entities import LegoSet
from brickset.domain.services import LegoSetQueryService
from brickset.infrastructure.repositories import InMemoryRecordRepository


def make_set(number, name, theme, pieces, **kwargs):
    """Build a LegoSet with only the fields queries look at."""
    return LegoSet(number=number, name=name, theme=theme, pieces=pieces, **kwargs)


def make_service(sets):
    """Wrap sets in an in-memory repository and a query service."""
    return LegoSetQueryService(InMemoryRecordRepository(sets))


@pytest.fixture
def castle_sets():
    """Two themed sets and one without a theme."""
    return [
        make_set("001", "Castle", "Medieval", 500),
        make_set("002", "Ship", "Medieval", 300),
        make_set("003", "Car", None, 50),
    ]


@pytest.fixture
def castle_service(castle_sets):
    return make_service(castle_sets)


@pytest.fixture
def themed_sets():
    """Sets that all carry a theme, two of them empty."""
    return [
        make_set("8534-1", "Tahu", "Bionicle", 33),
        make_set("40179-1", "Mosaic", "", 4502),
        make_set("6080-1", "King's Castle", "Castle", 674),
        make_set("8535-1", "Lewa", "Bionicle", 31),
        make_set("853373-1", "Chess Set", "", 328),
    ]


@pytest.fixture
def themed_service(themed_sets):
    return make_service(themed_sets)


@pytest.fixture
def data_file(tmp_path):
    """Write a small valid data file and return its path."""
    entries = [
        {"number": "001", "name": "Castle", "theme": "Medieval", "pieces": 500,
         "year": 1984, "tags": ["Castle"], "packagingType": "Box"},
        {"number": "002", "name": "Ship", "theme": "Medieval", "pieces": 300},
        {"number": "003", "name": "Car", "theme": None, "pieces": 50,
         "dimensions": {"width": 10, "height": 5, "depth": 2}},
    ]
    path = tmp_path / "sets.json"
    path.write_text(json.dumps(entries), encoding="utf-8")
    return path

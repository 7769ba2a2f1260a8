"""
Set collection entities.

This module defines the LEGO set record and the small value objects it carries.
Records are immutable once loaded; absent fields are represented as ``None``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, FrozenSet, Optional

from ..exceptions import DataLoadError

logger = logging.getLogger(__name__)

# Largest piece count a set may carry; also the seed of the minimum fold.
MAX_PIECES = 2**31 - 1


class PackagingType(Enum):
    """How a set is packaged, as labelled in the dataset."""
    BOX = "Box"
    BOX_WITH_BACKING_CARD = "Box with backing card"
    BLISTER_PACK = "Blister pack"
    BUCKET = "Bucket"
    FOIL_PACK = "Foil pack"
    NONE = "None (loose parts)"
    PLASTIC_BOX = "Plastic box"
    POLYBAG = "Polybag"
    TAG = "Tag"
    OTHER = "Other"


@dataclass(frozen=True, slots=True)
class Dimensions:
    """Box dimensions in centimetres."""
    width: float
    height: float
    depth: float

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Dimensions":
        return cls(
            width=float(data["width"]),
            height=float(data["height"]),
            depth=float(data["depth"]),
        )

    def to_dict(self) -> Dict[str, float]:
        return {"width": self.width, "height": self.height, "depth": self.depth}


@dataclass(frozen=True, slots=True, kw_only=True)
class LegoSet:
    """
    A single LEGO set entry.

    ``theme`` distinguishes an absent theme (``None``) from an empty one
    (``""``); queries decide how to treat each through their
    MissingThemePolicy.
    """

    number: Optional[str]
    name: Optional[str]
    pieces: int = 0
    year: Optional[int] = None
    theme: Optional[str] = None
    subtheme: Optional[str] = None
    minifigs: Optional[int] = None
    tags: FrozenSet[str] = field(default_factory=frozenset)
    dimensions: Optional[Dimensions] = None
    weight: Optional[float] = None
    packaging_type: Optional[PackagingType] = None
    availability: Optional[str] = None

    def __post_init__(self) -> None:
        if not 0 <= self.pieces <= MAX_PIECES:
            raise ValueError(f"Piece count must be between 0 and {MAX_PIECES}, got {self.pieces}")

    @property
    def has_theme(self) -> bool:
        return self.theme is not None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LegoSet":
        """Create a LegoSet from a dataset entry.

        Keys follow the dataset's camelCase naming; unknown keys are ignored.

        Raises:
            DataLoadError: If the entry is not an object or a field has the wrong type.
        """
        if not isinstance(data, dict):
            raise DataLoadError(f"Expected an object, got {type(data).__name__}")

        packaging = data.get("packagingType")
        packaging_type = None
        if packaging is not None:
            try:
                packaging_type = PackagingType(packaging)
            except ValueError:
                logger.debug(f"Unknown packaging type {packaging!r} for set {data.get('number')}")
                packaging_type = PackagingType.OTHER

        dimensions = data.get("dimensions")

        try:
            return cls(
                number=data.get("number"),
                name=data.get("name"),
                pieces=int(data.get("pieces") or 0),
                year=data.get("year"),
                theme=data.get("theme"),
                subtheme=data.get("subtheme"),
                minifigs=data.get("minifigs"),
                tags=frozenset(data.get("tags") or ()),
                dimensions=Dimensions.from_dict(dimensions) if dimensions else None,
                weight=data.get("weight"),
                packaging_type=packaging_type,
                availability=data.get("availability"),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise DataLoadError(f"Invalid set entry {data.get('number')!r}: {e}") from e

    def to_dict(self) -> Dict[str, Any]:
        """Convert back to the dataset's entry shape."""
        return {
            "number": self.number,
            "name": self.name,
            "year": self.year,
            "theme": self.theme,
            "subtheme": self.subtheme,
            "pieces": self.pieces,
            "minifigs": self.minifigs,
            "tags": sorted(self.tags),
            "dimensions": self.dimensions.to_dict() if self.dimensions else None,
            "weight": self.weight,
            "packagingType": self.packaging_type.value if self.packaging_type else None,
            "availability": self.availability,
        }

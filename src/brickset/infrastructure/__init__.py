"""Infrastructure layer for brickset."""

from . import repositories

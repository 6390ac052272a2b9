"""Map pattern grid model."""

from .prefab import Prefab
from .map_pattern import MapPattern, GRID_SIDE, MAP_SIZE, MIN_LEVEL, MAX_LEVEL

__all__ = ["Prefab", "MapPattern", "GRID_SIDE", "MAP_SIZE", "MIN_LEVEL", "MAX_LEVEL"]

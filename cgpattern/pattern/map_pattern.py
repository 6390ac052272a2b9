"""Fixed 16x16 map pattern grid with per-cell height levels and prefabs."""

import numbers
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, Optional, Tuple, Union

import numpy as np

from ..errors import IndexOutOfBoundsError, LevelRangeError
from .prefab import Prefab

GRID_SIDE = 16
MAP_SIZE = GRID_SIDE * GRID_SIDE
MIN_LEVEL = -50
MAX_LEVEL = 50


def _default_levels() -> np.ndarray:
    return np.zeros(MAP_SIZE, dtype=np.int8)


def _default_prefabs() -> np.ndarray:
    return np.full(MAP_SIZE, Prefab.EMPTY, dtype=np.uint8)


def _read_only(array: np.ndarray) -> np.ndarray:
    view = array.view()
    view.flags.writeable = False
    return view


@dataclass(eq=False)
class MapPattern:
    """One 16x16 map pattern.

    Cells are addressed by 0-indexed row ``x`` and column ``y`` or by the
    linear index ``x * 16 + y``. Levels range from -50 to 50 with 0 as the
    base height; prefabs hold ``Prefab`` codes.

    Attributes:
        levels: int8 array of shape (256,)
        prefabs: uint8 array of shape (256,)
    """
    levels: np.ndarray = field(default_factory=_default_levels)
    prefabs: np.ndarray = field(default_factory=_default_prefabs)

    def __post_init__(self):
        """Validate both layers, then coerce them to fixed-size arrays.

        Raises:
            ValueError: If a layer has the wrong shape or an unknown prefab code
            LevelRangeError: If a level is not an integer in -50..50
        """
        levels = np.asarray(self.levels)
        prefabs = np.asarray(self.prefabs)

        if levels.shape != (MAP_SIZE,):
            raise ValueError(f"levels must have shape ({MAP_SIZE},), got {levels.shape}")
        if prefabs.shape != (MAP_SIZE,):
            raise ValueError(f"prefabs must have shape ({MAP_SIZE},), got {prefabs.shape}")

        # Range checks run before the cast so wrapped values cannot slip through
        if not np.issubdtype(levels.dtype, np.integer):
            raise LevelRangeError(f"levels must be integers, got dtype {levels.dtype}")
        out_of_range = np.flatnonzero((levels < MIN_LEVEL) | (levels > MAX_LEVEL))
        if out_of_range.size:
            index = int(out_of_range[0])
            raise LevelRangeError(
                f"Level must be between {MIN_LEVEL} and {MAX_LEVEL}",
                index=index,
                token=str(levels[index]),
            )
        if not np.issubdtype(prefabs.dtype, np.integer):
            raise ValueError(f"prefabs must be integer codes, got dtype {prefabs.dtype}")
        if int(prefabs.min()) < 0 or int(prefabs.max()) > max(Prefab):
            bad = int(prefabs.min()) if int(prefabs.min()) < 0 else int(prefabs.max())
            raise ValueError(f"prefabs contains unknown code {bad}")

        self.levels = np.array(levels, dtype=np.int8)
        self.prefabs = np.array(prefabs, dtype=np.uint8)

    @classmethod
    def default(cls) -> "MapPattern":
        """Pattern with every level at 0 and every prefab EMPTY."""
        return cls()

    @staticmethod
    def index_of(x: int, y: int) -> int:
        """Linear index of cell (x, y).

        Raises:
            IndexOutOfBoundsError: If either coordinate is outside 0..15
        """
        if not (0 <= x < GRID_SIDE and 0 <= y < GRID_SIDE):
            raise IndexOutOfBoundsError(f"Invalid coordinates ({x}, {y})")
        return x * GRID_SIDE + y

    @staticmethod
    def coords_of(index: int) -> Tuple[int, int]:
        """(x, y) coordinates of a linear index."""
        _check_index(index)
        return divmod(index, GRID_SIDE)

    # Bulk views

    def get_levels(self) -> np.ndarray:
        """Read-only view of all 256 levels."""
        return _read_only(self.levels)

    def get_levels_mut(self) -> np.ndarray:
        """Writable level array. Values written here are not range checked."""
        return self.levels

    def get_prefabs(self) -> np.ndarray:
        """Read-only view of all 256 prefab codes."""
        return _read_only(self.prefabs)

    def get_prefabs_mut(self) -> np.ndarray:
        """Writable prefab code array."""
        return self.prefabs

    # Cell access

    def level_at(self, x: int, y: int) -> int:
        return int(self.levels[self.index_of(x, y)])

    def prefab_at(self, x: int, y: int) -> Prefab:
        return Prefab(int(self.prefabs[self.index_of(x, y)]))

    def set_level_at(self, x: int, y: int, level: int) -> None:
        """Set height level of cell (x, y).

        Raises:
            IndexOutOfBoundsError: If x or y is outside 0..15
            LevelRangeError: If level is outside -50..50
        """
        self.set_level_at_index(self.index_of(x, y), level)

    def set_level_at_index(self, index: int, level: int) -> None:
        """Set height level of the cell at a linear index.

        Raises:
            IndexOutOfBoundsError: If index is outside 0..255
            LevelRangeError: If level is not an integer in -50..50
        """
        _check_index(index)
        if not isinstance(level, numbers.Integral) or isinstance(level, bool):
            raise LevelRangeError(
                f"Level must be an integer, got {type(level).__name__}",
                index=index,
                token=repr(level),
            )
        if not MIN_LEVEL <= level <= MAX_LEVEL:
            raise LevelRangeError(
                f"Level must be between {MIN_LEVEL} and {MAX_LEVEL}",
                index=index,
                token=str(level),
            )
        self.levels[index] = level

    def set_prefab_at(self, x: int, y: int, prefab: Union[Prefab, str]) -> None:
        """Place a prefab on cell (x, y). Accepts a Prefab or its file character."""
        self.set_prefab_at_index(self.index_of(x, y), prefab)

    def set_prefab_at_index(self, index: int, prefab: Union[Prefab, str]) -> None:
        _check_index(index)
        self.prefabs[index] = Prefab.coerce(prefab)

    def iter_cells(self) -> Iterator[Tuple[int, int, int, Prefab]]:
        """Yield (x, y, level, prefab) for every cell in index order."""
        for index in range(MAP_SIZE):
            x, y = divmod(index, GRID_SIDE)
            yield x, y, int(self.levels[index]), Prefab(int(self.prefabs[index]))

    def copy(self) -> "MapPattern":
        duplicate = MapPattern()
        duplicate.levels[:] = self.levels
        duplicate.prefabs[:] = self.prefabs
        return duplicate

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MapPattern):
            return NotImplemented
        return bool(
            np.array_equal(self.levels, other.levels)
            and np.array_equal(self.prefabs, other.prefabs)
        )

    __hash__ = None  # mutable

    # Text form

    def get_map_raw(self) -> str:
        """Canonical ``.cgp`` text of this pattern."""
        from ..codec.serializer import serialize
        return serialize(self)

    def save_pattern(self, name: Union[str, Path], extension: Optional[str] = None) -> Path:
        """Write this pattern to ``<name>.cgp``.

        Raises:
            PatternIOError: If the file cannot be created or written
        """
        from ..codec.files import save_pattern
        if extension is None:
            return save_pattern(self, name)
        return save_pattern(self, name, extension=extension)


def _check_index(index: int) -> None:
    if not 0 <= index < MAP_SIZE:
        raise IndexOutOfBoundsError(f"Index out of bounds (0..{MAP_SIZE - 1})", index=index)


__all__ = ["MapPattern", "GRID_SIDE", "MAP_SIZE", "MIN_LEVEL", "MAX_LEVEL"]

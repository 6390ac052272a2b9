"""Codec between ``.cgp`` pattern text and MapPattern."""

from ..errors import (
    MapPatternError,
    ConversionError,
    ParsingError,
    PatternIOError,
    IndexOutOfBoundsError,
    InvalidCharacterError,
    LevelRangeError,
)
from .parser import PatternParser, parse
from .serializer import serialize
from .files import load_pattern, save_pattern, write_pattern

__all__ = [
    "MapPatternError",
    "ConversionError",
    "ParsingError",
    "PatternIOError",
    "IndexOutOfBoundsError",
    "InvalidCharacterError",
    "LevelRangeError",
    "PatternParser",
    "parse",
    "serialize",
    "load_pattern",
    "save_pattern",
    "write_pattern",
]

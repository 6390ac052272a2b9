"""Codec for 16x16 ``.cgp`` map pattern files."""

from .pattern import MapPattern, Prefab
from .codec import (
    MapPatternError,
    ConversionError,
    ParsingError,
    PatternIOError,
    IndexOutOfBoundsError,
    InvalidCharacterError,
    LevelRangeError,
    PatternParser,
    parse,
    serialize,
    load_pattern,
    save_pattern,
)

__version__ = "0.1.0"

__all__ = [
    "MapPattern",
    "Prefab",
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
]

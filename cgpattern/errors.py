"""Typed errors raised by the map pattern codec and grid model.

Every failure derives from :class:`MapPatternError`, so callers that only
care whether a pattern could be handled can catch the base class. The
subclasses also derive from the matching builtin (``IndexError``,
``ValueError``) where one exists.
"""

from typing import Optional


class MapPatternError(Exception):
    """Base class for map pattern failures.

    Attributes:
        index: Linear cell index the failure relates to, if any
        offset: Character offset in the parsed text, if any
        token: Offending character or literal, if any
    """

    def __init__(
        self,
        message: str,
        *,
        index: Optional[int] = None,
        offset: Optional[int] = None,
        token: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.index = index
        self.offset = offset
        self.token = token

    def __str__(self) -> str:
        details = []
        if self.index is not None:
            details.append(f"index={self.index}")
        if self.offset is not None:
            details.append(f"offset={self.offset}")
        if self.token is not None:
            details.append(f"token={self.token!r}")
        if not details:
            return self.message
        return f"{self.message} ({', '.join(details)})"


class ConversionError(MapPatternError):
    """A height token outside parentheses is not a decimal digit."""
    pass


class ParsingError(MapPatternError):
    """A parenthesized height literal is malformed or out of range."""
    pass


class PatternIOError(MapPatternError):
    """Reading or writing a pattern file failed."""
    pass


class IndexOutOfBoundsError(MapPatternError, IndexError):
    """A coordinate or linear index falls outside the 16x16 grid."""
    pass


class InvalidCharacterError(MapPatternError, ValueError):
    """A prefab character has no matching Prefab."""
    pass


class LevelRangeError(MapPatternError, ValueError):
    """A height level outside -50..50 was given to a mutator."""
    pass


__all__ = [
    "MapPatternError",
    "ConversionError",
    "ParsingError",
    "PatternIOError",
    "IndexOutOfBoundsError",
    "InvalidCharacterError",
    "LevelRangeError",
]

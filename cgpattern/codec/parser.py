"""Parser for the ``.cgp`` map pattern text format.

The input is a stream of whitespace-separated tokens. The first 256 tokens
are height levels, every following non-whitespace character is a prefab.

A height token is either a single digit (``0``..``9``) or a parenthesized
signed integer such as ``(-12)`` or ``(35)``. Prefab tokens are always one
character and have no escape form.

Example (truncated)::

    00(-3)0000000000(12)00
    ...

    0000nn0000000000
    ...
"""

from enum import Enum
from typing import List, Optional
import logging
import re

import numpy as np

from ..pattern.map_pattern import MAP_SIZE, MAX_LEVEL, MIN_LEVEL, MapPattern
from ..pattern.prefab import Prefab
from ..errors import (
    ConversionError,
    IndexOutOfBoundsError,
    InvalidCharacterError,
    ParsingError,
)

logger = logging.getLogger(__name__)

DIGITS = "0123456789"
INT8_MIN = -128
INT8_MAX = 127
_LITERAL_RE = re.compile(r"[+-]?[0-9]+")


class ScanState(Enum):
    """Tokenizer states."""
    NORMAL = "normal"
    IN_PARENS = "in_parens"


class PatternParser:
    """Parses pattern text into a MapPattern."""

    def __init__(self, strict_levels: bool = True):
        """Initialize parser.

        Args:
            strict_levels: Reject parenthesized levels outside -50..50. When
                False any value that fits a signed byte is accepted.
        """
        self.strict_levels = strict_levels

    def parse(self, text: str) -> MapPattern:
        """Parse pattern text.

        Args:
            text: Full contents of a ``.cgp`` file

        Returns:
            Populated MapPattern. Cells the input never reaches keep level 0
            and prefab EMPTY.

        Raises:
            ConversionError: A bare height token is not a digit
            ParsingError: A parenthesized level is malformed or out of range
            IndexOutOfBoundsError: More than 256 prefab characters
            InvalidCharacterError: A prefab character has no Prefab
        """
        levels = np.zeros(MAP_SIZE, dtype=np.int8)
        raw_prefabs: List[str] = []
        prefab_offsets: List[int] = []

        state = ScanState.NORMAL
        buffer: List[str] = []
        paren_offset: Optional[int] = None
        index = 0

        for offset, char in enumerate(text):
            if char.isspace():
                continue

            if state is ScanState.IN_PARENS:
                if char == ")":
                    levels[index] = self._parse_literal("".join(buffer), index, paren_offset)
                    buffer.clear()
                    index += 1
                    state = ScanState.NORMAL
                else:
                    buffer.append(char)
                continue

            if index >= MAP_SIZE:
                if index - MAP_SIZE >= MAP_SIZE:
                    raise IndexOutOfBoundsError(
                        f"More than {MAP_SIZE} prefab characters",
                        index=index - MAP_SIZE,
                        offset=offset,
                        token=char,
                    )
                raw_prefabs.append(char)
                prefab_offsets.append(offset)
                index += 1
            elif char == "(":
                state = ScanState.IN_PARENS
                paren_offset = offset
            elif char in DIGITS:
                levels[index] = DIGITS.index(char)
                index += 1
            else:
                raise ConversionError(
                    "Height token is not a digit", index=index, offset=offset, token=char
                )

        if state is ScanState.IN_PARENS:
            raise ParsingError(
                "Unterminated parenthesized height",
                index=index,
                offset=paren_offset,
                token="(" + "".join(buffer),
            )

        prefabs = np.full(MAP_SIZE, Prefab.EMPTY, dtype=np.uint8)
        for cell, (char, offset) in enumerate(zip(raw_prefabs, prefab_offsets)):
            try:
                prefabs[cell] = Prefab.from_char(char)
            except InvalidCharacterError as e:
                e.index = cell
                e.offset = offset
                raise

        if index < 2 * MAP_SIZE:
            logger.debug(
                "Pattern input ended early: %d of %d heights, %d of %d prefabs",
                min(index, MAP_SIZE), MAP_SIZE, len(raw_prefabs), MAP_SIZE,
            )

        # Lenient levels may lie outside -50..50, which the constructor rejects
        pattern = MapPattern()
        pattern.get_levels_mut()[:] = levels
        pattern.get_prefabs_mut()[:] = prefabs
        return pattern

    def _parse_literal(self, literal: str, index: int, offset: Optional[int]) -> int:
        """Convert the contents of a parenthesized height token."""
        token = f"({literal})"
        if not _LITERAL_RE.fullmatch(literal):
            raise ParsingError(
                "Parenthesized height is not an integer", index=index, offset=offset, token=token
            )

        # int() refuses very long digit strings, and nothing past 3 digits fits
        magnitude = literal.lstrip("+-").lstrip("0") or "0"
        value = None
        if len(magnitude) <= 3:
            value = -int(magnitude) if literal.startswith("-") else int(magnitude)
        if value is None or not INT8_MIN <= value <= INT8_MAX:
            raise ParsingError(
                "Parenthesized height does not fit a signed byte",
                index=index,
                offset=offset,
                token=token,
            )
        if self.strict_levels and not MIN_LEVEL <= value <= MAX_LEVEL:
            raise ParsingError(
                f"Parenthesized height outside {MIN_LEVEL}..{MAX_LEVEL}",
                index=index,
                offset=offset,
                token=token,
            )
        return value


def parse(text: str, *, strict_levels: bool = True) -> MapPattern:
    """Parse pattern text with a one-off PatternParser."""
    return PatternParser(strict_levels=strict_levels).parse(text)


__all__ = ["PatternParser", "ScanState", "parse"]

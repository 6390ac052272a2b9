"""Placeable object tags attached to map pattern cells."""

from enum import IntEnum
from typing import Dict, Union

from ..errors import InvalidCharacterError


class Prefab(IntEnum):
    """Prefab enumeration.

    Values are the codes stored in ``MapPattern.prefabs``. Each member has
    exactly one character in the ``.cgp`` text form.
    """
    EMPTY = 0
    MELEE = 1
    PROJECTILE = 2
    JUMP_PAD = 3
    STAIRS = 4
    HIDEOUS = 5

    @property
    def char(self) -> str:
        """Character used for this prefab in pattern files."""
        return PREFAB_CHARS[self]

    @classmethod
    def from_char(cls, char: str) -> "Prefab":
        """Resolve a pattern file character to its Prefab.

        Raises:
            InvalidCharacterError: If no prefab uses ``char``
        """
        try:
            return CHAR_PREFABS[char]
        except KeyError:
            raise InvalidCharacterError("Invalid prefab character", token=char) from None

    @classmethod
    def coerce(cls, value: Union["Prefab", int, str]) -> "Prefab":
        """Accept a Prefab, its integer code or its file character."""
        if isinstance(value, str):
            return cls.from_char(value)
        try:
            return cls(value)
        except ValueError:
            raise InvalidCharacterError("Invalid prefab code", token=str(value)) from None


PREFAB_CHARS: Dict[Prefab, str] = {
    Prefab.EMPTY: "0",
    Prefab.MELEE: "n",
    Prefab.PROJECTILE: "p",
    Prefab.JUMP_PAD: "J",
    Prefab.STAIRS: "s",
    Prefab.HIDEOUS: "H",
}

CHAR_PREFABS: Dict[str, Prefab] = {char: prefab for prefab, char in PREFAB_CHARS.items()}


__all__ = ["Prefab", "PREFAB_CHARS", "CHAR_PREFABS"]

"""Serializer producing the canonical ``.cgp`` text of a MapPattern."""

from typing import Iterable, List

from ..pattern.map_pattern import GRID_SIDE, MapPattern
from ..pattern.prefab import PREFAB_CHARS, Prefab


def height_token(level: int) -> str:
    """Text token for one height level.

    Only 0..9 fit in a single character; everything else, including every
    negative level, is wrapped in parentheses.
    """
    text = str(int(level))
    if len(text) == 1:
        return text
    return f"({text})"


def _wrap_rows(tokens: Iterable[str]) -> List[str]:
    rows: List[str] = []
    row: List[str] = []
    for token in tokens:
        row.append(token)
        if len(row) == GRID_SIDE:
            rows.append("".join(row))
            row = []
    if row:
        rows.append("".join(row))
    return rows


def serialize(pattern: MapPattern) -> str:
    """Render a pattern in canonical form.

    Sixteen rows of height tokens, a blank line, sixteen rows of prefab
    characters and a trailing newline. Rows are wrapped by token count, so
    rows holding parenthesized tokens are wider than the others.
    """
    heights = _wrap_rows(height_token(level) for level in pattern.get_levels())
    prefabs = _wrap_rows(PREFAB_CHARS[Prefab(int(code))] for code in pattern.get_prefabs())
    return "\n".join(heights) + "\n\n" + "\n".join(prefabs) + "\n"


__all__ = ["serialize", "height_token"]

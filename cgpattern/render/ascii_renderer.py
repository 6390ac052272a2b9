"""ASCII renderer for human-readable previews of map patterns.

This module creates deterministic text views of:
- Height levels (fixed-width, column aligned)
- Prefab placement (one symbol per cell)
- Both side by side with a legend
"""

from typing import List, Optional
from dataclasses import dataclass
from pathlib import Path
import logging

from ..errors import PatternIOError
from ..pattern.map_pattern import GRID_SIDE, MapPattern
from ..pattern.prefab import Prefab

logger = logging.getLogger(__name__)

PREFAB_LABELS = {
    Prefab.EMPTY: "empty",
    Prefab.MELEE: "melee",
    Prefab.PROJECTILE: "projectile",
    Prefab.JUMP_PAD: "jump pad",
    Prefab.STAIRS: "stairs",
    Prefab.HIDEOUS: "hideous",
}


@dataclass
class ASCIIRenderOptions:
    """Options for ASCII rendering."""
    cell_width: int = 4  # Characters per height cell, sign included
    show_grid_indices: bool = True  # Row/column headers
    show_legend: bool = True  # Prefab legend under the overview
    empty_symbol: str = "."  # Shown for Prefab.EMPTY
    separator: str = "   "  # Between heights and prefabs in the overview


class ASCIIRenderer:
    """Creates ASCII representations of map patterns."""

    def __init__(self, options: Optional[ASCIIRenderOptions] = None):
        """Initialize ASCII renderer.

        Args:
            options: Rendering options
        """
        self.options = options or ASCIIRenderOptions()
        if self.options.cell_width < 3:
            raise ValueError(f"cell_width must be at least 3, got {self.options.cell_width}")
        if len(self.options.empty_symbol) != 1:
            raise ValueError("empty_symbol must be a single character")

    def _prefab_symbol(self, prefab: Prefab) -> str:
        if prefab is Prefab.EMPTY:
            return self.options.empty_symbol
        return prefab.char

    def render_heights(self, pattern: MapPattern, output_path: Optional[Path] = None) -> str:
        """Render height levels with every column the same width.

        Args:
            pattern: Map pattern
            output_path: Optional output file path

        Returns:
            ASCII string representation
        """
        width = self.options.cell_width
        lines = []
        if self.options.show_grid_indices:
            header = "".join(str(y).rjust(width) for y in range(GRID_SIDE))
            lines.append("   " + header)

        for x in range(GRID_SIDE):
            row = "".join(str(pattern.level_at(x, y)).rjust(width) for y in range(GRID_SIDE))
            if self.options.show_grid_indices:
                row = f"{x:>2} " + row
            lines.append(row)

        ascii_text = "\n".join(lines)
        if output_path:
            self._save_to_file(ascii_text, output_path)
        return ascii_text

    def render_prefabs(self, pattern: MapPattern, output_path: Optional[Path] = None) -> str:
        """Render prefab placement, one symbol per cell.

        Args:
            pattern: Map pattern
            output_path: Optional output file path

        Returns:
            ASCII string representation
        """
        lines = []
        if self.options.show_grid_indices:
            lines.append("   " + "".join(format(y, "x") for y in range(GRID_SIDE)))

        for x in range(GRID_SIDE):
            row = "".join(self._prefab_symbol(pattern.prefab_at(x, y)) for y in range(GRID_SIDE))
            if self.options.show_grid_indices:
                row = f"{x:>2} " + row
            lines.append(row)

        ascii_text = "\n".join(lines)
        if output_path:
            self._save_to_file(ascii_text, output_path)
        return ascii_text

    def render_overview(self, pattern: MapPattern, output_path: Optional[Path] = None) -> str:
        """Render heights and prefabs side by side, then the legend.

        Args:
            pattern: Map pattern
            output_path: Optional output file path

        Returns:
            ASCII string representation
        """
        height_lines = self.render_heights(pattern).split("\n")
        prefab_lines = self.render_prefabs(pattern).split("\n")
        pad = max(len(line) for line in height_lines)

        lines = [
            h.ljust(pad) + self.options.separator + p
            for h, p in zip(height_lines, prefab_lines)
        ]

        if self.options.show_legend:
            lines.append("")
            lines.extend(self._render_legend(pattern))

        ascii_text = "\n".join(lines)
        if output_path:
            self._save_to_file(ascii_text, output_path)
        return ascii_text

    def _render_legend(self, pattern: MapPattern) -> List[str]:
        """Legend with a count for every prefab present."""
        levels = pattern.get_levels()
        counts = {prefab: 0 for prefab in Prefab}
        for code in pattern.get_prefabs():
            counts[Prefab(int(code))] += 1

        lines = [f"LEVELS: min {int(levels.min())} | max {int(levels.max())}"]
        for prefab in Prefab:
            if counts[prefab]:
                lines.append(f"  {self._prefab_symbol(prefab)} = {PREFAB_LABELS[prefab]} ({counts[prefab]})")
        return lines

    def _save_to_file(self, text: str, output_path: Path) -> None:
        """Save ASCII text to file.

        Raises:
            PatternIOError: If the file cannot be written
        """
        output_path = Path(output_path)
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            with open(output_path, "w", encoding="utf-8") as f:
                f.write(text)
        except OSError as e:
            raise PatternIOError(f"Error occurred while writing to {output_path}: {e}") from e
        logger.debug("Saved ASCII render to %s", output_path)

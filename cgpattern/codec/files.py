"""Reading and writing ``.cgp`` pattern files."""

from pathlib import Path
from typing import Union
import logging

from ..pattern.map_pattern import MapPattern
from ..errors import PatternIOError
from .parser import PatternParser
from .serializer import serialize

logger = logging.getLogger(__name__)

PATTERN_EXTENSION = ".cgp"
DEFAULT_ENCODING = "utf-8"


def pattern_path(name: Union[str, Path], extension: str = PATTERN_EXTENSION) -> Path:
    """Path a pattern called ``name`` is saved to."""
    path = Path(name)
    if path.suffix == extension:
        return path
    return path.with_name(path.name + extension)


def load_pattern(
    path: Union[str, Path],
    *,
    strict_levels: bool = True,
    encoding: str = DEFAULT_ENCODING,
) -> MapPattern:
    """Read and parse a pattern file.

    Args:
        path: File to read
        strict_levels: Passed to PatternParser
        encoding: Text encoding of the file

    Returns:
        Parsed MapPattern

    Raises:
        PatternIOError: If the file cannot be read or decoded
        MapPatternError: Any parse error from PatternParser
    """
    path = Path(path)
    try:
        with open(path, "r", encoding=encoding) as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Failed to read pattern %s: %s", path, e)
        raise PatternIOError(f"Error occurred while reading {path}: {e}") from e

    logger.info("Loaded pattern text from %s (%d chars)", path, len(text))
    return PatternParser(strict_levels=strict_levels).parse(text)


def save_pattern(
    pattern: MapPattern,
    name: Union[str, Path],
    *,
    extension: str = PATTERN_EXTENSION,
    encoding: str = DEFAULT_ENCODING,
) -> Path:
    """Write a pattern to ``<name><extension>``.

    Returns:
        Path of the written file

    Raises:
        PatternIOError: If the file cannot be created or written
    """
    return write_pattern(pattern, pattern_path(name, extension), encoding=encoding)


def write_pattern(
    pattern: MapPattern,
    path: Union[str, Path],
    *,
    encoding: str = DEFAULT_ENCODING,
) -> Path:
    """Write a pattern to exactly ``path``, whatever its suffix.

    Raises:
        PatternIOError: If the file cannot be created or written
    """
    path = Path(path)
    text = serialize(pattern)
    try:
        with open(path, "w", encoding=encoding, newline="\n") as f:
            f.write(text)
    except OSError as e:
        logger.error("Failed to write pattern %s: %s", path, e)
        raise PatternIOError(f"Error occurred while writing to {path}: {e}") from e

    logger.info("Saved pattern to %s", path)
    return path


__all__ = ["load_pattern", "save_pattern", "write_pattern", "pattern_path", "PATTERN_EXTENSION"]

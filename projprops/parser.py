"""Read ``key=value`` property files."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Dict, Optional, Tuple, Union

logger = logging.getLogger(__name__)

KEY_PATTERN = re.compile(r"[a-zA-Z0-9._-]+")
PROPERTY_PATTERN = re.compile(r"^(" + KEY_PATTERN.pattern + r")\s*=\s*(.*)$")


class PropertyParseError(ValueError):
    """A line of a property file is not a comment, blank or ``key=value``."""

    def __init__(self, line_num: int, line: str):
        super().__init__(f"line {line_num}: invalid property line {line!r}")
        self.line_num = line_num
        self.line = line


def parse_line(line: str) -> Optional[Tuple[str, str]]:
    """Parse a single line from a property file.

    Args:
        line: Line to parse, with or without its line break.

    Returns:
        Tuple of (key, value) or None if line should be ignored.

    Raises:
        ValueError: If the line is neither blank, a comment nor ``key=value``.
    """
    line = line.rstrip("\r\n").lstrip()

    # Skip empty lines and comments
    if not line.strip() or line.startswith("#"):
        return None

    match = PROPERTY_PATTERN.match(line)
    if not match:
        raise ValueError(line)

    key, value = match.groups()
    return key, value


def parse_property_file(path: Union[str, Path]) -> Optional[Dict[str, str]]:
    """Parse a property file into an ordered map.

    The whole file is rejected if any line is malformed. Later definitions
    of a key replace earlier ones.

    Args:
        path: File to read.

    Returns:
        The properties in file order, or None if the file could not be read
        or parsed.
    """
    path = Path(path)
    values: Dict[str, str] = {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            for line_num, line in enumerate(f, 1):
                try:
                    parsed = parse_line(line)
                except ValueError:
                    raise PropertyParseError(line_num, line.rstrip("\r\n")) from None
                if parsed:
                    key, value = parsed
                    values[key] = value
    except PropertyParseError as e:
        logger.warning("Error parsing %s: %s", path, e)
        return None
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Error loading %s: %s", path, e)
        return None

    logger.debug("Loaded %d properties from %s", len(values), path)
    return values

"""Filtering of property keys."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Mapping, Optional, Pattern


@dataclass(frozen=True)
class Filter:
    """Filter for selecting property keys.

    Attributes:
        include_regex: Keys must match this pattern (searched, not anchored).
        prefix: Keys must start with this string.
    """

    include_regex: Optional[Pattern[str]] = None
    prefix: Optional[str] = None


def should_include_key(key: str, flt: Optional[Filter]) -> bool:
    """Check if a key should be included based on filter.

    Args:
        key: Property name.
        flt: Filter to apply (None means include all).

    Returns:
        True if key should be included, False otherwise.
    """
    if flt is None:
        return True
    if flt.prefix and not key.startswith(flt.prefix):
        return False
    if flt.include_regex and not flt.include_regex.search(key):
        return False
    return True


def filter_items(data: Mapping[str, str], flt: Optional[Filter]) -> Dict[str, str]:
    """Return the entries of ``data`` whose keys pass ``flt``, keeping order."""
    return {k: v for k, v in data.items() if should_include_key(k, flt)}

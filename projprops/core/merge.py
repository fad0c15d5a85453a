"""Ant-style merging of property maps."""

from __future__ import annotations

from typing import Dict, List, Mapping, Optional


def merge_missing(
    target: Dict[str, Optional[str]],
    incoming: Mapping[str, Optional[str]],
) -> List[str]:
    """Copy entries from ``incoming`` that ``target`` does not define yet.

    This is how Ant treats properties: the first definition wins and later
    ones are ignored. A key mapped to ``None`` counts as undefined.

    Args:
        target: Map updated in place. New keys are appended in the order
            they appear in ``incoming``.
        incoming: Map to take missing values from. ``None`` values are skipped.

    Returns:
        The keys added to ``target``.
    """
    added: List[str] = []
    for key, value in incoming.items():
        if value is None:
            continue
        # first definition wins
        if target.get(key) is None:
            target[key] = value
            added.append(key)
    return added

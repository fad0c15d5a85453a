"""Exceptions raised by projprops."""

from __future__ import annotations

from typing import Optional


class ProjectPropertiesError(Exception):
    """Base exception for this project."""


class PropertyTypeError(ProjectPropertiesError, ValueError):
    """Raised when an operation is used on the wrong kind of property file."""


class PropertyFormatError(ProjectPropertiesError, ValueError):
    """Raised when an entry cannot be written as a single ``key=value`` line."""

    def __init__(self, message: str, *, key: Optional[str] = None):
        super().__init__(f"{key}: {message}" if key else message)
        self.key = key

"""Loading and saving of project property files."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Dict, List, Optional, Union

from ..parser import KEY_PATTERN, parse_property_file
from .comments import comment_for
from .errors import PropertyFormatError, PropertyTypeError
from .merge import merge_missing
from .types import PROPERTY_TARGET, BuildTarget, PropertyType

logger = logging.getLogger(__name__)


def _read_properties(project_folder: str, property_type: PropertyType) -> Optional[Dict[str, str]]:
    folder = Path(project_folder)
    if not folder.is_dir():
        logger.debug("No project folder at %s", folder)
        return None
    path = folder / property_type.filename
    if not path.is_file():
        logger.debug("No %s in %s", property_type.filename, folder)
        return None
    return parse_property_file(path)


class ProjectProperties:
    """The properties of one property file of a project.

    Instances are created with :meth:`load` or :meth:`create`. Entries keep
    their insertion order, which is also the order they are saved in.

    A ProjectProperties is not thread-safe. Callers sharing one instance
    between threads must serialize access to it themselves.
    """

    def __init__(
        self,
        project_folder: Union[str, "os.PathLike[str]"],
        properties: Dict[str, str],
        property_type: PropertyType,
    ):
        self._project_folder = os.fspath(project_folder)
        self._properties = properties
        self._property_type = property_type

    @classmethod
    def load(
        cls,
        project_folder: Union[str, "os.PathLike[str]"],
        property_type: PropertyType,
    ) -> Optional["ProjectProperties"]:
        """Load a project property file.

        A missing folder, a missing file or a file that cannot be parsed are
        all reported the same way, since callers routinely check for optional
        files.

        Args:
            project_folder: The project folder.
            property_type: Which property file to read.

        Returns:
            The loaded properties, or None if there is nothing to load.
        """
        folder = os.fspath(project_folder)
        values = _read_properties(folder, property_type)
        if values is None:
            return None
        return cls(folder, values, property_type)

    @classmethod
    def create(
        cls,
        project_folder: Union[str, "os.PathLike[str]"],
        property_type: PropertyType,
    ) -> "ProjectProperties":
        """Create a new, empty set of properties.

        The file is not written until :meth:`save` is called.
        """
        return cls(project_folder, {}, property_type)

    @property
    def project_folder(self) -> str:
        return self._project_folder

    @property
    def property_type(self) -> PropertyType:
        return self._property_type

    @property
    def path(self) -> Path:
        """Location of the backing file."""
        return Path(self._project_folder) / self._property_type.filename

    def merge(self, property_type: PropertyType) -> "ProjectProperties":
        """Merge the properties of another file of the same project.

        This emulates Ant: properties already defined here are *not*
        overridden, only undefined ones become defined. Typically a BUILD
        instance is loaded first and DEFAULT is merged into it, so the
        result holds the defaults plus the overrides of build.properties.

        A file that is missing or cannot be parsed is ignored.

        Args:
            property_type: Which property file to merge in.

        Returns:
            This object, for chaining.
        """
        values = _read_properties(self._project_folder, property_type)
        if values is not None:
            added = merge_missing(self._properties, values)
            logger.debug(
                "Merged %d properties from %s into %s",
                len(added),
                property_type.filename,
                self._property_type.filename,
            )
        return self

    def set_property(self, name: str, value: str) -> None:
        """Set a property, replacing any existing value."""
        self._properties[name] = value

    def set_android_target(self, target: BuildTarget) -> None:
        """Set the ``target`` property from a build target.

        Raises:
            PropertyTypeError: If this is not a DEFAULT property file.
        """
        if self._property_type is not PropertyType.DEFAULT:
            raise PropertyTypeError(
                f"The build target is stored in {PropertyType.DEFAULT.filename}, "
                f"not {self._property_type.filename}"
            )
        self._properties[PROPERTY_TARGET] = target.hash_string()

    def get_property(self, name: str) -> Optional[str]:
        return self._properties.get(name)

    def remove_property(self, name: str) -> Optional[str]:
        """Remove a property.

        Returns:
            The previous value, or None if the property did not exist.
        """
        return self._properties.pop(name, None)

    def exists(self, name: str) -> bool:
        return name in self._properties

    def keys(self) -> List[str]:
        return list(self._properties.keys())

    def values(self) -> Dict[str, str]:
        """Get a copy of all properties, in save order."""
        return dict(self._properties)

    def size(self) -> int:
        return len(self._properties)

    def save(self) -> None:
        """Write the property file, replacing its current content.

        The header of the file kind comes first, then each property as a
        ``key=value`` line, preceded by its comment for well-known keys.

        Raises:
            PropertyFormatError: If an entry would not read back unchanged: a
                key outside ``[a-zA-Z0-9._-]``, or a value with a line break
                or leading whitespace. The file is not touched in that case.
            OSError: If the file cannot be written.
        """
        for key, value in self._properties.items():
            _check_entry(key, value)

        path = self.path
        with open(path, "w", encoding="utf-8", newline="\n") as writer:
            writer.write(self._property_type.header)
            for key, value in self._properties.items():
                comment = comment_for(key)
                if comment is not None:
                    writer.write(comment)
                writer.write(f"{key}={value}\n")
        logger.debug("Saved %d properties to %s", len(self._properties), path)

    def __repr__(self) -> str:
        return (
            f"ProjectProperties({self._project_folder!r}, "
            f"{self._property_type.name}, size={len(self._properties)})"
        )


def _check_entry(key: str, value: Optional[str]) -> None:
    if not KEY_PATTERN.fullmatch(key):
        raise PropertyFormatError("invalid property name", key=key)
    if value is None:
        return
    if "\n" in value or "\r" in value:
        raise PropertyFormatError("line breaks cannot be saved", key=key)
    # the parser skips whitespace after '='
    if value[:1].isspace():
        raise PropertyFormatError("value cannot start with whitespace", key=key)

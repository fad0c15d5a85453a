"""projprops - project property files for Ant-based builds.

Load, merge, edit and save build.properties, default.properties and
local.properties with their generated headers and comments.
"""

from .core.errors import ProjectPropertiesError, PropertyFormatError, PropertyTypeError
from .core.filters import Filter
from .core.properties import ProjectProperties
from .core.types import (
    PROPERTY_APK_CONFIGS,
    PROPERTY_SDK,
    PROPERTY_TARGET,
    BuildTarget,
    PropertyType,
    metadata_of,
)
from .parser import parse_property_file

__all__ = [
    "ProjectProperties",
    "PropertyType",
    "BuildTarget",
    "metadata_of",
    "PROPERTY_TARGET",
    "PROPERTY_APK_CONFIGS",
    "PROPERTY_SDK",
    "Filter",
    "parse_property_file",
    "ProjectPropertiesError",
    "PropertyFormatError",
    "PropertyTypeError",
]

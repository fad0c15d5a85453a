"""Property file kinds and well-known property names."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol

PROPERTY_TARGET = "target"
PROPERTY_APK_CONFIGS = "apk-configurations"
PROPERTY_SDK = "sdk-location"


LOCAL_HEADER = (
    "# This file is automatically generated by Android Tools.\n"
    "# Do not modify this file -- YOUR CHANGES WILL BE ERASED!\n"
    "# \n"
    "# This file must *NOT* be checked in Version Control Systems,\n"
    "# as it contains information specific to your local configuration.\n"
    "\n"
)

DEFAULT_HEADER = (
    "# This file is automatically generated by Android Tools.\n"
    "# Do not modify this file -- YOUR CHANGES WILL BE ERASED!\n"
    "# \n"
    "# This file must be checked in Version Control Systems.\n"
    "# \n"
    "# To customize properties used by the Ant build system use,\n"
    '# "build.properties", and override values to adapt the script to your\n'
    "# project structure.\n"
    "\n"
)

BUILD_HEADER = (
    "# This file is used to override default values used by the Ant build system.\n"
    "# \n"
    "# This file must be checked in Version Control Systems, as it is\n"
    "# integral to the build system of your project.\n"
    "\n"
    "# The name of your application package as defined in the manifest.\n"
    "# Used by the 'uninstall' rule.\n"
    "#application-package=com.example.myproject\n"
    "\n"
    "# The name of the source folder.\n"
    "#source-folder=src\n"
    "\n"
    "# The name of the output folder.\n"
    "#out-folder=bin\n"
    "\n"
)


@dataclass(frozen=True)
class PropertyTypeMetadata:
    """On-disk metadata bound to a property file kind.

    Attributes:
        filename: Name of the file inside the project folder.
        header: Comment block written at the top of the file on save.
    """

    filename: str
    header: str


class PropertyType(Enum):
    """The property files a project can carry."""

    BUILD = PropertyTypeMetadata("build.properties", BUILD_HEADER)
    DEFAULT = PropertyTypeMetadata("default.properties", DEFAULT_HEADER)
    LOCAL = PropertyTypeMetadata("local.properties", LOCAL_HEADER)

    @property
    def filename(self) -> str:
        return self.value.filename

    @property
    def header(self) -> str:
        return self.value.header


def metadata_of(kind: PropertyType) -> PropertyTypeMetadata:
    return kind.value


class BuildTarget(Protocol):
    """A build target as handed out by an SDK target registry.

    Only the hash string is stored in property files.
    """

    def hash_string(self) -> str:
        ...

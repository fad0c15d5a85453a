"""Comments written above well-known properties when a file is saved."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional

from .types import PROPERTY_APK_CONFIGS, PROPERTY_SDK, PROPERTY_TARGET

APK_CONFIG_PREFIX = "apk-config-"

COMMENTS: Mapping[str, str] = MappingProxyType(
    {
        PROPERTY_TARGET: "# Project target.\n",
        PROPERTY_APK_CONFIGS: (
            "# apk configurations. This property allows creation of APK files with limited\n"
            "# resources. For example, if your application contains many locales and\n"
            "# you wish to release multiple smaller apks instead of a large one, you can\n"
            "# define configuration to create apks with limited language sets.\n"
            "# Format is a comma separated list of configuration names. For each\n"
            "# configuration, a property will declare the resource configurations to\n"
            "# include. Example:\n"
            f"#     {PROPERTY_APK_CONFIGS}=european,northamerica\n"
            f"#     {APK_CONFIG_PREFIX}european=en,fr,it,de,es\n"
            f"#     {APK_CONFIG_PREFIX}northamerica=en,es\n"
        ),
        PROPERTY_SDK: (
            "# location of the SDK. This is only used by Ant\n"
            "# For customization when using a Version Control System, please read the\n"
            "# header note.\n"
        ),
    }
)


def comment_for(key: str) -> Optional[str]:
    return COMMENTS.get(key)

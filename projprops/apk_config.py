"""Read and write APK configurations stored in project properties.

``apk-configurations`` holds a comma separated list of configuration names.
Each name has its own property, ``apk-config-<name>``, listing the resource
configurations that APK includes::

    apk-configurations=european,northamerica
    apk-config-european=en,fr,it,de,es
    apk-config-northamerica=en,es
"""

from __future__ import annotations

from typing import Dict, List, Mapping

from .core.comments import APK_CONFIG_PREFIX as CONFIG_PREFIX
from .core.errors import PropertyFormatError
from .core.properties import ProjectProperties
from .core.types import PROPERTY_APK_CONFIGS
from .parser import KEY_PATTERN


def _config_names(properties: ProjectProperties) -> List[str]:
    value = properties.get_property(PROPERTY_APK_CONFIGS)
    if not value:
        return []
    return [name.strip() for name in value.split(",") if name.strip()]


def get_configs(properties: ProjectProperties) -> Dict[str, str]:
    """Return the APK configurations, keyed by name, in declaration order.

    Names without an ``apk-config-<name>`` property are skipped.
    """
    configs: Dict[str, str] = {}
    for name in _config_names(properties):
        value = properties.get_property(CONFIG_PREFIX + name)
        if value is not None:
            configs[name] = value
    return configs


def set_configs(properties: ProjectProperties, configs: Mapping[str, str]) -> None:
    """Replace the APK configurations of ``properties``.

    The per-configuration properties of the previous list are removed first.
    An empty ``configs`` removes ``apk-configurations`` altogether.

    Raises:
        PropertyFormatError: If a name is not a valid property name part, for
            instance because it is empty or holds a comma or whitespace.
            ``properties`` is left unchanged in that case.
    """
    for name in configs:
        if not KEY_PATTERN.fullmatch(name):
            raise PropertyFormatError(
                "invalid apk configuration name", key=CONFIG_PREFIX + name
            )

    for name in _config_names(properties):
        properties.remove_property(CONFIG_PREFIX + name)

    if not configs:
        properties.remove_property(PROPERTY_APK_CONFIGS)
        return

    properties.set_property(PROPERTY_APK_CONFIGS, ",".join(configs))
    for name, value in configs.items():
        properties.set_property(CONFIG_PREFIX + name, value)

from .properties import ProjectProperties
from .types import PropertyType, metadata_of
from .filters import Filter

__all__ = [
    "ProjectProperties",
    "PropertyType",
    "metadata_of",
    "Filter",
]

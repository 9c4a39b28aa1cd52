"""Named-mapping store interface and implementations."""

from .base import MappingStore, mapping_name_exists, normalize_mapping_name
from .json_file import JsonFileMappingStore
from .memory import InMemoryMappingStore

__all__ = [
    "InMemoryMappingStore",
    "JsonFileMappingStore",
    "MappingStore",
    "mapping_name_exists",
    "normalize_mapping_name",
]

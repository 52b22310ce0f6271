"""
Repository layer for capability mappings.
Implements Repository Pattern and follows Single Responsibility Principle.
"""

from .mapping_store import MappingStore
from .properties_parser import parse_properties

__all__ = [
    "MappingStore",
    "parse_properties",
]

"""
Repository Interfaces.
"""

from .mapping_store_interface import IMappingStore

__all__ = [
    "IMappingStore",
]

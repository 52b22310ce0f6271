"""
Domain layer: the capability marker and injector value objects.
"""

from .markers import AutoInjectable, is_marker
from .value_objects import (
    MappingEntry,
    InjectableField,
    Resolved,
    Unresolved,
    ResolutionResult,
)

__all__ = [
    "AutoInjectable",
    "is_marker",
    "MappingEntry",
    "InjectableField",
    "Resolved",
    "Unresolved",
    "ResolutionResult",
]

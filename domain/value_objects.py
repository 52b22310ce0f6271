"""
Domain value objects.
"""

from dataclasses import dataclass
from typing import Any, Optional, Union


@dataclass(frozen=True)
class MappingEntry:
    """Capability to implementation mapping loaded from configuration."""

    capability_id: str
    implementation_id: str

    def __str__(self):
        return f"{self.capability_id}={self.implementation_id}"


@dataclass(frozen=True)
class InjectableField:
    """
    A marked field found on a target object's class.

    field_name is the name as written in the class body; access_path is the
    attribute actually written, which differs for name-mangled private fields.
    evaluation_error is set when the annotation could not be fully evaluated;
    declared_type then holds forward references for the missing names.
    """

    owner_type: type
    field_name: str
    declared_type: Any
    access_path: str
    evaluation_error: Optional[str] = None

    def __str__(self):
        return f"{self.owner_type.__qualname__}.{self.field_name}"


@dataclass(frozen=True)
class Resolved:
    """Capability found in the mapping store."""

    implementation_id: str


@dataclass(frozen=True)
class Unresolved:
    """Capability missing from the mapping store."""

    capability_id: str


ResolutionResult = Union[Resolved, Unresolved]

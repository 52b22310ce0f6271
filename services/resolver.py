"""
Resolver: maps a field's declared capability to an implementation id.
"""

from typing import Any, ForwardRef, get_origin

from core.logger import logger
from domain.value_objects import InjectableField, Resolved, ResolutionResult, Unresolved
from repositories.interfaces import IMappingStore


def capability_id_for(declared_type: Any) -> str:
    """
    Derive the capability identifier of a declared field type.

    Classes give their fully-qualified name (module.QualName, builtins bare).
    Strings and forward references are taken literally, so a field can name
    its capability as text.
    """
    if isinstance(declared_type, str):
        return declared_type
    if isinstance(declared_type, ForwardRef):
        return declared_type.__forward_arg__
    if isinstance(declared_type, type):
        module = declared_type.__module__
        if module == "builtins":
            return declared_type.__qualname__
        return f"{module}.{declared_type.__qualname__}"

    # Parameterised generics resolve through their origin class
    origin = get_origin(declared_type)
    if origin is not None:
        return capability_id_for(origin)
    return repr(declared_type)


class Resolver:
    """Pure lookup of a field's capability in a mapping store."""

    def resolve(self, field: InjectableField, store: IMappingStore) -> ResolutionResult:
        capability_id = capability_id_for(field.declared_type)
        implementation_id = store.lookup(capability_id)

        if implementation_id is None:
            logger.debug(f"No mapping for {capability_id} ({field})")
            return Unresolved(capability_id=capability_id)

        logger.debug(f"Resolved {capability_id} -> {implementation_id} ({field})")
        return Resolved(implementation_id=implementation_id)

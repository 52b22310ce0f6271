"""
Field writer: stores injected values into target fields.
"""

from typing import Any, ForwardRef, get_origin

from core.errors import AssignmentError
from core.logger import logger, format_exception_short
from domain.value_objects import InjectableField


def _runtime_class(declared_type: Any):
    """Class usable with isinstance(), or None when the type is not checkable."""
    if isinstance(declared_type, (str, ForwardRef)):
        return None
    if isinstance(declared_type, type):
        return declared_type
    origin = get_origin(declared_type)
    if isinstance(origin, type):
        return origin
    return None


class FieldWriter:
    """
    Writes values with object.__setattr__, bypassing custom __setattr__
    guards such as frozen dataclasses.
    """

    def __init__(self, strict_types: bool = True):
        self.strict_types = strict_types

    def write(self, instance: Any, field: InjectableField, value: Any) -> None:
        """
        Assign value to the field on instance.

        Raises:
            AssignmentError: If value does not match the declared type or the
                attribute cannot be stored
        """
        if self.strict_types and not self.is_compatible(value, field.declared_type):
            raise AssignmentError(
                f"Cannot assign {type(value).__module__}.{type(value).__qualname__} "
                f"to {field} declared as {getattr(field.declared_type, '__qualname__', field.declared_type)}"
            )

        try:
            object.__setattr__(instance, field.access_path, value)
        except (AttributeError, TypeError) as e:
            raise AssignmentError(
                f"Cannot set {field}: {format_exception_short(e)}"
            ) from e

        logger.debug(f"Assigned {type(value).__qualname__} to {field}")

    @staticmethod
    def is_compatible(value: Any, declared_type: Any) -> bool:
        runtime_class = _runtime_class(declared_type)
        if runtime_class is None:
            return True
        try:
            return isinstance(value, runtime_class)
        except TypeError:
            # Non runtime-checkable Protocols and similar
            return True

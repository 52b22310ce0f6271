"""
Capability marker for injectable fields.
"""

from typing import Any


class AutoInjectable:
    """
    Marks a field for injection by the Injector.

    Attach it as ``typing.Annotated`` metadata on a class-level annotation;
    the annotated type is the capability the field needs::

        class SomeBean:
            __field1: Annotated[SomeInterface, AutoInjectable()] = None
            field2: Annotated[Optional[SomeOtherInterface], AutoInjectable] = None

    The marker carries no behaviour and is only inspected at runtime.
    """

    __slots__ = ()

    def __repr__(self) -> str:
        return "AutoInjectable()"

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, AutoInjectable)

    def __hash__(self) -> int:
        return hash(AutoInjectable)


def is_marker(metadata: Any) -> bool:
    """True for the marker class itself or any instance of it."""
    return metadata is AutoInjectable or isinstance(metadata, AutoInjectable)

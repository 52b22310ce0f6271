"""
Injector error taxonomy.

ConfigLoadError is fatal to injector construction. Everything deriving from
FieldInjectionError is reported per field and never aborts an inject() call.
"""

from typing import Optional


class InjectorError(Exception):
    """Base exception for all injector errors"""

    pass


class ConfigLoadError(InjectorError):
    """Mapping configuration could not be opened, decoded or parsed"""

    def __init__(
        self, message: str, path: Optional[str] = None, line: Optional[int] = None
    ):
        self.path = path
        self.line = line
        location = path or "<stream>"
        if line is not None:
            location = f"{location}:{line}"
        super().__init__(f"{message} ({location})")


class FieldInjectionError(InjectorError):
    """
    Failure to inject a single field.

    Services raise these without field context; the injector fills in
    capability_id and field_name before reporting.
    """

    def __init__(
        self,
        message: str,
        capability_id: Optional[str] = None,
        field_name: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.capability_id = capability_id
        self.field_name = field_name

    def __str__(self):
        context = []
        if self.field_name:
            context.append(f"field={self.field_name}")
        if self.capability_id:
            context.append(f"capability={self.capability_id}")
        if not context:
            return self.message
        return f"{self.message} [{', '.join(context)}]"


class CapabilityUnresolvedError(FieldInjectionError):
    """No implementation is mapped for the field's capability"""

    pass


class InstantiationError(FieldInjectionError):
    """Base class for failures while producing an implementation instance"""

    def __init__(self, message: str, implementation_id: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.implementation_id = implementation_id


class TypeNotFoundError(InstantiationError):
    """Implementation identifier does not name a loadable class"""

    pass


class NoDefaultConstructorError(InstantiationError):
    """Implementation class cannot be constructed without arguments"""

    pass


class ConstructionError(InstantiationError):
    """Implementation constructor raised"""

    pass


class AssignmentError(FieldInjectionError):
    """Value could not be stored into the target field"""

    pass

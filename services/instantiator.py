"""
Instantiator: turns an implementation id into a fresh instance.
Includes type lookup, zero-argument constructor checks and construction.
"""

import builtins
import importlib
import inspect
from typing import Any, Dict, Mapping, Optional

from core.errors import ConstructionError, NoDefaultConstructorError, TypeNotFoundError
from core.logger import logger, format_exception_short

_REQUIRED_KINDS = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
    inspect.Parameter.KEYWORD_ONLY,
)


class Instantiator:
    """Creates implementation instances through their no-argument constructor."""

    def __init__(self, registry: Optional[Mapping[str, type]] = None):
        """
        Initialize instantiator.

        Args:
            registry: Optional explicit id -> class table, consulted before
                importing by dotted name
        """
        self._registry: Dict[str, type] = dict(registry or {})
        self._cache: Dict[str, type] = {}

    def instantiate(self, implementation_id: str) -> Any:
        """
        Create a new instance of the named implementation.

        Args:
            implementation_id: Registry key, fully-qualified class name, or
                bare builtin name

        Returns:
            New instance

        Raises:
            TypeNotFoundError: If no class can be located
            NoDefaultConstructorError: If the class needs constructor arguments
            ConstructionError: If the constructor raised
        """
        implementation = self.locate(implementation_id)
        self._check_default_constructor(implementation, implementation_id)

        try:
            instance = implementation()
        except Exception as e:
            raise ConstructionError(
                f"Constructor of {implementation_id} raised {format_exception_short(e)}",
                implementation_id=implementation_id,
            ) from e

        logger.debug(f"Constructed {implementation_id}")
        return instance

    def locate(self, implementation_id: str) -> type:
        """
        Find the class for an implementation id.

        Raises:
            TypeNotFoundError: If nothing loadable is found or it is not a class
        """
        if implementation_id in self._registry:
            found = self._registry[implementation_id]
        elif implementation_id in self._cache:
            return self._cache[implementation_id]
        else:
            found = self._import(implementation_id)

        if not inspect.isclass(found):
            raise TypeNotFoundError(
                f"{implementation_id} is not a class: {type(found).__name__}",
                implementation_id=implementation_id,
            )

        self._cache[implementation_id] = found
        return found

    def _import(self, implementation_id: str) -> Any:
        parts = implementation_id.split(".")
        if not all(part.strip() for part in parts):
            raise TypeNotFoundError(
                f"Invalid type name: {implementation_id!r}",
                implementation_id=implementation_id,
            )

        # Longest importable module prefix, remaining parts are attributes
        for split in range(len(parts) - 1, 0, -1):
            module_name = ".".join(parts[:split])
            try:
                module = importlib.import_module(module_name)
            except ModuleNotFoundError as e:
                if e.name and (module_name + ".").startswith(e.name + "."):
                    continue
                raise TypeNotFoundError(
                    f"Importing {module_name} failed: {format_exception_short(e)}",
                    implementation_id=implementation_id,
                ) from e
            except Exception as e:
                raise TypeNotFoundError(
                    f"Importing {module_name} failed: {format_exception_short(e)}",
                    implementation_id=implementation_id,
                ) from e

            found: Any = module
            for attribute in parts[split:]:
                try:
                    found = getattr(found, attribute)
                except AttributeError:
                    raise TypeNotFoundError(
                        f"Class not found: {implementation_id} "
                        f"({module_name} has no {'.'.join(parts[split:])})",
                        implementation_id=implementation_id,
                    ) from None
            return found

        # Bare names are builtins, matching capability ids of builtin types
        if len(parts) == 1 and hasattr(builtins, implementation_id):
            return getattr(builtins, implementation_id)

        raise TypeNotFoundError(
            f"Class not found: {implementation_id}",
            implementation_id=implementation_id,
        )

    @staticmethod
    def _check_default_constructor(implementation: type, implementation_id: str):
        if inspect.isabstract(implementation):
            raise NoDefaultConstructorError(
                f"{implementation_id} is abstract and cannot be instantiated",
                implementation_id=implementation_id,
            )

        try:
            signature = inspect.signature(implementation)
        except (TypeError, ValueError):
            # No introspectable signature (some builtins); let construction decide
            return

        required = [
            parameter.name
            for parameter in signature.parameters.values()
            if parameter.kind in _REQUIRED_KINDS
            and parameter.default is inspect.Parameter.empty
        ]
        if required:
            raise NoDefaultConstructorError(
                f"{implementation_id} has no no-argument constructor "
                f"(requires: {', '.join(required)})",
                implementation_id=implementation_id,
            )

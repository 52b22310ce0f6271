"""
Field scanner: finds the marked fields declared on an object's own class.
"""

import ast
import builtins
import inspect
import sys
import types
from typing import (
    Annotated,
    Any,
    ClassVar,
    Dict,
    ForwardRef,
    List,
    Optional,
    Tuple,
    Union,
    get_args,
    get_origin,
)

from core.logger import logger, format_exception_short
from domain.markers import AutoInjectable, is_marker
from domain.value_objects import InjectableField

_UNION_TYPES = (Union, getattr(types, "UnionType", Union))
_MARKER_NAME = AutoInjectable.__name__


def _unwrap_optional(declared: Any) -> Any:
    """Optional[T] (or T | None) declares capability T."""
    if get_origin(declared) not in _UNION_TYPES:
        return declared
    args = [arg for arg in get_args(declared) if arg is not type(None)]
    if len(args) == 1:
        return args[0]
    return declared


def _display_name(owner: type, attribute: str) -> str:
    """Undo private name mangling: _Owner__field -> __field."""
    prefix = f"_{owner.__name__.lstrip('_')}__"
    if attribute.startswith(prefix) and len(attribute) > len(prefix):
        return "__" + attribute[len(prefix):]
    return attribute


class _AnnotationNamespace(dict):
    """
    Evaluation locals for a string annotation.

    Looks up the class namespace, then the module globals, then builtins.
    Names found nowhere become ForwardRefs and are recorded in ``missing``.
    """

    def __init__(self, owner: type):
        super().__init__(vars(owner))
        module = sys.modules.get(owner.__module__)
        self._globals = vars(module) if module is not None else {}
        self.missing: List[str] = []

    def __missing__(self, name: str) -> Any:
        if name in self._globals:
            return self._globals[name]
        if hasattr(builtins, name):
            return getattr(builtins, name)
        self.missing.append(name)
        return ForwardRef(name)


def _is_named(node: ast.AST, name: str) -> bool:
    if isinstance(node, ast.Name):
        return node.id == name
    if isinstance(node, ast.Attribute):
        return node.attr == name
    return False


def _marked_source(source: str) -> Optional[str]:
    """
    Read a marked annotation syntactically.

    Returns:
        Source text of T for 'Annotated[T, ..., AutoInjectable(), ...]', None otherwise
    """
    try:
        node = ast.parse(source, mode="eval").body
    except SyntaxError:
        return None
    if not isinstance(node, ast.Subscript) or not _is_named(node.value, "Annotated"):
        return None
    if not isinstance(node.slice, ast.Tuple) or len(node.slice.elts) < 2:
        return None

    declared, *metadata = node.slice.elts
    declared_head = declared.value if isinstance(declared, ast.Subscript) else declared
    if _is_named(declared_head, "ClassVar"):
        return None
    for item in metadata:
        target = item.func if isinstance(item, ast.Call) else item
        if _is_named(target, _MARKER_NAME):
            return ast.unparse(declared)
    return None


class FieldScanner:
    """
    Lists the injectable fields of an instance.

    Only annotations written in the runtime class' own body are inspected;
    fields declared on base classes are never returned. String annotations
    (``from __future__ import annotations``) are evaluated one at a time, so
    a single unresolvable name never hides the other fields.
    """

    def scan(self, instance: Any) -> List[InjectableField]:
        """
        Scan an instance for marked fields.

        Args:
            instance: Target object

        Returns:
            Marked fields in declaration order (empty if none)
        """
        owner = type(instance)
        fields = []

        for attribute, hint in self._own_annotations(owner).items():
            error = None
            if isinstance(hint, str):
                hint, error = self._evaluate(owner, attribute, hint)

            declared = self.marked_type(hint)
            if declared is None:
                continue
            fields.append(
                InjectableField(
                    owner_type=owner,
                    field_name=_display_name(owner, attribute),
                    declared_type=declared,
                    access_path=attribute,
                    evaluation_error=error,
                )
            )

        logger.debug(
            f"Scanned {owner.__qualname__}: {len(fields)} injectable field(s)"
        )
        return fields

    @staticmethod
    def marked_type(hint: Any) -> Optional[Any]:
        """
        Get the capability type of a marked annotation.

        Returns:
            The declared type for Annotated[T, AutoInjectable], None otherwise.
            ClassVar annotations are never injectable.
        """
        if get_origin(hint) is not Annotated:
            return None
        if not any(is_marker(metadata) for metadata in hint.__metadata__):
            return None

        declared = hint.__origin__
        if get_origin(declared) is ClassVar or declared is ClassVar:
            return None
        return _unwrap_optional(declared)

    def _evaluate(self, owner: type, attribute: str, source: str) -> Tuple[Any, Optional[str]]:
        """
        Evaluate one string annotation.

        Returns:
            (hint, error) where error describes names that could not be found
        """
        namespace = _AnnotationNamespace(owner)
        try:
            hint = eval(source, {}, namespace)
        except Exception as e:
            # e.g. attribute access on a missing module name; fall back to syntax
            declared = _marked_source(source)
            if declared is None:
                logger.debug(
                    f"Skipping {owner.__qualname__}.{attribute}: "
                    f"cannot evaluate {source!r} ({format_exception_short(e)})"
                )
                return source, None
            return (
                Annotated[ForwardRef(declared), AutoInjectable()],
                format_exception_short(e),
            )

        if namespace.missing:
            missing = ", ".join(repr(name) for name in namespace.missing)
            return hint, f"NameError: name(s) {missing} not defined"
        return hint, None

    def _own_annotations(self, owner: type) -> Dict[str, Any]:
        """Own-class annotations; strings are left for per-field evaluation."""
        try:
            return dict(inspect.get_annotations(owner))
        except NameError:
            if sys.version_info < (3, 14):
                raise
            # Deferred annotations referring to missing names
            import annotationlib

            return dict(
                inspect.get_annotations(owner, format=annotationlib.Format.FORWARDREF)
            )
        except (TypeError, AttributeError) as e:
            logger.warning(
                f"Skipping {owner.__qualname__}, annotations unavailable: "
                f"{format_exception_short(e)}"
            )
            return {}

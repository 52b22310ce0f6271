"""
Core module containing configuration, logging and the injector error types.
The Injector itself lives in core.container.
"""

from .config import Settings, get_settings
from .logger import logger, format_exception_short
from .errors import (
    InjectorError,
    ConfigLoadError,
    FieldInjectionError,
    CapabilityUnresolvedError,
    InstantiationError,
    TypeNotFoundError,
    NoDefaultConstructorError,
    ConstructionError,
    AssignmentError,
)

__all__ = [
    "Settings",
    "get_settings",
    "logger",
    "format_exception_short",
    "InjectorError",
    "ConfigLoadError",
    "FieldInjectionError",
    "CapabilityUnresolvedError",
    "InstantiationError",
    "TypeNotFoundError",
    "NoDefaultConstructorError",
    "ConstructionError",
    "AssignmentError",
]

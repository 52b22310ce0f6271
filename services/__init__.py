"""
Service layer implementing the injection pipeline.
Scanner -> Resolver -> Instantiator -> Writer, one class per step.
"""

from .field_scanner import FieldScanner
from .resolver import Resolver, capability_id_for
from .instantiator import Instantiator
from .field_writer import FieldWriter

__all__ = [
    "FieldScanner",
    "Resolver",
    "capability_id_for",
    "Instantiator",
    "FieldWriter",
]

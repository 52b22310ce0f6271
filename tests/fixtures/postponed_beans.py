"""
Targets declared with postponed (string) annotations.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Annotated, ClassVar, Optional

from domain.markers import AutoInjectable
from tests.fixtures.beans import Greeter, Shape

if TYPE_CHECKING:
    from decimal import Decimal

    from tests.fixtures.beans import Square as HiddenShape


class FutureDrawing:
    shape: Annotated[Optional[Shape], AutoInjectable()] = None
    price: Optional[Decimal] = None
    greeter: Annotated[Optional[Greeter], AutoInjectable] = None


class HiddenCapabilityDrawing:
    hidden: Annotated[Optional[HiddenShape], AutoInjectable()] = None
    shape: Annotated[Optional[Shape], AutoInjectable()] = None
    broken: Annotated[missing_module.Shape, AutoInjectable()] = None  # noqa: F821


class ClassVarHolder:
    registry: Annotated[ClassVar[Shape], AutoInjectable()]
    hidden_registry: Annotated[ClassVar[HiddenShape], AutoInjectable()]
    shared: ClassVar[Annotated[Optional[Shape], AutoInjectable()]] = None

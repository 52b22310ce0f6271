"""
Demo capabilities and implementations.
"""

from abc import ABC, abstractmethod
from typing import Annotated, Optional

from domain.markers import AutoInjectable


class SomeInterface(ABC):
    @abstractmethod
    def do_something(self) -> None:
        pass


class SomeOtherInterface(ABC):
    @abstractmethod
    def do_some_other(self) -> None:
        pass


class SomeImpl(SomeInterface):
    def do_something(self) -> None:
        print("A")


class OtherImpl(SomeInterface):
    def do_something(self) -> None:
        print("B")


class SODoer(SomeOtherInterface):
    def do_some_other(self) -> None:
        print("C")


class SomeBean:
    """Bean with two private fields filled in by the Injector."""

    __field1: Annotated[Optional[SomeInterface], AutoInjectable()] = None
    __field2: Annotated[Optional[SomeOtherInterface], AutoInjectable()] = None

    def foo(self) -> None:
        """Call whichever dependencies were injected."""
        if self.__field1 is not None:
            self.__field1.do_something()
        if self.__field2 is not None:
            self.__field2.do_some_other()

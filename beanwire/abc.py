"""
This module defines base types for dependency injection.
"""

from typing import Any, Protocol


class InjectorProtocol(Protocol):
    """
    Generic interface of an injector that can register beans, and wire them
    together by their fields.
    """

    def register(self, *beans: Any) -> Any:
        """Registers already constructed beans, in the given order."""

    def inject(self) -> None:
        """Wires the fields of every registered bean."""

    def __contains__(self, item) -> bool:  # type: ignore
        """
        Returns a value indicating whether a given type is registered in this
        injector.
        """

"""Custom errors for the lawful package."""

from typing import Any, Type


class MissingInstanceError(Exception):
    """Raised when no instance of a contract is registered for a container type."""

    container_type: Type[Any]
    contract: Type[Any]

    def __init__(self, container_type: Type[Any], contract: Type[Any]):
        super().__init__(
            f"No {contract.__name__} instance registered "
            f"for '{container_type.__name__}'."
        )
        self.container_type = container_type
        self.contract = contract


class DoNotationError(Exception):
    """Raised when a function decorated with `do` does not return a generator."""

    pass

"""Registry for looking up contract instances by container type."""

import logging
from dataclasses import dataclass
from typing import Any, Tuple, Type, TypeVar

from lawful.errors import MissingInstanceError

logger = logging.getLogger(__name__)

C = TypeVar("C")


def _cache_key(container_type: Type[Any], contract: Type[Any]) -> str:
    return (
        f"{container_type.__module__}.{container_type.__qualname__}:"
        f"{contract.__module__}.{contract.__qualname__}"
    )


@dataclass(frozen=True, init=False)
class Instances:
    """
    Contract instances registered by container type.

    Passing instances explicitly is the primary way to use lawful. A registry
    is useful where one place decides which instances the rest of the
    program uses.
    """

    instances: Tuple[Tuple[Type[Any], Any], ...]
    _instance_cache: dict[str, Any]

    def __init__(self, *instances: Tuple[Type[Any], Any]):
        object.__setattr__(self, "instances", instances)
        object.__setattr__(self, "_instance_cache", {})

    def use(self, container_type: Type[Any], instance: Any) -> "Instances":
        """
        Register `instance` for `container_type`.

        Args:
        ----
            container_type: The container type `instance` is for.
            instance: The contract instance.

        Returns:
        -------
            A new registry with the instance. It takes precedence over
            instances registered earlier for the same type.

        """
        return Instances(*self.instances, (container_type, instance))

    def get(self, container_type: Type[Any], contract: Type[C]) -> C:
        """
        Get an instance of `contract` for `container_type`.

        The types of `container_type.__mro__` are tried in order, so instances
        registered for a base class are found for its subclasses.

        Args:
        ----
            container_type: The container type to get an instance for.
            contract: The contract the instance must implement, e.g. `Monad`.

        Returns:
        -------
            The most recently registered matching instance.

        """
        cache_key = _cache_key(container_type, contract)
        if cache_key in self._instance_cache:
            return self._instance_cache[cache_key]  # type: ignore
        for t in container_type.__mro__:
            for registered_type, instance in reversed(self.instances):
                if registered_type is t and isinstance(instance, contract):
                    logger.debug(
                        "Resolved %s for %s to %r",
                        contract.__name__,
                        container_type.__name__,
                        instance,
                    )
                    self._instance_cache[cache_key] = instance
                    return instance  # type: ignore
        raise MissingInstanceError(container_type, contract)

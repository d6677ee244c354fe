"""Contains the Functor and ContravariantFunctor contracts."""

from abc import ABC, abstractmethod
from typing import Any, Callable, TypeVar

A = TypeVar("A")
B = TypeVar("B")

# Sadly, complete type safety here requires higher-kinded types,
# so containers are typed as `Any` throughout the contracts.


class Functor(ABC):
    """
    Structure preserving mapping over a container type.

    Laws:
        Identity: `map(fa, lambda x: x) == fa`
        Composition: `map(fa, lambda x: h(g(x))) == map(map(fa, g), h)`
    """

    @abstractmethod
    def map(self, fa: Any, f: Callable[[A], B]) -> Any:
        """Apply `f` to every value in `fa`, keeping its shape."""

    def lift(self, f: Callable[[A], B]) -> Callable[[Any], Any]:
        """
        Lift `f` to a function between containers.

        Args:
        ----
            f: The function to lift.

        Returns:
        -------
            A function mapping `f` over its argument.

        """

        def lifted(fa: Any) -> Any:
            return self.map(fa, f)

        return lifted


class ContravariantFunctor(ABC):
    """Mapping over the input side of a container type."""

    @abstractmethod
    def contramap(self, fa: Any, f: Callable[[B], A]) -> Any:
        """Turn a consumer of `A` into a consumer of `B` by pre-applying `f`."""

"""Contains the NaturalTransformation contract."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable


class NaturalTransformation(ABC):
    """
    Conversion from containers `F[A]` to containers `G[A]` for every `A`.

    A transformation only changes structure and never depends on the
    contained values. It is called like a function.
    """

    @abstractmethod
    def apply(self, fa: Any) -> Any:
        """Convert `fa` to the target container."""

    def __call__(self, fa: Any) -> Any:
        """Convert `fa` to the target container."""
        return self.apply(fa)

    def and_then(self, other: "NaturalTransformation") -> "NaturalTransformation":
        """
        Compose with `other`, applying `self` first.

        Args:
        ----
            other: Transformation `G ~> H` to apply after `self`.

        Returns:
        -------
            Transformation `F ~> H`.

        """
        return natural(lambda fa: other.apply(self.apply(fa)))


@dataclass(frozen=True)
class FunctionTransformation(NaturalTransformation):
    """Natural transformation defined by a plain function."""

    function: Callable[[Any], Any]

    def apply(self, fa: Any) -> Any:
        """Convert `fa` with `function`."""
        return self.function(fa)


def natural(function: Callable[[Any], Any]) -> NaturalTransformation:
    """
    Create a natural transformation from a function.

    Args:
    ----
        function: Function converting any `F[A]` to `G[A]`.

    Returns:
    -------
        The natural transformation wrapping `function`.

    """
    return FunctionTransformation(function)

"""Contains the Semigroup and Monoid contracts."""

from abc import ABC, abstractmethod
from functools import reduce
from typing import Generic, Iterable, TypeVar

A = TypeVar("A")


class Semigroup(ABC, Generic[A]):
    """
    An associative binary operation on `A`.

    Instances must satisfy `append(append(a, b), c) == append(a, append(b, c))`.
    """

    @abstractmethod
    def append(self, a: A, b: A) -> A:
        """Combine `a` and `b`."""


class Monoid(Semigroup[A]):
    """
    A semigroup with an identity element.

    Instances must satisfy `append(zero, a) == a == append(a, zero)`.
    """

    @property
    @abstractmethod
    def zero(self) -> A:
        """The identity element of `append`."""

    def concat(self, items: Iterable[A]) -> A:
        """
        Combine all of `items`, starting from `zero`.

        Args:
        ----
            items: The values to combine, in order.

        Returns:
        -------
            The combined value, or `zero` if `items` is empty.

        """
        return reduce(self.append, items, self.zero)

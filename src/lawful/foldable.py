"""Contains the Foldable contract."""

from abc import ABC, abstractmethod
from typing import Any, Callable, Iterable, TypeVar

from lawful.semigroup import Monoid

A = TypeVar("A")
B = TypeVar("B")


class Foldable(ABC):
    """Container reducible to a single summary value."""

    @abstractmethod
    def fold_map(self, fa: Any, f: Callable[[A], B], monoid: Monoid[B]) -> B:
        """Map every value of `fa` with `f` and combine the results with `monoid`."""

    @abstractmethod
    def fold_right(self, fa: Any, seed: B, f: Callable[[A, B], B]) -> B:
        """
        Fold `fa` from the right.

        Args:
        ----
            fa: The container to fold.
            seed: The value to start from.
            f: Function combining a value of `fa` with the folded rest.

        Returns:
        -------
            `f(a1, f(a2, ... f(an, seed)))`

        """

    def fold(self, fa: Any, monoid: Monoid[A]) -> A:
        """Combine the values of `fa` with `monoid`."""
        return self.fold_map(fa, lambda a: a, monoid)


def fold_right_sequence(items: Iterable[A], seed: B, f: Callable[[A, B], B]) -> B:
    """
    Fold `items` from the right without recursion.

    Intended as the `Foldable.fold_right` of sequence-like containers.

    Args:
    ----
        items: The values to fold.
        seed: The value to start from.
        f: Function combining a value with the folded rest.

    Returns:
    -------
        `f(a1, f(a2, ... f(an, seed)))`

    """
    result = seed
    for item in reversed(tuple(items)):
        result = f(item, result)
    return result

"""Contains the Traverse contract."""

from abc import abstractmethod
from typing import Any, Callable, Iterable, Tuple, TypeVar

from lawful.applicative import Applicative
from lawful.foldable import Foldable
from lawful.functor import Functor
from lawful.identity import id_monad

A = TypeVar("A")
B = TypeVar("B")

# A cons cell: the head and the rest of the list, or () for the empty list.
# Never None, since optional applicatives use None for absence.
_Cons = Tuple[Any, ...]


class Traverse(Functor, Foldable):
    """Container that can be visited element-wise with an effect."""

    @abstractmethod
    def traverse(
        self, fa: Any, f: Callable[[A], Any], applicative: Applicative
    ) -> Any:
        """
        Apply the effectful `f` to every value of `fa`, collecting the effects.

        Args:
        ----
            fa: The container to traverse.
            f: Function producing an effect of `applicative` for every value.
            applicative: The applicative instance of the effect.

        Returns:
        -------
            An effect producing the container of results.

        """

    def sequence(self, fga: Any, applicative: Applicative) -> Any:
        """Turn a container of effects into an effect of a container."""
        return self.traverse(fga, lambda ga: ga, applicative)

    def map(self, fa: Any, f: Callable[[A], B]) -> Any:
        """Map `f` over `fa` by traversing with the identity effect."""
        return self.traverse(fa, f, id_monad)


def _cons(head: Any, tail: _Cons) -> _Cons:
    return (head, tail)


def _to_tuple(cells: _Cons) -> Tuple[Any, ...]:
    result = []
    while cells:
        head, cells = cells
        result.append(head)
    return tuple(result)


def traverse_sequence(
    items: Iterable[A], f: Callable[[A], Any], applicative: Applicative
) -> Any:
    """
    Traverse `items` with `f`, producing an effect of a tuple.

    Intended as the `Traverse.traverse` of sequence-like containers.
    `f` is called in element order, and the result is assembled from
    the right with `Applicative.apply2`, so the effects are combined in
    element order. The loop keeps the call stack flat for strict effects.

    Args:
    ----
        items: The values to traverse.
        f: Function producing an effect for every value.
        applicative: The applicative instance of the effect.

    Returns:
    -------
        An effect producing a tuple of the results.

    """
    effects = [f(item) for item in items]
    result = applicative.pure(())
    for effect in reversed(effects):
        result = applicative.apply2(effect, result, _cons)
    return applicative.map(result, _to_tuple)

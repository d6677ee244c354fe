"""Contains the Kleisli arrow and the Reader arrow."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

from lawful.functor import Functor
from lawful.identity import id_monad
from lawful.monad import Monad

A = TypeVar("A")
AA = TypeVar("AA")
B = TypeVar("B")
C = TypeVar("C")
R = TypeVar("R")


@dataclass(frozen=True)
class Kleisli(Generic[A, B]):
    """
    A function `A -> F[B]` for some effect `F`.

    Arrows compose through the monad of `F`, which is passed
    to the operations that need it.
    """

    f: Callable[[A], Any]

    def run(self, a: A) -> Any:
        """Run the arrow on `a`."""
        return self.f(a)

    def __call__(self, a: A) -> Any:
        """Run the arrow on `a`."""
        return self.f(a)

    def and_then(self, k: Kleisli[B, C], monad: Monad) -> Kleisli[A, C]:
        """
        Compose with `k`, running `self` first.

        Args:
        ----
            k: The arrow to run on the result of `self`.
            monad: The monad instance of `F`.

        Returns:
        -------
            The composed arrow.

        """
        return Kleisli(lambda a: monad.flat_map(self.run(a), k.run))

    def and_then_f(self, f: Callable[[B], Any], monad: Monad) -> Kleisli[A, C]:
        """Like `and_then`, but for a plain function `B -> F[C]`."""
        return self.and_then(Kleisli(f), monad)

    def compose(self, k: Kleisli[C, A], monad: Monad) -> Kleisli[C, B]:
        """
        Compose with `k`, running `k` first.

        Args:
        ----
            k: The arrow producing the input of `self`.
            monad: The monad instance of `F`.

        Returns:
        -------
            The composed arrow.

        """
        return k.and_then(self, monad)

    def compose_f(self, f: Callable[[C], Any], monad: Monad) -> Kleisli[C, B]:
        """Like `compose`, but for a plain function `C -> F[A]`."""
        return self.compose(Kleisli(f), monad)

    def map(self, f: Callable[[B], C], functor: Functor) -> Kleisli[A, C]:
        """Transform the result of the arrow with `f`."""
        return Kleisli(lambda a: functor.map(self.run(a), f))

    def map_k(self, f: Callable[[Any], Any]) -> Kleisli[A, C]:
        """
        Transform the effect produced by the arrow with `f`.

        Args:
        ----
            f: Function from `F[B]` to `G[C]`.

        Returns:
        -------
            An arrow `A -> G[C]`.

        """
        return Kleisli(lambda a: f(self.run(a)))

    def flat_map(self, f: Callable[[B], Kleisli[A, C]], monad: Monad) -> Kleisli[A, C]:
        """
        Choose the next arrow from the result of this one.

        Both arrows receive the same input.

        Args:
        ----
            f: Function producing the next arrow.
            monad: The monad instance of `F`.

        Returns:
        -------
            The combined arrow.

        """
        return Kleisli(lambda a: monad.flat_map(self.run(a), lambda b: f(b).run(a)))

    def flat_map_k(self, f: Callable[[B], Any], monad: Monad) -> Kleisli[A, C]:
        """Sequence the effect of the arrow with `f: B -> F[C]`."""
        return Kleisli(lambda a: monad.flat_map(self.run(a), f))

    def local(self, f: Callable[[AA], A]) -> Kleisli[AA, B]:
        """Adapt the input of the arrow with `f`."""
        return Kleisli(lambda aa: self.run(f(aa)))


class KleisliMonad(Monad):
    """
    Monad for arrows `R -> F[A]` with a fixed input type `R`.

    Derived from the monad of `F`.
    """

    def __init__(self, monad: Monad):
        self.monad = monad

    def pure(self, a: A) -> Kleisli[Any, A]:
        return Kleisli(lambda _: self.monad.pure(a))

    def flat_map(
        self, fa: Kleisli[R, A], f: Callable[[A], Kleisli[R, B]]
    ) -> Kleisli[R, B]:
        return fa.flat_map(f, self.monad)

    def ap(self, fa: Kleisli[R, A], ff: Kleisli[R, Callable[[A], B]]) -> Kleisli[R, B]:
        return Kleisli(lambda r: self.monad.ap(fa.run(r), ff.run(r)))

    def tail_rec_m(self, a: A, f: Callable[[A], Kleisli[R, Any]]) -> Kleisli[R, Any]:
        """Loop with the `tail_rec_m` of `F`, reading the same environment."""
        return Kleisli(lambda r: self.monad.tail_rec_m(a, lambda x: f(x).run(r)))


def reader(f: Callable[[A], B]) -> Kleisli[A, B]:
    """
    Create an arrow reading from an environment, without any effect.

    Args:
    ----
        f: Function from the environment to a value.

    Returns:
    -------
        `f` as an arrow over the identity container.

    """
    return Kleisli(f)


def ask() -> Kleisli[A, A]:
    """Create a reader returning its environment."""
    return Kleisli(lambda a: a)


reader_monad = KleisliMonad(id_monad)

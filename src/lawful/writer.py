"""Contains the Writer computation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Tuple, TypeVar

from lawful.monad import Done, Loop, Monad
from lawful.semigroup import Monoid, Semigroup

W = TypeVar("W")
W2 = TypeVar("W2")
X = TypeVar("X")
A = TypeVar("A")
B = TypeVar("B")


@dataclass(frozen=True)
class Writer(Generic[W, A]):
    """
    A value `A` paired with a log `W`.

    Sequencing writers combines their logs with a semigroup for `W`.
    """

    run: Tuple[W, A]

    @property
    def written(self) -> W:
        """The log side."""
        return self.run[0]

    @property
    def value(self) -> A:
        """The value side."""
        return self.run[1]

    def map(self, f: Callable[[A], B]) -> Writer[W, B]:
        """Transform the value with `f`, leaving the log alone."""
        w, a = self.run
        return Writer((w, f(a)))

    def flat_map(
        self, f: Callable[[A], Writer[W, B]], semigroup: Semigroup[W]
    ) -> Writer[W, B]:
        """
        Continue with the writer `f` produces from the value.

        Args:
        ----
            f: Function producing the next writer.
            semigroup: Semigroup combining the logs.

        Returns:
        -------
            Writer with the combined logs and the value of `f(a)`.

        """
        w, a = self.run
        w1, b = f(a).run
        return Writer((semigroup.append(w, w1), b))

    def map_written(self, f: Callable[[W], W2]) -> Writer[W2, A]:
        """Transform the log with `f`, leaving the value alone."""
        return Writer((f(self.written), self.value))

    def map_value(self, f: Callable[[Tuple[W, A]], Tuple[X, B]]) -> Writer[X, B]:
        """
        Transform the whole `(log, value)` pair with `f`.

        Unlike `map`, `f` sees and replaces both sides.
        """
        return Writer(f(self.run))

    def prepend(self, w: W, semigroup: Semigroup[W]) -> Writer[W, A]:
        """Put `w` in front of the log."""
        return self.map_written(lambda written: semigroup.append(w, written))

    def append(self, w: W, semigroup: Semigroup[W]) -> Writer[W, A]:
        """Put `w` at the end of the log."""
        return self.map_written(lambda written: semigroup.append(written, w))

    def reset(self, monoid: Monoid[W]) -> Writer[W, A]:
        """Replace the log with the identity of `monoid`."""
        return Writer((monoid.zero, self.value))


def tell(w: W) -> Writer[W, None]:
    """Create a writer logging `w`."""
    return Writer((w, None))


def writer(value: A, w: W) -> Writer[W, A]:
    """Create a writer with `value` and the log `w`."""
    return Writer((w, value))


class WriterMonad(Monad):
    """
    Monad instance for `Writer`.

    `pure` needs an empty log, so the instance is built from a monoid.
    """

    def __init__(self, monoid: Monoid[Any]):
        self.monoid = monoid

    def pure(self, a: A) -> Writer[Any, A]:
        return Writer((self.monoid.zero, a))

    def flat_map(
        self, fa: Writer[W, A], f: Callable[[A], Writer[W, B]]
    ) -> Writer[W, B]:
        return fa.flat_map(f, self.monoid)

    def map(self, fa: Writer[W, A], f: Callable[[A], B]) -> Writer[W, B]:
        return fa.map(f)

    def tail_rec_m(self, a: A, f: Callable[[A], Writer[W, Any]]) -> Writer[W, Any]:
        log = self.monoid.zero
        while True:
            w, step = f(a).run
            log = self.monoid.append(log, w)
            match step:
                case Loop(value):
                    a = value
                case Done(value):
                    return Writer((log, value))
                case _:
                    raise TypeError(f"Expected Loop or Done, got {type(step).__name__}")

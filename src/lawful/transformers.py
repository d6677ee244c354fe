"""Monad transformers layering optional and list results inside another monad."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, Sequence, Tuple, TypeVar

from lawful.functor import Functor
from lawful.monad import Done, Loop, Monad
from lawful.traverse import traverse_sequence

A = TypeVar("A")
B = TypeVar("B")

# Steps still to visit, first on top, and results found so far, newest on top.
_Pending = Optional[Tuple[Any, Any]]


@dataclass(frozen=True)
class Some(Generic[A]):
    """A present value. The value itself may be `None`."""

    value: A


@dataclass(frozen=True)
class OptionT(Generic[A]):
    """
    An optional result inside a monad, `F[Some[A] | None]`.

    `None` is the absent case and `Some` the present one.
    """

    run: Any

    def map(self, f: Callable[[A], B], functor: Functor) -> OptionT[B]:
        """Transform the present value with `f`."""

        def present(option: Optional[Some[A]]) -> Optional[Some[B]]:
            match option:
                case None:
                    return None
                case Some(value):
                    return Some(f(value))
            raise TypeError(f"Expected Some or None, got {option!r}")

        return OptionT(functor.map(self.run, present))

    def flat_map(self, f: Callable[[A], OptionT[B]], monad: Monad) -> OptionT[B]:
        """
        Continue with the transformer `f` produces from the present value.

        If the value is absent, `f` is not called and the result is absent.

        Args:
        ----
            f: Function producing the next transformer.
            monad: The monad instance of `F`.

        Returns:
        -------
            The combined transformer.

        """

        def bind(option: Optional[Some[A]]) -> Any:
            match option:
                case None:
                    return monad.pure(None)
                case Some(value):
                    return f(value).run
            raise TypeError(f"Expected Some or None, got {option!r}")

        return OptionT(monad.flat_map(self.run, bind))

    @staticmethod
    def lift(fa: Any, functor: Functor) -> OptionT[Any]:
        """
        Lift an effect `F[A]` into the transformer as a present value.

        Args:
        ----
            fa: The effect to lift.
            functor: The functor instance of `F`.

        Returns:
        -------
            `OptionT` with the value of `fa` present, whatever the value is.

        """
        return OptionT(functor.map(fa, Some))

    @staticmethod
    def some(a: A, monad: Monad) -> OptionT[A]:
        """Create a transformer with `a` present."""
        return OptionT(monad.pure(Some(a)))

    @staticmethod
    def none(monad: Monad) -> OptionT[Any]:
        """Create a transformer with an absent value."""
        return OptionT(monad.pure(None))


@dataclass(frozen=True)
class ListT(Generic[A]):
    """
    A list of results inside a monad, `F[tuple[A, ...]]`.

    Continuations may produce any sequence; results are always tuples.
    """

    run: Any

    def map(self, f: Callable[[A], B], functor: Functor) -> ListT[B]:
        """Transform every value with `f`."""
        return ListT(functor.map(self.run, lambda items: tuple(f(a) for a in items)))

    def flat_map(self, f: Callable[[A], ListT[B]], monad: Monad) -> ListT[B]:
        """
        Continue every value with the transformer `f` produces from it.

        The results are concatenated in the order of the values. If there
        are no values, `f` is not called.

        Args:
        ----
            f: Function producing the next transformer.
            monad: The monad instance of `F`.

        Returns:
        -------
            The combined transformer.

        """

        def bind(items: Sequence[A]) -> Any:
            groups = traverse_sequence(items, lambda a: f(a).run, monad)
            return monad.map(groups, _flatten)

        return ListT(monad.flat_map(self.run, bind))

    def concat(self, other: ListT[A], monad: Monad) -> ListT[A]:
        """
        Concatenate the values of `self` and `other`.

        Args:
        ----
            other: The transformer whose values come last.
            monad: The monad instance of `F`.

        Returns:
        -------
            Transformer with the values of both, once both effects have run.

        """
        return ListT(
            monad.flat_map(
                self.run,
                lambda first: monad.map(
                    other.run, lambda second: (*first, *second)
                ),
            )
        )

    def head_option(self, functor: Functor) -> Any:
        """The first value as `Some`, or `None` if there are no values."""
        return functor.map(
            self.run, lambda items: Some(items[0]) if len(items) > 0 else None
        )

    def head(self, functor: Functor) -> Any:
        """The first value. Raises `IndexError` when run if there are no values."""
        return functor.map(self.run, lambda items: items[0])

    def is_empty(self, functor: Functor) -> Any:
        """Whether there are no values."""
        return functor.map(self.run, lambda items: len(items) == 0)

    @staticmethod
    def lift(fa: Any, monad: Monad) -> ListT[Any]:
        """
        Lift an effect `F[A]` into the transformer as a single value.

        Args:
        ----
            fa: The effect to lift.
            monad: The monad instance of `F`.

        Returns:
        -------
            `ListT` with the value of `fa` as its only value.

        """
        return ListT(monad.map(fa, lambda a: (a,)))


def _flatten(groups: Sequence[Sequence[A]]) -> Tuple[A, ...]:
    return tuple(b for group in groups for b in group)


class OptionTMonad(Monad):
    """Monad instance for `OptionT` over the monad of `F`."""

    def __init__(self, monad: Monad):
        self.monad = monad

    def pure(self, a: A) -> OptionT[A]:
        return OptionT.some(a, self.monad)

    def flat_map(self, fa: OptionT[A], f: Callable[[A], OptionT[B]]) -> OptionT[B]:
        return fa.flat_map(f, self.monad)

    def map(self, fa: OptionT[A], f: Callable[[A], B]) -> OptionT[B]:
        return fa.map(f, self.monad)

    def tail_rec_m(self, a: A, f: Callable[[A], OptionT[Any]]) -> OptionT[Any]:
        def next_step(option: Optional[Some[Any]]) -> Any:
            match option:
                case None:
                    return Done(None)
                case Some(Loop(value)):
                    return Loop(value)
                case Some(Done(value)):
                    return Done(Some(value))
            raise TypeError(f"Expected Loop or Done in Some or None, got {option!r}")

        def step(seed: A) -> Any:
            return self.monad.map(f(seed).run, next_step)

        return OptionT(self.monad.tail_rec_m(a, step))


class ListTMonad(Monad):
    """Monad instance for `ListT` over the monad of `F`."""

    def __init__(self, monad: Monad):
        self.monad = monad

    def pure(self, a: A) -> ListT[A]:
        return ListT(self.monad.pure((a,)))

    def flat_map(self, fa: ListT[A], f: Callable[[A], ListT[B]]) -> ListT[B]:
        return fa.flat_map(f, self.monad)

    def map(self, fa: ListT[A], f: Callable[[A], B]) -> ListT[B]:
        return fa.map(f, self.monad)

    def tail_rec_m(self, a: A, f: Callable[[A], ListT[Any]]) -> ListT[Any]:
        """
        Expand the steps depth first, in the order `flat_map` would.

        Every `Loop` runs one effect of `F` through the inner `tail_rec_m`.
        `Done` values are collected without running any effect.
        """

        def step(seed: Tuple[_Pending, _Pending]) -> Any:
            pending, results = seed
            while pending is not None:
                head, pending = pending
                match head:
                    case Loop(value):
                        rest = pending
                        return self.monad.map(
                            f(value).run,
                            lambda items: Loop((_push(items, rest), results)),
                        )
                    case Done(value):
                        results = (value, results)
                    case _:
                        raise TypeError(
                            f"Expected Loop or Done, got {type(head).__name__}"
                        )
            return self.monad.pure(Done(_unwind(results)))

        return ListT(self.monad.tail_rec_m(((Loop(a), None), None), step))


def _push(items: Sequence[Any], pending: _Pending) -> _Pending:
    for item in reversed(items):
        pending = (item, pending)
    return pending


def _unwind(results: _Pending) -> Tuple[Any, ...]:
    values = []
    while results is not None:
        value, results = results
        values.append(value)
    values.reverse()
    return tuple(values)

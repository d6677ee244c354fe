"""Contains the Free monad and its interpreter."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, Tuple, TypeVar

from lawful.monad import Done, Loop, Monad
from lawful.natural import NaturalTransformation

logger = logging.getLogger(__name__)

A = TypeVar("A")
B = TypeVar("B")
I = TypeVar("I")  # noqa: E741

# Continuations waiting for a result, innermost first. Immutable, so
# monads running a continuation more than once can share it.
_Stack = Optional[Tuple[Callable[[Any], "Free[Any]"], Any]]


class Free(Generic[A]):
    """
    A program of suspended operations, interpreted later.

    A `Free` value is either `Return`, a finished program, or `Bind`,
    an operation of some container type `F` followed by a continuation
    producing the rest of the program. Programs are interpreted into a
    monad `G` with `fold_map` and a natural transformation `F ~> G`.
    """

    def flat_map(self, f: Callable[[A], Free[B]]) -> Free[B]:
        """
        Continue this program with `f`.

        Suspended operations are never run by `flat_map`.

        Args:
        ----
            f: Function producing the rest of the program from the result of this one.

        Returns:
        -------
            The extended program.

        """
        match self:
            case Return(value):
                return f(value)
            case Bind(op, continuation):
                return Bind(op, _Chained(continuation, f))
        raise TypeError(f"Expected Return or Bind, got {type(self).__name__}")

    def map(self, f: Callable[[A], B]) -> Free[B]:
        """Transform the result of this program with `f`."""
        return self.flat_map(lambda a: Return(f(a)))

    def fold_map(self, nt: NaturalTransformation, monad: Monad) -> Any:
        """
        Interpret this program into the monad `G`.

        Runs as a loop through `monad.tail_rec_m`, one step per `Bind`,
        keeping pending continuations on an explicit stack. The call stack
        does not grow with the length of the program as long as
        `tail_rec_m` of `monad` is a loop.

        Args:
        ----
            nt: Natural transformation from the operations of this program to `G`.
            monad: The monad instance of `G`.

        Returns:
        -------
            The program's result in `G`.

        """
        logger.debug(
            "Interpreting free program into %s with %s",
            type(monad).__name__,
            type(nt).__name__,
        )

        def suspend(
            op: Any, continuation: Callable[[Any], Free[Any]], stack: _Stack
        ) -> Any:
            return monad.map(nt(op), lambda i: Loop((continuation(i), stack)))

        def step(seed: Tuple[Free[Any], _Stack]) -> Any:
            program, stack = seed
            while True:
                match program:
                    case Return(value):
                        if stack is None:
                            return monad.pure(Done(value))
                        then, stack = stack
                        program = then(value)
                    case Bind(op, continuation):
                        chain = []
                        while isinstance(continuation, _Chained):
                            chain.append(continuation.then)
                            continuation = continuation.first
                        # outermost first, so the innermost ends up on top
                        for then in chain:
                            stack = (then, stack)
                        return suspend(op, continuation, stack)
                    case _:
                        raise TypeError(
                            f"Expected Return or Bind, got {type(program).__name__}"
                        )

        return monad.tail_rec_m((self, None), step)

    @staticmethod
    def pure(value: B) -> Free[B]:
        """Create a finished program."""
        return Return(value)


@dataclass(frozen=True)
class Return(Free[A]):
    """A finished program."""

    value: A


@dataclass(frozen=True)
class Bind(Free[A], Generic[I, A]):
    """An operation followed by a continuation."""

    op: Any
    continuation: Callable[[I], Free[A]]


@dataclass(frozen=True)
class _Chained:
    """Continuation `first`, followed by `flat_map` with `then`."""

    first: Callable[[Any], Free[Any]]
    then: Callable[[Any], Free[Any]]

    def __call__(self, value: Any) -> Free[Any]:
        return _resume(self, value)


def _resume(continuation: Callable[[Any], Free[Any]], value: Any) -> Free[Any]:
    # Left-nested flat_maps build chains as deep as the program is long,
    # so they are unrolled onto a list instead of called recursively.
    pending = []
    while isinstance(continuation, _Chained):
        pending.append(continuation.then)
        continuation = continuation.first
    program = continuation(value)
    while pending:
        program = program.flat_map(pending.pop())
    return program


def lift_f(op: Any) -> Free[Any]:
    """
    Lift an operation into a program.

    Args:
    ----
        op: The operation to suspend.

    Returns:
    -------
        A program running `op` and returning its result.

    """
    return Bind(op, Return)


class FreeMonad(Monad):
    """Monad instance for `Free`."""

    def pure(self, a: A) -> Free[A]:
        return Return(a)

    def flat_map(self, fa: Free[A], f: Callable[[A], Free[B]]) -> Free[B]:
        return fa.flat_map(f)

    def map(self, fa: Free[A], f: Callable[[A], B]) -> Free[B]:
        return fa.map(f)


free_monad = FreeMonad()

"""Contains the State computation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, List, Tuple, TypeVar

from lawful.monad import Done, Loop, Monad

S = TypeVar("S")
A = TypeVar("A")
B = TypeVar("B")


@dataclass(frozen=True)
class State(Generic[S, A]):
    """
    A computation threading a state value, `S -> (S, A)`.

    Every call to `run` is independent; no state is shared between runs.
    `map` and `flat_map` record their continuation instead of wrapping `f`,
    and `run` works through the recorded continuations in a loop, so long
    chains run without growing the call stack.
    """

    f: Callable[[S], Tuple[S, A]]

    def run(self, s: S) -> Tuple[S, A]:
        """Run the computation from the initial state `s`."""
        pending: List[Callable[[Any], State[S, Any]]] = []
        state: State[S, Any] = self
        while True:
            while isinstance(state.f, _FlatMapped):
                pending.append(state.f.then)
                state = state.f.source
            s, a = state.f(s)
            if not pending:
                return (s, a)
            state = pending.pop()(a)

    def eval(self, s: S) -> A:
        """Run the computation from `s` and return only its value."""
        return self.run(s)[1]

    def exec(self, s: S) -> S:
        """Run the computation from `s` and return only the final state."""
        return self.run(s)[0]

    def map(self, f: Callable[[A], B]) -> State[S, B]:
        """Transform the value with `f`, leaving the state alone."""
        return self.flat_map(lambda a: State.pure(f(a)))

    def flat_map(self, f: Callable[[A], State[S, B]]) -> State[S, B]:
        """
        Continue with the computation `f` produces from the value.

        Args:
        ----
            f: Function producing the next computation.

        Returns:
        -------
            A computation running `self`, then `f(a)` on the resulting state.

        """
        return State(_FlatMapped(self, f))

    @staticmethod
    def pure(a: A) -> State[Any, A]:
        """Create a computation returning `a` without touching the state."""
        return State(lambda s: (s, a))


@dataclass(frozen=True)
class _FlatMapped:
    """Computation `source`, followed by `flat_map` with `then`."""

    source: State[Any, Any]
    then: Callable[[Any], State[Any, Any]]

    def __call__(self, s: Any) -> Tuple[Any, Any]:
        return State(self).run(s)


def get() -> State[S, S]:
    """Create a computation returning the current state."""
    return State(lambda s: (s, s))


def put(s: S) -> State[S, None]:
    """Create a computation replacing the state with `s`."""
    return State(lambda _: (s, None))


def modify(f: Callable[[S], S]) -> State[S, None]:
    """Create a computation updating the state with `f`."""
    return State(lambda s: (f(s), None))


def inspect(f: Callable[[S], A]) -> State[S, A]:
    """Create a computation returning `f` applied to the state."""
    return State(lambda s: (s, f(s)))


class StateMonad(Monad):
    """Monad instance for `State`."""

    def pure(self, a: A) -> State[Any, A]:
        return State.pure(a)

    def flat_map(self, fa: State[S, A], f: Callable[[A], State[S, B]]) -> State[S, B]:
        return fa.flat_map(f)

    def map(self, fa: State[S, A], f: Callable[[A], B]) -> State[S, B]:
        return fa.map(f)

    def tail_rec_m(self, a: A, f: Callable[[A], State[S, Any]]) -> State[S, Any]:
        def run(s: S) -> Tuple[S, Any]:
            seed = a
            while True:
                s, step = f(seed).run(s)
                match step:
                    case Loop(value):
                        seed = value
                    case Done(value):
                        return (s, value)
                    case _:
                        raise TypeError(
                            f"Expected Loop or Done, got {type(step).__name__}"
                        )

        return State(run)


state_monad = StateMonad()

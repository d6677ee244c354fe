"""Contains the Monad contract."""

from abc import abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

from typing_extensions import TypeAlias

from lawful.applicative import Applicative

A = TypeVar("A")
B = TypeVar("B")


@dataclass(frozen=True)
class Loop(Generic[A]):
    """Continue `Monad.tail_rec_m` with a new seed."""

    value: A


@dataclass(frozen=True)
class Done(Generic[B]):
    """Finish `Monad.tail_rec_m` with a result."""

    value: B


Step: TypeAlias = "Loop[A] | Done[B]"


class Monad(Applicative):
    """
    An applicative supporting value dependent sequencing.

    `map` and `ap` are derived from `flat_map` and `pure`. Note that the derived
    `ap` runs the effect producing the function before the effect producing
    the value. Instances where independent composition must differ from
    sequential composition override `ap`.

    Laws:
        Left identity: `flat_map(pure(a), f) == f(a)`
        Right identity: `flat_map(fa, pure) == fa`
        Associativity: `flat_map(flat_map(fa, f), g)
            == flat_map(fa, lambda a: flat_map(f(a), g))`
    """

    @abstractmethod
    def flat_map(self, fa: Any, f: Callable[[A], Any]) -> Any:
        """Sequence `fa` with `f`, which may depend on the value of `fa`."""

    def map(self, fa: Any, f: Callable[[A], B]) -> Any:
        """Map `f` over `fa` as `flat_map(fa, lambda a: pure(f(a)))`."""
        return self.flat_map(fa, lambda a: self.pure(f(a)))

    def ap(self, fa: Any, ff: Any) -> Any:
        """Apply the function in `ff` to the value in `fa`, running `ff` first."""
        return self.flat_map(ff, lambda f: self.map(fa, f))

    def flatten(self, ffa: Any) -> Any:
        """Remove one layer of nesting from `ffa`."""
        return self.flat_map(ffa, lambda fa: fa)

    def tail_rec_m(self, a: A, f: Callable[[A], Any]) -> Any:
        """
        Repeatedly apply `f` until it produces `Done`.

        The default implementation recurses through `flat_map`, so its
        stack usage grows with the number of steps. Instances that can
        run the steps in a loop should override it.

        Args:
        ----
            a: The initial seed.
            f: Function from a seed to a container holding `Loop` or `Done`.

        Returns:
        -------
            The container holding the value of the final `Done`.

        """

        def step(result: "Step[A, B]") -> Any:
            match result:
                case Loop(value):
                    return self.tail_rec_m(value, f)
                case Done(value):
                    return self.pure(value)
            raise TypeError(f"Expected Loop or Done, got {type(result).__name__}")

        return self.flat_map(f(a), step)

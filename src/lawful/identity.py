"""The identity container, where every value is its own container."""

from typing import Any, Callable, TypeVar

from lawful.monad import Done, Loop, Monad
from lawful.natural import NaturalTransformation

A = TypeVar("A")
B = TypeVar("B")


class IdMonad(Monad):
    """Monad for the identity container. Effects are plain values."""

    def pure(self, a: A) -> A:
        return a

    def flat_map(self, fa: A, f: Callable[[A], B]) -> B:
        return f(fa)

    def map(self, fa: A, f: Callable[[A], B]) -> B:
        return f(fa)

    def tail_rec_m(self, a: A, f: Callable[[A], Any]) -> Any:
        while True:
            match f(a):
                case Loop(value):
                    a = value
                case Done(value):
                    return value
                case step:
                    raise TypeError(f"Expected Loop or Done, got {type(step).__name__}")


class IdentityTransformation(NaturalTransformation):
    """The natural transformation `Id ~> Id`."""

    def apply(self, fa: A) -> A:
        return fa


id_monad = IdMonad()
identity_transformation = IdentityTransformation()

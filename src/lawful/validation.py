"""Contains the CValidation type, which can accumulate failures."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

from lawful.monad import Done, Loop, Monad
from lawful.semigroup import Semigroup

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")


class CValidation(Generic[A, B]):
    """
    Either a failure `CLeft(error)` or a success `CRight(value)`.

    `flat_map` stops at the first failure. `ap` runs both sides and
    combines their failures with a semigroup.
    """

    def ap(
        self, ff: CValidation[A, Callable[[B], C]], semigroup: Semigroup[A]
    ) -> CValidation[A, C]:
        """
        Apply the function in `ff` to the value in `self`, accumulating failures.

        Args:
        ----
            ff: Validation holding the function.
            semigroup: Semigroup combining failures.

        Returns:
        -------
            `CRight(f(value))` if both succeed, the failure if one fails,
            or both failures combined, `self` first, if both fail.

        """
        match (self, ff):
            case (CRight(value), CRight(f)):
                return CRight(f(value))
            case (CRight(), CLeft(error)):
                return CLeft(error)
            case (CLeft(error), CRight()):
                return CLeft(error)
            case (CLeft(error1), CLeft(error2)):
                return CLeft(semigroup.append(error1, error2))
        raise TypeError(f"Expected CLeft or CRight, got {type(self).__name__}")

    def map(self, f: Callable[[B], C]) -> CValidation[A, C]:
        """Transform the success value with `f`."""
        match self:
            case CLeft(error):
                return CLeft(error)
            case CRight(value):
                return CRight(f(value))
        raise TypeError(f"Expected CLeft or CRight, got {type(self).__name__}")

    def flat_map(self, f: Callable[[B], CValidation[A, C]]) -> CValidation[A, C]:
        """Continue with `f` on success. Failures are returned without calling `f`."""
        match self:
            case CLeft(error):
                return CLeft(error)
            case CRight(value):
                return f(value)
        raise TypeError(f"Expected CLeft or CRight, got {type(self).__name__}")

    def is_valid(self) -> bool:
        """Whether this is a success."""
        return isinstance(self, CRight)

    def fold(self, on_left: Callable[[A], C], on_right: Callable[[B], C]) -> C:
        """
        Reduce to a single value.

        Args:
        ----
            on_left: Called with the error of a failure.
            on_right: Called with the value of a success.

        Returns:
        -------
            The result of whichever function was called.

        """
        match self:
            case CLeft(error):
                return on_left(error)
            case CRight(value):
                return on_right(value)
        raise TypeError(f"Expected CLeft or CRight, got {type(self).__name__}")


@dataclass(frozen=True)
class CLeft(CValidation[A, B]):
    """A failure."""

    error: A


@dataclass(frozen=True)
class CRight(CValidation[A, B]):
    """A success."""

    value: B


class ValidationMonad(Monad):
    """
    Monad instance for `CValidation` with failures combined by `semigroup`.

    `ap` and `apply2` accumulate failures instead of stopping at
    the first one, unlike `flat_map`.
    """

    def __init__(self, semigroup: Semigroup[Any]):
        self.semigroup = semigroup

    def pure(self, a: B) -> CValidation[Any, B]:
        return CRight(a)

    def flat_map(
        self, fa: CValidation[A, B], f: Callable[[B], CValidation[A, C]]
    ) -> CValidation[A, C]:
        return fa.flat_map(f)

    def map(self, fa: CValidation[A, B], f: Callable[[B], C]) -> CValidation[A, C]:
        return fa.map(f)

    def ap(
        self, fa: CValidation[A, B], ff: CValidation[A, Callable[[B], C]]
    ) -> CValidation[A, C]:
        return fa.ap(ff, self.semigroup)

    def apply2(
        self,
        fa: CValidation[A, Any],
        fb: CValidation[A, Any],
        f: Callable[[Any, Any], C],
    ) -> CValidation[A, C]:
        # failures of `fa` come before failures of `fb`
        return fa.ap(fb.map(lambda b: lambda a: f(a, b)), self.semigroup)

    def tail_rec_m(
        self, a: Any, f: Callable[[Any], CValidation[A, Any]]
    ) -> CValidation[A, Any]:
        while True:
            match f(a):
                case CLeft() as failure:
                    return failure
                case CRight(Loop(value)):
                    a = value
                case CRight(Done(value)):
                    return CRight(value)
                case step:
                    raise TypeError(
                        f"Expected CLeft or CRight holding Loop or Done, got {step!r}"
                    )

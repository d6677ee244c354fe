"""Contains the Applicative contract."""

from abc import abstractmethod
from typing import Any, Callable, Tuple, TypeVar

from lawful.functor import Functor

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")


class Applicative(Functor):
    """
    A functor that can lift values and combine independent effects.

    Laws:
        Homomorphism: `ap(pure(a), pure(f)) == pure(f(a))`
    """

    @abstractmethod
    def pure(self, a: A) -> Any:
        """Lift `a` into the container."""

    @abstractmethod
    def ap(self, fa: Any, ff: Any) -> Any:
        """
        Apply the function contained in `ff` to the value contained in `fa`.

        Args:
        ----
            fa: The container holding the argument.
            ff: The container holding the function.

        Returns:
        -------
            The container holding the result.

        """

    def map(self, fa: Any, f: Callable[[A], B]) -> Any:
        """Map `f` over `fa` as `ap(fa, pure(f))`."""
        return self.ap(fa, self.pure(f))

    def apply2(self, fa: Any, fb: Any, f: Callable[[A, B], C]) -> Any:
        """
        Combine the values of `fa` and `fb` with `f`.

        The effect of `fa` happens before the effect of `fb`
        when `ap` evaluates its function argument first.

        Args:
        ----
            fa: The container holding the first argument.
            fb: The container holding the second argument.
            f: Binary function to combine the values with.

        Returns:
        -------
            The container holding `f(a, b)`.

        """
        return self.ap(fb, self.map(fa, lambda a: lambda b: f(a, b)))

    def tuple2(self, fa: Any, fb: Any) -> Any:
        """Pair the values of `fa` and `fb`."""

        def pair(a: A, b: B) -> Tuple[A, B]:
            return (a, b)

        return self.apply2(fa, fb, pair)

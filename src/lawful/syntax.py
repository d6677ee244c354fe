"""Generator based do-notation for monads."""

from collections.abc import Generator
from functools import wraps
from typing import Any, Callable, Tuple, TypeVar

from typing_extensions import ParamSpec

from lawful.errors import DoNotationError
from lawful.monad import Monad

P = ParamSpec("P")
R = TypeVar("R")


def do(
    monad: Monad,
) -> Callable[[Callable[P, Generator[Any, Any, R]]], Callable[P, Any]]:
    """
    Write monadic code as a generator function.

    Every value the generator yields is a container of `monad`; the
    generator receives the contained value back. Its return value is
    lifted with `monad.pure`.

    ```
    @do(state_monad)
    def tick() -> Generator[State[int, Any], Any, int]:
        n = yield get()
        yield put(n + 1)
        return n
    ```

    The generator is run again from the start for every continuation,
    sending it the values received so far, which lets monads call a
    continuation more than once. The generator must therefore be
    deterministic given the values it receives.

    Args:
    ----
        monad: The monad instance of the yielded containers.

    Returns:
    -------
        Decorator turning the generator function into a function
        returning a container of `monad`.

    """

    def decorator(f: Callable[P, Generator[Any, Any, R]]) -> Callable[P, Any]:
        @wraps(f)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> Any:
            def resume(history: Tuple[Any, ...]) -> Any:
                effect = f(*args, **kwargs)
                if not isinstance(effect, Generator):
                    raise DoNotationError(
                        f"'{f.__name__}' must be a generator function "
                        "to be used with 'do'."
                    )
                try:
                    fa = next(effect)
                    for value in history:
                        fa = effect.send(value)
                except StopIteration as e:
                    return monad.pure(e.value)
                return monad.flat_map(fa, lambda a: resume((*history, a)))

            return resume(())

        return wrapper

    return decorator

from dataclasses import dataclass
from typing import Any

from lawful import CLeft, CRight, CValidation, Free, ValidationMonad, lift_f
from lawful.natural import NaturalTransformation
from lawful.semigroup import Semigroup
from lawful.state import State, state_monad


class Errors(Semigroup[list[str]]):
    def append(self, a: list[str], b: list[str]) -> list[str]:
        return a + b


validation = ValidationMonad(Errors())


def non_empty(field: str, value: str) -> CValidation[list[str], str]:
    return CRight(value) if value else CLeft([f"{field} must not be empty"])


def register(name: str, email: str) -> CValidation[list[str], tuple[str, str]]:
    return validation.tuple2(non_empty("name", name), non_empty("email", email))


@dataclass(frozen=True)
class Push:
    value: int


@dataclass(frozen=True)
class Pop:
    pass


class StackInterpreter(NaturalTransformation):
    def apply(self, fa: Any) -> State[tuple[int, ...], Any]:
        match fa:
            case Push(value):
                return State(lambda stack: ((value, *stack), None))
            case Pop():
                return State(lambda stack: (stack[1:], stack[0]))


def add() -> Free[int]:
    return lift_f(Pop()).flat_map(
        lambda a: lift_f(Pop()).flat_map(lambda b: lift_f(Push(a + b)))
    )


program = lift_f(Push(1)).flat_map(lambda _: lift_f(Push(2))).flat_map(lambda _: add())

print(register("", ""))
print(register("Ada", "ada@example.com"))
print(program.fold_map(StackInterpreter(), state_monad).exec(()))

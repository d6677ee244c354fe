# ruff: noqa: D100, D103

from dataclasses import dataclass
from functools import reduce
from typing import Any

from pytest_benchmark.fixture import BenchmarkFixture

from lawful import Free, Return, id_monad, lift_f, natural, state_monad
from lawful.state import State
from lawful.traverse import traverse_sequence


@dataclass(frozen=True)
class Emit:
    value: int


to_value = natural(lambda op: op.value)
to_state = natural(lambda op: State(lambda s: (s + op.value, s)))


def create_program(length: int) -> Free[int]:
    if length == 0:
        return Return(0)
    return lift_f(Emit(length)).flat_map(lambda _: create_program(length - 1))


def create_left_nested_program(length: int) -> Free[int]:
    def step(total: int) -> Free[int]:
        return lift_f(Emit(1)).map(lambda v: total + v)

    return reduce(lambda acc, _: acc.flat_map(step), range(length), Return(0))


def test_free_into_identity(benchmark: BenchmarkFixture) -> None:
    """Benchmark interpreting a long program into the identity monad."""
    program = create_program(10_000)
    benchmark(program.fold_map, to_value, id_monad)


def test_left_nested_free_into_state(benchmark: BenchmarkFixture) -> None:
    program = create_left_nested_program(10_000)

    def run() -> Any:
        return program.fold_map(to_state, state_monad).run(0)

    benchmark(run)


def test_traverse_into_identity(benchmark: BenchmarkFixture) -> None:
    items = list(range(10_000))
    benchmark(traverse_sequence, items, lambda a: a, id_monad)

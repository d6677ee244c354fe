from typing import Any, List

from pytest import raises

from lawful import (
    Done,
    ListT,
    ListTMonad,
    Loop,
    Monad,
    OptionT,
    OptionTMonad,
    Some,
    State,
    Writer,
    WriterMonad,
    id_monad,
    state_monad,
    tell,
)
from lawful.state import put

from tests.instances import list_instance, list_monoid


def fail(_: Any) -> Any:
    raise AssertionError("continuation must not be called")


def unrolled(monad: Monad, a: Any, f: Any) -> Any:
    def next_step(step: Any) -> Any:
        match step:
            case Loop(value):
                return unrolled(monad, value, f)
            case Done(value):
                return monad.pure(value)

    return monad.flat_map(f(a), next_step)


def test_option_t_flat_map() -> None:
    result = OptionT(Some(3)).flat_map(lambda a: OptionT(Some(a * 2)), id_monad)
    assert result.run == Some(6)


def test_option_t_flat_map_short_circuits() -> None:
    assert OptionT(None).flat_map(fail, id_monad).run is None


def test_option_t_map() -> None:
    assert OptionT(Some(3)).map(lambda a: a + 1, id_monad).run == Some(4)
    assert OptionT(None).map(fail, id_monad).run is None


def test_option_t_present_none_is_not_absent() -> None:
    result = OptionT(Some(None)).flat_map(
        lambda a: OptionT.some(a is None, id_monad), id_monad
    )
    assert result.run == Some(True)


def test_option_t_over_list() -> None:
    values = OptionT([Some(1), None, Some(3)])
    result = values.flat_map(
        lambda a: OptionT([Some(a), Some(a * 10)]), list_instance
    )
    assert result.run == [Some(1), Some(10), None, Some(3), Some(30)]


def test_option_t_over_state() -> None:
    def lookup(key: str) -> OptionT[int]:
        def run(s: List[str]) -> Any:
            found = {"a": 1}.get(key)
            return (s + [key], None if found is None else Some(found))

        return OptionT(State(run))

    found = lookup("a").flat_map(lambda a: lookup("a"), state_monad)
    assert found.run.run([]) == (["a", "a"], Some(1))

    missing = lookup("b").flat_map(lambda a: lookup("a"), state_monad)
    assert missing.run.run([]) == (["b"], None)


def test_option_t_lift() -> None:
    assert OptionT.lift([1, 2], list_instance).run == [Some(1), Some(2)]
    assert OptionT.some(1, id_monad).run == Some(1)
    assert OptionT.none(id_monad).run is None


def test_option_t_lift_keeps_none_values_present() -> None:
    calls = []

    def record(a: Any) -> OptionT[str]:
        calls.append(a)
        return OptionT.some("after put", state_monad)

    program = OptionT.lift(put(5), state_monad).flat_map(record, state_monad)

    assert program.run.run(0) == (5, Some("after put"))
    assert calls == [None]


def test_option_t_lift_over_writer() -> None:
    monad = WriterMonad(list_monoid)
    program = OptionT.lift(tell(["first"]), monad).flat_map(
        lambda _: OptionT.lift(tell(["second"]), monad), monad
    )
    assert program.run == Writer((["first", "second"], Some(None)))


def test_option_t_monad() -> None:
    monad = OptionTMonad(list_instance)
    assert monad.pure(1).run == [Some(1)]
    result = monad.flat_map(OptionT([Some(1), Some(2)]), lambda a: monad.pure(a + 1))
    assert result.run == [Some(2), Some(3)]
    assert monad.map(OptionT([Some(1), None]), lambda a: a * 2).run == [Some(2), None]


def test_option_t_tail_rec_m_is_stack_safe() -> None:
    monad = OptionTMonad(id_monad)

    def step(n: int) -> OptionT[Any]:
        return monad.pure(Done(n) if n == 50_000 else Loop(n + 1))

    assert monad.tail_rec_m(0, step).run == Some(50_000)


def test_option_t_tail_rec_m_stops_on_absence() -> None:
    monad = OptionTMonad(state_monad)

    def step(n: int) -> OptionT[Any]:
        def run(s: int) -> Any:
            return (s + 1, None if n == 3 else Some(Loop(n + 1)))

        return OptionT(State(run))

    assert monad.tail_rec_m(0, step).run.run(0) == (4, None)


def test_option_t_tail_rec_m_rejects_other_steps() -> None:
    monad = OptionTMonad(id_monad)
    with raises(TypeError):
        monad.tail_rec_m(0, lambda n: monad.pure(n))


def test_list_t_flat_map() -> None:
    def spread(x: int) -> ListT[int]:
        return ListT([x, x * 100])

    assert ListT([1, 2]).flat_map(spread, id_monad).run == (1, 100, 2, 200)
    assert ListT([10, 20]).flat_map(spread, id_monad).run == (10, 1000, 20, 2000)


def test_list_t_flat_map_on_empty() -> None:
    assert ListT([]).flat_map(fail, id_monad).run == ()


def test_list_t_flat_map_over_state_keeps_order() -> None:
    def visit(x: int) -> ListT[int]:
        return ListT(State(lambda s: (s + [x], [x])))

    result = ListT(State.pure([1, 2, 3])).flat_map(visit, state_monad)
    assert result.run.run([]) == ([1, 2, 3], (1, 2, 3))


def test_list_t_map() -> None:
    assert ListT([1, 2]).map(str, id_monad).run == ("1", "2")


def test_list_t_concat() -> None:
    combined = ListT([[1], [2]]).concat(ListT([[3]]), list_instance)
    assert combined.run == [(1, 3), (2, 3)]


def test_list_t_head_and_is_empty() -> None:
    assert ListT([4, 5]).head_option(id_monad) == Some(4)
    assert ListT([None]).head_option(id_monad) == Some(None)
    assert ListT([]).head_option(id_monad) is None
    assert ListT([4, 5]).head(id_monad) == 4
    assert ListT([]).is_empty(id_monad) is True
    assert ListT([4]).is_empty(id_monad) is False


def test_list_t_lift() -> None:
    assert ListT.lift(5, id_monad).run == (5,)


def test_list_t_monad() -> None:
    monad = ListTMonad(list_instance)
    outer: List[Any] = [[1, 2], [3]]
    result = monad.flat_map(ListT(outer), lambda a: monad.pure(a * 2))
    assert result.run == [(2, 4), (6,)]
    assert monad.map(ListT([[1]]), lambda a: a + 1).run == [(2,)]


def test_list_t_flat_map_many_values() -> None:
    values = ListT(range(20_000))
    result = values.flat_map(lambda a: ListT([a, -a]), id_monad)
    assert len(result.run) == 40_000
    assert result.run[:4] == (0, 0, 1, -1)
    assert result.run[-2:] == (19_999, -19_999)


def test_list_t_tail_rec_m_expands_depth_first() -> None:
    monad = ListTMonad(id_monad)

    def step(n: int) -> ListT[Any]:
        if n < 3:
            return ListT([Done(n), Loop(n + 1), Done(-n)])
        return ListT([Done(n)])

    expected = unrolled(monad, 0, step).run
    assert monad.tail_rec_m(0, step).run == expected
    assert expected == (0, 1, 2, 3, -2, -1, 0)


def test_list_t_tail_rec_m_keeps_effect_order() -> None:
    monad = ListTMonad(state_monad)

    def step(n: int) -> ListT[Any]:
        def run(s: List[int]) -> Any:
            return (s + [n], [Loop(n + 1), Loop(n + 2)] if n < 2 else [Done(n)])

        return ListT(State(run))

    expected = unrolled(monad, 0, step).run.run([])
    assert monad.tail_rec_m(0, step).run.run([]) == expected
    assert expected == ([0, 1, 2, 3, 2], (2, 3, 2))


def test_list_t_tail_rec_m_is_stack_safe() -> None:
    monad = ListTMonad(id_monad)

    def step(n: int) -> ListT[Any]:
        return ListT([Done(n) if n == 50_000 else Loop(n + 1)])

    assert monad.tail_rec_m(0, step).run == (50_000,)


def test_list_t_tail_rec_m_rejects_other_steps() -> None:
    monad = ListTMonad(id_monad)
    with raises(TypeError):
        monad.tail_rec_m(0, lambda n: ListT([n]))

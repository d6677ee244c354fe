from typing import Any

from pytest import raises

from lawful import Done, Loop, Writer, WriterMonad, tell, writer

from tests.instances import list_monoid, string_monoid, sum_monoid


def log(message: str) -> Writer[str, str]:
    return Writer((message, message.upper()))


def test_three_steps() -> None:
    result = log("a").flat_map(
        lambda _: log("b").flat_map(lambda _: log("c"), string_monoid),
        string_monoid,
    )

    assert result.written == "abc"
    assert result.value == "C"


def test_left_nested_steps() -> None:
    result = (
        log("a")
        .flat_map(lambda _: log("b"), string_monoid)
        .flat_map(lambda _: log("c"), string_monoid)
    )
    assert result.run == ("abc", "C")


def test_map_only_touches_value() -> None:
    assert writer(2, ["start"]).map(lambda v: v + 1) == Writer((["start"], 3))


def test_map_written() -> None:
    assert writer(1, "log").map_written(len) == Writer((3, 1))


def test_map_value() -> None:
    swapped = writer(1, "log").map_value(lambda run: (run[1], run[0]))
    assert swapped == Writer((1, "log"))


def test_prepend_and_append() -> None:
    w = writer(1, "middle")
    assert w.prepend("start ", string_monoid).written == "start middle"
    assert w.append(" end", string_monoid).written == "middle end"


def test_reset() -> None:
    assert writer(1, ["a", "b"]).reset(list_monoid) == Writer(([], 1))


def test_writer_monad() -> None:
    monad = WriterMonad(list_monoid)

    program = monad.flat_map(
        tell(["first"]), lambda _: monad.map(tell(["second"]), lambda _: "done")
    )

    assert program == Writer((["first", "second"], "done"))
    assert monad.pure(1) == Writer(([], 1))


def test_tail_rec_m() -> None:
    monad = WriterMonad(sum_monoid)

    def count(n: int) -> Writer[int, Any]:
        return Writer((n, Done(n) if n == 50_000 else Loop(n + 1)))

    result = monad.tail_rec_m(0, count)
    assert result.value == 50_000
    assert result.written == sum(range(50_001))


def test_tail_rec_m_rejects_other_steps() -> None:
    with raises(TypeError):
        WriterMonad(list_monoid).tail_rec_m(0, lambda n: Writer(([], n)))

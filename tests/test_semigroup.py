from hypothesis import given
from hypothesis import strategies as st

from tests.instances import list_monoid, string_monoid, sum_monoid


@given(st.text(), st.text(), st.text())
def test_string_associativity(a: str, b: str, c: str) -> None:
    assert string_monoid.append(
        string_monoid.append(a, b), c
    ) == string_monoid.append(a, string_monoid.append(b, c))


@given(st.text())
def test_string_identity(a: str) -> None:
    assert string_monoid.append(string_monoid.zero, a) == a
    assert string_monoid.append(a, string_monoid.zero) == a


@given(st.lists(st.integers()), st.lists(st.integers()), st.lists(st.integers()))
def test_list_associativity(a: list[int], b: list[int], c: list[int]) -> None:
    assert list_monoid.append(list_monoid.append(a, b), c) == list_monoid.append(
        a, list_monoid.append(b, c)
    )


def test_concat() -> None:
    assert string_monoid.concat(["a", "b", "c"]) == "abc"
    assert sum_monoid.concat(range(5)) == 10


def test_concat_empty() -> None:
    assert sum_monoid.concat([]) == 0
    assert list_monoid.concat([]) == []

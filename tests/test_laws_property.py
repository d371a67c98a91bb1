from __future__ import annotations

from typing import Callable
from unittest.mock import Mock

import pytest
from hypothesis import given, settings, strategies as st

from trycat import Result, UnwrapError, err, ok

payloads: st.SearchStrategy[object] = st.one_of(
    st.none(),
    st.booleans(),
    st.integers(),
    st.text(max_size=20),
    st.lists(st.integers(), max_size=5),
)
mappers: st.SearchStrategy[Callable[[object], object]] = st.sampled_from(
    (repr, str, lambda x: (x, x), lambda x: [x], type)
)
results: st.SearchStrategy[Result[object, object]] = st.one_of(
    payloads.map(ok), payloads.map(err)
)


@given(v=payloads)
def test_discriminants_are_exclusive(v: object) -> None:
    assert ok(v).is_ok() and not ok(v).is_err()
    assert err(v).is_err() and not err(v).is_ok()


@given(v=payloads, f=mappers)
def test_map_applies_to_ok(v: object, f: Callable[[object], object]) -> None:
    assert ok(v).map(f).unwrap() == f(v)


@given(e=payloads, f=mappers)
def test_map_on_err_is_identity(e: object, f: Callable[[object], object]) -> None:
    original = err(e)
    assert original.map(f) is original


@given(v=payloads, f=mappers)
def test_map_err_on_ok_is_identity(v: object, f: Callable[[object], object]) -> None:
    original = ok(v)
    assert original.map_err(f) is original


@given(v=payloads)
def test_and_then_left_identity(v: object) -> None:
    assert ok(v).and_then(ok) == ok(v)


@given(r=results)
def test_and_then_right_identity(r: Result[object, object]) -> None:
    chained = r.and_then(ok)
    assert chained == r


@given(e=payloads)
def test_and_then_short_circuits_on_err(e: object) -> None:
    op = Mock()
    original = err(e)
    assert original.and_then(op) is original
    op.assert_not_called()


@given(v=payloads, default=payloads, f=mappers)
def test_map_or(v: object, default: object, f: Callable[[object], object]) -> None:
    assert ok(v).map_or(default, f) == f(v)
    never = Mock()
    assert err(v).map_or(default, never) is default
    never.assert_not_called()


@given(a=payloads, e=payloads, r=results)
def test_or_and_duality(a: object, e: object, r: Result[object, object]) -> None:
    success = ok(a)
    failure = err(e)
    assert success.or_(r) is success
    assert failure.or_(r) is r
    assert success.and_(r) is r
    assert failure.and_(r) is failure


@settings(max_examples=25)
@given(v=payloads, message=st.text(max_size=20))
def test_assertion_accessors(v: object, message: str) -> None:
    with pytest.raises(UnwrapError):
        err(v).unwrap()
    with pytest.raises(UnwrapError) as unwrap_err_info:
        ok(v).unwrap_err()
    assert unwrap_err_info.value.payload is v
    with pytest.raises(UnwrapError) as expect_info:
        err(v).expect(message)
    assert str(expect_info.value) == message
    with pytest.raises(UnwrapError) as expect_err_info:
        ok(v).expect_err(message)
    assert str(expect_err_info.value) == f"{message}: {v}"

"""Tests for glw.core.result module."""

import pytest

from glw.core.result import Err, Ok, Result


class TestOk:
    def test_unwrap_or_ignores_default(self) -> None:
        assert Ok("abc").unwrap_or("origin/main") == "abc"

    def test_repr(self) -> None:
        assert repr(Ok("x")) == "Ok('x')"


class TestErr:
    def test_unwrap_or_returns_default(self) -> None:
        assert Err("no merge-base").unwrap_or("origin/main") == "origin/main"

    def test_repr(self) -> None:
        assert repr(Err("boom")) == "Err('boom')"


class TestPatternMatching:
    def test_ok_binds_value(self) -> None:
        result: Result[int, str] = Ok(1)
        match result:
            case Ok(value):
                assert value == 1
            case Err(error):
                pytest.fail(f"unexpected Err({error})")

    def test_err_binds_error(self) -> None:
        result: Result[int, str] = Err("bad")
        match result:
            case Ok(value):
                pytest.fail(f"unexpected Ok({value})")
            case Err(error):
                assert error == "bad"

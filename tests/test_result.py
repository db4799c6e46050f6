"""Tests for Ok/Err result values."""

from __future__ import annotations

import pytest

from doio.result import Err, Ok


def test_ok_accessors() -> None:
    result = Ok(3)

    assert result.is_ok() and not result.is_err()
    assert result.ok() == 3
    assert result.err() is None
    assert result.unwrap() == 3
    assert result.unwrap_or(0) == 3
    assert result.map(lambda x: x * 2) == Ok(6)
    assert repr(result) == "Ok(3)"


def test_err_accessors() -> None:
    error = ValueError("bad")
    result = Err(error)

    assert result.is_err() and not result.is_ok()
    assert result.ok() is None
    assert result.err() is error
    assert result.unwrap_or(0) == 0
    assert result.map(lambda x: x * 2) is result
    with pytest.raises(ValueError, match="bad"):
        result.unwrap()


def test_unwrap_err_on_ok_raises() -> None:
    with pytest.raises(RuntimeError):
        Ok(1).unwrap_err()

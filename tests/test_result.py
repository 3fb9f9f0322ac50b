import pytest

from app.services.result import Result


def test_ok():
    result = Result.ok("success")
    assert result.is_ok and not result.is_err
    assert result.value == "success"
    with pytest.raises(ValueError, match="Called error on Result.ok"):
        _ = result.error


def test_err():
    result = Result.err("boom")
    assert result.is_err and not result.is_ok
    assert result.error == "boom"
    with pytest.raises(ValueError, match="Called value on Result.err"):
        _ = result.value


def test_ok_may_hold_none():
    result = Result.ok(None)
    assert result.is_ok
    assert result.value is None

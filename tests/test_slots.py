"""Tests for slot usage in tidbits classes."""

import pytest

import tidbits as tb


def _check_slots(obj: object) -> bool:
    try:
        _x = obj.__dict__
        return False  # noqa: TRY300
    except AttributeError:
        return True


def test_slots() -> None:  # noqa: D103
    assert _check_slots(tb.Some(42))
    assert _check_slots(tb.NOTHING)
    assert _check_slots(tb.Err[int, object](42))
    assert _check_slots(tb.Ok[int, object](42))
    assert _check_slots(tb.try_to_fold([0], lambda _acc, _n, bail: bail("x"), 0))
    assert _check_slots(tb.get_config())


def test_frozen() -> None:
    """Wrapped values can't be reassigned."""
    with pytest.raises(AttributeError):
        tb.Ok(1).value = 2  # type: ignore[misc]
    with pytest.raises(AttributeError):
        tb.Some(1).value = 2  # type: ignore[misc]

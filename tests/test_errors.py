"""Every error exposes a distinct machine-readable kind and a short label."""

from __future__ import annotations

import pytest

import picomsgpack
from picomsgpack import MsgpackError

ERROR_CLASSES = [
    getattr(picomsgpack, name)
    for name in picomsgpack.__all__
    if isinstance(getattr(picomsgpack, name), type)
    and issubclass(getattr(picomsgpack, name), MsgpackError)
    and getattr(picomsgpack, name) is not MsgpackError
]


def test_all_error_kinds_are_distinct() -> None:
    kinds = [cls.kind for cls in ERROR_CLASSES]
    assert len(ERROR_CLASSES) == 9
    assert len(set(kinds)) == len(kinds)


@pytest.mark.parametrize("cls", ERROR_CLASSES, ids=lambda cls: cls.__name__)
def test_error_has_label(cls) -> None:
    assert cls.label
    assert cls.label != MsgpackError.label


def test_error_message_and_repr() -> None:
    err = picomsgpack.IntegerOverflow(2**64)
    assert str(err) == err.message
    assert "integer_overflow" in repr(err)
    assert isinstance(err, Exception)

import pytest

from immutable_queue import ImmutableQueue, InvalidArgument


def test_invalid_argument_is_value_error():
    with pytest.raises(ValueError):
        ImmutableQueue().enqueue(None)


def test_invalid_argument_carries_code_and_message():
    with pytest.raises(InvalidArgument) as excinfo:
        ImmutableQueue().enqueue(None)

    assert excinfo.value.code == "invalid_argument"
    assert excinfo.value.message == "item must not be None or NO_VALUE"

import pytest

from eventiter.exceptions import InvalidArgTypeError
from eventiter.utils.validation import validate_channel, validate_error


def test_validate_error_accepts_exceptions():
    err = KeyboardInterrupt()
    assert validate_error(err) is err


@pytest.mark.parametrize(
    "value, received",
    [
        (None, "Received None"),
        ("boom", "Received type str ('boom')"),
        (RuntimeError, "Received an instance of type"),
    ],
)
def test_validate_error_rejects(value, received):
    with pytest.raises(InvalidArgTypeError) as excinfo:
        validate_error(value)
    assert excinfo.value.name == "error"
    assert excinfo.value.received is value
    assert str(excinfo.value).endswith(received)


def test_validate_channel():
    assert validate_channel("foo") == "foo"
    assert validate_channel(("ns", 1)) == ("ns", 1)
    with pytest.raises(InvalidArgTypeError):
        validate_channel(None)
    with pytest.raises(InvalidArgTypeError) as excinfo:
        validate_channel(["not", "hashable"], name="error_channel")
    assert excinfo.value.name == "error_channel"

import pytest

from inputsource.errors.errors import (
    InputSourceError,
    KeyNotFoundError,
    RecordShapeError,
    ValueConversionError,
)


@pytest.mark.parametrize(
    "exc,builtin",
    [
        (RecordShapeError([1]), TypeError),
        (KeyNotFoundError("a-b"), KeyError),
        (ValueConversionError("a-b", "x", "int", default=0), ValueError),
    ],
)
def test_hierarchy(exc, builtin):
    assert isinstance(exc, InputSourceError)
    assert isinstance(exc, builtin)


def test_shape_error_details():
    err = RecordShapeError({"a": 1})
    assert err.value == {"a": 1}
    assert err.details == {"type": "dict"}
    assert str(err) == "inputsource: structure is not a record [details={'type': 'dict'}]"


def test_key_not_found_message_is_not_quoted():
    # KeyError normally repr()s its argument
    assert str(KeyNotFoundError("db-host")) == "could not find key: db-host"


def test_conversion_error_fields():
    err = ValueConversionError("server-port", [1, 2], "int", default=0)
    assert err.key == "server-port"
    assert err.value == [1, 2]
    assert err.expected == "int"
    assert err.actual == "list"
    assert err.default == 0
    assert str(err) == "could not convert list{[1, 2]} to int for server-port"

import pytest

from src.api.error import ClientError, ServerError, code_of, to_http_error
from src.app.error_codes import ErrorCode
from src.libs.result import Error, Return


@pytest.mark.parametrize(
    "code,status_code",
    [
        (ErrorCode.INVALID_INPUT, 400),
        (ErrorCode.UNAUTHORIZED, 401),
        (ErrorCode.FORBIDDEN, 403),
        (ErrorCode.NOT_FOUND, 404),
        (ErrorCode.CONFLICT, 409),
        (ErrorCode.CAPACITY_EXHAUSTED, 409),
    ],
)
def test_client_errors(code, status_code):
    exc = to_http_error(Error(code, "boom"))

    assert isinstance(exc, ClientError)
    assert exc.status_code == status_code


def test_internal_error_is_server_error():
    exc = to_http_error(Error(ErrorCode.INTERNAL_ERROR, "boom"))

    assert isinstance(exc, ServerError)


def test_code_renders_plain_value():
    assert code_of(Error(ErrorCode.CONFLICT, "x")) == "CONFLICT"
    assert code_of(Error("CUSTOM", "x")) == "CUSTOM"


def test_result_accessors():
    ok = Return.ok(5)
    err = Return.err(Error(ErrorCode.NOT_FOUND, "missing"))

    assert ok.is_ok() and ok.value == 5
    assert err.is_err() and err.error.code == ErrorCode.NOT_FOUND
    with pytest.raises(ValueError):
        ok.error
    with pytest.raises(ValueError):
        err.value

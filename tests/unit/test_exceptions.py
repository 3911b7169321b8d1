"""Tests for the exception hierarchy."""

import pytest

from resultant_acl.core.exceptions import (
    ACLLoadError,
    AuthFailureError,
    FetchFailureError,
    MalformedResponseError,
    PermissionDeniedError,
    PermissionsError,
    create_error_response,
    get_http_status_code,
)


@pytest.mark.parametrize("exc,status", [
    (AuthFailureError(), 403),
    (PermissionDeniedError("sys/policies"), 403),
    (MalformedResponseError(), 502),
    (FetchFailureError(), 503),
    (ACLLoadError("unclassified"), 500),
    (ValueError("other"), 500),
])
def test_http_status_codes(exc, status):
    assert get_http_status_code(exc) == status


def test_load_errors_share_base():
    for exc_type in (AuthFailureError, FetchFailureError, MalformedResponseError):
        assert issubclass(exc_type, ACLLoadError)
        assert issubclass(exc_type, PermissionsError)
    assert not issubclass(PermissionDeniedError, ACLLoadError)


def test_error_code_defaults_to_class_name():
    assert PermissionsError("boom").error_code == "PermissionsError"


def test_error_response_envelope():
    response = create_error_response(PermissionDeniedError("sys/mounts"))

    assert response == {
        "error": {
            "code": "PERMISSION_DENIED",
            "message": "Permission denied: sys/mounts",
            "details": {"path": "sys/mounts"},
            "type": "PermissionDeniedError",
        }
    }


def test_fetch_failure_records_source():
    exc = FetchFailureError("timeout", source="StaticACLSource()")

    assert exc.details == {"source": "StaticACLSource()"}
    assert str(exc) == "timeout"

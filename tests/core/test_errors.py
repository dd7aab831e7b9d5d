"""Error Hierarchy - status codes and response envelopes."""

from devconnect.core.errors import (
    DatabaseError,
    ErrorCategory,
    FieldError,
    InputValidationError,
    InvalidTokenError,
    MissingTokenError,
    ProfileNotFoundError,
    UserAlreadyExistsError,
)


def test_validation_error_includes_details():
    exc = InputValidationError([FieldError("status", "Status is required")])
    body = exc.to_response()["error"]
    assert exc.http_status == 400
    assert body["code"] == "VALIDATION_ERROR"
    assert body["details"] == [{"field": "status", "message": "Status is required"}]


def test_not_found_and_conflict_are_400():
    assert ProfileNotFoundError().http_status == 400
    assert ProfileNotFoundError().message == "Profile not found"
    assert UserAlreadyExistsError().http_status == 400
    assert UserAlreadyExistsError().category == ErrorCategory.CONFLICT


def test_auth_errors_are_401():
    assert MissingTokenError().http_status == 401
    assert InvalidTokenError().http_status == 401
    assert InvalidTokenError().to_response()["error"]["message"] == "Token is not valid"


def test_database_error_hides_detail():
    exc = DatabaseError("duplicate key value violates unique constraint", "commit")
    body = exc.to_response()["error"]
    assert exc.http_status == 500
    assert body["message"] == "Server error"
    assert "duplicate" not in str(body)
    assert exc.detail.startswith("duplicate")

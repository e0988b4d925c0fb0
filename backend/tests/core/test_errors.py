"""Error Hierarchy — status codes and response bodies per error type."""

from movies_api.core.domain_types import MovieOperation, StoreErrorCode
from movies_api.core.errors import (
    ErrorCategory, ErrorSeverity, FieldError, MovieNotFoundError,
    MovieValidationError, MoviesApiError, NoUpdatableFieldsError, StoreError,
)


def test_not_found_is_404_with_message_body():
    err = MovieNotFoundError(5)
    assert err.http_status == 404
    assert err.category == ErrorCategory.RESOURCE_NOT_FOUND
    assert err.to_response() == {"message": "Movie not found"}


def test_no_fields_is_400():
    err = NoUpdatableFieldsError()
    assert err.http_status == 400
    assert err.to_response() == {"message": "No valid fields to update."}


def test_validation_error_body_is_error_list():
    err = MovieValidationError([FieldError(msg="Title is required", path="title")])
    assert err.http_status == 400
    assert err.to_response() == {"error": [{
        "msg": "Title is required", "path": "title", "value": None,
        "type": "field", "location": "body",
    }]}


def test_store_error_carries_code_and_driver_message():
    err = StoreError(StoreErrorCode.DELETE_FAILED, "lock wait timeout", MovieOperation.DELETE)
    assert err.http_status == 500
    assert err.severity == ErrorSeverity.CRITICAL
    assert err.to_response() == {
        "code": 1006,
        "message": "Error deleting movie",
        "error_message": "lock wait timeout",
    }


def test_all_errors_share_base_class():
    assert issubclass(StoreError, MoviesApiError)
    assert issubclass(MovieValidationError, MoviesApiError)

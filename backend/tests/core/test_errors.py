"""Error hierarchy: status codes and response bodies per error type."""

from movie_api.core.errors import (
    DatabaseError, ErrorCategory, ErrorSeverity, MovieApiError, MovieNotFoundError,
)


def test_movie_not_found_has_fixed_body():
    err = MovieNotFoundError(12)
    assert err.http_status == 404
    assert err.to_response() == {"error": "Movie not found"}
    assert err.movie_id == 12
    assert err.context.movie_id == 12
    assert err.category is ErrorCategory.RESOURCE_NOT_FOUND


def test_database_error_hides_driver_message():
    err = DatabaseError("password authentication failed", "execute")
    body = err.to_response()["error"]
    assert err.http_status == 500
    assert err.severity is ErrorSeverity.CRITICAL
    assert body["code"] == "DATABASE_ERROR"
    assert "password" not in body["message"]
    assert "password" in err.message


def test_base_error_response_envelope():
    err = MovieApiError("nope", "SOMETHING", ErrorCategory.INTERNAL)
    body = err.to_response()["error"]
    assert body["code"] == "SOMETHING"
    assert body["message"] == "nope"
    assert body["category"] == "internal"
    assert body["severity"] == "error"
    assert err.http_status == 500

"""Error Hierarchy — status codes and response envelope per error kind."""

from people_api.core.errors import (
    AuthenticationError, AuthUnavailableError, DatabaseError,
    DatabaseTimeoutError, ErrorCategory, ExternalServiceError,
    LoginRequiredError, PeopleApiError, ResourceNotFoundError,
)


def test_not_found_is_404_and_distinct_from_database_error():
    err = ResourceNotFoundError("Person", 9)
    assert err.http_status == 404
    assert err.category == ErrorCategory.RESOURCE_NOT_FOUND
    assert not isinstance(err, DatabaseError)


def test_status_codes_by_kind():
    assert AuthenticationError("bad state").http_status == 401
    assert LoginRequiredError().http_status == 307
    assert ExternalServiceError("GitHub", "down").http_status == 502
    assert AuthUnavailableError("no creds").http_status == 503
    assert DatabaseError("boom", "list").http_status == 500
    assert DatabaseTimeoutError("get", 2).http_status == 504


def test_response_envelope():
    err = DatabaseError("Connection lost", "list")
    assert err.to_response() == {
        "error": "Database list failed: Connection lost",
        "code": "DATABASE_ERROR",
    }


def test_all_errors_share_base():
    for err in (
        ResourceNotFoundError("Person", 1), LoginRequiredError(),
        DatabaseTimeoutError("get", 1.5),
    ):
        assert isinstance(err, PeopleApiError)

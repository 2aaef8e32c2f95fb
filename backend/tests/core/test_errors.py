"""Error Hierarchy - verifies codes, HTTP statuses and the response envelope."""

from dataclasses import fields

from casework.core.errors import (
    CaseworkError, DatabaseError, ErrorCategory, ErrorContext, ErrorSeverity,
    ResourceNotFoundError,
)


def test_resource_not_found_is_404_with_context():
    err = ResourceNotFoundError("Task", "999")
    assert isinstance(err, CaseworkError)
    assert err.http_status == 404
    assert err.category is ErrorCategory.RESOURCE_NOT_FOUND
    assert err.context.entity == "Task"
    assert err.context.entity_id == "999"
    assert err.message == "Task '999' not found"


def test_database_error_is_503_and_critical():
    err = DatabaseError("Connection or operational error", "execute")
    assert err.http_status == 503
    assert err.severity is ErrorSeverity.CRITICAL
    assert err.operation == "execute"


def test_to_response_envelope():
    body = ResourceNotFoundError("Case", "1").to_response()
    error = body["error"]
    assert error["code"] == "RESOURCE_NOT_FOUND"
    assert error["category"] == "resource_not_found"
    assert error["severity"] == "warning"
    assert "timestamp" in error


def test_error_context_carries_only_entity_fields():
    assert [f.name for f in fields(ErrorContext)] == [
        "timestamp", "entity", "entity_id",
    ]
    assert {s.value for s in ErrorSeverity} == {"warning", "error", "critical"}

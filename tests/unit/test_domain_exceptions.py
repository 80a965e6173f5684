"""Tests for domain exceptions: codes, messages, and details."""

from taskdeck.domain.exceptions import (
    AuthenticationException,
    AuthorizationException,
    ConflictException,
    ResourceNotFoundException,
    TaskdeckException,
    ValidationException,
)


def test_validation_exception_carries_field() -> None:
    exc = ValidationException("Title is required", field="title")
    assert exc.error_code == "VALIDATION_ERROR"
    assert exc.details == {"field": "title"}
    assert str(exc) == "Title is required"


def test_not_found_message_hides_id() -> None:
    exc = ResourceNotFoundException("task", "abc123")
    assert exc.message == "Task not found"
    assert exc.details == {"resource_type": "task", "resource_id": "abc123"}


def test_conflict_default_message() -> None:
    exc = ConflictException("email")
    assert exc.message == "Email is already taken"
    assert exc.error_code == "CONFLICT"


def test_authorization_with_resource_and_action() -> None:
    exc = AuthorizationException(resource="task", action="list_all")
    assert exc.message == "Permission denied: list_all on task"
    assert exc.error_code == "PERMISSION_DENIED"


def test_authentication_default_message() -> None:
    assert AuthenticationException().message == "Authentication failed"


def test_to_dict_shape() -> None:
    body = ValidationException("bad", field="limit").to_dict()
    assert body == {
        "success": False,
        "error": "VALIDATION_ERROR",
        "message": "bad",
        "details": {"field": "limit"},
    }


def test_base_error_code_defaults_to_class_name() -> None:
    assert TaskdeckException("boom").error_code == "TaskdeckException"

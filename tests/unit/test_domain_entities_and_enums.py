"""Tests for TaskEntity, UserEntity, lifecycle helpers, and enums."""

from datetime import UTC, datetime, timedelta, timezone

import pytest

from taskdeck.domain.entities import TaskEntity, UserEntity
from taskdeck.domain.entities.task import (
    completed_at_for,
    days_until_deadline,
    is_overdue,
    parse_priority,
    parse_status,
    require_future_deadline,
)
from taskdeck.domain.entities.user import normalize_email
from taskdeck.domain.enums import TaskPriority, TaskStatus, UserRole
from taskdeck.domain.exceptions import ValidationException

NOW = datetime(2026, 3, 1, 12, 0, tzinfo=UTC)


class TestEnums:
    def test_task_status_values(self) -> None:
        assert TaskStatus.values() == ["Pending", "In Progress", "Completed"]

    def test_task_priority_values(self) -> None:
        assert TaskPriority.values() == ["Low", "Medium", "High"]

    def test_user_role_values(self) -> None:
        assert UserRole.values() == ["user", "admin"]


class TestParsing:
    def test_parse_status_accepts_display_value(self) -> None:
        assert parse_status("In Progress") is TaskStatus.IN_PROGRESS

    def test_parse_status_rejects_unknown(self) -> None:
        with pytest.raises(ValidationException) as exc_info:
            parse_status("Done")
        assert exc_info.value.details == {"field": "status"}

    def test_parse_priority_rejects_lowercase(self) -> None:
        with pytest.raises(ValidationException, match="Priority"):
            parse_priority("high")


class TestDeadline:
    def test_future_deadline_accepted(self) -> None:
        deadline = NOW + timedelta(minutes=1)
        assert require_future_deadline(deadline, NOW) == deadline

    def test_now_rejected(self) -> None:
        with pytest.raises(ValidationException, match="Deadline must be in the future"):
            require_future_deadline(NOW, NOW)

    def test_past_rejected(self) -> None:
        with pytest.raises(ValidationException, match="future"):
            require_future_deadline(NOW - timedelta(days=1), NOW)

    def test_naive_treated_as_utc(self) -> None:
        naive = datetime(2026, 3, 2, 12, 0)
        assert require_future_deadline(naive, NOW).tzinfo is UTC

    def test_non_datetime_rejected_with_field(self) -> None:
        with pytest.raises(ValidationException) as exc_info:
            require_future_deadline(None, NOW)  # type: ignore[arg-type]
        assert exc_info.value.details == {"field": "deadline"}

    def test_other_timezone_converted_to_utc(self) -> None:
        eastern = timezone(timedelta(hours=-5))
        deadline = datetime(2026, 3, 1, 9, 0, tzinfo=eastern)
        normalized = require_future_deadline(deadline, NOW)
        assert normalized == datetime(2026, 3, 1, 14, 0, tzinfo=UTC)
        assert normalized.tzinfo is UTC


class TestCompletionRule:
    def test_entering_completed_stamps_now(self) -> None:
        assert completed_at_for(TaskStatus.COMPLETED, None, NOW) == NOW

    def test_staying_completed_keeps_stamp(self) -> None:
        earlier = NOW - timedelta(days=2)
        assert completed_at_for(TaskStatus.COMPLETED, earlier, NOW) == earlier

    def test_leaving_completed_clears(self) -> None:
        assert completed_at_for(TaskStatus.PENDING, NOW, NOW) is None


class TestDerivedFields:
    def test_overdue_requires_past_deadline_and_not_completed(self) -> None:
        past = NOW - timedelta(hours=1)
        assert is_overdue(past, "Pending", NOW) is True
        assert is_overdue(past, "Completed", NOW) is False
        assert is_overdue(NOW + timedelta(hours=1), "Pending", NOW) is False

    def test_days_until_deadline_rounds_up(self) -> None:
        assert days_until_deadline(NOW + timedelta(hours=1), NOW) == 1
        assert days_until_deadline(NOW + timedelta(days=2), NOW) == 2
        assert days_until_deadline(NOW - timedelta(days=1, hours=12), NOW) == -1


class TestTaskEntity:
    def test_create_defaults(self) -> None:
        task = TaskEntity.create(
            title=" Write report ",
            description="Quarterly numbers",
            deadline=NOW + timedelta(days=3),
            now=NOW,
        )
        assert task.title == "Write report"
        assert task.status is TaskStatus.PENDING
        assert task.priority is TaskPriority.MEDIUM
        assert task.tags == []
        assert task.completed_at is None

    def test_create_completed_stamps_completed_at(self) -> None:
        task = TaskEntity.create(
            title="Done already",
            description="x",
            deadline=NOW + timedelta(days=1),
            now=NOW,
            status="Completed",
        )
        assert task.completed_at == NOW

    def test_create_with_past_deadline_fails(self) -> None:
        with pytest.raises(ValidationException, match="future"):
            TaskEntity.create(
                title="Late",
                description="x",
                deadline=NOW - timedelta(seconds=1),
                now=NOW,
            )

    def test_transition_round_trip_clears_completed_at(self) -> None:
        task = TaskEntity.create(
            title="Toggle", description="x", deadline=NOW + timedelta(days=1), now=NOW
        )
        task.transition_to(TaskStatus.COMPLETED, NOW)
        assert task.completed_at == NOW
        task.transition_to(TaskStatus.PENDING, NOW + timedelta(minutes=5))
        assert task.status is TaskStatus.PENDING
        assert task.completed_at is None

    def test_to_fields_uses_enum_values(self) -> None:
        task = TaskEntity.create(
            title="T",
            description="D",
            deadline=NOW + timedelta(days=1),
            now=NOW,
            priority="High",
            tags=["a", "b"],
        )
        fields = task.to_fields()
        assert fields["status"] == "Pending"
        assert fields["priority"] == "High"
        assert fields["tags"] == ["a", "b"]

    def test_invalid_title_reports_field(self) -> None:
        with pytest.raises(ValidationException) as exc_info:
            TaskEntity.create(
                title="", description="D", deadline=NOW + timedelta(days=1), now=NOW
            )
        assert exc_info.value.details["field"] == "title"


class TestUserEntity:
    def test_email_normalized(self) -> None:
        user = UserEntity(name="Bob Builder", email="  Bob@Example.COM ")
        assert user.email == "bob@example.com"
        assert user.role is UserRole.USER
        assert user.can_log_in()

    def test_invalid_email_rejected(self) -> None:
        with pytest.raises(ValidationException, match="valid email"):
            normalize_email("not-an-email")

    def test_invalid_role_rejected(self) -> None:
        with pytest.raises(ValidationException, match="Role"):
            UserEntity(name="Bob Builder", email="b@example.com", role="owner")  # type: ignore[arg-type]

    def test_deactivate(self) -> None:
        user = UserEntity(name="Bob Builder", email="b@example.com", role=UserRole.ADMIN)
        assert user.is_admin()
        user.deactivate()
        assert not user.can_log_in()

"""Tests for domain value objects (TaskTitle, TaskDescription, TaskTags, PersonName)."""

import pytest

from taskdeck.domain.value_objects.core import (
    PersonName,
    TaskDescription,
    TaskTags,
    TaskTitle,
)


class TestTaskTitle:
    """TaskTitle: non-empty after trimming, at most 200 chars."""

    def test_valid_titles(self) -> None:
        assert TaskTitle.of("Buy milk").value == "Buy milk"
        assert TaskTitle.of("  padded  ").value == "padded"
        TaskTitle.of("a" * 200)

    def test_blank_rejected(self) -> None:
        with pytest.raises(ValueError, match="required"):
            TaskTitle.of("   ")

    def test_too_long_rejected(self) -> None:
        with pytest.raises(ValueError, match="200"):
            TaskTitle.of("a" * 201)


class TestTaskDescription:
    """TaskDescription: non-empty, at most 1000 chars."""

    def test_max_length_accepted(self) -> None:
        TaskDescription.of("d" * 1000)

    def test_too_long_rejected(self) -> None:
        with pytest.raises(ValueError, match="1000"):
            TaskDescription.of("d" * 1001)

    def test_empty_rejected(self) -> None:
        with pytest.raises(ValueError, match="required"):
            TaskDescription.of("")


class TestTaskTags:
    """TaskTags: ordered, trimmed, blanks dropped, each at most 50 chars."""

    def test_none_is_empty(self) -> None:
        assert TaskTags.of(None).as_list() == []

    def test_order_preserved_and_blanks_dropped(self) -> None:
        assert TaskTags.of([" work ", "", "home", "  "]).as_list() == ["work", "home"]

    def test_tag_too_long_rejected(self) -> None:
        with pytest.raises(ValueError, match="50"):
            TaskTags.of(["x" * 51])

    def test_string_instead_of_list_rejected(self) -> None:
        with pytest.raises(ValueError, match="list"):
            TaskTags.of("work")  # type: ignore[arg-type]

    def test_non_string_tag_rejected(self) -> None:
        with pytest.raises(ValueError, match="list of strings"):
            TaskTags.of(["ok", 3])  # type: ignore[list-item]


class TestPersonName:
    """PersonName: 2-100 chars after trimming."""

    def test_valid(self) -> None:
        assert PersonName.of("  Al ").value == "Al"

    def test_too_short_rejected(self) -> None:
        with pytest.raises(ValueError, match="at least 2"):
            PersonName.of("A")

    def test_too_long_rejected(self) -> None:
        with pytest.raises(ValueError, match="100"):
            PersonName.of("n" * 101)

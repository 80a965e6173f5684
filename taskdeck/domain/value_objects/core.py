"""Domain value objects for the taskdeck application.

Value objects are immutable types that represent domain concepts with
self-validation. They have no identity, only value. Text values are
trimmed by the ``of`` constructors before validation.
"""

from dataclasses import dataclass
from typing import ClassVar


def _validate_text(value: str, max_len: int, field_name: str, min_len: int = 1) -> None:
    """Validate a trimmed text value: non-empty and within length bounds. Raises ValueError."""
    if not isinstance(value, str):
        raise ValueError(f"{field_name} must be a string")
    if len(value) < min_len:
        if min_len == 1:
            raise ValueError(f"{field_name} is required")
        raise ValueError(f"{field_name} must be at least {min_len} characters")
    if len(value) > max_len:
        raise ValueError(f"{field_name} cannot exceed {max_len} characters")


@dataclass(frozen=True)
class TaskTitle:
    """Value object for task title: non-empty, at most 200 characters."""

    MAX_LENGTH: ClassVar[int] = 200

    value: str

    def __post_init__(self) -> None:
        _validate_text(self.value, self.MAX_LENGTH, "Title")

    @classmethod
    def of(cls, raw: str) -> "TaskTitle":
        return cls(raw.strip() if isinstance(raw, str) else raw)


@dataclass(frozen=True)
class TaskDescription:
    """Value object for task description: non-empty, at most 1000 characters."""

    MAX_LENGTH: ClassVar[int] = 1000

    value: str

    def __post_init__(self) -> None:
        _validate_text(self.value, self.MAX_LENGTH, "Description")

    @classmethod
    def of(cls, raw: str) -> "TaskDescription":
        return cls(raw.strip() if isinstance(raw, str) else raw)


@dataclass(frozen=True)
class TaskTags:
    """Value object for the ordered tag list of a task.

    Each tag is trimmed; blank tags are dropped; each remaining tag is at most
    50 characters. Order is preserved.
    """

    TAG_MAX_LENGTH: ClassVar[int] = 50

    values: tuple[str, ...]

    def __post_init__(self) -> None:
        for tag in self.values:
            _validate_text(tag, self.TAG_MAX_LENGTH, "Tag")

    @classmethod
    def of(cls, raw: list[str] | tuple[str, ...] | None) -> "TaskTags":
        if raw is None:
            return cls(())
        if isinstance(raw, str):
            raise ValueError("Tags must be a list of strings")
        cleaned: list[str] = []
        for tag in raw:
            if not isinstance(tag, str):
                raise ValueError("Tags must be a list of strings")
            stripped = tag.strip()
            if stripped:
                cleaned.append(stripped)
        return cls(tuple(cleaned))

    def as_list(self) -> list[str]:
        return list(self.values)


@dataclass(frozen=True)
class PersonName:
    """Value object for a user's display name: 2-100 characters after trimming."""

    MIN_LENGTH: ClassVar[int] = 2
    MAX_LENGTH: ClassVar[int] = 100

    value: str

    def __post_init__(self) -> None:
        _validate_text(self.value, self.MAX_LENGTH, "Name", min_len=self.MIN_LENGTH)

    @classmethod
    def of(cls, raw: str) -> "PersonName":
        return cls(raw.strip() if isinstance(raw, str) else raw)

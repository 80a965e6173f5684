"""Domain value objects (immutable, self-validating)."""

from taskdeck.domain.value_objects.core import (
    PersonName,
    TaskDescription,
    TaskTags,
    TaskTitle,
)

__all__ = [
    "PersonName",
    "TaskDescription",
    "TaskTags",
    "TaskTitle",
]

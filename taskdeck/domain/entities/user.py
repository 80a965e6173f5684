"""User (profile) domain entity.

Represents the business concept of an account holder, independent of persistence.
"""

from dataclasses import dataclass

from taskdeck.domain.enums import UserRole
from taskdeck.domain.exceptions import ValidationException
from taskdeck.domain.value_objects.core import PersonName


def normalize_email(raw: str) -> str:
    """Return the trimmed, lowercased email. Raises ValidationException if blank."""
    email = raw.strip().lower() if isinstance(raw, str) else ""
    if not email or "@" not in email:
        raise ValidationException("Please provide a valid email", field="email")
    return email


def validate_name(raw: str) -> str:
    try:
        return PersonName.of(raw).value
    except ValueError as e:
        raise ValidationException(str(e), field="name") from e


@dataclass
class UserEntity:
    """Domain entity for a user profile (SRP: business logic separate from persistence).

    Users are deactivated, never hard-deleted. Validation runs on construction.
    """

    name: str
    email: str
    role: UserRole = UserRole.USER
    is_active: bool = True

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Validate and normalize profile fields. Raises ValidationException if invalid."""
        self.name = validate_name(self.name)
        self.email = normalize_email(self.email)
        try:
            self.role = UserRole(self.role)
        except ValueError:
            raise ValidationException(
                "Role must be user or admin", field="role"
            ) from None

    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    def can_log_in(self) -> bool:
        """Inactive users cannot authenticate."""
        return self.is_active

    def deactivate(self) -> None:
        """Mark the profile inactive. Idempotent."""
        self.is_active = False

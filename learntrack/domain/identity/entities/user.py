"""User entity: the owner every learning item is scoped to."""

from dataclasses import dataclass
from datetime import UTC, datetime

from learntrack.domain.common.entity import Entity
from learntrack.domain.common.exceptions import ValidationError
from learntrack.domain.common.value_objects import Email, UserId

# Domain constraints
MIN_NAME_LENGTH = 2
MAX_NAME_LENGTH = 100


def _validate_name(name: str) -> None:
    if not name or not name.strip():
        raise ValidationError("User name cannot be empty", field="name", value=name)
    if len(name.strip()) < MIN_NAME_LENGTH:
        raise ValidationError(
            f"User name must have at least {MIN_NAME_LENGTH} characters", field="name", value=name
        )
    if len(name) > MAX_NAME_LENGTH:
        raise ValidationError(
            f"User name cannot exceed {MAX_NAME_LENGTH} characters", field="name", value=name
        )


def _validate_password_hash(hashed_password: str) -> None:
    if not hashed_password:
        raise ValidationError("Password hash is required", field="hashed_password")


@dataclass(eq=False)
class User(Entity[UserId]):
    """
    User entity representing an authenticated user in the system.

    Business Rules:
    - Email is unique (enforced at repository level) and valid
    - Name is 2-100 characters
    - A password hash is always present; hashing happens outside the domain
    """

    id: UserId
    name: str
    email: Email
    hashed_password: str
    created_at: datetime
    updated_at: datetime

    def __post_init__(self) -> None:
        """Validate invariants."""
        _validate_name(self.name)
        _validate_password_hash(self.hashed_password)

    @classmethod
    def create(cls, name: str, email: Email, hashed_password: str) -> "User":
        """
        Create a new user.

        Raises:
            ValidationError: If name or password hash is invalid
        """
        _validate_name(name)
        now = datetime.now(UTC)
        return cls(
            id=UserId.generate(),
            name=name.strip(),
            email=email,
            hashed_password=hashed_password,
            created_at=now,
            updated_at=now,
        )

    @classmethod
    def create_with_id(
        cls,
        id: UserId,
        name: str,
        email: Email,
        hashed_password: str,
        created_at: datetime,
        updated_at: datetime,
    ) -> "User":
        """Reconstitute a user from persistence."""
        return cls(
            id=id,
            name=name,
            email=email,
            hashed_password=hashed_password,
            created_at=created_at,
            updated_at=updated_at,
        )

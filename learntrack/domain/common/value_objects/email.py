"""
Email value object.

Normalizes addresses so that comparisons and uniqueness checks
are case-insensitive.
"""

import re
from dataclasses import dataclass
from typing import Self

from ..exceptions import ValidationError
from ..value_object import ValueObject

_EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


@dataclass(frozen=True)
class Email(ValueObject):
    """A trimmed, lower-cased, syntactically valid email address."""

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValidationError("Email cannot be empty", field="email", value=self.value)
        if self.value != self.value.strip().lower():
            raise ValidationError(
                "Email must be normalized; use Email.create()", field="email", value=self.value
            )
        if not _EMAIL_PATTERN.match(self.value):
            raise ValidationError(
                f"Invalid email format: {self.value}", field="email", value=self.value
            )

    @classmethod
    def create(cls, raw: str) -> Self:
        """Normalize and validate a raw address."""
        normalized = raw.strip().lower()
        if not normalized:
            raise ValidationError("Email cannot be empty", field="email", value=raw)
        if not _EMAIL_PATTERN.match(normalized):
            raise ValidationError(f"Invalid email format: {raw}", field="email", value=raw)
        return cls(normalized)

    @property
    def domain(self) -> str:
        return self.value.split("@", 1)[1]

    @property
    def local_part(self) -> str:
        return self.value.split("@", 1)[0]

    def __str__(self) -> str:
        return self.value

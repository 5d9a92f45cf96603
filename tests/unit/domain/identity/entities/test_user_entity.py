"""Tests for the User entity."""

import pytest

from learntrack.domain.common.exceptions import ValidationError
from learntrack.domain.common.value_objects import Email
from learntrack.domain.identity.entities.user import User


def test_create() -> None:
    user = User.create("  Ana Silva ", Email.create("ana@example.com"), "hash")
    assert user.name == "Ana Silva"
    assert not user.id.is_persisted


@pytest.mark.parametrize("name", ["", "A", "x" * 101])
def test_invalid_name(name: str) -> None:
    with pytest.raises(ValidationError):
        User.create(name, Email.create("ana@example.com"), "hash")


def test_password_hash_required() -> None:
    with pytest.raises(ValidationError, match="Password hash is required"):
        User.create("Ana", Email.create("ana@example.com"), "")

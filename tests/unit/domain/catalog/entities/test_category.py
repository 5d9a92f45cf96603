"""Tests for the Category entity."""

import pytest

from learntrack.domain.catalog.entities import Category
from learntrack.domain.common.exceptions import ValidationError


@pytest.mark.parametrize("color", ["#fff", "#3B82F6", "#3b82f6cc"])
def test_valid_colors(color: str) -> None:
    assert Category.create("Backend", color).color == color


@pytest.mark.parametrize("color", ["", "3B82F6", "#12345", "#GGGGGG", "blue"])
def test_invalid_colors(color: str) -> None:
    with pytest.raises(ValidationError, match="Invalid hex color"):
        Category.create("Backend", color)


def test_name_rules() -> None:
    assert Category.create("  Cloud  ", "#000").name == "Cloud"
    with pytest.raises(ValidationError):
        Category.create("", "#000")
    with pytest.raises(ValidationError):
        Category.create("x" * 51, "#000")


def test_rename_and_recolor() -> None:
    category = Category.create("Cloud", "#000")
    category.rename("DevOps")
    category.recolor("#10B981")
    assert category.name == "DevOps"
    assert category.color == "#10B981"
    with pytest.raises(ValidationError):
        category.recolor("green")

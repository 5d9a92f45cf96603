"""Tests for the Progress value object and calculator."""

import pytest

from learntrack.domain.common.exceptions import InvariantViolationError, ValidationError
from learntrack.domain.learning.value_objects import Progress


class TestFromModules:
    def test_no_modules_is_zero(self) -> None:
        assert Progress.from_modules(0, 0) == Progress.zero()

    def test_all_completed_is_complete(self) -> None:
        progress = Progress.from_modules(4, 4)
        assert progress.value == 100.0
        assert progress.is_complete()

    def test_three_of_four(self) -> None:
        assert Progress.from_modules(3, 4).value == 75.0

    def test_completed_above_total_is_invariant_violation(self) -> None:
        with pytest.raises(InvariantViolationError, match="cannot exceed total"):
            Progress.from_modules(5, 4)

    def test_rounds_to_two_decimals(self) -> None:
        assert Progress.from_modules(1, 3).value == 33.33
        assert Progress.from_modules(2, 3).value == 66.67

    def test_none_completed(self) -> None:
        progress = Progress.from_modules(0, 5)
        assert progress.is_zero()
        assert not progress.is_in_progress()


class TestProgressBounds:
    @pytest.mark.parametrize("value", [-0.01, 100.01, 250.0])
    def test_out_of_range_rejected(self, value: float) -> None:
        with pytest.raises(ValidationError):
            Progress(value)

    def test_bounds_accepted(self) -> None:
        assert Progress(0).is_zero()
        assert Progress(100).is_complete()

    def test_in_progress(self) -> None:
        assert Progress(40).is_in_progress()

    def test_as_percentage(self) -> None:
        assert Progress(75).as_percentage() == "75%"

"""Tests for the LearningItem aggregate."""

from datetime import UTC, date, datetime, timedelta

import pytest

from learntrack.domain.common.exceptions import (
    InvalidTransitionError,
    InvariantViolationError,
    ValidationError,
)
from learntrack.domain.common.value_objects import (
    CategoryId,
    LearningItemId,
    ModuleId,
    TagId,
    UserId,
)
from learntrack.domain.learning.entities import LearningItem, Module
from learntrack.domain.learning.exceptions import CompletedItemModulesError
from learntrack.domain.learning.value_objects import ModuleStatusVO, Progress, StatusVO


def _make_item(status: StatusVO | None = None, due_date: date | None = None) -> LearningItem:
    now = datetime.now(UTC)
    return LearningItem.create_with_id(
        id=LearningItemId(1),
        user_id=UserId(1),
        category_id=CategoryId(1),
        title="Designing Data-Intensive Applications",
        status=status or StatusVO.backlog(),
        progress=Progress.zero(),
        created_at=now,
        updated_at=now,
        due_date=due_date,
    )


def test_create_starts_in_backlog_with_zero_progress() -> None:
    item = LearningItem.create(
        user_id=UserId(1),
        category_id=CategoryId(2),
        title="  Kubernetes in Action  ",
        tag_ids=[TagId(3), TagId(3), TagId(4)],
    )

    assert item.id == LearningItemId(0)
    assert item.status.is_backlog()
    assert item.progress.is_zero()
    assert item.title == "Kubernetes in Action"
    assert item.tag_ids == [TagId(3), TagId(4)]


@pytest.mark.parametrize("title", ["", "   ", "x" * 201])
def test_create_rejects_invalid_title(title: str) -> None:
    with pytest.raises(ValidationError):
        LearningItem.create(user_id=UserId(1), category_id=CategoryId(1), title=title)


def test_create_rejects_past_due_date() -> None:
    with pytest.raises(ValidationError, match="Due date cannot be in the past"):
        LearningItem.create(
            user_id=UserId(1),
            category_id=CategoryId(1),
            title="Rust Book",
            due_date=date.today() - timedelta(days=3),
        )


def test_reconstitution_accepts_past_due_date() -> None:
    item = _make_item(due_date=date(2020, 1, 1))
    assert item.is_overdue()


def test_entities_compare_by_id() -> None:
    first = _make_item()
    second = _make_item(status=StatusVO.pausado())
    assert first == second


class TestStatus:
    def test_backlog_to_em_andamento(self) -> None:
        item = _make_item()
        item.update_status(StatusVO.em_andamento())
        assert item.status.is_em_andamento()

    @pytest.mark.parametrize(
        "target",
        [StatusVO.backlog(), StatusVO.em_andamento(), StatusVO.pausado(), StatusVO.concluido()],
    )
    def test_concluido_rejects_every_transition(self, target: StatusVO) -> None:
        item = _make_item(status=StatusVO.concluido())
        with pytest.raises(InvalidTransitionError) as exc_info:
            item.update_status(target)
        assert exc_info.value.message == (
            f"Cannot transition LearningItem from Concluido to {target}"
        )
        assert item.status.is_concluido()

    def test_pausado_to_backlog_rejected(self) -> None:
        item = _make_item(status=StatusVO.pausado())
        with pytest.raises(InvalidTransitionError):
            item.update_status(StatusVO.backlog())


class TestProgress:
    def test_refresh_from_counts(self) -> None:
        item = _make_item()
        assert item.refresh_progress(1, 4).value == 25.0
        assert item.progress.value == 25.0

    def test_completed_item_without_modules_is_complete(self) -> None:
        item = _make_item(status=StatusVO.concluido())
        assert item.refresh_progress(0, 0).is_complete()

    def test_active_item_without_modules_is_zero(self) -> None:
        item = _make_item(status=StatusVO.em_andamento())
        assert item.refresh_progress(0, 0).is_zero()

    def test_completed_item_refuses_new_modules(self) -> None:
        item = _make_item(status=StatusVO.em_andamento())
        item.update_status(StatusVO.concluido())
        assert item.refresh_progress(0, 0).is_complete()

        with pytest.raises(CompletedItemModulesError):
            item.ensure_accepts_modules()

    def test_active_item_accepts_modules(self) -> None:
        _make_item(status=StatusVO.pausado()).ensure_accepts_modules()

    def test_inconsistent_counts(self) -> None:
        with pytest.raises(InvariantViolationError):
            _make_item().refresh_progress(3, 2)

    def test_refresh_from_modules(self) -> None:
        item = _make_item()
        now = datetime.now(UTC)
        modules = [
            Module.create_with_id(
                id=ModuleId(index + 1),
                learning_item_id=item.id,
                title=f"Chapter {index + 1}",
                status=status,
                order=index,
                created_at=now,
                updated_at=now,
            )
            for index, status in enumerate(
                [ModuleStatusVO.concluido(), ModuleStatusVO.pendente()]
            )
        ]
        assert item.refresh_progress_from(modules).value == 50.0

    def test_refresh_from_foreign_module_rejected(self) -> None:
        item = _make_item()
        foreign = Module.create(learning_item_id=LearningItemId(99), title="Intro", order=0)
        with pytest.raises(ValidationError):
            item.refresh_progress_from([foreign])


class TestDueDate:
    def test_due_soon_window(self) -> None:
        today = date(2026, 3, 1)
        item = _make_item(due_date=date(2026, 3, 5))
        assert item.is_due_soon(days=7, today=today)
        assert not item.is_due_soon(days=3, today=today)
        assert not item.is_overdue(today=today)

    def test_completed_item_is_never_overdue(self) -> None:
        item = _make_item(status=StatusVO.concluido(), due_date=date(2020, 1, 1))
        assert not item.is_overdue()
        assert not item.is_due_soon()

    def test_completed_item_accepts_past_due_date(self) -> None:
        item = _make_item(status=StatusVO.concluido())
        item.update_due_date(date(2020, 1, 1))
        assert item.due_date == date(2020, 1, 1)

    def test_clear_due_date(self) -> None:
        item = _make_item(due_date=date.today() + timedelta(days=10))
        item.update_due_date(None)
        assert item.due_date is None

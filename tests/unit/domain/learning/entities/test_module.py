"""Tests for the Module entity."""

from datetime import UTC, datetime

import pytest

from learntrack.domain.common.exceptions import InvalidTransitionError, ValidationError
from learntrack.domain.common.value_objects import LearningItemId, ModuleId
from learntrack.domain.learning.entities import Module
from learntrack.domain.learning.value_objects import ModuleStatusVO


def _make_module(status: ModuleStatusVO) -> Module:
    now = datetime.now(UTC)
    return Module.create_with_id(
        id=ModuleId(7),
        learning_item_id=LearningItemId(1),
        title="Chapter 1",
        status=status,
        order=0,
        created_at=now,
        updated_at=now,
    )


def test_create_defaults_to_pendente() -> None:
    module = Module.create(learning_item_id=LearningItemId(1), title=" Intro ", order=2)
    assert module.status == ModuleStatusVO.pendente()
    assert module.title == "Intro"
    assert module.order == 2
    assert module.belongs_to(LearningItemId(1))


def test_negative_order_rejected() -> None:
    with pytest.raises(ValidationError):
        Module.create(learning_item_id=LearningItemId(1), title="Intro", order=-1)


def test_move_to_negative_rejected() -> None:
    module = _make_module(ModuleStatusVO.pendente())
    with pytest.raises(ValidationError):
        module.move_to(-3)
    assert module.order == 0


def test_pendente_straight_to_concluido() -> None:
    module = _make_module(ModuleStatusVO.pendente())
    module.mark_as_concluido()
    assert module.is_concluido()


def test_em_andamento_back_to_pendente_rejected() -> None:
    module = _make_module(ModuleStatusVO.em_andamento())
    with pytest.raises(InvalidTransitionError, match="Cannot transition Module"):
        module.mark_as_pendente()


@pytest.mark.parametrize(
    "target",
    [ModuleStatusVO.pendente(), ModuleStatusVO.em_andamento(), ModuleStatusVO.concluido()],
)
def test_concluido_rejects_every_update(target: ModuleStatusVO) -> None:
    module = _make_module(ModuleStatusVO.concluido())
    with pytest.raises(InvalidTransitionError):
        module.update_status(target)
    assert module.is_concluido()


def test_rename() -> None:
    module = _make_module(ModuleStatusVO.pendente())
    module.rename("Chapter 1: Foundations")
    assert module.title == "Chapter 1: Foundations"
    with pytest.raises(ValidationError):
        module.rename("")

"""Tests for ModuleRepository against SQLite."""

import pytest
from sqlalchemy.orm import Session

from learntrack import models
from learntrack.application.learning.protocols import ModuleOrder
from learntrack.domain.common.value_objects import LearningItemId, ModuleId
from learntrack.domain.learning.entities import Module
from learntrack.domain.learning.exceptions import LearningModuleNotFoundError
from learntrack.domain.learning.value_objects import ModuleStatusVO
from learntrack.infrastructure.learning.repositories.module_repository import ModuleRepository
from tests.conftest import create_test_module


def test_create_many_keeps_input_order(db_session: Session, test_item: models.LearningItem) -> None:
    repository = ModuleRepository(db_session)
    item_id = LearningItemId(test_item.id)
    created = repository.create_many(
        [Module.create(item_id, title, order) for order, title in enumerate(["A", "B", "C"])]
    )

    assert [m.title for m in created] == ["A", "B", "C"]
    assert all(m.id.is_persisted for m in created)
    assert [m.order for m in repository.find_by_learning_item_id(item_id)] == [0, 1, 2]


def test_ordering_options(db_session: Session, test_item: models.LearningItem) -> None:
    create_test_module(db_session, test_item, title="Beta", order=1)
    create_test_module(db_session, test_item, title="Alpha", order=2)
    create_test_module(db_session, test_item, title="Gamma", order=0)
    repository = ModuleRepository(db_session)
    item_id = LearningItemId(test_item.id)

    assert [m.title for m in repository.find_by_learning_item_id(item_id)] == [
        "Gamma",
        "Beta",
        "Alpha",
    ]
    assert [m.title for m in repository.find_by_learning_item_id(item_id, "title", "desc")] == [
        "Gamma",
        "Beta",
        "Alpha",
    ]
    assert [m.title for m in repository.find_by_learning_item_id(item_id, "title")] == [
        "Alpha",
        "Beta",
        "Gamma",
    ]


def test_counts_and_status_filter(db_session: Session, test_item: models.LearningItem) -> None:
    create_test_module(db_session, test_item, title="A", order=0, status="Concluido")
    create_test_module(db_session, test_item, title="B", order=1, status="Em_Andamento")
    create_test_module(db_session, test_item, title="C", order=2)
    repository = ModuleRepository(db_session)
    item_id = LearningItemId(test_item.id)

    assert repository.count(item_id) == 3
    assert repository.count_completed(item_id) == 1
    in_progress = repository.find_by_status(item_id, ModuleStatusVO.em_andamento())
    assert [m.title for m in in_progress] == ["B"]


def test_update_persists_status(db_session: Session, test_item: models.LearningItem) -> None:
    orm_module = create_test_module(db_session, test_item)
    repository = ModuleRepository(db_session)
    module = repository.find_by_id(ModuleId(orm_module.id))
    assert module is not None

    module.mark_as_concluido()
    repository.update(module)

    reloaded = repository.find_by_id(ModuleId(orm_module.id))
    assert reloaded is not None
    assert reloaded.is_concluido()


def test_reorder_applies_all_positions(db_session: Session, test_item: models.LearningItem) -> None:
    first = create_test_module(db_session, test_item, title="First", order=0)
    second = create_test_module(db_session, test_item, title="Second", order=1)
    repository = ModuleRepository(db_session)
    item_id = LearningItemId(test_item.id)

    repository.reorder(
        item_id,
        [ModuleOrder(ModuleId(first.id), 1), ModuleOrder(ModuleId(second.id), 0)],
    )

    assert [m.title for m in repository.find_by_learning_item_id(item_id)] == ["Second", "First"]


def test_reorder_with_foreign_module_changes_nothing(
    db_session: Session, test_item: models.LearningItem
) -> None:
    first = create_test_module(db_session, test_item, title="First", order=0)
    repository = ModuleRepository(db_session)

    with pytest.raises(LearningModuleNotFoundError):
        repository.reorder(
            LearningItemId(test_item.id),
            [ModuleOrder(ModuleId(first.id), 5), ModuleOrder(ModuleId(9999), 0)],
        )

    reloaded = repository.find_by_id(ModuleId(first.id))
    assert reloaded is not None
    assert reloaded.order == 0


def test_delete(db_session: Session, test_item: models.LearningItem) -> None:
    orm_module = create_test_module(db_session, test_item)
    repository = ModuleRepository(db_session)

    assert repository.delete(ModuleId(orm_module.id))
    assert not repository.delete(ModuleId(orm_module.id))
    assert repository.count(LearningItemId(test_item.id)) == 0

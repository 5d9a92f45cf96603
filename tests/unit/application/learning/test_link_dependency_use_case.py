"""Tests for LinkDependencyUseCase."""

import pytest

from learntrack.application.learning.services import DependencyGraphService
from learntrack.application.learning.use_cases.dependencies import LinkDependencyUseCase
from learntrack.domain.common.value_objects import LearningItemId, UserId
from learntrack.domain.learning.exceptions import (
    CircularDependencyError,
    DuplicateDependencyError,
    LearningItemNotFoundError,
    SelfDependencyError,
)
from tests.unit.application.learning.fakes import (
    InMemoryDependencyRepository,
    InMemoryLearningItemRepository,
)


@pytest.fixture
def dependencies() -> InMemoryDependencyRepository:
    return InMemoryDependencyRepository()


@pytest.fixture
def items() -> InMemoryLearningItemRepository:
    repository = InMemoryLearningItemRepository()
    for item_id in (1, 2, 3, 4):
        repository.add(item_id, user_id=1)
    repository.add(99, user_id=2)
    return repository


@pytest.fixture
def use_case(
    dependencies: InMemoryDependencyRepository, items: InMemoryLearningItemRepository
) -> LinkDependencyUseCase:
    return LinkDependencyUseCase(dependencies, items, DependencyGraphService(dependencies))


def test_link_creates_edge_under_graph_lock(
    use_case: LinkDependencyUseCase, dependencies: InMemoryDependencyRepository
) -> None:
    edge = use_case.link(user_id=1, source_item_id=1, target_item_id=2)

    assert edge.id.is_persisted
    assert edge.source_item_id == LearningItemId(1)
    assert edge.target_item_id == LearningItemId(2)
    assert dependencies.lock_calls == [UserId(1)]


def test_self_dependency_rejected(
    use_case: LinkDependencyUseCase, dependencies: InMemoryDependencyRepository
) -> None:
    with pytest.raises(SelfDependencyError):
        use_case.link(user_id=1, source_item_id=3, target_item_id=3)
    assert dependencies.edges == []


def test_duplicate_rejected(use_case: LinkDependencyUseCase) -> None:
    use_case.link(user_id=1, source_item_id=1, target_item_id=2)
    with pytest.raises(DuplicateDependencyError):
        use_case.link(user_id=1, source_item_id=1, target_item_id=2)


def test_cycle_rejected(
    use_case: LinkDependencyUseCase, dependencies: InMemoryDependencyRepository
) -> None:
    use_case.link(user_id=1, source_item_id=1, target_item_id=2)
    use_case.link(user_id=1, source_item_id=2, target_item_id=3)

    with pytest.raises(CircularDependencyError) as exc_info:
        use_case.link(user_id=1, source_item_id=3, target_item_id=1)

    assert exc_info.value.details["source_item_id"] == 3
    assert len(dependencies.edges) == 2


def test_other_users_item_is_not_found(
    use_case: LinkDependencyUseCase, dependencies: InMemoryDependencyRepository
) -> None:
    with pytest.raises(LearningItemNotFoundError):
        use_case.link(user_id=1, source_item_id=1, target_item_id=99)
    with pytest.raises(LearningItemNotFoundError):
        use_case.link(user_id=1, source_item_id=99, target_item_id=1)
    assert dependencies.edges == []


def test_missing_target_is_not_found(use_case: LinkDependencyUseCase) -> None:
    with pytest.raises(LearningItemNotFoundError):
        use_case.link(user_id=1, source_item_id=1, target_item_id=12345)


class TestLinkMany:
    def test_links_each_target_once(
        self, use_case: LinkDependencyUseCase, dependencies: InMemoryDependencyRepository
    ) -> None:
        edges = use_case.link_many(user_id=1, source_item_id=1, target_item_ids=[2, 3, 2, 4])

        assert [e.target_item_id.value for e in edges] == [2, 3, 4]
        assert len(dependencies.edges) == 3

    def test_one_bad_target_stores_nothing(
        self, use_case: LinkDependencyUseCase, dependencies: InMemoryDependencyRepository
    ) -> None:
        use_case.link(user_id=1, source_item_id=3, target_item_id=1)

        with pytest.raises(CircularDependencyError):
            use_case.link_many(user_id=1, source_item_id=1, target_item_ids=[2, 3])

        assert len(dependencies.edges) == 1

    def test_self_in_batch_rejected(
        self, use_case: LinkDependencyUseCase, dependencies: InMemoryDependencyRepository
    ) -> None:
        with pytest.raises(SelfDependencyError):
            use_case.link_many(user_id=1, source_item_id=1, target_item_ids=[2, 1])
        assert dependencies.edges == []

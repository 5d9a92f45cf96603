"""Use case for linking learning items as prerequisites."""

import structlog

from learntrack.application.learning.protocols import (
    DependencyRepositoryProtocol,
    LearningItemRepositoryProtocol,
)
from learntrack.application.learning.services import DependencyGraphService
from learntrack.application.learning.services.ownership import get_owned_item
from learntrack.domain.common.value_objects import LearningItemId, UserId
from learntrack.domain.learning.entities import Dependency
from learntrack.domain.learning.exceptions import (
    CircularDependencyError,
    DuplicateDependencyError,
    SelfDependencyError,
)

logger = structlog.get_logger(__name__)


class LinkDependencyUseCase:
    """
    Use case for creating prerequisite edges.

    Business Rules:
    - Both items exist and belong to the user
    - No self-dependencies
    - No exact duplicates
    - No cycles
    """

    def __init__(
        self,
        dependency_repository: DependencyRepositoryProtocol,
        learning_item_repository: LearningItemRepositoryProtocol,
        dependency_graph_service: DependencyGraphService,
    ) -> None:
        """Initialize use case with repository protocols."""
        self.dependency_repository = dependency_repository
        self.learning_item_repository = learning_item_repository
        self.dependency_graph_service = dependency_graph_service

    def _validate_edge(
        self, source_id: LearningItemId, target_id: LearningItemId, user_id: UserId
    ) -> None:
        if source_id == target_id:
            raise SelfDependencyError(source_id.value)

        get_owned_item(self.learning_item_repository, target_id, user_id)

        if self.dependency_graph_service.exists(source_id, target_id):
            raise DuplicateDependencyError(source_id.value, target_id.value)

        if self.dependency_graph_service.would_create_cycle(source_id, target_id):
            logger.info(
                "cycle_rejected",
                user_id=user_id.value,
                source_item_id=source_id.value,
                target_item_id=target_id.value,
            )
            raise CircularDependencyError(source_id.value, target_id.value)

    def link(self, user_id: int, source_item_id: int, target_item_id: int) -> Dependency:
        """
        Make the source item require the target item.

        Args:
            user_id: ID of the requesting user
            source_item_id: The dependent item
            target_item_id: The prerequisite item

        Returns:
            Created dependency entity

        Raises:
            LearningItemNotFoundError: If either item is missing or not the user's
            SelfDependencyError: If source and target are the same item
            DuplicateDependencyError: If the edge already exists
            CircularDependencyError: If the edge would close a loop
        """
        user_id_vo = UserId(user_id)
        source_id = LearningItemId(source_item_id)
        target_id = LearningItemId(target_item_id)

        get_owned_item(self.learning_item_repository, source_id, user_id_vo)

        # Held until create() commits, so concurrent links cannot both pass the check
        self.dependency_repository.lock_graph(user_id_vo)
        self._validate_edge(source_id, target_id, user_id_vo)

        dependency = self.dependency_repository.create(Dependency.create(source_id, target_id))

        logger.info(
            "dependency_linked",
            dependency_id=dependency.id.value,
            source_item_id=source_item_id,
            target_item_id=target_item_id,
        )
        return dependency

    def link_many(
        self, user_id: int, source_item_id: int, target_item_ids: list[int]
    ) -> list[Dependency]:
        """
        Link one source item to several prerequisites at once.

        Every proposed edge is validated before any is stored, so the batch
        is accepted or rejected as a whole. Edges sharing one source cannot
        close a loop through each other.

        Raises:
            Same as ``link``, for the first offending target
        """
        user_id_vo = UserId(user_id)
        source_id = LearningItemId(source_item_id)
        target_ids = [LearningItemId(t) for t in dict.fromkeys(target_item_ids)]

        get_owned_item(self.learning_item_repository, source_id, user_id_vo)
        self.dependency_repository.lock_graph(user_id_vo)

        for target_id in target_ids:
            self._validate_edge(source_id, target_id, user_id_vo)

        dependencies = self.dependency_repository.create_many(
            [Dependency.create(source_id, target_id) for target_id in target_ids]
        )

        logger.info(
            "dependencies_linked",
            source_item_id=source_item_id,
            count=len(dependencies),
        )
        return dependencies

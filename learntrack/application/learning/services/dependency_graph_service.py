"""
Cycle detection for the prerequisite graph.

Edges are rows, not object references, so the graph is walked by asking the
repository for the outgoing edges of one node at a time.
"""

from collections import deque
from dataclasses import dataclass

import structlog

from learntrack.application.learning.protocols import DependencyRepositoryProtocol
from learntrack.domain.common.value_objects import LearningItemId
from learntrack.domain.learning.exceptions import (
    CIRCULAR_DEPENDENCY_MESSAGE,
    SELF_DEPENDENCY_MESSAGE,
)

logger = structlog.get_logger(__name__)

SAFE_DEPENDENCY_MESSAGE = "This dependency can be created safely"


@dataclass(frozen=True)
class CycleCheck:
    """Outcome of checking a proposed edge, with the message to show a user."""

    would_create_cycle: bool
    is_self_dependency: bool
    message: str


class DependencyGraphService:
    """
    Decides whether a proposed edge source→target keeps the graph acyclic.

    Adding source→target closes a loop exactly when target can already reach
    source through existing edges, so the search starts at target and
    follows outgoing edges only. The traversal needs nothing from the
    repository but ``find_by_source_item_id``.
    """

    def __init__(self, dependency_repository: DependencyRepositoryProtocol) -> None:
        self.dependency_repository = dependency_repository

    def would_create_cycle(
        self, source_item_id: LearningItemId, target_item_id: LearningItemId
    ) -> bool:
        """
        Check whether adding source→target would create a cycle.

        Both items must already be known to exist and belong to the
        requesting user. Nodes are visited in FIFO order with one edge
        query per node, so a graph of V items and E edges costs O(V + E).

        Args:
            source_item_id: The dependent item
            target_item_id: The proposed prerequisite

        Returns:
            True for a self-loop or when target already reaches source
        """
        if source_item_id == target_item_id:
            return True

        visited: set[LearningItemId] = set()
        queue: deque[LearningItemId] = deque([target_item_id])

        while queue:
            current = queue.popleft()
            if current in visited:
                continue
            visited.add(current)

            if current == source_item_id:
                logger.debug(
                    "cycle_found",
                    source_item_id=source_item_id.value,
                    target_item_id=target_item_id.value,
                    visited=len(visited),
                )
                return True

            for edge in self.dependency_repository.find_by_source_item_id(current):
                if edge.target_item_id not in visited:
                    queue.append(edge.target_item_id)

        return False

    def exists(self, source_item_id: LearningItemId, target_item_id: LearningItemId) -> bool:
        """Exact duplicate check, independent of cycle detection."""
        return self.dependency_repository.exists(source_item_id, target_item_id)

    def explain(
        self, source_item_id: LearningItemId, target_item_id: LearningItemId
    ) -> CycleCheck:
        """Run the cycle check and phrase the result for a user."""
        if source_item_id == target_item_id:
            return CycleCheck(
                would_create_cycle=True,
                is_self_dependency=True,
                message=SELF_DEPENDENCY_MESSAGE,
            )
        if self.would_create_cycle(source_item_id, target_item_id):
            return CycleCheck(
                would_create_cycle=True,
                is_self_dependency=False,
                message=CIRCULAR_DEPENDENCY_MESSAGE,
            )
        return CycleCheck(
            would_create_cycle=False,
            is_self_dependency=False,
            message=SAFE_DEPENDENCY_MESSAGE,
        )

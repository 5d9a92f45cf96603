"""
Learning item status and its transition table.

Backlog ──► Em_Andamento ◄──► Pausado
   │             │               │
   └─────────────┴──► Concluido ◄┘   (terminal)
"""

from dataclasses import dataclass
from enum import StrEnum
from typing import Self

from learntrack.domain.common.exceptions import ValidationError
from learntrack.domain.common.value_object import ValueObject


class Status(StrEnum):
    BACKLOG = "Backlog"
    EM_ANDAMENTO = "Em_Andamento"
    PAUSADO = "Pausado"
    CONCLUIDO = "Concluido"


# Backlog accepts every status, itself included.
ITEM_TRANSITIONS: dict[Status, frozenset[Status]] = {
    Status.BACKLOG: frozenset(Status),
    Status.EM_ANDAMENTO: frozenset({Status.PAUSADO, Status.CONCLUIDO}),
    Status.PAUSADO: frozenset({Status.EM_ANDAMENTO, Status.CONCLUIDO}),
    Status.CONCLUIDO: frozenset(),
}


def can_transition(current: Status, proposed: Status) -> bool:
    """Whether the item table allows ``current`` to move to ``proposed``."""
    return proposed in ITEM_TRANSITIONS[current]


@dataclass(frozen=True)
class StatusVO(ValueObject):
    """Immutable learning item status."""

    value: Status

    def __post_init__(self) -> None:
        if not isinstance(self.value, Status):
            raise ValidationError(f"Invalid status: {self.value}", field="status", value=self.value)

    @classmethod
    def create(cls, raw: str) -> Self:
        """Build a status from its wire value, e.g. ``"Em_Andamento"``."""
        try:
            return cls(Status(raw))
        except ValueError as err:
            raise ValidationError(f"Invalid status: {raw}", field="status", value=raw) from err

    @classmethod
    def backlog(cls) -> Self:
        return cls(Status.BACKLOG)

    @classmethod
    def em_andamento(cls) -> Self:
        return cls(Status.EM_ANDAMENTO)

    @classmethod
    def pausado(cls) -> Self:
        return cls(Status.PAUSADO)

    @classmethod
    def concluido(cls) -> Self:
        return cls(Status.CONCLUIDO)

    def is_backlog(self) -> bool:
        return self.value is Status.BACKLOG

    def is_em_andamento(self) -> bool:
        return self.value is Status.EM_ANDAMENTO

    def is_pausado(self) -> bool:
        return self.value is Status.PAUSADO

    def is_concluido(self) -> bool:
        return self.value is Status.CONCLUIDO

    def is_terminal(self) -> bool:
        return not ITEM_TRANSITIONS[self.value]

    def can_transition_to(self, new_status: "StatusVO") -> bool:
        return can_transition(self.value, new_status.value)

    def allowed_transitions(self) -> frozenset[Status]:
        return ITEM_TRANSITIONS[self.value]

    def __str__(self) -> str:
        return self.value.value

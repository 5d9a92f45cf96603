"""Module status and its transition table."""

from dataclasses import dataclass
from enum import StrEnum
from typing import Self

from learntrack.domain.common.exceptions import ValidationError
from learntrack.domain.common.value_object import ValueObject


class ModuleStatus(StrEnum):
    PENDENTE = "Pendente"
    EM_ANDAMENTO = "Em_Andamento"
    CONCLUIDO = "Concluido"


# Pendente accepts every status, itself included. Modules never move backwards.
MODULE_TRANSITIONS: dict[ModuleStatus, frozenset[ModuleStatus]] = {
    ModuleStatus.PENDENTE: frozenset(ModuleStatus),
    ModuleStatus.EM_ANDAMENTO: frozenset({ModuleStatus.CONCLUIDO}),
    ModuleStatus.CONCLUIDO: frozenset(),
}


def can_transition(current: ModuleStatus, proposed: ModuleStatus) -> bool:
    """Whether the module table allows ``current`` to move to ``proposed``."""
    return proposed in MODULE_TRANSITIONS[current]


@dataclass(frozen=True)
class ModuleStatusVO(ValueObject):
    """Immutable module status."""

    value: ModuleStatus

    def __post_init__(self) -> None:
        if not isinstance(self.value, ModuleStatus):
            raise ValidationError(
                f"Invalid module status: {self.value}", field="status", value=self.value
            )

    @classmethod
    def create(cls, raw: str) -> Self:
        try:
            return cls(ModuleStatus(raw))
        except ValueError as err:
            raise ValidationError(
                f"Invalid module status: {raw}", field="status", value=raw
            ) from err

    @classmethod
    def pendente(cls) -> Self:
        return cls(ModuleStatus.PENDENTE)

    @classmethod
    def em_andamento(cls) -> Self:
        return cls(ModuleStatus.EM_ANDAMENTO)

    @classmethod
    def concluido(cls) -> Self:
        return cls(ModuleStatus.CONCLUIDO)

    def is_pendente(self) -> bool:
        return self.value is ModuleStatus.PENDENTE

    def is_em_andamento(self) -> bool:
        return self.value is ModuleStatus.EM_ANDAMENTO

    def is_concluido(self) -> bool:
        return self.value is ModuleStatus.CONCLUIDO

    def is_terminal(self) -> bool:
        return not MODULE_TRANSITIONS[self.value]

    def can_transition_to(self, new_status: "ModuleStatusVO") -> bool:
        return can_transition(self.value, new_status.value)

    def allowed_transitions(self) -> frozenset[ModuleStatus]:
        return MODULE_TRANSITIONS[self.value]

    def __str__(self) -> str:
        return self.value.value

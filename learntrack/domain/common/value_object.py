"""
Value object base.

Statuses, progress, e-mails and ids are values: they never change after
construction and two of them are interchangeable whenever their fields
match. Subclasses are frozen dataclasses that validate in ``__post_init__``.
"""


class ValueObject:
    """Field-wise equality and hashing for frozen dataclass subclasses."""

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return False
        return vars(self) == vars(other)

    def __hash__(self) -> int:
        return hash((type(self).__name__, *vars(self).values()))

    def __repr__(self) -> str:
        fields = ", ".join(f"{name}={value!r}" for name, value in vars(self).items())
        return f"{type(self).__name__}({fields})"

from enum import StrEnum


class StringEnum(StrEnum):
    """
    A StrEnum subclass that behaves like a plain string in all representations.

    Usage:
        class ConditionStatus(StringEnum):
            TRUE = "True"
            FALSE = "False"

        # repr() returns just "True" instead of "<ConditionStatus.TRUE: 'True'>"
    """

    def __repr__(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value

    def __format__(self, format_spec: str) -> str:
        return self.value.__format__(format_spec)

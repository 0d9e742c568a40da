from enum import StrEnum


class ImportanceLevel(StrEnum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def rank(self) -> int:
        """Sort ordinal: high first."""
        return _RANKS[self]


_RANKS = {
    ImportanceLevel.HIGH: 0,
    ImportanceLevel.MEDIUM: 1,
    ImportanceLevel.LOW: 2,
}

from enum import StrEnum


class ChangeDirection(StrEnum):
    ADDED = "added"
    REMOVED = "removed"

    @property
    def marker(self) -> str:
        return "+" if self is ChangeDirection.ADDED else "-"

from typing import Any


class DiffNoteError(Exception):
    """Base exception for diff-note."""

    def __init__(self, message: str = "", *, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.context: dict[str, Any] = context or {}

"""Raw per-file change record as supplied by the change-request host."""

from dataclasses import dataclass

from diff_note.core.domain.diff.value_objects.file_status import FileStatus


@dataclass(frozen=True, kw_only=True)
class FileDiff:
    path: str
    status: FileStatus
    additions: int = 0
    deletions: int = 0
    patch: str | None = None

    @property
    def total_changes(self) -> int:
        return self.additions + self.deletions

from dataclasses import dataclass, field

from diff_note.core.domain.diff.value_objects.change_type import ChangeType
from diff_note.core.domain.diff.value_objects.file_category import FileCategory


@dataclass(frozen=True, kw_only=True)
class CategorySummary:
    category: FileCategory
    files: tuple[str, ...] = field(default_factory=tuple)
    highlights: tuple[str, ...] = field(default_factory=tuple)
    has_breaking_changes: bool = False
    change_types: tuple[ChangeType, ...] = field(default_factory=tuple)

from dataclasses import dataclass, field

from diff_note.core.domain.diff.file_diff import FileDiff
from diff_note.core.domain.diff.meaningful_change import MeaningfulChange
from diff_note.core.domain.diff.value_objects.change_type import ChangeType
from diff_note.core.domain.diff.value_objects.file_category import FileCategory
from diff_note.core.domain.diff.value_objects.importance_level import ImportanceLevel


@dataclass(frozen=True, kw_only=True)
class EnhancedFileDiff(FileDiff):
    """FileDiff enriched with classification, scoring and extracted changes.

    Only ``meaningful_changes`` and ``truncated`` differ between the scored
    record and the one produced by budget allocation.
    """

    category: FileCategory
    change_type: ChangeType
    importance: ImportanceLevel
    is_generated: bool = False
    is_formatting_only: bool = False
    meaningful_changes: tuple[MeaningfulChange, ...] = field(default_factory=tuple)
    truncated: bool = False
    original_change_count: int = 0

from dataclasses import dataclass, field

from diff_note.core.domain.diff.value_objects.file_category import FileCategory


@dataclass(frozen=True, kw_only=True)
class ProcessingStats:
    """Counts derived from the final categorized state of one invocation."""

    total_files: int
    processed_files: int
    skipped_files: int
    truncated_files: int
    estimated_tokens: int
    category_counts: dict[FileCategory, int] = field(default_factory=dict)
    exhausted_categories: tuple[FileCategory, ...] = field(default_factory=tuple)

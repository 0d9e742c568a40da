from collections.abc import Iterable

from diff_note.core.domain.diff.categorized_files import CategorizedFiles
from diff_note.core.domain.diff.enhanced_file_diff import EnhancedFileDiff
from diff_note.core.domain.diff.value_objects.file_category import FileCategory


def group_by_category(files: Iterable[EnhancedFileDiff]) -> CategorizedFiles:
    """Bucket files by category, high importance first (stable within a level)."""
    buckets: dict[FileCategory, list[EnhancedFileDiff]] = {c: [] for c in FileCategory}
    for file in files:
        buckets[file.category].append(file)
    return CategorizedFiles(
        {
            category: tuple(sorted(bucket, key=lambda f: f.importance.rank))
            for category, bucket in buckets.items()
        }
    )

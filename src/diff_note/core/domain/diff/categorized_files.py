from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field

from diff_note.core.domain.diff.enhanced_file_diff import EnhancedFileDiff
from diff_note.core.domain.diff.value_objects.file_category import FileCategory


@dataclass(frozen=True)
class CategorizedFiles(Mapping[FileCategory, tuple[EnhancedFileDiff, ...]]):
    """Read-only category -> files mapping.

    Always holds every FileCategory, in enumeration order; a file lives in
    exactly one bucket.
    """

    buckets: dict[FileCategory, tuple[EnhancedFileDiff, ...]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        complete = {category: tuple(self.buckets.get(category, ())) for category in FileCategory}
        object.__setattr__(self, "buckets", complete)

    def __getitem__(self, category: FileCategory) -> tuple[EnhancedFileDiff, ...]:
        return self.buckets[category]

    def __iter__(self) -> Iterator[FileCategory]:
        return iter(self.buckets)

    def __len__(self) -> int:
        return len(self.buckets)

    def all_files(self) -> list[EnhancedFileDiff]:
        return [file for files in self.buckets.values() for file in files]

    def non_empty(self) -> Iterator[tuple[FileCategory, tuple[EnhancedFileDiff, ...]]]:
        return ((category, files) for category, files in self.buckets.items() if files)

    def counts(self) -> dict[FileCategory, int]:
        return {category: len(files) for category, files in self.buckets.items()}

"""Unit tests — file_grouper (bucket partition with stable importance sort)."""

from diff_note.core.application.diff.file_grouper import group_by_category
from diff_note.core.domain.diff import (
    ChangeType,
    EnhancedFileDiff,
    FileCategory,
    FileStatus,
    ImportanceLevel,
)


def _enhanced(path: str, category: FileCategory, importance: ImportanceLevel) -> EnhancedFileDiff:
    return EnhancedFileDiff(
        path=path,
        status=FileStatus.MODIFIED,
        category=category,
        change_type=ChangeType.FEATURE,
        importance=importance,
    )


class TestGroupByCategory:
    def test_every_category_has_a_bucket(self) -> None:
        grouped = group_by_category([])

        assert list(grouped) == list(FileCategory)
        assert all(files == () for files in grouped.values())

    def test_files_land_in_their_category(self) -> None:
        files = [
            _enhanced("a.ts", FileCategory.BACKEND, ImportanceLevel.MEDIUM),
            _enhanced("README.md", FileCategory.DOCS, ImportanceLevel.LOW),
        ]

        grouped = group_by_category(files)

        assert [f.path for f in grouped[FileCategory.BACKEND]] == ["a.ts"]
        assert [f.path for f in grouped[FileCategory.DOCS]] == ["README.md"]
        assert len(grouped.all_files()) == 2

    def test_sorted_by_importance_with_stable_ties(self) -> None:
        files = [
            _enhanced("low-a", FileCategory.BACKEND, ImportanceLevel.LOW),
            _enhanced("high-b", FileCategory.BACKEND, ImportanceLevel.HIGH),
            _enhanced("medium-c", FileCategory.BACKEND, ImportanceLevel.MEDIUM),
            _enhanced("high-d", FileCategory.BACKEND, ImportanceLevel.HIGH),
        ]

        grouped = group_by_category(files)

        assert [f.path for f in grouped[FileCategory.BACKEND]] == [
            "high-b",
            "high-d",
            "medium-c",
            "low-a",
        ]

from diff_note.core.domain.diff.categorized_files import CategorizedFiles
from diff_note.core.domain.diff.category_summary import CategorySummary
from diff_note.core.domain.diff.commit_info import CommitInfo
from diff_note.core.domain.diff.enhanced_file_diff import EnhancedFileDiff
from diff_note.core.domain.diff.file_diff import FileDiff
from diff_note.core.domain.diff.meaningful_change import MeaningfulChange
from diff_note.core.domain.diff.processing_stats import ProcessingStats
from diff_note.core.domain.diff.structured_diff_output import DiffMetadata, StructuredDiffOutput
from diff_note.core.domain.diff.value_objects.change_direction import ChangeDirection
from diff_note.core.domain.diff.value_objects.change_type import ChangeType
from diff_note.core.domain.diff.value_objects.file_category import FileCategory
from diff_note.core.domain.diff.value_objects.file_status import FileStatus
from diff_note.core.domain.diff.value_objects.importance_level import ImportanceLevel

__all__ = [
    "CategorizedFiles",
    "CategorySummary",
    "ChangeDirection",
    "ChangeType",
    "CommitInfo",
    "DiffMetadata",
    "EnhancedFileDiff",
    "FileCategory",
    "FileDiff",
    "FileStatus",
    "ImportanceLevel",
    "MeaningfulChange",
    "ProcessingStats",
    "StructuredDiffOutput",
]

"""Heuristics deriving change type, importance and noise flags for one file.

Each rule list is first-match-wins; rule order is significant.
"""

from collections.abc import Sequence

from diff_note.core.application.diff.change_extractor import is_formatting_line
from diff_note.core.domain.diff.diff_patterns import (
    CONFIG_PATH_RE,
    DEPENDENCY_MANIFESTS,
    DOC_EXTENSION_RE,
    FIX_KEYWORDS,
    GENERATED_MARKERS,
    GENERATED_PATH_RE,
)
from diff_note.core.domain.diff.file_diff import FileDiff
from diff_note.core.domain.diff.meaningful_change import MeaningfulChange
from diff_note.core.domain.diff.value_objects.change_type import ChangeType
from diff_note.core.domain.diff.value_objects.file_category import FileCategory
from diff_note.core.domain.diff.value_objects.file_status import FileStatus
from diff_note.core.domain.diff.value_objects.importance_level import ImportanceLevel

_LARGE_BACKEND_ADDITIONS = 50
_GENERATED_MARKER_SCAN_LINES = 10


def detect_formatting_only(file: FileDiff, changes: Sequence[MeaningfulChange]) -> bool:
    if not changes:
        return file.total_changes > 0
    return all(is_formatting_line(change.content) for change in changes)


def detect_change_type(file: FileDiff, changes: Sequence[MeaningfulChange]) -> ChangeType:
    path = file.path
    if DOC_EXTENSION_RE.search(path):
        return ChangeType.DOCS
    # Added files count as features even when their content mentions a fix.
    if file.status is FileStatus.ADDED:
        return ChangeType.FEATURE
    if any(manifest in path for manifest in DEPENDENCY_MANIFESTS):
        return ChangeType.DEPENDENCY
    if CONFIG_PATH_RE.search(path):
        return ChangeType.CONFIG
    content = "\n".join(change.content for change in changes).lower()
    if any(keyword in content for keyword in FIX_KEYWORDS):
        return ChangeType.FIX
    added = sum(1 for change in changes if change.is_addition)
    if added == len(changes) - added:
        return ChangeType.REFACTOR
    return ChangeType.FEATURE


def score_importance(
    file: FileDiff, category: FileCategory, change_type: ChangeType
) -> ImportanceLevel:
    path = file.path
    if category is FileCategory.BACKEND and file.additions > _LARGE_BACKEND_ADDITIONS:
        return ImportanceLevel.HIGH
    if change_type is ChangeType.FEATURE and file.status is FileStatus.ADDED:
        return ImportanceLevel.HIGH
    if "schema" in path or "migration" in path:
        return ImportanceLevel.HIGH
    if "auth" in path or "security" in path:
        return ImportanceLevel.HIGH

    if category is FileCategory.TEST:
        return ImportanceLevel.LOW
    if category is FileCategory.DOCS and change_type is not ChangeType.FEATURE:
        return ImportanceLevel.LOW
    if change_type is ChangeType.STYLE:
        return ImportanceLevel.LOW
    return ImportanceLevel.MEDIUM


def detect_generated(file: FileDiff) -> bool:
    """Informational flag: generated naming convention or marker near the top of the patch."""
    if GENERATED_PATH_RE.search(file.path):
        return True
    if not file.patch:
        return False
    head = "\n".join(file.patch.split("\n")[:_GENERATED_MARKER_SCAN_LINES])
    return any(marker in head for marker in GENERATED_MARKERS)

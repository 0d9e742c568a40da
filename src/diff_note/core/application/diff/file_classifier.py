"""Pure functions mapping repository paths to categories and skip decisions."""

from diff_note.core.domain.diff.diff_patterns import (
    CATEGORY_PATTERN_TABLE,
    FRONTEND_HINTS,
    SKIP_PATTERNS,
    SOURCE_FILE_RE,
)
from diff_note.core.domain.diff.value_objects.file_category import FileCategory


def classify(path: str) -> FileCategory:
    """Return the first category whose pattern block matches ``path``."""
    for category, patterns in CATEGORY_PATTERN_TABLE:
        if any(pattern.search(path) for pattern in patterns):
            return category
    if SOURCE_FILE_RE.search(path):
        if any(hint in path for hint in FRONTEND_HINTS):
            return FileCategory.FRONTEND
        return FileCategory.BACKEND
    return FileCategory.OTHER


def should_skip(path: str) -> bool:
    """True for lock files, generated output, build artifacts, assets and vendored code."""
    return any(pattern.search(path) for pattern in SKIP_PATTERNS)

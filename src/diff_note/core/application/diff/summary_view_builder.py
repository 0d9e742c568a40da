"""Audience-specific views over the budget-truncated categorized files."""

from collections.abc import Sequence

from diff_note.core.domain.diff.categorized_files import CategorizedFiles
from diff_note.core.domain.diff.category_summary import CategorySummary
from diff_note.core.domain.diff.diff_patterns import (
    ADR_TRIGGER_PATTERNS,
    BREAKING_KEYWORDS,
    CATEGORY_LABELS,
    CATEGORY_PRIORITY,
)
from diff_note.core.domain.diff.enhanced_file_diff import EnhancedFileDiff
from diff_note.core.domain.diff.value_objects.change_type import ChangeType
from diff_note.core.domain.diff.value_objects.file_category import FileCategory
from diff_note.core.domain.diff.value_objects.importance_level import ImportanceLevel

README_CATEGORIES = (FileCategory.BACKEND, FileCategory.FRONTEND, FileCategory.CONFIG)
README_CHANGE_TYPES = frozenset({ChangeType.FEATURE, ChangeType.FIX})
ADR_CATEGORIES = (FileCategory.INFRA, FileCategory.CONFIG, FileCategory.BACKEND)
ADR_LARGE_ADDITIONS = 100

_HIGHLIGHTS_PER_FILE = 2
_MAX_HIGHLIGHTS = 5


def build_pr_relevant(categories: CategorizedFiles) -> tuple[CategorySummary, ...]:
    """Non-low-importance files per category, highest-priority category first."""
    summaries = [
        summarize(category, relevant)
        for category, files in categories.non_empty()
        if (relevant := [f for f in files if f.importance is not ImportanceLevel.LOW])
    ]
    summaries.sort(key=lambda s: CATEGORY_PRIORITY[s.category], reverse=True)
    return tuple(summaries)


def build_readme_relevant(categories: CategorizedFiles) -> tuple[CategorySummary, ...]:
    summaries: list[CategorySummary] = []
    for category in README_CATEGORIES:
        files = [f for f in categories[category] if f.change_type in README_CHANGE_TYPES]
        if files:
            summaries.append(summarize(category, files))
    return tuple(summaries)


def build_adr_relevant(categories: CategorizedFiles) -> tuple[CategorySummary, ...]:
    summaries: list[CategorySummary] = []
    for category in ADR_CATEGORIES:
        files = [f for f in categories[category] if is_architecture_relevant(f)]
        if files:
            summaries.append(summarize(category, files))
    return tuple(summaries)


def is_architecture_relevant(file: EnhancedFileDiff) -> bool:
    return (
        file.importance is ImportanceLevel.HIGH
        or matches_adr_trigger(file.path)
        or file.additions > ADR_LARGE_ADDITIONS
    )


def matches_adr_trigger(path: str) -> bool:
    return any(pattern.search(path) for pattern in ADR_TRIGGER_PATTERNS)


def summarize(category: FileCategory, files: Sequence[EnhancedFileDiff]) -> CategorySummary:
    return CategorySummary(
        category=category,
        files=tuple(f.path for f in files),
        highlights=extract_highlights(files),
        has_breaking_changes=detect_breaking_changes(files),
        change_types=tuple(dict.fromkeys(f.change_type for f in files)),
    )


def extract_highlights(files: Sequence[EnhancedFileDiff]) -> tuple[str, ...]:
    added = [
        change.content
        for file in files
        for change in file.meaningful_changes[:_HIGHLIGHTS_PER_FILE]
        if change.is_addition
    ]
    return tuple(added[:_MAX_HIGHLIGHTS])


def detect_breaking_changes(files: Sequence[EnhancedFileDiff]) -> bool:
    content = "\n".join(
        change.content.lower() for file in files for change in file.meaningful_changes
    )
    return any(keyword in content for keyword in BREAKING_KEYWORDS)


def render_legacy_summary(categories: CategorizedFiles, changes_per_file: int = 5) -> str:
    """Flat markdown-ish rendering kept for consumers of the plain-text format."""
    parts: list[str] = []
    for category, files in categories.non_empty():
        parts.append(f"### {CATEGORY_LABELS[category]}")
        for file in files:
            shown = file.meaningful_changes[:changes_per_file]
            parts.append(f"- {file.path}")
            if shown:
                parts.append("\n".join(f"  {change.render()}" for change in shown))
            hidden = file.original_change_count - len(shown)
            if hidden > 0:
                parts.append(f"  ... ({hidden} more lines)")
    return "\n\n".join(parts)

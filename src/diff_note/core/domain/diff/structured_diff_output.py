"""Final artifact of one diff-processing invocation."""

from dataclasses import dataclass, field
from typing import Any

from diff_note.core.domain.diff.categorized_files import CategorizedFiles
from diff_note.core.domain.diff.category_summary import CategorySummary
from diff_note.core.domain.diff.commit_info import CommitInfo
from diff_note.core.domain.diff.enhanced_file_diff import EnhancedFileDiff
from diff_note.core.domain.diff.meaningful_change import MeaningfulChange
from diff_note.core.domain.diff.processing_stats import ProcessingStats


@dataclass(frozen=True, kw_only=True)
class DiffMetadata:
    title: str
    number: int | None = None
    body: str | None = None
    total_additions: int = 0
    total_deletions: int = 0
    file_count: int = 0
    stats: ProcessingStats
    commits: tuple[CommitInfo, ...] = field(default_factory=tuple)

    @property
    def total_changes(self) -> int:
        return self.total_additions + self.total_deletions


@dataclass(frozen=True, kw_only=True)
class StructuredDiffOutput:
    metadata: DiffMetadata
    categories: CategorizedFiles
    pr_relevant: tuple[CategorySummary, ...] = field(default_factory=tuple)
    readme_relevant: tuple[CategorySummary, ...] = field(default_factory=tuple)
    adr_relevant: tuple[CategorySummary, ...] = field(default_factory=tuple)
    legacy_summary: str = ""

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready representation; key order is stable across runs."""
        return {
            "metadata": _metadata_to_dict(self.metadata),
            "categories": {
                str(category): [_file_to_dict(f) for f in files]
                for category, files in self.categories.items()
            },
            "summary": {
                "pr_relevant": [_summary_to_dict(s) for s in self.pr_relevant],
                "readme_relevant": [_summary_to_dict(s) for s in self.readme_relevant],
                "adr_relevant": [_summary_to_dict(s) for s in self.adr_relevant],
            },
            "legacy_summary": self.legacy_summary,
        }


def _metadata_to_dict(metadata: DiffMetadata) -> dict[str, Any]:
    stats = metadata.stats
    return {
        "title": metadata.title,
        "number": metadata.number,
        "body": metadata.body,
        "total_additions": metadata.total_additions,
        "total_deletions": metadata.total_deletions,
        "file_count": metadata.file_count,
        "stats": {
            "total_files": stats.total_files,
            "processed_files": stats.processed_files,
            "skipped_files": stats.skipped_files,
            "truncated_files": stats.truncated_files,
            "estimated_tokens": stats.estimated_tokens,
            "category_counts": {str(k): v for k, v in stats.category_counts.items()},
            "exhausted_categories": [str(c) for c in stats.exhausted_categories],
        },
        "commits": [
            {"sha": c.sha, "message": c.message, "conventional_type": c.conventional_type}
            for c in metadata.commits
        ],
    }


def _file_to_dict(file: EnhancedFileDiff) -> dict[str, Any]:
    return {
        "path": file.path,
        "status": str(file.status),
        "additions": file.additions,
        "deletions": file.deletions,
        "category": str(file.category),
        "change_type": str(file.change_type),
        "importance": str(file.importance),
        "is_generated": file.is_generated,
        "is_formatting_only": file.is_formatting_only,
        "truncated": file.truncated,
        "original_change_count": file.original_change_count,
        "meaningful_changes": [_change_to_dict(c) for c in file.meaningful_changes],
    }


def _change_to_dict(change: MeaningfulChange) -> dict[str, Any]:
    return {
        "type": str(change.direction),
        "content": change.content,
        "context": change.context,
        "line_number": change.line_number,
    }


def _summary_to_dict(summary: CategorySummary) -> dict[str, Any]:
    return {
        "category": str(summary.category),
        "files": list(summary.files),
        "highlights": list(summary.highlights),
        "has_breaking_changes": summary.has_breaking_changes,
        "change_types": [str(t) for t in summary.change_types],
    }

"""Diff pipeline: raw files -> skip filter -> enhance -> drop formatting-only
-> group -> budget -> views.

Each call is self-contained; the processor holds only its read-only config.
"""

from collections.abc import Sequence

import structlog
from structlog.contextvars import bound_contextvars

from diff_note.core.application.diff import summary_view_builder as views
from diff_note.core.application.diff.budget_allocator import (
    AllocationResult,
    allocate,
    estimate_tokens,
)
from diff_note.core.application.diff.change_extractor import extract_changes
from diff_note.core.application.diff.change_scorer import (
    detect_change_type,
    detect_formatting_only,
    detect_generated,
    score_importance,
)
from diff_note.core.application.diff.config.diff_processor_config import DiffProcessorConfig
from diff_note.core.application.diff.file_classifier import classify, should_skip
from diff_note.core.application.diff.file_grouper import group_by_category
from diff_note.core.domain.diff import (
    CommitInfo,
    DiffMetadata,
    EnhancedFileDiff,
    FileDiff,
    ProcessingStats,
    StructuredDiffOutput,
)

logger = structlog.get_logger()


class DiffProcessor:
    """Turns a change request's file diffs into a budgeted StructuredDiffOutput."""

    def __init__(self, config: DiffProcessorConfig | None = None) -> None:
        self._config = config or DiffProcessorConfig()

    @property
    def config(self) -> DiffProcessorConfig:
        return self._config

    def process(
        self,
        files: Sequence[FileDiff],
        title: str,
        *,
        number: int | None = None,
        body: str | None = None,
        commits: Sequence[CommitInfo] = (),
    ) -> StructuredDiffOutput:
        with bound_contextvars(pr_title=title, pr_number=number):
            kept = [f for f in files if not should_skip(f.path)]
            enhanced = [self.enhance(f) for f in kept]
            meaningful = [f for f in enhanced if not f.is_formatting_only]
            allocation = allocate(group_by_category(meaningful), self._config)
            output = self._build_output(allocation, title, number, body, commits, len(files))
            stats = output.metadata.stats
            logger.info(
                "Diff processed",
                total_files=stats.total_files,
                processed_files=stats.processed_files,
                skipped_files=stats.skipped_files,
                truncated_files=stats.truncated_files,
                estimated_tokens=stats.estimated_tokens,
            )
            return output

    def enhance(self, file: FileDiff) -> EnhancedFileDiff:
        """Classify, extract and score a single file."""
        category = classify(file.path)
        changes = extract_changes(file.patch, self._config.max_change_length)
        change_type = detect_change_type(file, changes)
        return EnhancedFileDiff(
            path=file.path,
            status=file.status,
            additions=file.additions,
            deletions=file.deletions,
            patch=file.patch,
            category=category,
            change_type=change_type,
            importance=score_importance(file, category, change_type),
            is_generated=detect_generated(file),
            is_formatting_only=detect_formatting_only(file, changes),
            meaningful_changes=changes,
            truncated=False,
            original_change_count=len(changes),
        )

    # ── Output assembly ─────────────────────────────────────────────

    def _build_output(
        self,
        allocation: AllocationResult,
        title: str,
        number: int | None,
        body: str | None,
        commits: Sequence[CommitInfo],
        original_count: int,
    ) -> StructuredDiffOutput:
        categories = allocation.categories
        surviving = categories.all_files()
        stats = ProcessingStats(
            total_files=original_count,
            processed_files=len(surviving),
            skipped_files=original_count - len(surviving),
            truncated_files=sum(1 for f in surviving if f.truncated),
            estimated_tokens=estimate_tokens(
                [c for f in surviving for c in f.meaningful_changes],
                self._config.chars_per_token,
            ),
            category_counts=categories.counts(),
            exhausted_categories=allocation.exhausted_categories,
        )
        metadata = DiffMetadata(
            title=title,
            number=number,
            body=body,
            total_additions=sum(f.additions for f in surviving),
            total_deletions=sum(f.deletions for f in surviving),
            file_count=stats.processed_files,
            stats=stats,
            commits=tuple(commits),
        )
        return StructuredDiffOutput(
            metadata=metadata,
            categories=categories,
            pr_relevant=views.build_pr_relevant(categories),
            readme_relevant=views.build_readme_relevant(categories),
            adr_relevant=views.build_adr_relevant(categories),
            legacy_summary=views.render_legacy_summary(
                categories, self._config.legacy_changes_per_file
            ),
        )

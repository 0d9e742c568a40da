"""Per-category token budgeting with greedy fill and proportional fallback.

Each file is first capped to its category's line limit, then kept whole if
it fits the remaining category budget; otherwise the largest prefix the
average per-change cost allows (at least one change) is kept. Budgets are
per category, so categories never compete with each other.
"""

import math
from collections.abc import Sequence
from dataclasses import dataclass, field, replace

import structlog

from diff_note.core.application.diff.config.diff_processor_config import DiffProcessorConfig
from diff_note.core.domain.diff.categorized_files import CategorizedFiles
from diff_note.core.domain.diff.diff_patterns import categories_by_priority
from diff_note.core.domain.diff.enhanced_file_diff import EnhancedFileDiff
from diff_note.core.domain.diff.meaningful_change import MeaningfulChange
from diff_note.core.domain.diff.value_objects.file_category import FileCategory

logger = structlog.get_logger()


@dataclass(frozen=True, kw_only=True)
class BucketAllocation:
    files: tuple[EnhancedFileDiff, ...]
    tokens_used: int
    dropped_files: int = 0

    @property
    def exhausted(self) -> bool:
        return self.dropped_files > 0


@dataclass(frozen=True, kw_only=True)
class AllocationResult:
    categories: CategorizedFiles
    tokens_by_category: dict[FileCategory, int] = field(default_factory=dict)
    exhausted_categories: tuple[FileCategory, ...] = field(default_factory=tuple)


def estimate_tokens(changes: Sequence[MeaningfulChange], chars_per_token: int = 4) -> int:
    total_chars = sum(change.char_count for change in changes)
    return math.ceil(total_chars / chars_per_token)


def allocate_bucket(
    files: Sequence[EnhancedFileDiff],
    *,
    budget: int,
    line_limit: int,
    chars_per_token: int = 4,
) -> BucketAllocation:
    """Fit one category's files, in order, into ``budget`` tokens."""
    spent = 0
    dropped = 0
    allocated: list[EnhancedFileDiff] = []
    for file in files:
        if spent >= budget and file.meaningful_changes:
            dropped += 1
        kept, spent = _fit_changes(
            file.meaningful_changes, budget, line_limit, spent, chars_per_token
        )
        allocated.append(
            replace(
                file,
                meaningful_changes=kept,
                truncated=len(kept) < file.original_change_count,
            )
        )
    return BucketAllocation(files=tuple(allocated), tokens_used=spent, dropped_files=dropped)


def allocate(categorized: CategorizedFiles, config: DiffProcessorConfig) -> AllocationResult:
    """Apply ``allocate_bucket`` to every category in descending priority order."""
    buckets: dict[FileCategory, tuple[EnhancedFileDiff, ...]] = {}
    tokens: dict[FileCategory, int] = {}
    exhausted: list[FileCategory] = []
    for category in categories_by_priority():
        allocation = allocate_bucket(
            categorized[category],
            budget=config.token_budgets[category],
            line_limit=config.line_limits[category],
            chars_per_token=config.chars_per_token,
        )
        buckets[category] = allocation.files
        tokens[category] = allocation.tokens_used
        if allocation.exhausted:
            exhausted.append(category)
            logger.warning(
                "Category budget exhausted",
                category=str(category),
                budget=config.token_budgets[category],
                dropped_files=allocation.dropped_files,
            )
    return AllocationResult(
        categories=CategorizedFiles(buckets),
        tokens_by_category=tokens,
        exhausted_categories=tuple(exhausted),
    )


def _fit_changes(
    changes: tuple[MeaningfulChange, ...],
    budget: int,
    line_limit: int,
    spent: int,
    chars_per_token: int,
) -> tuple[tuple[MeaningfulChange, ...], int]:
    """Return the retained changes and the updated running token count."""
    if spent >= budget:
        return (), spent
    capped = changes[:line_limit]
    cost = estimate_tokens(capped, chars_per_token)
    if spent + cost <= budget:
        return capped, spent + cost
    average = cost / len(capped)
    count = max(1, math.floor((budget - spent) / average))
    kept = capped[:count]
    return kept, spent + estimate_tokens(kept, chars_per_token)

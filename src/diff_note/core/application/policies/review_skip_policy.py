from collections.abc import Iterable
from dataclasses import dataclass

import structlog

from diff_note.core.domain.diff import StructuredDiffOutput
from diff_note.core.domain.diff.diff_patterns import REVIEW_DOC_PATTERNS, REVIEW_TEST_PATTERNS

logger = structlog.get_logger()


@dataclass(frozen=True)
class SkipDecision:
    should_skip: bool
    reason: str | None = None


class ReviewSkipPolicy:
    """Decides whether a processed change request is worth summarising.

    Rules, first match wins: opt-out label, change too small, nothing left
    after filtering, docs/tests-only change.
    """

    def __init__(self, skip_label: str = "skip-doc", min_changed_lines: int = 10) -> None:
        self._skip_label = skip_label
        self._min_changed_lines = min_changed_lines

    def evaluate(self, labels: Iterable[str], output: StructuredDiffOutput) -> SkipDecision:
        decision = self._decide(set(labels), output)
        if decision.should_skip:
            logger.info("Change request skipped", reason=decision.reason)
        return decision

    def _decide(self, labels: set[str], output: StructuredDiffOutput) -> SkipDecision:
        if self._skip_label in labels:
            return SkipDecision(True, f"label '{self._skip_label}' is present")
        total = output.metadata.total_changes
        if total < self._min_changed_lines:
            return SkipDecision(
                True, f"fewer than {self._min_changed_lines} changed lines ({total})"
            )
        files = output.categories.all_files()
        if not files:
            return SkipDecision(True, "no reviewable files after filtering")
        if all(is_doc_or_test_path(f.path) for f in files):
            return SkipDecision(True, "only documentation or test files changed")
        return SkipDecision(False)


def is_doc_or_test_path(path: str) -> bool:
    return any(p.search(path) for p in (*REVIEW_DOC_PATTERNS, *REVIEW_TEST_PATTERNS))

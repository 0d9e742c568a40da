"""Decides which optional documents to request from the text generator."""

from datetime import date

from diff_note.core.application.diff.summary_view_builder import (
    ADR_LARGE_ADDITIONS,
    matches_adr_trigger,
)
from diff_note.core.domain.diff import ChangeType, FileStatus, StructuredDiffOutput

_ENDPOINT_HINTS = ("route", "api", "controller")
_DEPENDENCY_KEYS = ('"dependencies"', '"devDependencies"')


class DocumentGenerationPolicy:
    """Gatekeeper for the README history entry and the ADR draft.

    The PR summary itself is always generated; these two documents are only
    worth a generation call when the change request carries enough signal.
    """

    def __init__(
        self,
        feat_commit_min_changes: int = 10,
        readme_relevant_min_changes: int = 20,
        dependency_min_changes: int = 30,
        adr_min_files: int = 5,
    ) -> None:
        self._feat_commit_min_changes = feat_commit_min_changes
        self._readme_relevant_min_changes = readme_relevant_min_changes
        self._dependency_min_changes = dependency_min_changes
        self._adr_min_files = adr_min_files

    def should_generate_readme(self, output: StructuredDiffOutput) -> bool:
        total = output.metadata.total_changes
        has_feat_commit = any(c.conventional_type == "feat" for c in output.metadata.commits)
        if has_feat_commit and total >= self._feat_commit_min_changes:
            return True
        if output.readme_relevant and total >= self._readme_relevant_min_changes:
            return True
        files = output.categories.all_files()
        if any(
            f.change_type is ChangeType.FEATURE
            and f.status is FileStatus.ADDED
            and any(hint in f.path for hint in _ENDPOINT_HINTS)
            for f in files
        ):
            return True
        adds_dependency = any(
            "package.json" in f.path
            and any(
                c.is_addition and any(key in c.content for key in _DEPENDENCY_KEYS)
                for c in f.meaningful_changes
            )
            for f in files
        )
        return adds_dependency and total >= self._dependency_min_changes

    def should_generate_adr(self, output: StructuredDiffOutput) -> bool:
        if output.adr_relevant:
            return True
        files = output.categories.all_files()
        return (
            any(matches_adr_trigger(f.path) for f in files)
            or any(f.additions > ADR_LARGE_ADDITIONS for f in files)
            or len(files) >= self._adr_min_files
        )

    @staticmethod
    def adr_identifier(output: StructuredDiffOutput, today: date) -> str:
        """``YYYYMMDD-PR<number>`` prefix for the ADR title."""
        return f"{today:%Y%m%d}-PR{output.metadata.number or 0}"

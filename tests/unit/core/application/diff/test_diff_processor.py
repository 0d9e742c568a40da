"""Unit tests — DiffProcessor (end-to-end pipeline over FileDiff inputs)."""

import json

import pytest
from structlog.testing import capture_logs

from diff_note.core.application.diff.config.diff_processor_config import DiffProcessorConfig
from diff_note.core.application.diff.diff_processor import DiffProcessor
from diff_note.core.domain.diff import (
    ChangeType,
    CommitInfo,
    FileCategory,
    FileDiff,
    FileStatus,
    ImportanceLevel,
)
from diff_note.core.exceptions import ConfigurationError


def _diff(path: str, patch: str | None, status: FileStatus = FileStatus.MODIFIED, **kwargs) -> FileDiff:
    return FileDiff(path=path, status=status, patch=patch, **kwargs)


class TestSingleFileScenarios:
    def test_large_auth_fix_is_high_backend_and_line_capped(self, processor, make_patch) -> None:
        lines = [f"const step{i} = run({i});" for i in range(59)] + ["applyFix(session);"]
        file = _diff("src/auth/login.ts", make_patch(lines), additions=60)

        output = processor.process([file], "Harden login")

        (result,) = output.categories[FileCategory.BACKEND]
        assert result.change_type == ChangeType.FIX
        assert result.importance == ImportanceLevel.HIGH
        assert len(result.meaningful_changes) == 30
        assert result.original_change_count == 60
        assert result.truncated is True
        assert output.metadata.stats.truncated_files == 1

    def test_readme_only_change_stays_out_of_audience_views(self, processor, make_patch) -> None:
        file = _diff("README.md", make_patch(["Install with npm."]), additions=1)

        output = processor.process([file], "Docs")

        (result,) = output.categories[FileCategory.DOCS]
        assert result.change_type == ChangeType.DOCS
        assert result.importance == ImportanceLevel.LOW
        assert output.readme_relevant == ()
        assert output.pr_relevant == ()
        assert "### Documentation" in output.legacy_summary
        assert "  + Install with npm." in output.legacy_summary

    def test_lock_file_is_skipped_everywhere(self, processor, make_patch) -> None:
        lock = _diff("package-lock.json", make_patch(['"lockfileVersion": 3']), additions=1)
        app = _diff("src/api/users.ts", make_patch(["export const x = 1;"]), additions=1)

        output = processor.process([lock, app], "Bump")

        paths = [f.path for f in output.categories.all_files()]
        assert paths == ["src/api/users.ts"]
        assert output.metadata.stats.skipped_files == 1
        assert "package-lock.json" not in output.legacy_summary

    def test_large_test_patch_respects_test_budget(self, processor, make_patch) -> None:
        lines = [f"{i:02d}" + "x" * 97 for i in range(20)]
        file = _diff("tests/test_big.py", make_patch(lines), additions=20)

        output = processor.process([file], "Tests")

        (result,) = output.categories[FileCategory.TEST]
        assert len(result.meaningful_changes) == 8
        assert result.truncated is True
        assert output.metadata.stats.estimated_tokens <= 200

    def test_generated_marker_sets_flag(self, processor) -> None:
        patch = "@@ -0,0 +1,2 @@\n+// @generated by openapi\n+export const api = 1;"
        file = _diff("src/api/client.ts", patch, FileStatus.ADDED, additions=2)

        (result,) = processor.process([file], "Client").categories[FileCategory.BACKEND]

        assert result.is_generated is True


class TestInvariants:
    @pytest.fixture
    def files(self, make_patch) -> list[FileDiff]:
        return [
            _diff("src/api/orders.ts", make_patch([f"order{i}()" for i in range(40)]), additions=40),
            _diff("src/components/Cart.tsx", make_patch(["<Cart />"], ["<Basket />"]), additions=1, deletions=1),
            _diff("src/api/format.ts", make_patch(["}", ";"]), additions=2),
            _diff("yarn.lock", make_patch(["left-pad@1"]), additions=1),
            _diff("docs/guide.md", make_patch([f"Step {i}" for i in range(15)]), additions=15),
        ]

    def test_every_input_is_either_processed_or_skipped(self, processor, files) -> None:
        stats = processor.process(files, "Mixed").metadata.stats

        assert stats.total_files == 5
        assert stats.processed_files == 3
        assert stats.processed_files + stats.skipped_files == stats.total_files

    def test_formatting_only_files_are_dropped(self, processor, files) -> None:
        output = processor.process(files, "Mixed")

        assert "src/api/format.ts" not in [f.path for f in output.categories.all_files()]

    def test_truncated_iff_changes_were_removed(self, processor, files) -> None:
        output = processor.process(files, "Mixed")

        for file in output.categories.all_files():
            assert file.truncated == (len(file.meaningful_changes) < file.original_change_count)

    def test_totals_cover_surviving_files(self, processor, files) -> None:
        metadata = processor.process(files, "Mixed").metadata

        assert metadata.total_additions == 56
        assert metadata.total_deletions == 1
        assert metadata.file_count == 3

    def test_processing_is_deterministic(self, processor, files) -> None:
        first = processor.process(files, "Mixed", number=7)
        second = processor.process(files, "Mixed", number=7)

        assert first == second
        assert json.dumps(first.to_dict()) == json.dumps(second.to_dict())

    def test_category_counts_match_buckets(self, processor, files) -> None:
        output = processor.process(files, "Mixed")

        assert output.metadata.stats.category_counts == {
            category: len(bucket) for category, bucket in output.categories.items()
        }


class TestMetadata:
    def test_request_fields_and_commits_pass_through(self, processor) -> None:
        commits = (CommitInfo(sha="abc123", message="feat: add cart", conventional_type="feat"),)

        output = processor.process([], "Cart", number=42, body="Adds a cart", commits=commits)

        assert output.metadata.title == "Cart"
        assert output.metadata.number == 42
        assert output.metadata.body == "Adds a cart"
        assert output.metadata.commits == commits
        assert output.to_dict()["metadata"]["commits"][0]["conventional_type"] == "feat"

    def test_empty_input_yields_empty_output(self, processor) -> None:
        output = processor.process([], "Nothing")

        assert output.categories.all_files() == []
        assert output.legacy_summary == ""
        assert output.metadata.stats.estimated_tokens == 0

    def test_logs_processing_summary_with_request_context(self, processor, make_patch) -> None:
        file = _diff("src/api/a.ts", make_patch(["run()"]), additions=1)

        with capture_logs() as logs:
            processor.process([file], "Log me", number=3)

        (event,) = [e for e in logs if e["event"] == "Diff processed"]
        assert event["processed_files"] == 1
        assert event["total_files"] == 1


class TestConfiguration:
    def test_default_config_is_used_when_none_given(self) -> None:
        assert DiffProcessor().config == DiffProcessorConfig()

    def test_incomplete_budget_table_is_rejected(self) -> None:
        with pytest.raises(ConfigurationError):
            DiffProcessorConfig(token_budgets={FileCategory.BACKEND: 10})

    def test_non_positive_chars_per_token_is_rejected(self) -> None:
        with pytest.raises(ConfigurationError):
            DiffProcessorConfig(chars_per_token=0)

    def test_custom_line_limit_is_applied(self, make_patch) -> None:
        limits = dict(DiffProcessorConfig().line_limits) | {FileCategory.BACKEND: 3}
        processor = DiffProcessor(DiffProcessorConfig(line_limits=limits))
        file = _diff("src/api/a.ts", make_patch([f"call{i}()" for i in range(5)]), additions=5)

        (result,) = processor.process([file], "Cap").categories[FileCategory.BACKEND]

        assert len(result.meaningful_changes) == 3
        assert result.truncated is True

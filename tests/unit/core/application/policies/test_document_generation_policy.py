"""Unit tests — DocumentGenerationPolicy (README and ADR generation gates)."""

from datetime import date

from diff_note.core.application.policies.document_generation_policy import (
    DocumentGenerationPolicy,
)
from diff_note.core.domain.diff import CommitInfo, FileDiff, FileStatus


def _diff(
    path: str, lines: list[str], make_patch, status: FileStatus = FileStatus.MODIFIED
) -> FileDiff:
    return FileDiff(path=path, status=status, additions=len(lines), patch=make_patch(lines))


def _calls(count: int) -> list[str]:
    return [f"step{i}()" for i in range(count)]


class TestReadmeGate:
    def test_feat_commit_with_enough_changes(self, processor, make_patch) -> None:
        commits = (CommitInfo(sha="a1", message="feat: orders", conventional_type="feat"),)
        output = processor.process(
            [_diff("src/api/orders.ts", _calls(10), make_patch)], "Orders", commits=commits
        )

        assert DocumentGenerationPolicy().should_generate_readme(output) is True

    def test_feat_commit_below_threshold(self, processor, make_patch) -> None:
        commits = (CommitInfo(sha="a1", message="feat: orders", conventional_type="feat"),)
        output = processor.process(
            [_diff("src/lib/orders.ts", _calls(3), make_patch)], "Orders", commits=commits
        )

        assert DocumentGenerationPolicy().should_generate_readme(output) is False

    def test_new_route_file(self, processor, make_patch) -> None:
        file = _diff("src/routes/users.ts", _calls(2), make_patch, FileStatus.ADDED)

        output = processor.process([file], "Users route")

        assert DocumentGenerationPolicy().should_generate_readme(output) is True

    def test_new_dependency_in_manifest(self, processor, make_patch) -> None:
        lines = ['"dependencies": {', *[f'"pkg-{i}": "^1.0.{i}",' for i in range(29)]]
        output = processor.process([_diff("package.json", lines, make_patch)], "Deps")

        assert DocumentGenerationPolicy().should_generate_readme(output) is True

    def test_small_modification_is_not_enough(self, processor, make_patch) -> None:
        output = processor.process([_diff("src/lib/date.ts", _calls(3), make_patch)], "Tweak")

        assert DocumentGenerationPolicy().should_generate_readme(output) is False


class TestAdrGate:
    def test_infrastructure_trigger(self, processor, make_patch) -> None:
        output = processor.process([_diff("Dockerfile", ["FROM node:20"], make_patch)], "Image")

        assert DocumentGenerationPolicy().should_generate_adr(output) is True

    def test_many_files(self, processor, make_patch) -> None:
        files = [_diff(f"src/lib/m{i}.ts", _calls(1), make_patch) for i in range(5)]

        output = processor.process(files, "Spread")

        assert DocumentGenerationPolicy().should_generate_adr(output) is True

    def test_single_small_file(self, processor, make_patch) -> None:
        output = processor.process([_diff("src/lib/date.ts", _calls(3), make_patch)], "Tweak")

        assert DocumentGenerationPolicy().should_generate_adr(output) is False

    def test_identifier_uses_date_and_number(self, processor) -> None:
        output = processor.process([], "Anything", number=42)

        assert DocumentGenerationPolicy.adr_identifier(output, date(2024, 12, 16)) == (
            "20241216-PR42"
        )

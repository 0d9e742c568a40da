"""Pure functions mapping GitHub pull-request API payloads into domain records."""

import json
from typing import Any

from pydantic import ValidationError

from diff_note.core.application.diff.commit_parser import parse_commit
from diff_note.core.domain.diff import CommitInfo, FileDiff, FileStatus
from diff_note.infrastructure.observability import get_logger
from diff_note.infrastructure.providers.github.dtos.github_pull_models import (
    GitHubPullCommitModel,
    GitHubPullFileModel,
)

logger = get_logger("github_payload_mapper")

# GitHub statuses outside the domain enum collapse to "modified".
_STATUS_MAP: dict[str, FileStatus] = {
    "added": FileStatus.ADDED,
    "removed": FileStatus.REMOVED,
    "modified": FileStatus.MODIFIED,
    "renamed": FileStatus.RENAMED,
    "changed": FileStatus.MODIFIED,
    "copied": FileStatus.MODIFIED,
    "unchanged": FileStatus.MODIFIED,
}


def parse_pull_files(raw: str | list[Any]) -> list[FileDiff]:
    """Parse the ``GET /pulls/{n}/files`` response into FileDiff records."""
    results: list[FileDiff] = []
    for entry in _extract_entries(raw):
        try:
            model = GitHubPullFileModel.model_validate(entry)
        except ValidationError:
            path = entry.get("filename", "<unknown>") if isinstance(entry, dict) else "<unknown>"
            logger.warning("Skipping unparseable file entry", file_path=path, source_system="GitHub")
            continue
        results.append(_to_file_diff(model))
    return results


def parse_pull_commits(raw: str | list[Any]) -> list[CommitInfo]:
    """Parse the ``GET /pulls/{n}/commits`` response into CommitInfo records."""
    results: list[CommitInfo] = []
    for entry in _extract_entries(raw):
        try:
            model = GitHubPullCommitModel.model_validate(entry)
        except ValidationError:
            logger.warning("Skipping unparseable commit entry", source_system="GitHub")
            continue
        results.append(parse_commit(model.sha, model.commit.message))
    return results


def _extract_entries(raw: str | list[Any]) -> list[Any]:
    """Decode ``raw`` when needed, returning an empty list on failure."""
    if isinstance(raw, str):
        try:
            raw = json.loads(raw)
        except json.JSONDecodeError:
            logger.warning("Payload is not valid JSON", source_system="GitHub")
            return []
    if not isinstance(raw, list):
        logger.warning(
            "Payload is not a list", payload_type=type(raw).__name__, source_system="GitHub"
        )
        return []
    return raw


def _to_file_diff(model: GitHubPullFileModel) -> FileDiff:
    return FileDiff(
        path=model.filename,
        status=_STATUS_MAP.get(model.status, FileStatus.MODIFIED),
        additions=model.additions,
        deletions=model.deletions,
        patch=model.patch,
    )

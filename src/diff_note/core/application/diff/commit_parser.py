import re
from collections.abc import Iterable

from diff_note.core.domain.diff.commit_info import CommitInfo

CONVENTIONAL_COMMIT_RE = re.compile(
    r"^(feat|fix|docs|style|refactor|perf|test|build|ci|chore|revert)(\(.*\))?!?:"
)


def parse_conventional_type(message: str) -> str | None:
    """Return the conventional-commit keyword of the subject line, if any."""
    match = CONVENTIONAL_COMMIT_RE.match(message.split("\n", 1)[0])
    return match.group(1) if match else None


def parse_commit(sha: str, message: str) -> CommitInfo:
    return CommitInfo(sha=sha, message=message, conventional_type=parse_conventional_type(message))


def parse_commits(entries: Iterable[tuple[str, str]]) -> tuple[CommitInfo, ...]:
    return tuple(parse_commit(sha, message) for sha, message in entries)

"""Extracts meaningful added/removed lines from a unified-diff patch.

Lossy on purpose: comments, bracket-only lines and formatting-only edits
are dropped so that the budget is spent on signal.
"""

from diff_note.core.domain.diff.diff_patterns import (
    BRACKET_ONLY_RE,
    FORMATTING_PATTERNS,
    HUNK_HEADER_RE,
)
from diff_note.core.domain.diff.meaningful_change import MeaningfulChange
from diff_note.core.domain.diff.value_objects.change_direction import ChangeDirection

DEFAULT_MAX_CONTENT_LENGTH = 100
ELLIPSIS = "..."


def extract_changes(
    patch: str | None, max_length: int = DEFAULT_MAX_CONTENT_LENGTH
) -> tuple[MeaningfulChange, ...]:
    """Scan ``patch`` once and return its retained change lines in order."""
    if not patch:
        return ()
    changes: list[MeaningfulChange] = []
    context = ""
    line_number = 0
    for line in patch.split("\n"):
        hunk = HUNK_HEADER_RE.match(line)
        if hunk:
            line_number = int(hunk.group(1))
            continue
        if not line.startswith(("+", "-")):
            if line.startswith(" "):
                context = line[1:].strip()
            line_number += 1
            continue
        if line.startswith(("+++", "---")):
            continue

        is_addition = line.startswith("+")
        content = line[1:].strip()
        if is_meaningful_line(content) and not is_formatting_line(content):
            changes.append(
                MeaningfulChange(
                    direction=ChangeDirection.ADDED if is_addition else ChangeDirection.REMOVED,
                    content=truncate_content(content, max_length),
                    context=context or None,
                    line_number=line_number if is_addition else None,
                )
            )
        if is_addition:
            line_number += 1
    return tuple(changes)


def is_meaningful_line(content: str) -> bool:
    """False for blanks, line/block comments and bracket-only punctuation."""
    if not content.strip():
        return False
    if content.startswith("//"):
        return False
    if content.startswith("#") and not content.startswith("#!"):
        return False
    if content.startswith(("/*", "*")):
        return False
    return not BRACKET_ONLY_RE.match(content)


def is_formatting_line(content: str) -> bool:
    return any(pattern.search(content) for pattern in FORMATTING_PATTERNS)


def truncate_content(content: str, max_length: int) -> str:
    if len(content) <= max_length:
        return content
    return content[:max_length] + ELLIPSIS

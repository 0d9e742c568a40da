import pytest

from diff_note.core.application.diff.diff_processor import DiffProcessor
from diff_note.infrastructure.configuration.diff_settings import DiffSettings


@pytest.fixture
def settings(monkeypatch):
    for name in (
        "DIFF_CATEGORY_TOKEN_BUDGETS",
        "DIFF_CATEGORY_LINE_LIMITS",
        "DIFF_MAX_CHANGE_LENGTH",
        "DIFF_CHARS_PER_TOKEN",
        "DIFF_LEGACY_CHANGES_PER_FILE",
        "DIFF_SKIP_LABEL",
        "DIFF_MIN_CHANGED_LINES",
    ):
        monkeypatch.delenv(name, raising=False)
    return DiffSettings()


@pytest.fixture
def processor(settings):
    return DiffProcessor(settings.to_processor_config())


@pytest.fixture
def make_patch():
    """Build a single-hunk patch from added and removed line bodies."""

    def _make(added: list[str], removed: list[str] | None = None, start: int = 1) -> str:
        removed = removed or []
        header = f"@@ -{start},{len(removed)} +{start},{len(added)} @@"
        body = [f"-{line}" for line in removed] + [f"+{line}" for line in added]
        return "\n".join([header, *body])

    return _make

from __future__ import annotations

from diff_note.core.exceptions.diff_note_error import DiffNoteError


class ConfigurationError(DiffNoteError):
    """Raised when configuration is invalid or incomplete."""

from diff_note.core.exceptions.configuration_error import ConfigurationError
from diff_note.core.exceptions.diff_note_error import DiffNoteError

__all__ = [
    "ConfigurationError",
    "DiffNoteError",
]

from diff_note.core.application.diff.config.diff_processor_config import DiffProcessorConfig
from diff_note.core.application.diff.diff_processor import DiffProcessor
from diff_note.core.domain.diff import FileDiff, FileStatus, StructuredDiffOutput

__all__ = [
    "DiffProcessor",
    "DiffProcessorConfig",
    "FileDiff",
    "FileStatus",
    "StructuredDiffOutput",
]

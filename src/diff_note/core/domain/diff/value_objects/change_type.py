from enum import StrEnum


class ChangeType(StrEnum):
    FEATURE = "feature"
    REFACTOR = "refactor"
    FIX = "fix"
    STYLE = "style"
    DEPENDENCY = "dependency"
    CONFIG = "config"
    DOCS = "docs"

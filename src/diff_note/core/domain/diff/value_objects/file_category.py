from enum import StrEnum


class FileCategory(StrEnum):
    BACKEND = "backend"
    FRONTEND = "frontend"
    INFRA = "infra"
    CONFIG = "config"
    TEST = "test"
    DOCS = "docs"
    OTHER = "other"

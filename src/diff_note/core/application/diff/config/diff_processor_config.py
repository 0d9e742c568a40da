from dataclasses import dataclass, field

from diff_note.core.domain.diff.diff_patterns import CATEGORY_LINE_LIMITS, CATEGORY_TOKEN_BUDGET
from diff_note.core.domain.diff.value_objects.file_category import FileCategory
from diff_note.core.exceptions import ConfigurationError


@dataclass(frozen=True, kw_only=True)
class DiffProcessorConfig:
    """Budget and rendering knobs for the diff pipeline.

    Defaults reproduce the built-in tables; every FileCategory must be
    present in both tables.
    """

    token_budgets: dict[FileCategory, int] = field(default_factory=lambda: dict(CATEGORY_TOKEN_BUDGET))
    line_limits: dict[FileCategory, int] = field(default_factory=lambda: dict(CATEGORY_LINE_LIMITS))
    max_change_length: int = 100
    chars_per_token: int = 4
    legacy_changes_per_file: int = 5

    def __post_init__(self) -> None:
        _check_table("token_budgets", self.token_budgets)
        _check_table("line_limits", self.line_limits)
        if self.chars_per_token <= 0:
            raise ConfigurationError(
                "chars_per_token must be positive.", context={"value": self.chars_per_token}
            )
        if self.max_change_length <= 0 or self.legacy_changes_per_file <= 0:
            raise ConfigurationError(
                "max_change_length and legacy_changes_per_file must be positive.",
                context={
                    "max_change_length": self.max_change_length,
                    "legacy_changes_per_file": self.legacy_changes_per_file,
                },
            )


def _check_table(name: str, table: dict[FileCategory, int]) -> None:
    missing = [str(c) for c in FileCategory if c not in table]
    if missing:
        raise ConfigurationError(f"{name} is missing categories.", context={"missing": missing})
    negative = {str(c): v for c, v in table.items() if v < 0}
    if negative:
        raise ConfigurationError(f"{name} has negative values.", context={"values": negative})

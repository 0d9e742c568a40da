from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from diff_note.core.application.diff.config.diff_processor_config import DiffProcessorConfig
from diff_note.core.application.policies.review_skip_policy import ReviewSkipPolicy
from diff_note.core.domain.diff.diff_patterns import CATEGORY_LINE_LIMITS, CATEGORY_TOKEN_BUDGET
from diff_note.core.domain.diff.value_objects.file_category import FileCategory


class DiffSettings(BaseSettings):
    """Environment-driven budgets and thresholds for the diff pipeline."""

    # ── Budgets ──
    category_token_budgets: dict[FileCategory, int] = Field(
        default_factory=lambda: dict(CATEGORY_TOKEN_BUDGET),
        alias="DIFF_CATEGORY_TOKEN_BUDGETS",
        description="JSON object, category -> token budget. Missing categories keep their default.",
    )
    category_line_limits: dict[FileCategory, int] = Field(
        default_factory=lambda: dict(CATEGORY_LINE_LIMITS),
        alias="DIFF_CATEGORY_LINE_LIMITS",
        description="JSON object, category -> max changes kept per file.",
    )
    max_change_length: int = Field(default=100, alias="DIFF_MAX_CHANGE_LENGTH")
    chars_per_token: int = Field(default=4, alias="DIFF_CHARS_PER_TOKEN")
    legacy_changes_per_file: int = Field(default=5, alias="DIFF_LEGACY_CHANGES_PER_FILE")

    # ── Skip policy ──
    skip_label: str = Field(default="skip-doc", alias="DIFF_SKIP_LABEL")
    min_changed_lines: int = Field(default=10, alias="DIFF_MIN_CHANGED_LINES")

    @field_validator("category_token_budgets", mode="after")
    @classmethod
    def merge_token_budgets(cls, value: dict[FileCategory, int]) -> dict[FileCategory, int]:
        return {**CATEGORY_TOKEN_BUDGET, **value}

    @field_validator("category_line_limits", mode="after")
    @classmethod
    def merge_line_limits(cls, value: dict[FileCategory, int]) -> dict[FileCategory, int]:
        return {**CATEGORY_LINE_LIMITS, **value}

    def to_processor_config(self) -> DiffProcessorConfig:
        """Build the core config; raises ConfigurationError on invalid values."""
        return DiffProcessorConfig(
            token_budgets=dict(self.category_token_budgets),
            line_limits=dict(self.category_line_limits),
            max_change_length=self.max_change_length,
            chars_per_token=self.chars_per_token,
            legacy_changes_per_file=self.legacy_changes_per_file,
        )

    def to_skip_policy(self) -> ReviewSkipPolicy:
        return ReviewSkipPolicy(
            skip_label=self.skip_label, min_changed_lines=self.min_changed_lines
        )

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", populate_by_name=True)

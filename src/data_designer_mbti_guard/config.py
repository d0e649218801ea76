from __future__ import annotations

from typing import Literal

from pydantic import Field, field_validator

from data_designer.config.column_configs import SingleColumnConfig

from data_designer_mbti_guard.core import validate_personality_type


class MbtiGuardColumnConfig(SingleColumnConfig):
    """Score text columns for phrasing that hurts a recipient of a given MBTI type.

    Runs the rule-based landmine-phrase scorer against each row's text and produces
    a safety score (0-100, higher is safer), a risk band, reasons, and a rewritten
    version of the text.

    Attributes:
        target_columns: Columns whose text content will be concatenated and scored.
        personality_type: Recipient MBTI code used for every row (e.g. ``"INFP"``).
        personality_column: Optional column holding a per-row MBTI code. Rows with
            a value there use it instead of ``personality_type``.
        min_score: Minimum safety score (0-100) for ``is_valid=True``. Defaults to 60
            (the boundary between partial conflict and minor tuning).
        include_reasons: Include the reason sentences in output.
        include_findings: Include raw findings (phrase, reason, category, damage).
        include_improved_text: Include the rewritten text in output.
    """

    target_columns: list[str]
    personality_type: str = Field(default="INFP", description="Recipient MBTI code")
    personality_column: str | None = Field(default=None, description="Column with a per-row MBTI code")
    min_score: int = Field(default=60, ge=0, le=100, description="Minimum safety score for is_valid=True")
    include_reasons: bool = Field(default=True, description="Include reason sentences in output")
    include_findings: bool = Field(default=False, description="Include raw findings in output")
    include_improved_text: bool = Field(default=True, description="Include the rewritten text in output")
    column_type: Literal["mbti-guard"] = "mbti-guard"

    @field_validator("personality_type")
    @classmethod
    def _check_personality_type(cls, value: str) -> str:
        return validate_personality_type(value)

    @staticmethod
    def get_column_emoji() -> str:
        return "\U0001f4a3"

    @property
    def required_columns(self) -> list[str]:
        if self.personality_column:
            return [*self.target_columns, self.personality_column]
        return self.target_columns

    @property
    def side_effect_columns(self) -> list[str]:
        return []

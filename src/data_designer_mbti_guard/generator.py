from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from data_designer.engine.column_generators.generators.base import ColumnGeneratorFullColumn

from data_designer_mbti_guard.config import MbtiGuardColumnConfig
from data_designer_mbti_guard.core import InvalidInputError, analyze_text

if TYPE_CHECKING:
    import pandas as pd

logger = logging.getLogger(__name__)


def score_row(text: str, personality_type: str, config: MbtiGuardColumnConfig) -> dict:
    """Build the column value for one row."""
    try:
        analysis = analyze_text(text, personality_type)
    except InvalidInputError as exc:
        logger.warning(f"   skipping row: {exc}")
        return {"is_valid": False, "safety_score": None, "risk_band": None, "error": str(exc)}

    output: dict = {
        "is_valid": analysis["score"] >= config.min_score,
        "safety_score": analysis["score"],
        "risk_band": analysis["band"],
        "finding_count": len(analysis["findings"]),
    }
    if config.include_reasons:
        output["reasons"] = analysis["reasons"]
    if config.include_findings:
        output["findings"] = analysis["findings"]
        output["counts"] = analysis["counts"]
    if config.include_improved_text:
        output["improved_text"] = analysis["improved_text"]
    return output


class MbtiGuardColumnGenerator(ColumnGeneratorFullColumn[MbtiGuardColumnConfig]):
    """Column generator that scores text for MBTI landmine phrases via dictionary rules."""

    def generate(self, data: pd.DataFrame) -> pd.DataFrame:
        logger.info(f"\U0001f4a3 Scoring column {self.config.name!r} for MBTI landmine phrases")
        logger.info(f"   target columns: {self.config.target_columns}")
        logger.info(f"   personality: {self.config.personality_column or self.config.personality_type}")
        logger.info(f"   min_score: {self.config.min_score}")

        results = []
        for _, row in data.iterrows():
            text = " ".join(str(row[c]) for c in self.config.target_columns if row[c] is not None)
            personality_type = self.config.personality_type
            if self.config.personality_column:
                # missing cells come through as None or NaN
                override = row[self.config.personality_column]
                if isinstance(override, str) and override.strip():
                    personality_type = override.strip()
            results.append(score_row(text, personality_type, self.config))

        data = data.copy()
        data[self.config.name] = results
        return data

# SPDX-License-Identifier: Apache-2.0
"""MBTI Guard plugin for NeMo Data Designer.

Adds an ``mbti-guard`` column type that scores text for phrasing likely to hurt
a recipient of a given MBTI type, using fixed insult and psychological-category
dictionaries weighted by per-type sensitivity. No LLM calls, no API dependencies.

Usage::

    from data_designer_mbti_guard import MbtiGuardColumnConfig

    builder.add_column(MbtiGuardColumnConfig(
        name="landmine_check",
        target_columns=["message"],
        personality_type="INFP",
        min_score=60,
    ))
"""

from data_designer_mbti_guard.config import MbtiGuardColumnConfig
from data_designer_mbti_guard.core import Hyperparameters, InvalidInputError, analyze_text

__all__ = ["MbtiGuardColumnConfig", "analyze_text", "Hyperparameters", "InvalidInputError"]

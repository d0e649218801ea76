# Rule-based landmine-phrase scorer for messages aimed at a known MBTI type.
#
# Normalizes the text, matches it against fixed insult and psychological
# category dictionaries, weights category hits by the recipient's sensitivity
# profile, and returns a safety score (0-100), reasons, findings, and a
# rewritten version of the message. No LLM calls, no I/O.

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass, replace
from typing import Iterable

from data_designer_mbti_guard import lexicon
from data_designer_mbti_guard.lexicon import DIRECT_INSULT

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Hyperparameters
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Hyperparameters:
    """Tunable weights, caps, and thresholds used by the scorer."""

    damage_exponent: float = 1.3
    damage_scale: float = 2.0
    personality_spread: int = 10

    insult_cap: int = 30
    insult_cap_step: int = 20
    ultra_severe_cap: int = 5

    emphasis_burst_penalty: int = 15
    exclamation_heavy_min: int = 3
    exclamation_heavy_penalty: int = 8
    exclamation_light_penalty: int = 1
    question_run_long_penalty: int = 15
    question_run_penalty: int = 8
    katakana_emphasis_penalty: int = 15
    imperative_penalty: int = 10
    negation_min: int = 3
    negation_penalty: int = 5

    long_text_chars: int = 200
    long_text_penalty: int = 2
    short_text_chars: int = 5
    short_text_penalty: int = 3
    compounding_min_categories: int = 3
    compounding_penalty: int = 5

    danger_multiplier: float = 1.8
    caution_multiplier: float = 1.3
    reason_top_categories: int = 3

    score_min: int = 0
    score_max: int = 100
    severe_breach_max: int = 20
    rewrite_recommended_max: int = 40
    partial_conflict_max: int = 60
    minor_tuning_max: int = 80

    band_landmine_risk: int = 60
    band_danger_risk: int = 30
    band_caution_risk: int = 10


DEFAULT_HYPERPARAMETERS = Hyperparameters()


class InvalidInputError(ValueError):
    """Raised when the text is blank or the personality type is not one of the 16 codes."""


# ---------------------------------------------------------------------------
# Dataclasses
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Finding:
    phrase: str
    reason: str
    category: str
    personality_types: tuple[str, ...]
    damage: float

    def to_payload(self) -> dict[str, object]:
        return {
            "phrase": self.phrase,
            "reason": self.reason,
            "category": self.category,
            "personality_types": list(self.personality_types),
            "damage": round(self.damage, 2),
        }


@dataclass(frozen=True)
class CategoryScan:
    findings: list[Finding]
    base_damage: dict[str, float]
    weighted_damage: dict[str, float]


@dataclass(frozen=True)
class Correction:
    penalty: int
    reasons: tuple[str, ...]


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

_HANKAKU = "ｦｧｨｩｪｫｬｭｮｯｰｱｲｳｴｵｶｷｸｹｺｻｼｽｾｿﾀﾁﾂﾃﾄﾅﾆﾇﾈﾉﾊﾋﾌﾍﾎﾏﾐﾑﾒﾓﾔﾕﾖﾗﾘﾙﾚﾛﾜﾝﾞﾟ"
_ZENKAKU = "ヲァィゥェォャュョッーアイウエオカキクケコサシスセソタチツテトナニヌネノハヒフヘホマミムメモヤユヨラリルレロワン゛゜"

_FOLD_TABLE = {
    **{code: code - 0xFEE0 for code in range(ord("Ａ"), ord("Ｚ") + 1)},
    **{code: code - 0xFEE0 for code in range(ord("ａ"), ord("ｚ") + 1)},
    **{code: code - 0xFEE0 for code in range(ord("０"), ord("９") + 1)},
    **str.maketrans(_HANKAKU, _ZENKAKU),
}

# ASCII controls U+001C-U+001F and U+0085 are kept; U+FEFF is dropped.
_WHITESPACE_RE = re.compile("[\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff]+")


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def _band(score: int, hp: Hyperparameters) -> str:
    risk = hp.score_max - score
    if risk >= hp.band_landmine_risk:
        return "landmine"
    if risk >= hp.band_danger_risk:
        return "danger"
    if risk >= hp.band_caution_risk:
        return "caution"
    return "safe"


def _is_quoted(normalized: str, start: int) -> bool:
    after = normalized[start:]
    return any(suffix in after for suffix in lexicon.QUOTE_SUFFIXES)


def validate_personality_type(code: str) -> str:
    """Return the upper-cased code, or raise ``InvalidInputError``."""
    if not isinstance(code, str) or not lexicon.PERSONALITY_TYPE_RE.fullmatch(code):
        raise InvalidInputError(f"personality type must be one of the 16 MBTI codes (e.g. INFP), got {code!r}")
    return code.upper()


def sensitivity(personality_type: str, category: str) -> float:
    return lexicon.SENSITIVITY.get(personality_type, {}).get(category, 1.0)


# ---------------------------------------------------------------------------
# Pipeline stages
# ---------------------------------------------------------------------------


def normalize(text: str) -> str:
    """Canonicalize text for dictionary matching.

    Drops whitespace (including U+3000 and U+FEFF), folds full-width Latin
    letters and digits to ASCII and half-width katakana to full width, then
    lower-cases. Only used for matching; user-facing output keeps the original text.
    """
    return _WHITESPACE_RE.sub("", text).translate(_FOLD_TABLE).lower()


def detect_insults(normalized: str) -> tuple[list[Finding], int, bool]:
    """Find direct insults, skipping ones the writer is quoting.

    Returns the findings, how many insults counted, and whether any of them was
    ultra severe. Insult damage is fixed and ignores personality sensitivity.
    """
    base = lexicon.CATEGORIES[DIRECT_INSULT].base_severity
    findings: list[Finding] = []
    seen: set[str] = set()
    ultra = False
    for entry in lexicon.INSULTS:
        for phrase in entry.phrases:
            idx = normalized.find(phrase)
            if idx == -1:
                continue
            if not _is_quoted(normalized, idx) and phrase not in seen:
                seen.add(phrase)
                ultra = ultra or entry.ultra_severe
                findings.append(Finding(phrase, entry.reason, DIRECT_INSULT, (), base))
            break
    return findings, len(findings), ultra


def detect_categories(normalized: str, personality_type: str, seen: Iterable[str] = ()) -> CategoryScan:
    """Match every category entry; at most one finding per entry.

    ``seen`` holds phrases already reported by an earlier stage so the same
    phrase never yields two findings.
    """
    reported = set(seen)
    findings: list[Finding] = []
    base_damage: dict[str, float] = {}
    weighted_damage: dict[str, float] = {}
    for cat_id, entries in lexicon.CATEGORY_PATTERNS.items():
        category = lexicon.CATEGORIES.get(cat_id)
        base = category.base_severity if category else 3
        mult = sensitivity(personality_type, cat_id)
        for entry in entries:
            phrase = next((p for p in entry.phrases if p in normalized), None)
            if phrase is None or phrase in reported:
                continue
            reported.add(phrase)
            damage = base * mult
            base_damage[cat_id] = base_damage.get(cat_id, 0) + base
            weighted_damage[cat_id] = weighted_damage.get(cat_id, 0) + damage
            findings.append(Finding(phrase, entry.reason, cat_id, (personality_type,), damage))
    return CategoryScan(findings, base_damage, weighted_damage)


def tone_correction(text: str, normalized: str, hp: Hyperparameters = DEFAULT_HYPERPARAMETERS) -> Correction:
    """Penalize surface features of the message: punctuation bursts, mocking katakana, commands, negation."""
    penalty = 0
    reasons: list[str] = []

    if lexicon.EMPHASIS_BURST_RE.search(text):
        penalty += hp.emphasis_burst_penalty
        reasons.append(lexicon.EMPHASIS_BURST_REASON)
    else:
        exclamations = len(lexicon.EXCLAMATION_RE.findall(text))
        if exclamations >= hp.exclamation_heavy_min:
            penalty += hp.exclamation_heavy_penalty
            reasons.append(lexicon.EXCLAMATION_HEAVY_REASON)
        elif exclamations:
            penalty += hp.exclamation_light_penalty

    if lexicon.QUESTION_RUN_LONG_RE.search(text):
        penalty += hp.question_run_long_penalty
        reasons.append(lexicon.QUESTION_RUN_LONG_REASON)
    elif lexicon.QUESTION_RUN_RE.search(text):
        penalty += hp.question_run_penalty
        reasons.append(lexicon.QUESTION_RUN_REASON)

    if lexicon.KATAKANA_EMPHASIS_RE.search(normalized):
        penalty += hp.katakana_emphasis_penalty
        reasons.append(lexicon.KATAKANA_EMPHASIS_REASON)

    if lexicon.IMPERATIVE_RE.search(normalized):
        penalty += hp.imperative_penalty
        reasons.append(lexicon.IMPERATIVE_REASON)

    if len(lexicon.NEGATION_RE.findall(normalized)) >= hp.negation_min:
        penalty += hp.negation_penalty
        reasons.append(lexicon.NEGATION_REASON)

    return Correction(penalty, tuple(reasons))


def pressure_correction(normalized: str, categories_hit: int, hp: Hyperparameters = DEFAULT_HYPERPARAMETERS) -> Correction:
    penalty = 0
    reasons: list[str] = []
    length = len(normalized)
    if length > hp.long_text_chars:
        penalty += hp.long_text_penalty
        reasons.append(lexicon.LONG_TEXT_REASON)
    if 0 < length < hp.short_text_chars:
        penalty += hp.short_text_penalty
        reasons.append(lexicon.SHORT_TEXT_REASON)
    if categories_hit >= hp.compounding_min_categories:
        penalty += hp.compounding_penalty
        reasons.append(lexicon.COMPOUNDING_REASON)
    return Correction(penalty, tuple(reasons))


def _raw_score(total_damage: float, corrections: int, hp: Hyperparameters) -> int:
    deduction = (total_damage ** hp.damage_exponent) * hp.damage_scale + corrections
    return int(_clamp(_round_half_up(hp.score_max - deduction), hp.score_min, hp.score_max))


def _category_reason(cat_id: str, personality_type: str, hp: Hyperparameters) -> str | None:
    category = lexicon.CATEGORIES.get(cat_id)
    if category is None:
        return None
    mult = sensitivity(personality_type, cat_id)
    if mult >= hp.danger_multiplier:
        template = lexicon.DANGER_REASON
    elif mult >= hp.caution_multiplier:
        template = lexicon.CAUTION_REASON
    else:
        template = lexicon.NEUTRAL_REASON
    return template.format(label=category.label, ptype=personality_type, description=category.description)


def _summary_reason(score: int, hp: Hyperparameters) -> str | None:
    if score <= hp.severe_breach_max:
        return lexicon.SEVERE_BREACH_REASON
    if score <= hp.rewrite_recommended_max:
        return lexicon.REWRITE_RECOMMENDED_REASON
    if score <= hp.partial_conflict_max:
        return lexicon.PARTIAL_CONFLICT_REASON
    if score <= hp.minor_tuning_max:
        return lexicon.MINOR_TUNING_REASON
    return None


def compute_score(
    total_base_damage: float,
    total_weighted_damage: float,
    tone: Correction,
    pressure: Correction,
    insult_count: int,
    has_ultra_severe: bool,
    *,
    personality_type: str,
    category_damage: dict[str, float],
    detected: bool,
    hp: Hyperparameters = DEFAULT_HYPERPARAMETERS,
) -> tuple[int, list[str]]:
    """Turn accumulated damage and corrections into a bounded score and reasons.

    Damage is scaled by a convex power law, once personality-agnostic and once
    weighted. The weighted score may not stray more than
    ``hp.personality_spread`` from the agnostic one. Insults then cap the
    result regardless of personality.
    """
    corrections = tone.penalty + pressure.penalty
    base_score = _raw_score(total_base_damage, corrections, hp)
    weighted_score = _raw_score(total_weighted_damage, corrections, hp)
    score = int(_clamp(
        _clamp(weighted_score, base_score - hp.personality_spread, base_score + hp.personality_spread),
        hp.score_min,
        hp.score_max,
    ))

    if has_ultra_severe:
        score = min(score, hp.ultra_severe_cap)
    elif insult_count > 0:
        score = min(score, max(0, hp.insult_cap - (insult_count - 1) * hp.insult_cap_step))

    if not detected and corrections == 0:
        return score, [r.format(ptype=personality_type) for r in lexicon.SAFE_REASONS]

    reasons: list[str] = []
    ranked = sorted(category_damage.items(), key=lambda kv: kv[1], reverse=True)
    for cat_id, _damage in ranked[: hp.reason_top_categories]:
        reason = _category_reason(cat_id, personality_type, hp)
        if reason:
            reasons.append(reason)
    summary = _summary_reason(score, hp)
    if summary:
        reasons.append(summary)
    reasons.extend(tone.reasons)
    reasons.extend(pressure.reasons)
    return score, reasons


def _replacement(phrase: str, category: str) -> str:
    template = lexicon.REPLACEMENT_TEMPLATES.get(category)
    if template is None:
        return phrase
    return f"（{phrase}→）{template}"


def rewrite(text: str, findings: list[Finding]) -> str:
    """Produce a softer version of ``text``. Best effort.

    Findings are handled in detection order. Each one first tries the
    structural rule groups mapped to its category; the first rule that matches
    replaces all of its occurrences. Otherwise the finding's phrase, if still
    present, is swapped for a category template. The assertion rules then run
    once more over the whole text.

    Rules see the text as left by earlier findings, so one substitution can
    remove text a later finding expected to rewrite, and the output depends on
    finding order.
    """
    improved = text
    for finding in findings:
        transformed = False
        for group in lexicon.CATEGORY_RULE_GROUPS.get(finding.category, ()):
            for rule in lexicon.TRANSFORM_RULES[group]:
                improved, count = rule.pattern.subn(rule.replacement, improved)
                if count:
                    transformed = True
                    break
            if transformed:
                break
        if not transformed and finding.phrase in improved:
            improved = improved.replace(finding.phrase, _replacement(finding.phrase, finding.category))

    for rule in lexicon.TRANSFORM_RULES["assertion"]:
        improved = rule.pattern.sub(rule.replacement, improved)
    return improved


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def analyze_text(text: str, personality_type: str, hyperparameters: Hyperparameters | None = None) -> dict:
    """Score a message for phrasing that hurts a recipient of the given type.

    Args:
        text: The message to analyze. Leading/trailing whitespace is ignored.
        personality_type: One of the 16 MBTI codes, case-insensitive.
        hyperparameters: Optional tuning overrides. Uses defaults if omitted.

    Returns:
        Dict with keys: score (0-100, higher is safer), band, reasons,
        findings, improved_text, counts, base_damage, weighted_damage,
        tone_penalty, pressure_penalty.

    Raises:
        InvalidInputError: If the text is blank or the type is not a valid code.
    """
    hp = hyperparameters or DEFAULT_HYPERPARAMETERS
    if not isinstance(text, str) or not text.strip():
        raise InvalidInputError("text must not be empty")
    ptype = validate_personality_type(personality_type)
    text = text.strip()
    normalized = normalize(text)

    insults, insult_count, ultra = detect_insults(normalized)
    insults = [replace(f, personality_types=(ptype,)) for f in insults]
    scan = detect_categories(normalized, ptype, seen=(f.phrase for f in insults))

    base_damage = dict(scan.base_damage)
    weighted_damage = dict(scan.weighted_damage)
    if insults:
        insult_damage = sum(f.damage for f in insults)
        # direct_insult stays first so it wins ties when reasons are ranked.
        base_damage = {DIRECT_INSULT: insult_damage, **base_damage}
        weighted_damage = {DIRECT_INSULT: insult_damage, **weighted_damage}

    findings = insults + scan.findings
    tone = tone_correction(text, normalized, hp)
    pressure = pressure_correction(normalized, len(weighted_damage), hp)
    total_base = sum(base_damage.values())
    total_weighted = sum(weighted_damage.values())

    score, reasons = compute_score(
        total_base, total_weighted, tone, pressure, insult_count, ultra,
        personality_type=ptype, category_damage=weighted_damage, detected=bool(findings), hp=hp,
    )
    improved = rewrite(text, findings)

    counts: dict[str, int] = {}
    for f in findings:
        counts[f.category] = counts.get(f.category, 0) + 1

    logger.debug(f"analyzed {len(text)} chars for {ptype}: score={score} findings={len(findings)}")

    return {
        "score": score,
        "band": _band(score, hp),
        "reasons": reasons,
        "findings": [f.to_payload() for f in findings],
        "improved_text": improved,
        "counts": counts,
        "base_damage": round(total_base, 2),
        "weighted_damage": round(total_weighted, 2),
        "tone_penalty": tone.penalty,
        "pressure_penalty": pressure.penalty,
    }

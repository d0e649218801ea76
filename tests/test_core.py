import pytest

from data_designer_mbti_guard import lexicon
from data_designer_mbti_guard.core import (
    Correction,
    Finding,
    Hyperparameters,
    InvalidInputError,
    analyze_text,
    compute_score,
    detect_categories,
    detect_insults,
    normalize,
    pressure_correction,
    rewrite,
    sensitivity,
    tone_correction,
)


NEUTRAL_TEXT = "今日はいい天気ですね。散歩に行きましょう。"

IDEAL_DENIAL_TEXT = "現実を見ろ！！"

MIXED_TEXT = "いつも言ってるけど、現実を見なよ。気にしすぎだし、みんなそうしてるでしょ"

NO_CORRECTION = Correction(0, ())


class TestAnalyzeText:
    def test_neutral_text_scores_full(self):
        result = analyze_text(NEUTRAL_TEXT, "INFP")
        assert result["score"] == 100
        assert result["band"] == "safe"
        assert result["findings"] == []
        assert result["reasons"] == [
            "INFP の心理的安全性を脅かす表現は検出されませんでした。",
            "相手の価値観を尊重した安全なメッセージです。",
        ]
        assert result["improved_text"] == NEUTRAL_TEXT

    def test_ideal_denial_for_infp(self):
        result = analyze_text(IDEAL_DENIAL_TEXT, "INFP")
        assert [f["phrase"] for f in result["findings"]] == ["現実を見"]
        assert result["findings"][0]["category"] == "ideal_denial"
        assert result["findings"][0]["damage"] == 10.0
        assert result["tone_penalty"] == 15
        assert result["score"] == 59
        assert result["band"] == "danger"
        assert result["score"] < analyze_text(NEUTRAL_TEXT, "INFP")["score"]
        assert result["improved_text"] != IDEAL_DENIAL_TEXT
        assert result["improved_text"].startswith("（現実を見→）")
        assert result["reasons"][0].startswith("【危険】理想・価値観の否定: INFP")
        assert lexicon.PARTIAL_CONFLICT_REASON in result["reasons"]
        assert result["reasons"][-1] == lexicon.EMPHASIS_BURST_REASON

    def test_less_sensitive_type_scores_higher(self):
        assert analyze_text(IDEAL_DENIAL_TEXT, "ISTP")["score"] == 73
        assert analyze_text(IDEAL_DENIAL_TEXT, "ISTP")["score"] > analyze_text(IDEAL_DENIAL_TEXT, "INFP")["score"]

    def test_result_shape(self):
        result = analyze_text(MIXED_TEXT, "ENFP")
        expected_keys = {
            "score", "band", "reasons", "findings", "improved_text", "counts",
            "base_damage", "weighted_damage", "tone_penalty", "pressure_penalty",
        }
        assert expected_keys == set(result.keys())
        for f in result["findings"]:
            assert set(f.keys()) == {"phrase", "reason", "category", "personality_types", "damage"}
            assert f["personality_types"] == ["ENFP"]

    @pytest.mark.parametrize("ptype", lexicon.PERSONALITY_TYPES)
    def test_score_is_bounded_int(self, ptype):
        for text in (NEUTRAL_TEXT, IDEAL_DENIAL_TEXT, MIXED_TEXT, "バカ", "!!??"):
            score = analyze_text(text, ptype)["score"]
            assert isinstance(score, int)
            assert 0 <= score <= 100

    def test_personality_divergence_is_bounded(self):
        for text in (IDEAL_DENIAL_TEXT, MIXED_TEXT):
            scores = [analyze_text(text, t)["score"] for t in lexicon.PERSONALITY_TYPES]
            assert max(scores) - min(scores) <= 20

    def test_zero_spread_removes_personality_effect(self):
        hp = Hyperparameters(personality_spread=0)
        scores = {analyze_text(MIXED_TEXT, t, hyperparameters=hp)["score"] for t in lexicon.PERSONALITY_TYPES}
        assert len(scores) == 1

    def test_findings_order_insults_first(self):
        result = analyze_text("バカ、いつも現実を見ないよね", "INFP")
        assert [f["category"] for f in result["findings"]] == ["direct_insult", "ideal_denial", "generalization"]
        assert result["counts"] == {"direct_insult": 1, "ideal_denial": 1, "generalization": 1}
        assert lexicon.COMPOUNDING_REASON in result["reasons"]

    def test_lowercase_type_is_accepted(self):
        result = analyze_text(IDEAL_DENIAL_TEXT, "infp")
        assert result["findings"][0]["personality_types"] == ["INFP"]

    def test_surrounding_whitespace_is_ignored(self):
        assert analyze_text(f"  {IDEAL_DENIAL_TEXT}\n", "INFP") == analyze_text(IDEAL_DENIAL_TEXT, "INFP")


class TestInvalidInput:
    @pytest.mark.parametrize("text", ["", "   ", "　\n\t"])
    def test_blank_text(self, text):
        with pytest.raises(InvalidInputError):
            analyze_text(text, "INFP")

    @pytest.mark.parametrize("ptype", ["ABCD", "INF", "INFPX", "", "XNFP", "INFP\n", " INFP"])
    def test_bad_personality_type(self, ptype):
        with pytest.raises(InvalidInputError):
            analyze_text("こんにちは", ptype)

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            analyze_text("", "INFP")


class TestInsults:
    def test_single_insult_caps_at_30(self):
        result = analyze_text("バカ", "INFP")
        assert result["score"] == 30
        assert result["band"] == "landmine"
        assert result["counts"] == {"direct_insult": 1}
        assert result["reasons"][0] == "直接侮辱: 人格を直接攻撃する侮辱表現が含まれています。"

    def test_two_insults_cap_at_10(self):
        for ptype in lexicon.PERSONALITY_TYPES:
            assert analyze_text("バカだしアホだ", ptype)["score"] <= 10

    @pytest.mark.parametrize("ptype", lexicon.PERSONALITY_TYPES)
    def test_ultra_severe_caps_at_5(self, ptype):
        assert analyze_text("死ね", ptype)["score"] == 5
        assert analyze_text("そんなこと言うなら死ねばいいのに", ptype)["score"] <= 5

    def test_quoted_insult_is_ignored(self):
        quoted = analyze_text("バカって言われた", "INFP")
        assert all(f["category"] != "direct_insult" for f in quoted["findings"])
        plain = analyze_text("バカ", "INFP")
        assert [f["category"] for f in plain["findings"]] == ["direct_insult"]

    def test_adding_an_insult_never_raises_score(self):
        base = "いつも遅刻するよね"
        for ptype in lexicon.PERSONALITY_TYPES:
            assert analyze_text(base + "、バカ", ptype)["score"] <= analyze_text(base, ptype)["score"]

    def test_detect_insults_flags_ultra_severe(self):
        findings, count, ultra = detect_insults(normalize("お前なんか死ね"))
        assert [f.phrase for f in findings] == ["死ね", "お前"]
        assert count == 2
        assert ultra is True

    def test_half_width_katakana_insult(self):
        findings, count, ultra = detect_insults(normalize("ｱﾎ"))
        assert [f.phrase for f in findings] == ["アホ"]
        assert count == 1
        assert ultra is False


class TestNormalize:
    def test_full_width_and_spaces(self):
        assert normalize("Ｈｅｌｌｏ　Ｗｏｒｌｄ １２３") == "helloworld123"

    def test_all_whitespace_removed(self):
        assert normalize("a b\tc\nd") == "abcd"

    def test_byte_order_mark_removed_but_separators_kept(self):
        assert normalize("\ufeffa\u00a0b") == "ab"
        assert normalize("a\x1cb\x85c") == "a\x1cb\x85c"

    def test_half_width_katakana(self):
        assert normalize("ｱｲｳｴｵ") == "アイウエオ"
        assert normalize("ﾊﾞｶ") == "ハ゛カ"

    def test_unmapped_characters_kept(self):
        assert normalize("漢字ひらがな！？") == "漢字ひらがな！？"

    @pytest.mark.parametrize("text", [MIXED_TEXT, "ＡＢＣ ｶﾀｶﾅ　Text", IDEAL_DENIAL_TEXT, "  "])
    def test_idempotent(self, text):
        assert normalize(normalize(text)) == normalize(text)


class TestCategories:
    def test_weighted_damage(self):
        scan = detect_categories(normalize("気にしすぎ"), "INFJ")
        assert [(f.phrase, f.category) for f in scan.findings] == [("気にしすぎ", "emotional_dismiss")]
        assert scan.findings[0].damage == 10.0
        assert scan.base_damage == {"emotional_dismiss": 5}
        assert scan.weighted_damage == {"emotional_dismiss": 10.0}

    def test_first_phrase_in_entry_wins(self):
        scan = detect_categories(normalize("それはダメだ"), "INFP")
        assert [f.phrase for f in scan.findings] == ["ダメ"]

    def test_seen_phrases_are_skipped(self):
        scan = detect_categories(normalize("気にしすぎ"), "INFP", seen={"気にしすぎ"})
        assert scan.findings == []
        assert scan.weighted_damage == {}

    def test_every_type_has_every_category(self):
        weighted = set(lexicon.CATEGORIES) - {lexicon.DIRECT_INSULT}
        assert set(lexicon.SENSITIVITY) == set(lexicon.PERSONALITY_TYPES)
        for row in lexicon.SENSITIVITY.values():
            assert set(row) == weighted

    def test_sensitivity_defaults_to_one(self):
        assert sensitivity("INFP", "ideal_denial") == 2.0
        assert sensitivity("INFP", "direct_insult") == 1.0
        assert sensitivity("XXXX", "command") == 1.0


class TestCorrections:
    def test_emphasis_burst(self):
        tone = tone_correction("なに？！", normalize("なに？！"))
        assert tone.penalty == 15
        assert tone.reasons == (lexicon.EMPHASIS_BURST_REASON,)

    def test_double_exclamation_takes_priority(self):
        assert tone_correction("すごい!!!", "すごい!!!").penalty == 15

    def test_scattered_exclamations(self):
        tone = tone_correction("すごい!すごい!すごい!", "すごい!すごい!すごい!")
        assert tone.penalty == 8
        assert tone.reasons == (lexicon.EXCLAMATION_HEAVY_REASON,)

    def test_single_exclamation_has_no_reason(self):
        tone = tone_correction("すごい!", "すごい!")
        assert tone.penalty == 1
        assert tone.reasons == ()

    def test_question_runs(self):
        assert tone_correction("なんで???", "なんで???").penalty == 15
        assert tone_correction("本当??", "本当??").reasons == (lexicon.QUESTION_RUN_REASON,)

    def test_katakana_emphasis(self):
        tone = tone_correction("マジデ無理", normalize("マジデ無理"))
        assert tone.penalty == 15
        assert tone.reasons == (lexicon.KATAKANA_EMPHASIS_REASON,)

    def test_imperative(self):
        tone = tone_correction("静かにしろ", normalize("静かにしろ"))
        assert tone.penalty == 10
        assert tone.reasons == (lexicon.IMPERATIVE_REASON,)

    def test_accumulated_negation(self):
        text = "できないし、わからないし、行かない"
        tone = tone_correction(text, normalize(text))
        assert tone.penalty == 5
        assert tone.reasons == (lexicon.NEGATION_REASON,)

    def test_pressure(self):
        assert pressure_correction("a" * 201, 0).penalty == 2
        assert pressure_correction("abcd", 0).reasons == (lexicon.SHORT_TEXT_REASON,)
        assert pressure_correction("", 0).penalty == 0
        assert pressure_correction("abcdef", 3).reasons == (lexicon.COMPOUNDING_REASON,)


class TestComputeScore:
    def _score(self, base, weighted, insults=0, ultra=False, ptype="INFP", damage=None):
        return compute_score(
            base, weighted, NO_CORRECTION, NO_CORRECTION, insults, ultra,
            personality_type=ptype, category_damage=damage or {}, detected=bool(damage),
        )

    def test_nothing_detected(self):
        score, reasons = self._score(0, 0)
        assert score == 100
        assert len(reasons) == 2

    def test_weighted_score_is_clamped_to_base(self):
        assert self._score(5, 20, damage={"ideal_denial": 20})[0] == 74

    def test_insult_caps(self):
        assert self._score(10, 10, insults=1, damage={"direct_insult": 10})[0] == 30
        assert self._score(10, 10, insults=2, damage={"direct_insult": 10})[0] == 10
        assert self._score(10, 10, insults=3, damage={"direct_insult": 10})[0] == 0
        assert self._score(10, 10, insults=1, ultra=True, damage={"direct_insult": 10})[0] == 5

    def test_reason_framing_follows_multiplier(self):
        _, infp = self._score(5, 10, damage={"ideal_denial": 10}, ptype="INFP")
        _, istj = self._score(5, 7.5, damage={"ideal_denial": 7.5}, ptype="ISTJ")
        _, estj = self._score(5, 5, damage={"ideal_denial": 5}, ptype="ESTJ")
        assert infp[0].startswith("【危険】")
        assert istj[0].startswith("【注意】")
        assert estj[0].startswith("理想・価値観の否定:")

    def test_top_three_categories(self):
        damage = {"command": 4, "ideal_denial": 10, "comparison": 6, "conformity": 8}
        _, reasons = self._score(20, 28, damage=damage, ptype="ESTJ")
        labels = [r.split(": ")[0].removeprefix("【危険】").removeprefix("【注意】") for r in reasons[:3]]
        assert labels == ["理想・価値観の否定", "同調圧力", "比較・レッテル"]
        assert reasons[3] == lexicon.SEVERE_BREACH_REASON


class TestRewrite:
    @staticmethod
    def _finding(phrase, category):
        return Finding(phrase, "", category, ("INFP",), 1.0)

    def test_command_to_suggestion(self):
        assert analyze_text("ちゃんとしろ", "INFP")["improved_text"] == "ちゃんとしてみるのはどうかな？"

    def test_denial_to_empathy(self):
        improved = rewrite("どうせ無理、君にはできない", [self._finding("どうせ無理", "capability_deny")])
        assert improved == "無理、君にはは難しいかもしれないけど、まずやれることから始めてみない？"

    def test_comparison_to_affirmation(self):
        improved = rewrite("兄を見習え", [self._finding("怖い", "comparison")])
        assert improved == "あなたにはあなたの強みがあるよね。兄のこういう部分は参考になるかも"

    def test_template_fallback(self):
        improved = analyze_text("気にしすぎだよ", "INFP")["improved_text"]
        assert improved == "（気にしすぎ→）その気持ちは大切だよ。聞かせてくれてありがとうだよ"

    def test_insult_template(self):
        improved = rewrite("バカじゃないの", [self._finding("バカ", "direct_insult")])
        assert improved == "（バカ→）【この表現は削除すべきです】じゃないの"

    def test_final_assertion_pass_runs_without_findings(self):
        assert rewrite("それは間違いなく正しい", []) == "それはもしかすると正しい"

    def test_earlier_rewrite_can_consume_later_phrase(self):
        findings = [self._finding("ちゃんとしろ", "command_soft"), self._finding("しろよ", "command_soft")]
        assert rewrite("ちゃんとしろよ", findings) == "ちゃんとしてみるのはどうかな？よ"

    def test_uncovered_text_is_unchanged(self):
        assert rewrite("ありがとう", [self._finding("存在しない", "command")]) == "ありがとう"

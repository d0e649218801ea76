# Phrase and sensitivity tables for the MBTI landmine-phrase guard.
#
# All phrases are stored in their normalized form (no whitespace, half-width
# Latin, full-width katakana, lower case) because matching runs against
# normalized text.

from __future__ import annotations

import re
from dataclasses import dataclass

# ---------------------------------------------------------------------------
# Record types
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Category:
    id: str
    label: str
    base_severity: int
    description: str


@dataclass(frozen=True)
class PatternEntry:
    phrases: tuple[str, ...]
    reason: str
    ultra_severe: bool = False


@dataclass(frozen=True)
class TransformRule:
    pattern: re.Pattern[str]
    replacement: str


def _rule(pattern: str, replacement: str) -> TransformRule:
    return TransformRule(re.compile(pattern), replacement)


# ---------------------------------------------------------------------------
# Personality types
# ---------------------------------------------------------------------------

PERSONALITY_TYPES: tuple[str, ...] = (
    "INFP", "ENFP", "INFJ", "ENFJ",
    "INTJ", "ENTJ", "INTP", "ENTP",
    "ISFP", "ESFP", "ISTP", "ESTP",
    "ISFJ", "ESFJ", "ISTJ", "ESTJ",
)
PERSONALITY_TYPE_RE = re.compile(r"[EI][SN][TF][JP]", re.IGNORECASE)

# ---------------------------------------------------------------------------
# Categories
# ---------------------------------------------------------------------------

DIRECT_INSULT = "direct_insult"

CATEGORIES: dict[str, Category] = {
    c.id: c
    for c in (
        Category(DIRECT_INSULT, "直接侮辱", 10, "人格を直接攻撃する侮辱"),
        Category("ideal_denial", "理想・価値観の否定", 5, "相手の信念や理想を真っ向から否定する"),
        Category("command", "命令・支配", 4, "選択の自由を奪い、服従を強いる"),
        Category("command_soft", "柔らかい命令・圧力", 3, "励ましや指示の形をとりつつ暗に行動を強制する"),
        Category("comparison", "比較・レッテル", 4, "他者と比較して劣等感を植えつける"),
        Category("emotional_dismiss", "感情の軽視", 5, "感情を無意味・過剰と切り捨てる"),
        Category("identity_attack", "人格攻撃", 5, "性格や本質を否定する"),
        Category("conformity", "同調圧力", 4, "多数派に合わせることを強要する"),
        Category("capability_deny", "能力の否定", 4, "相手の力量や可能性を否定する"),
        Category("freedom_restrict", "自由の制限", 3, "行動や思考の自由を制限する"),
        Category("goodwill_reject", "善意の拒絶", 5, "善意からの行動を迷惑と退ける"),
        Category("privacy_invade", "境界侵害", 3, "心理的な境界を無視して踏み込む"),
        Category("past_blame", "過去の蒸し返し", 3, "過去の失敗を持ち出して攻撃する"),
        Category("vague_criticism", "曖昧な批判", 3, "具体性のない否定で逃げ場を奪う"),
        Category("generalization", "過度な一般化", 2, "「いつも」「絶対」で事実を歪める"),
        Category("interrogation_pressure", "詰問・追及", 5, "答えを追い詰め、繰り返しで無力感を与える"),
        Category("passive_aggressive", "受動攻撃", 4, "間接的に相手の価値を否定する冷淡な"),
    )
}

# ---------------------------------------------------------------------------
# Sensitivity multipliers (direct_insult is never weighted)
# ---------------------------------------------------------------------------

_MULTIPLIER_COLUMNS = (
    "ideal_denial", "command", "command_soft", "comparison", "emotional_dismiss",
    "identity_attack", "conformity", "capability_deny", "freedom_restrict",
    "goodwill_reject", "privacy_invade", "past_blame", "vague_criticism",
    "generalization", "interrogation_pressure", "passive_aggressive",
)

_MULTIPLIER_ROWS = {
    "INTJ": (1.2, 1.0, 0.8, 1.0, 0.6, 1.2, 2.0, 1.5, 1.5, 0.6, 1.0, 0.8, 1.2, 1.0, 0.8, 0.8),
    "INTP": (1.5, 1.2, 1.0, 0.8, 0.5, 1.0, 2.0, 1.2, 1.5, 0.5, 1.2, 0.8, 1.8, 1.5, 0.8, 0.8),
    "ENTJ": (1.0, 0.8, 0.5, 1.2, 0.5, 1.2, 1.0, 2.0, 1.2, 0.6, 0.8, 1.0, 1.0, 0.8, 0.6, 0.6),
    "ENTP": (1.2, 1.5, 0.8, 0.8, 0.5, 1.0, 2.0, 1.0, 1.8, 0.5, 0.8, 0.8, 1.5, 1.2, 0.6, 0.8),
    "INFJ": (1.5, 1.2, 1.2, 1.2, 2.0, 1.8, 1.0, 1.0, 1.0, 1.2, 1.8, 1.2, 1.0, 1.2, 1.5, 1.5),
    "INFP": (2.0, 1.5, 1.5, 1.5, 2.0, 1.8, 1.2, 1.0, 1.2, 1.0, 1.2, 1.5, 1.2, 1.0, 1.5, 1.8),
    "ENFJ": (1.2, 1.0, 1.0, 1.2, 1.5, 1.5, 0.8, 1.0, 0.8, 2.0, 1.0, 1.0, 1.0, 1.0, 1.2, 1.2),
    "ENFP": (1.8, 1.5, 1.2, 1.2, 1.5, 1.2, 1.5, 1.0, 1.8, 0.8, 0.8, 1.5, 1.0, 1.0, 1.0, 1.2),
    "ISTJ": (1.5, 0.6, 0.5, 1.0, 0.5, 1.2, 0.6, 1.5, 0.8, 0.8, 1.2, 1.0, 1.5, 1.2, 0.8, 0.6),
    "ISFJ": (1.2, 1.2, 1.2, 1.5, 1.5, 1.8, 0.8, 1.0, 0.8, 2.0, 1.5, 1.2, 1.2, 1.0, 1.5, 1.5),
    "ESTJ": (1.0, 0.5, 0.5, 1.2, 0.5, 1.5, 0.5, 1.8, 0.6, 0.8, 0.8, 1.0, 1.2, 0.8, 0.5, 0.5),
    "ESFJ": (1.0, 1.0, 1.0, 1.5, 1.5, 2.0, 0.6, 1.0, 0.8, 1.8, 1.2, 1.2, 1.0, 1.0, 1.2, 1.2),
    "ISTP": (0.8, 1.5, 1.0, 0.8, 0.5, 1.0, 1.5, 1.2, 2.0, 0.5, 1.5, 0.8, 1.2, 1.0, 0.8, 0.6),
    "ISFP": (1.5, 1.5, 1.2, 1.5, 1.8, 1.5, 1.2, 1.0, 1.5, 0.8, 1.5, 1.2, 1.5, 1.0, 1.5, 1.5),
    "ESTP": (0.8, 1.2, 0.6, 1.0, 0.5, 1.2, 1.2, 1.0, 1.8, 0.5, 1.0, 1.8, 0.8, 1.0, 0.6, 0.5),
    "ESFP": (1.0, 1.2, 1.0, 1.5, 1.5, 2.0, 1.0, 0.8, 1.5, 0.8, 0.8, 1.2, 1.0, 1.0, 1.0, 1.0),
}

SENSITIVITY: dict[str, dict[str, float]] = {
    ptype: dict(zip(_MULTIPLIER_COLUMNS, row)) for ptype, row in _MULTIPLIER_ROWS.items()
}

# ---------------------------------------------------------------------------
# Direct insults
# ---------------------------------------------------------------------------

INSULTS: tuple[PatternEntry, ...] = (
    PatternEntry(("ばか", "バカ", "馬鹿"), "直接的な侮辱は相手の尊厳を根本から傷つけます"),
    PatternEntry(("アホ", "あほ", "阿呆"), "知性を否定する侮辱表現です"),
    PatternEntry(("無能", "能無し", "役立たず"), "存在価値そのものを否定する極めて攻撃的な表現です"),
    PatternEntry(("死ね", "しね", "タヒね", "死んで", "死ねば"), "生存を否定する最も危険な言葉です", ultra_severe=True),
    PatternEntry(("クズ", "くず", "カス", "ゴミ"), "人間としての価値を完全に否定する侮辱です"),
    PatternEntry(("きもい", "キモい", "キモイ", "気持ち悪い"), "生理的嫌悪を示す深い侮辱表現です"),
    PatternEntry(("うざい", "ウザい", "ウザイ"), "存在そのものを否定する攻撃的な表現です"),
    PatternEntry(("お前", "てめえ", "てめぇ", "おまえ"), "人格を軽視する呼称は攻撃性を増幅させます"),
)

# A match followed by one of these is the writer reporting an insult, not making one.
QUOTE_SUFFIXES: tuple[str, ...] = (
    "って言われた", "と言われた", "言われたら", "って言うな", "って言われて", "と言われて",
)

# ---------------------------------------------------------------------------
# Category patterns
# ---------------------------------------------------------------------------


def _entries(*rows: tuple[tuple[str, ...], str]) -> tuple[PatternEntry, ...]:
    return tuple(PatternEntry(phrases, reason) for phrases, reason in rows)


CATEGORY_PATTERNS: dict[str, tuple[PatternEntry, ...]] = {
    "ideal_denial": _entries(
        (("現実を見", "現実見", "現実的に", "地に足つけ", "目を覚ませ"), "理想を持つこと自体を否定し、価値観の根幹を攻撃する表現です"),
        (("理想論", "きれいごと", "絵空事", "夢ばかり", "夢物語", "机上の空論"), "価値観や夢の全否定につながる危険な表現です"),
        (("甘い", "甘えてる", "甘すぎ", "世間知らず"), "優しさや理想主義を弱さとして否定する表現です"),
        (("ダメ", "ダメだ", "ダメでしょ"), "全否定的な表現は相手の自尊心を傷つけます"),
        (("意味ある", "役に立つの", "何の得が", "無駄じゃない"), "知的好奇心や取り組みの否定。実用性だけで価値を測る表現です"),
        (("ルール通りじゃなくても", "ルールなんて", "規則は破る"), "秩序や信念を軽視する表現です"),
        (("自分のこと先に", "人の心配より", "自分を優先しろ"), "他者貢献の姿勢を批判する表現です"),
        (("夢見すぎ", "妄想", "現実離れ"), "ビジョンや理想の原動力を否定する表現です"),
        (("将来のこと考えてる", "先のこと", "将来どうする", "老後"), "今を大切に生きる姿勢への批判です"),
        (("食べていける", "稼げるの", "お金になる", "生活できる"), "情熱や価値観を経済性だけで否定する表現です"),
        (("現実的じゃない",), "可能性の探究を封じる表現です"),
    ),
    "command": _entries(
        (("感情出して", "気持ちを言って", "もっと笑って"), "感情表現の強制は大きなストレスを生みます"),
        (("早く決めて", "さっさと決め", "いつまで迷って"), "熟考を軽視し、即断を強いる表現です"),
        (("落ち着き", "落ち着け", "落ち着いて", "静かにして"), "エネルギーや活力を抑圧する表現です"),
        (("断ればいい", "noと言え", "嫌なら断れ"), "優しさゆえに断れない苦しみを理解しない発言です"),
        (("はっきり言って", "はっきりして", "どっちなの"), "控えめさを否定し、即答を強制する表現です"),
        (("落ち着い", "冷静に", "もっとゆっくり"), "即断即決のスタイルを否定する表現です"),
        (("真面目にやって", "真剣にやれ", "遊びじゃない", "ふざけてないで"), "自由な表現を抑制する命令です"),
    ),
    "command_soft": _entries(
        (("頑張れよ", "頑張れば", "頑張りなよ", "もっと頑張"), "励ましの形をとりつつ、現状の努力を否定し行動を強制するニュアンスがあります"),
        (("ちゃんとやれ", "ちゃんとしろ", "ちゃんとして"), "「ちゃんと」は曖昧な基準で行動を強制する圧力表現です"),
        (("しろよ", "やれよ", "しなよ", "やりなよ"), "柔らかい口調でも行動の強制は相手の自律性を脅かします"),
    ),
    "comparison": _entries(
        (("リーダーぶる", "仕切りたがり", "目立ちたがり"), "自然なリーダーシップを自己顕示欲と決めつける攻撃です"),
        (("優しく言えない", "言い方きつい", "キツイ", "怖い"), "コミュニケーションスタイルへの一方的な批判です"),
        (("人の目気にし", "周り気にし", "人目を", "顔色うかがい"), "周囲への配慮を批判する表現です"),
    ),
    "emotional_dismiss": _entries(
        (("気にしすぎ", "気にするな", "気にしないで", "気にしなくていい"), "繊細さを弱さとして否定する表現です"),
        (("考えすぎ", "考え過ぎ", "深読みしすぎ"), "洞察力を過剰反応と片付ける表現です"),
        (("泣いても", "泣くな", "泣いたって", "めそめそ"), "感情表現を無意味と切り捨てる表現です"),
        (("結論は", "結局何", "要するに", "で、何が言いたい"), "思考プロセスを軽視する表現です"),
        (("でもさ、", "でも、", "だけど、", "だけどさ、", "しかし、"), "逆接の多用は相手の意見を否定する印象を与えます"),
        (("大げさ", "大げさすぎ", "オーバー", "オーバーすぎ"), "感情の表出を過剰と切り捨てる表現です"),
        (("それくらいで", "そのくらいで", "たかが", "たかだか"), "感情の大きさを軽視し、感じること自体を否定します"),
        (("落ち込むな", "凹むな", "へこむな", "くよくよするな"), "ネガティブな感情を感じること自体を否定する表現です"),
    ),
    "identity_attack": _entries(
        (("理屈っぽい", "理屈ばかり", "理屈じゃない"), "論理的思考力を欠点扱いする表現です"),
        (("冷たい", "冷たすぎ", "薄情", "ドライ"), "冷静さを冷淡と決めつける表現です"),
        (("繊細すぎ", "敏感すぎ", "打たれ弱い", "メンタル弱い"), "感受性そのものを否定する人格攻撃です"),
        (("仕切らないで", "仕切りすぎ", "出しゃばり", "でしゃばる"), "自然なリーダーシップを否定する表現です"),
        (("謙虚に", "偉そう", "上から目線", "傲慢", "何様", "威張る"), "自信を傲慢と決めつける人格否定です"),
        (("屁理屈", "理屈ばっかり", "ごちゃごちゃ言う", "ああ言えばこう言う"), "議論や思考を楽しむ姿勢を全否定する表現です"),
        (("偽善", "いい人ぶって", "ぶりっ子", "白々しい"), "誠意を疑い、人格を否定する表現です"),
        (("テンション高", "うるさい", "騒がしい", "はしゃぎすぎ"), "感情の自由な表現を抑制する表現です"),
        (("融通きかない", "融通がきかない", "頭が固い", "石頭"), "一貫性と信頼性を欠点扱いする表現です"),
        (("堅すぎ", "真面目すぎ", "堅物", "カタブツ"), "誠実さを欠点として否定する表現です"),
        (("自分の意見ないの", "意見がない", "主体性がない", "言いなり"), "協調性を弱さとして批判する表現です"),
        (("都合よく使われ", "利用されてる", "いいように使われ"), "献身を利用と指摘する攻撃的な表現です"),
        (("押し付け", "強制するな", "押しつけがましい"), "指導や助けを強制と決めつける表現です"),
        (("八方美人", "いい顔しすぎ", "誰にでもいい顔"), "調和の努力を偽りと否定する表現です"),
        (("嫌われたくない", "好かれたい", "人気取り", "媚び"), "動機を疑う攻撃的な表現です"),
        (("自分がない", "個性がない", "没個性", "流される"), "協調性を個性の欠如と否定する表現です"),
        (("優柔不断", "決められない", "迷いすぎ", "煮え切らない"), "慎重さを弱点として批判する表現です"),
        (("雑すぎ", "雑だね", "いい加減", "適当すぎ"), "スピード感や自由さを雑と批判する表現です"),
        (("空気読めてない", "ky", "場違い", "浮いてる"), "社交性や自然体を否定する表現です"),
        (("チャラい", "軽い", "軽薄", "薄っぺらい"), "表面的と決めつける人格否定です"),
        (("深みがない", "中身がない", "浅い"), "人格の全否定につながる危険な表現です"),
    ),
    "conformity": _entries(
        (("周りに合わせ", "合わせたら", "合わせろ", "合わせなよ"), "独自の視点を否定し、多数派への同調を強要する表現です"),
        (("みんなそうしてる", "普通はこう", "常識的に", "一般的には"), "多数派論法で独自性を全否定する表現です"),
        (("空気読", "場の雰囲気", "空気を"), "暗黙のルールを強制する同調圧力です"),
        (("協調性ない", "チームワーク", "みんなと一緒に", "一人で勝手に"), "独立性を欠点として批判する表現です"),
        (("普通は", "普通さ", "当然でしょ", "当然だろ"), "「普通」「当然」は自分の基準を相手に押し付ける断定語です"),
    ),
    "capability_deny": _entries(
        (("任せるのは不安", "任せられない", "心配だから"), "能力への不信感を示す表現です"),
        (("無理だと思う", "できないよ", "不可能", "どうせ無理"), "可能性を否定する表現です"),
        (("やり方が全てじゃない", "他にもやり方", "古い"), "経験に基づく判断を否定する表現です"),
    ),
    "freedom_restrict": _entries(
        (("計画的に", "計画を立てて", "行き当たりばったり", "無計画"), "柔軟性を否定し、自由さを制限する表現です"),
        (("柔軟に", "もっと柔軟", "臨機応変に", "適当でいい"), "計画性を否定し、混乱を強要する表現です"),
        (("報連相", "報告して", "連絡して", "逐一報告"), "自由な行動を制限する管理的な表現です"),
        (("後先考え", "先のこと考えて", "リスク考えろ"), "行動力を軽率と決めつける表現です"),
        (("ふざけ", "ふざけるな", "ふざけすぎ", "悪ふざけ"), "楽しさを生み出す力の否定です"),
    ),
    "goodwill_reject": _entries(
        (("お節介", "おせっかい", "余計なお世話", "頼んでない"), "善意からの行動を否定する表現です"),
        (("気を遣わなくて", "気遣い不要", "余計な心配"), "気遣いを否定され、存在意義を疑わせます"),
    ),
    "privacy_invade": _entries(
        (("本音を言", "本心は", "隠さないで", "正直に言って"), "心を無理にこじ開けようとする表現です"),
    ),
    "past_blame": _entries(
        (("飽きっぽい", "三日坊主", "続かない", "すぐ投げ出す"), "多方面への興味を欠点扱いする批判です"),
        (("途中でやめる", "どうせまた", "また飽きる"), "過去の失敗を蒸し返し、成長を認めない表現です"),
        (("反省してる", "反省しろ", "反省しな", "懲りない"), "過去の失敗を蒸し返す攻撃的な表現です"),
    ),
    "vague_criticism": _entries(
        (("ちゃんとして", "しっかりして", "だらしない", "しっかりしな", "ちゃんとしな", "もっとしっかり"), "曖昧な基準の押しつけ。具体性のない批判です"),
        (("曖昧",), "控えめさを否定する表現です"),
    ),
    "generalization": _entries(
        (("いつも", "毎回", "いっつも"), "「いつも」は過度な一般化。実際には毎回ではないため反発を招きます"),
        (("絶対", "絶対に", "必ず"), "断定的な表現は相手の選択肢を奪うニュアンスがあります"),
    ),
    "interrogation_pressure": _entries(
        (("なんで？", "なんでできない", "なぜできない", "ナンデ", "どうしてできない"), "能力を疑う詰問は相手の自信を破壊します"),
        (("何回言わせる", "何度言えば", "何回言ったら"), "繰り返しの詰問は相手を追い詰め無力感を与えます"),
        (("どうして毎回", "いつになったら"), "過去の蒸し返しと詰問の複合で強い圧迫感を与えます"),
    ),
    "passive_aggressive": _entries(
        (("期待してない", "期待しない", "期待できない"), "暗に相手の能力・価値を否定する受動攻撃的な表現です"),
        (("まあいいんじゃない", "別にいいけど", "好きにすれば", "どうでもいい"), "関心の放棄を装った拒絶のメッセージです"),
        (("別にいいよ", "ご自由に", "勝手にすれば"), "投げやりな態度で相手を突き放す表現です"),
    ),
}

# ---------------------------------------------------------------------------
# Tone heuristics
# ---------------------------------------------------------------------------

EMPHASIS_BURST_RE = re.compile(r"[！!]{2,}|[！!][？?]|[？?][！!]")
EXCLAMATION_RE = re.compile(r"[！!]")
QUESTION_RUN_LONG_RE = re.compile(r"[？?]{3,}")
QUESTION_RUN_RE = re.compile(r"[？?]{2,}")
KATAKANA_EMPHASIS_RE = re.compile(r"ナンデ|マジデ|フツウ|ホント[ニ二]|イミ[ワハ]カ|ダカラ|ムリ[ダだ]|ウザ|キモ")
IMPERATIVE_RE = re.compile(
    r"[しすき]ろ[。！!]?$|しなさい|するな|やめろ|やめなさい|黙れ|出ていけ|消えろ|どけ|失せろ|帰れ|来るな",
    re.MULTILINE,
)
NEGATION_RE = re.compile(r"ない|ません|じゃない|ではない|できない|しない")

# ---------------------------------------------------------------------------
# Rewrite rules
# ---------------------------------------------------------------------------

TRANSFORM_RULES: dict[str, tuple[TransformRule, ...]] = {
    # command -> suggestion
    "command": (
        _rule(r"(.+)[しすき]ろ[。！!]?", r"\1してみるのはどうかな？"),
        _rule(r"(.+)しなさい[。！!]?", r"\1してみない？"),
        _rule(r"(.+)するな[。！!]?", r"\1しないほうがいいかもしれないけど、どう思う？"),
        _rule(r"やめろ", "一度立ち止まって考えてみない？"),
        _rule(r"やめなさい", "少し休んでみるのはどうかな？"),
        _rule(r"黙れ", "少し落ち着いて話そう"),
        _rule(r"出ていけ", "少し距離を置いて考えよう"),
        _rule(r"消えろ", "お互い少し時間をおこう"),
        _rule(r"失せろ", "お互い冷静になってから話そう"),
        _rule(r"帰れ", "今日はここまでにしよう"),
        _rule(r"来るな", "少し時間をおいてからにしよう"),
    ),
    # assertion -> question
    "assertion": (
        _rule(r"絶対(.+)だ[。！!]?", r"\1かもしれないね。どう思う？"),
        _rule(r"(.+)に決まってる", r"\1の可能性もあるけど、他にも考えられるかな？"),
        _rule(r"間違いなく", "もしかすると"),
        _rule(r"当然(.+)でしょ", r"\1という考え方もあるけど、あなたはどう思う？"),
    ),
    # denial -> empathy and a proposal
    "denial": (
        _rule(r"(.+)なんて無駄", r"\1に取り組んでるんだね。もっと効果的な方法も一緒に探してみない？"),
        _rule(r"(.+)なんて意味ない", r"\1を頑張ってるんだね。別のアプローチも考えてみない？"),
        _rule(r"できるわけない", "難しいかもしれないけど、一緒にやり方を考えてみよう"),
        _rule(r"無理に決まってる", "大変そうだね。小さなステップから始めてみるのはどう？"),
        _rule(r"どうせ(.+)できない", r"\1は難しいかもしれないけど、まずやれることから始めてみない？"),
    ),
    # comparison -> individual affirmation
    "comparison": (
        _rule(r"(.+)を見習え", r"あなたにはあなたの強みがあるよね。\1のこういう部分は参考になるかも"),
        _rule(r"(.+)はできるのに", "あなたにはあなたのペースがあるよね"),
        _rule(r"他の人は(.+)", "それぞれ違うやり方があるよね。あなたはどうしたい？"),
    ),
}

CATEGORY_RULE_GROUPS: dict[str, tuple[str, ...]] = {
    "command": ("command",),
    "command_soft": ("command",),
    "freedom_restrict": ("command",),
    "ideal_denial": ("denial",),
    "capability_deny": ("denial",),
    "comparison": ("comparison",),
    "generalization": ("assertion",),
}

# Rendered as "（phrase→）alternative" when no structural rule applies.
REPLACEMENT_TEMPLATES: dict[str, str] = {
    DIRECT_INSULT: "【この表現は削除すべきです】",
    "ideal_denial": "あなたの考えには価値があるよ。一緒に方法を探してみない？",
    "command": "こうしてみるのはどうかな？",
    "command_soft": "応援してるよ。自分のペースでいいからね",
    "comparison": "あなたにはあなたの良さがあるよね",
    "emotional_dismiss": "その気持ちは大切だよ。聞かせてくれてありがとう",
    "identity_attack": "あなたのそういうところも個性だよね",
    "conformity": "いろんなやり方があるよね。あなたのやり方も聞かせて",
    "capability_deny": "難しいかもしれないけど、やり方を一緒に考えよう",
    "freedom_restrict": "こういう方法もあるかも。どう思う？",
    "goodwill_reject": "気にかけてくれてありがとう",
    "privacy_invade": "話せるタイミングで教えてくれたら嬉しいな",
    "past_blame": "これからどうするか一緒に考えよう",
    "vague_criticism": "具体的にはこの部分をこうしてみない？",
    "generalization": "今回の場合は",
    "interrogation_pressure": "どうしたらうまくいくかな？",
    "passive_aggressive": "あなたのことを信じてるよ",
}

# ---------------------------------------------------------------------------
# Reason sentences
# ---------------------------------------------------------------------------

SAFE_REASONS = (
    "{ptype} の心理的安全性を脅かす表現は検出されませんでした。",
    "相手の価値観を尊重した安全なメッセージです。",
)
DANGER_REASON = "【危険】{label}: {ptype}はこの領域に極めて敏感です。{description}表現が深い傷を与えます。"
CAUTION_REASON = "【注意】{label}: {ptype}にとって敏感な領域です。{description}表現に注意が必要です。"
NEUTRAL_REASON = "{label}: {description}表現が含まれています。"

SEVERE_BREACH_REASON = "相手の心理的防衛線を複数突破しており、深刻な信頼関係の破壊につながる恐れがあります。"
REWRITE_RECOMMENDED_REASON = "相手のコア・アイデンティティに触れる表現が多く、大幅な書き直しを強く推奨します。"
PARTIAL_CONFLICT_REASON = "部分的に相手の価値観と衝突する表現があります。改善案を参考にしてください。"
MINOR_TUNING_REASON = "概ね安全ですが、一部の表現を調整するとより良い関係構築につながります。"

EMPHASIS_BURST_REASON = "感嘆符・疑問符の連続が強い攻撃性・圧迫感を示しています"
EXCLAMATION_HEAVY_REASON = "感嘆符の多用が心理的圧迫感を生んでいます"
QUESTION_RUN_LONG_REASON = "疑問符の連続が強い詰問・追及のプレッシャーを与えます"
QUESTION_RUN_REASON = "連続する疑問符が詰問・追及のプレッシャーを与えます"
KATAKANA_EMPHASIS_REASON = "カタカナ強調が威圧的・嘲笑的なトーンを生んでいます"
IMPERATIVE_REASON = "命令口調は相手の自律性を脅かし、心理的安全性を破壊します"
NEGATION_REASON = "否定表現の蓄積が無力感・絶望感を誘発します"

LONG_TEXT_REASON = "長文は受け手に処理の負担を与え、逃げ場のなさを感じさせます"
SHORT_TEXT_REASON = "極端に短い言葉は突き放しや拒絶のシグナルとして受け取られます"
COMPOUNDING_REASON = "複数の心理的攻撃が重なり、相手の防御機能を突破する危険があります"

from data_designer_mbti_guard.conversation import (
    ConversationBot,
    InMemoryConversationStore,
    QuickReply,
    Reply,
    Step,
    format_result,
)


class FakeClock:
    def __init__(self):
        self.now = 1000.0

    def __call__(self):
        return self.now


def _bot(ttl=60.0):
    clock = FakeClock()
    return ConversationBot(ttl_seconds=ttl, clock=clock), clock


class TestConversationFlow:
    def test_full_flow(self):
        bot, _ = _bot()
        reply = bot.handle("u1", "診断")
        assert reply.text == "相手のMBTIを選んでください"
        assert len(reply.quick_replies) == 16
        assert bot.state_for("u1").step is Step.AWAITING_TYPE

        reply = bot.handle("u1", " infp ")
        assert reply.text == "INFP ですね！\nチェックしたい文章を送ってください。"
        state = bot.state_for("u1")
        assert state.step is Step.AWAITING_TEXT
        assert state.pending_type == "INFP"

        reply = bot.handle("u1", "現実を見ろ！！")
        assert "地雷リスク：41%（🟠 危険）" in reply.text
        assert "💡 改善案：\n（現実を見→）" in reply.text
        assert reply.quick_replies == (QuickReply("もう一度診断する", "診断を始める"),)
        assert bot.state_for("u1") is None

    def test_invalid_type_keeps_waiting(self):
        bot, _ = _bot()
        bot.handle("u1", "診断を始める")
        reply = bot.handle("u1", "ABCD")
        assert reply.text.startswith("有効なMBTIタイプを入力してください")
        assert bot.state_for("u1").step is Step.AWAITING_TYPE

    def test_blank_text_keeps_waiting(self):
        bot, _ = _bot()
        bot.handle("u1", "診断")
        bot.handle("u1", "ESTJ")
        reply = bot.handle("u1", "   ")
        assert reply.text == "チェックしたい文章を送ってください。"
        assert bot.state_for("u1").step is Step.AWAITING_TEXT

    def test_idle_message_invites_start(self):
        bot, _ = _bot()
        reply = bot.handle("u1", "こんにちは")
        assert reply.text == "🔍 MBTI地雷診断を始めますか？"
        assert reply.quick_replies == (QuickReply("診断を始める", "診断を始める"),)
        assert bot.state_for("u1") is None

    def test_start_resets_mid_flow(self):
        bot, _ = _bot()
        bot.handle("u1", "診断")
        bot.handle("u1", "INTJ")
        bot.handle("u1", "診断")
        assert bot.state_for("u1").step is Step.AWAITING_TYPE
        assert bot.state_for("u1").pending_type is None

    def test_users_are_independent(self):
        bot, _ = _bot()
        bot.handle("u1", "診断")
        bot.handle("u2", "診断")
        bot.handle("u1", "INFP")
        assert bot.state_for("u1").step is Step.AWAITING_TEXT
        assert bot.state_for("u2").step is Step.AWAITING_TYPE


class TestExpiry:
    def test_expired_state_is_dropped(self):
        bot, clock = _bot(ttl=60.0)
        bot.handle("u1", "診断")
        clock.now += 61
        reply = bot.handle("u1", "INFP")
        assert reply.text == "🔍 MBTI地雷診断を始めますか？"
        assert bot.state_for("u1") is None

    def test_state_within_ttl_survives(self):
        bot, clock = _bot(ttl=60.0)
        bot.handle("u1", "診断")
        clock.now += 59
        assert bot.handle("u1", "INFP").text.startswith("INFP ですね")

    def test_purge_expired(self):
        bot, clock = _bot(ttl=60.0)
        bot.handle("u1", "診断")
        clock.now += 30
        bot.handle("u2", "診断")
        clock.now += 40
        assert bot.purge_expired() == 1
        assert len(bot.store) == 1
        assert bot.state_for("u2").step is Step.AWAITING_TYPE

    def test_custom_store_without_purge(self):
        class DictStore:
            def __init__(self):
                self.states = {}

            def get(self, user_id):
                return self.states.get(user_id)

            def put(self, user_id, state):
                self.states[user_id] = state

            def delete(self, user_id):
                self.states.pop(user_id, None)

        store = DictStore()
        bot = ConversationBot(store=store, clock=FakeClock())
        bot.handle("u1", "診断")
        assert store.states["u1"].step is Step.AWAITING_TYPE
        assert bot.purge_expired() == 0


class TestFormatting:
    def test_format_result(self):
        result = {"score": 95, "band": "safe", "reasons": ["a", "b"], "improved_text": "ok"}
        assert format_result(result) == (
            "━━━━━━━━━━━━\n"
            "⚠️ 地雷リスク：5%（🟢 安全）\n"
            "━━━━━━━━━━━━\n"
            "\n"
            "🧠 理由：\na\nb\n"
            "\n"
            "💡 改善案：\nok"
        )

    def test_reply_payload(self):
        payload = Reply("hi", (QuickReply("L", "T"),)).to_payload()
        assert payload == {
            "type": "text",
            "text": "hi",
            "quickReply": {"items": [{"type": "action", "action": {"type": "message", "label": "L", "text": "T"}}]},
        }
        assert Reply("hi").to_payload() == {"type": "text", "text": "hi"}

    def test_store_roundtrip(self):
        store = InMemoryConversationStore()
        assert store.get("x") is None
        store.delete("x")
        assert len(store) == 0

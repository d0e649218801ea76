# Three-step chat flow in front of the scorer: start -> pick recipient type -> send text.
#
# Transport-agnostic. ``ConversationBot.handle`` takes one inbound text message
# and returns the reply to send; delivering it (and any webhook parsing) is the
# caller's job.

from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Protocol

from data_designer_mbti_guard.core import Hyperparameters, InvalidInputError, analyze_text, validate_personality_type
from data_designer_mbti_guard.lexicon import PERSONALITY_TYPES

logger = logging.getLogger(__name__)

START_COMMANDS = frozenset({"診断", "診断を始める"})
START_LABEL = "診断を始める"
RESTART_LABEL = "もう一度診断する"
SEPARATOR = "━━━━━━━━━━━━"

DEFAULT_TTL_SECONDS = 30 * 60

_BAND_LABELS = {
    "landmine": ("🔴", "地雷"),
    "danger": ("🟠", "危険"),
    "caution": ("🟡", "注意"),
    "safe": ("🟢", "安全"),
}


class Step(str, Enum):
    NONE = "none"
    AWAITING_TYPE = "awaiting_type"
    AWAITING_TEXT = "awaiting_text"


@dataclass(frozen=True)
class ConversationState:
    step: Step
    pending_type: str | None = None
    updated_at: float = 0.0


@dataclass(frozen=True)
class QuickReply:
    label: str
    text: str


@dataclass(frozen=True)
class Reply:
    text: str
    quick_replies: tuple[QuickReply, ...] = ()

    def to_payload(self) -> dict[str, object]:
        payload: dict[str, object] = {"type": "text", "text": self.text}
        if self.quick_replies:
            payload["quickReply"] = {
                "items": [
                    {"type": "action", "action": {"type": "message", "label": q.label, "text": q.text}}
                    for q in self.quick_replies
                ]
            }
        return payload


class ConversationStore(Protocol):
    def get(self, user_id: str) -> ConversationState | None: ...

    def put(self, user_id: str, state: ConversationState) -> None: ...

    def delete(self, user_id: str) -> None: ...


@dataclass
class InMemoryConversationStore:
    """Process-local state keyed by user id. Lost on restart."""

    _states: dict[str, ConversationState] = field(default_factory=dict, repr=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def get(self, user_id: str) -> ConversationState | None:
        with self._lock:
            return self._states.get(user_id)

    def put(self, user_id: str, state: ConversationState) -> None:
        with self._lock:
            self._states[user_id] = state

    def delete(self, user_id: str) -> None:
        with self._lock:
            self._states.pop(user_id, None)

    def purge_expired(self, now: float, ttl_seconds: float) -> int:
        with self._lock:
            stale = [uid for uid, s in self._states.items() if now - s.updated_at > ttl_seconds]
            for uid in stale:
                del self._states[uid]
        return len(stale)

    def __len__(self) -> int:
        with self._lock:
            return len(self._states)


def format_result(result: dict) -> str:
    """Render an analysis result as the multi-line chat summary."""
    risk = 100 - result["score"]
    emoji, label = _BAND_LABELS.get(result["band"], ("", result["band"]))
    reasons = "\n".join(result["reasons"])
    return (
        f"{SEPARATOR}\n"
        f"⚠️ 地雷リスク：{risk}%（{emoji} {label}）\n"
        f"{SEPARATOR}\n"
        f"\n"
        f"🧠 理由：\n{reasons}\n"
        f"\n"
        f"💡 改善案：\n{result['improved_text']}"
    )


class ConversationBot:
    def __init__(
        self,
        store: ConversationStore | None = None,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
        hyperparameters: Hyperparameters | None = None,
    ) -> None:
        self.store = store if store is not None else InMemoryConversationStore()
        self.ttl_seconds = ttl_seconds
        self.clock = clock
        self.hyperparameters = hyperparameters
        # One step per user must finish before the next one reads the state.
        self._lock = threading.RLock()

    def state_for(self, user_id: str) -> ConversationState | None:
        state = self.store.get(user_id)
        if state is not None and self.clock() - state.updated_at > self.ttl_seconds:
            logger.debug(f"conversation for {user_id} expired at step={state.step.value}")
            self.store.delete(user_id)
            return None
        return state

    def handle(self, user_id: str, text: str) -> Reply:
        with self._lock:
            message = text.strip()
            state = self.state_for(user_id)
            step = state.step if state else Step.NONE
            logger.info(f"user={user_id} step={step.value} text={message!r}")

            if message in START_COMMANDS:
                self._advance(user_id, Step.AWAITING_TYPE)
                return Reply(
                    "相手のMBTIを選んでください",
                    tuple(QuickReply(t, t) for t in PERSONALITY_TYPES),
                )

            if step is Step.AWAITING_TYPE:
                try:
                    ptype = validate_personality_type(message)
                except InvalidInputError:
                    return Reply("有効なMBTIタイプを入力してください（例: INFP, ESTJ）")
                self._advance(user_id, Step.AWAITING_TEXT, ptype)
                return Reply(f"{ptype} ですね！\nチェックしたい文章を送ってください。")

            if step is Step.AWAITING_TEXT:
                try:
                    result = analyze_text(message, state.pending_type, self.hyperparameters)
                except InvalidInputError:
                    return Reply("チェックしたい文章を送ってください。")
                self.store.delete(user_id)
                logger.info(f"user={user_id} analyzed for {state.pending_type}: score={result['score']}")
                return Reply(format_result(result), (QuickReply(RESTART_LABEL, START_LABEL),))

            return Reply("🔍 MBTI地雷診断を始めますか？", (QuickReply(START_LABEL, START_LABEL),))

    def purge_expired(self) -> int:
        """Drop every state past its TTL. Only for stores that support bulk expiry."""
        purge = getattr(self.store, "purge_expired", None)
        if purge is None:
            return 0
        return purge(self.clock(), self.ttl_seconds)

    def _advance(self, user_id: str, step: Step, pending_type: str | None = None) -> None:
        self.store.put(user_id, ConversationState(step, pending_type, self.clock()))

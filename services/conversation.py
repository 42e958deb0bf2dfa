"""Conversation window — bounded, role-tagged tutor chat history.

The full history is kept for persistence; only the most recent
``max_render_turns`` turns are rendered into the next prompt.  A window
belongs to one chat session and is passed explicitly into each turn;
callers serialize turns within a session.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from config.prompts.tutor import STUDENT_LABEL, TUTOR_LABEL
from config.settings import get_settings


def _default_render_turns() -> int:
    return get_settings().conversation_window_turns


class ConversationTurn(BaseModel):
    """A single turn in a conversation."""

    role: Literal["user", "assistant"]
    content: str


class ConversationWindow(BaseModel):
    """Ordered turn history with a sliding render window."""

    turns: list[ConversationTurn] = Field(default_factory=list)
    max_render_turns: int = Field(default_factory=_default_render_turns, ge=1)

    def append(self, turn: ConversationTurn) -> None:
        self.turns.append(turn)

    def add_user_turn(self, content: str) -> ConversationTurn:
        turn = ConversationTurn(role="user", content=content)
        self.append(turn)
        return turn

    def add_assistant_turn(self, content: str) -> ConversationTurn:
        turn = ConversationTurn(role="assistant", content=content)
        self.append(turn)
        return turn

    def recent_turns(self, upto: int | None = None) -> list[ConversationTurn]:
        """Return the render window over ``turns[:upto]``."""
        history = self.turns if upto is None else self.turns[:upto]
        return history[-self.max_render_turns:]

    def render(self, upto: int | None = None) -> str:
        """Format the render window as blank-line separated ``Student:`` / ``Tutor:`` lines.

        Returns an empty string if there are no turns.
        """
        lines = [
            f"{STUDENT_LABEL if turn.role == 'user' else TUTOR_LABEL}: {turn.content}"
            for turn in self.recent_turns(upto)
        ]
        return "\n\n".join(lines)

    def has_pending_user_turn(self, content: str) -> bool:
        """True when the last turn is an unanswered user turn with *content*.

        Lets a retried chat turn reuse its optimistic user turn instead of
        appending a second copy.
        """
        return bool(self.turns) and self.turns[-1].role == "user" and self.turns[-1].content == content

    # ── Regeneration ──────────────────────────────────────────

    def prompt_for_reply(self, assistant_index: int) -> tuple[str, str]:
        """Return ``(user_message, history)`` for regenerating a reply.

        The history covers turns before the user turn being answered, so
        the regenerated reply sees the same context the original did.

        Raises:
            ValueError: if *assistant_index* is not an assistant turn
                directly preceded by a user turn.
        """
        if not 0 < assistant_index < len(self.turns):
            raise ValueError(f"No reply at index {assistant_index}")
        if self.turns[assistant_index].role != "assistant":
            raise ValueError(f"Turn {assistant_index} is not an assistant reply")
        user_turn = self.turns[assistant_index - 1]
        if user_turn.role != "user":
            raise ValueError(f"Reply {assistant_index} does not follow a user turn")
        return user_turn.content, self.render(upto=assistant_index - 1)

    def replace_reply(self, assistant_index: int, content: str) -> None:
        """Accept a regenerated reply: it replaces the old one and anything after it."""
        self.prompt_for_reply(assistant_index)
        del self.turns[assistant_index:]
        self.add_assistant_turn(content)

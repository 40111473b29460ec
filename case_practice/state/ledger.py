"""
Conversation Ledger.

Append-only log of the turns exchanged during one skill attempt. The order
is replayed verbatim to the advisory service, so entries are never edited.
"""

from typing import Iterable, Iterator, List, Literal, Tuple

from .models import Turn

TRANSCRIPT_LABELS = {"user": "Candidate", "assistant": "Interviewer"}


def render_transcript(turns: Iterable[Turn]) -> str:
    """Render turns as alternating 'Candidate:' / 'Interviewer:' lines."""
    return "\n".join(f"{TRANSCRIPT_LABELS[turn.role]}: {turn.content}" for turn in turns)


class ConversationLedger:
    def __init__(self):
        self._turns: List[Turn] = []

    def append(self, role: Literal["user", "assistant"], text: str) -> Turn:
        turn = Turn(role=role, content=text)
        self._turns.append(turn)
        return turn

    def snapshot(self) -> Tuple[Turn, ...]:
        return tuple(self._turns)

    def clear(self) -> None:
        self._turns = []

    def render_transcript(self) -> str:
        return render_transcript(self._turns)

    def __len__(self) -> int:
        return len(self._turns)

    def __iter__(self) -> Iterator[Turn]:
        return iter(self.snapshot())

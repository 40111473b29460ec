"""
State Layer - Runtime Data Models

Defines the runtime state of a practice attempt: the conversation ledger,
the exhibit paginator, and the session phase / notice models.
"""

from case_practice.state.models import (
    CompletionAction,
    NoticeKind,
    SessionErrorCode,
    SessionNotice,
    SessionPhase,
    SkillSessionState,
    Turn,
)
from case_practice.state.ledger import ConversationLedger
from case_practice.state.paginator import AdvanceResult, ExhibitPaginator

__all__ = [
    "CompletionAction",
    "NoticeKind",
    "SessionErrorCode",
    "SessionNotice",
    "SessionPhase",
    "SkillSessionState",
    "Turn",
    "ConversationLedger",
    "AdvanceResult",
    "ExhibitPaginator",
]

"""
Case Interview Practice Client

Drives case-interview practice sessions: a deterministic per-skill state
machine (prompt assignment, exhibit pagination, conversation ledger,
completion gating) around a remote advisory service.
"""

from case_practice.domain import (
    ChartKind,
    ExhibitRecord,
    PromptRecord,
    SkillCategory,
)
from case_practice.state import (
    AdvanceResult,
    CompletionAction,
    ConversationLedger,
    ExhibitPaginator,
    SessionNotice,
    SessionPhase,
    SkillSessionState,
    Turn,
)
from case_practice.execution import SkillSession, SkillProfile, SKILL_PROFILES

__all__ = [
    # Domain Layer
    "ChartKind",
    "ExhibitRecord",
    "PromptRecord",
    "SkillCategory",
    # State Layer
    "AdvanceResult",
    "CompletionAction",
    "ConversationLedger",
    "ExhibitPaginator",
    "SessionNotice",
    "SessionPhase",
    "SkillSessionState",
    "Turn",
    # Execution Layer
    "SKILL_PROFILES",
    "SkillProfile",
    "SkillSession",
]

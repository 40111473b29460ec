"""
State Layer - Runtime Data Models

This module defines the runtime model for one practice attempt: the phase of
the session state machine, the turns exchanged so far, and the display-only
notices the session raises instead of exceptions.
"""

from enum import Enum
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..domain.models import ExhibitRecord, PromptRecord, SkillCategory


class SessionPhase(str, Enum):
    """
    IDLE: No skill chosen, or no prompt available for the chosen skill.
    LOADING: Prompt repository is being queried.
    ACTIVE: Prompt assigned, waiting for the user.
    AWAITING_REPLY: A user turn was sent, advisory reply pending.
    COMPLETED: Terminal for the attempt. Left only by selecting a skill.
    """
    IDLE = "IDLE"
    LOADING = "LOADING"
    ACTIVE = "ACTIVE"
    AWAITING_REPLY = "AWAITING_REPLY"
    COMPLETED = "COMPLETED"


class SessionErrorCode(str, Enum):
    NO_PROMPT_FOR_SKILL = "NO_PROMPT_FOR_SKILL"
    NO_ACTIVE_PROMPT = "NO_ACTIVE_PROMPT"
    MISSING_EXHIBIT = "MISSING_EXHIBIT"


class NoticeKind(str, Enum):
    INFO = "info"
    ERROR = "error"


class Turn(BaseModel):
    model_config = ConfigDict(frozen=True)

    role: Literal["user", "assistant"]
    content: str


class SessionNotice(BaseModel):
    """
    A message for the display surface. Errors in the session are reported
    this way rather than raised.
    """
    kind: NoticeKind
    text: str
    code: Optional[str] = None


class CompletionAction(BaseModel):
    """
    The completion button currently on offer.

    'nudge' is set when the user should be encouraged to wrap up
    (Hypothesis after enough refinements). It never disables the action.
    """
    label: str
    nudge: bool = False


class SkillSessionState(BaseModel):
    """
    Read-only snapshot of a SkillSession, suitable for rendering or the API.
    """
    skill: Optional[SkillCategory] = None
    phase: SessionPhase = SessionPhase.IDLE
    generation: int = 0
    prompt: Optional[PromptRecord] = None
    exhibit_index: int = 0
    visible_exhibits: List[ExhibitRecord] = Field(default_factory=list)
    turns: List[Turn] = Field(default_factory=list)
    refinements: int = 0
    completed: bool = False
    completion_action: Optional[CompletionAction] = None
    instructions: Optional[str] = None
    notices: List[SessionNotice] = Field(default_factory=list)
    feedback: Optional[str] = None

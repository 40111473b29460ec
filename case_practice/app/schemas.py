"""
API Layer - Request/Response Schemas

Pydantic models for API request and response validation.
"""

from typing import Optional

from pydantic import BaseModel

from ..domain.models import SkillCategory
from ..state.models import SkillSessionState


class CreateSessionRequest(BaseModel):
    skill: Optional[SkillCategory] = None


class SelectSkillRequest(BaseModel):
    skill: SkillCategory


class UserMessage(BaseModel):
    text: str


class SessionResponse(BaseModel):
    session_id: str
    state: SkillSessionState


class ActionResponse(BaseModel):
    """Result of an operation that may be a no-op (blank turn, no action on offer)."""
    session_id: str
    accepted: bool
    state: SkillSessionState

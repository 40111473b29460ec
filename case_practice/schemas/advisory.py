"""
Schemas - Advisory Service Wire Models

This module defines the Pydantic models exchanged with the advisory service:
the outbound request body and the two reply shapes the service is known to
return (chat-completion style 'choices', or a flat 'output').
"""
from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from ..domain.models import SkillCategory


class ChatMessage(BaseModel):
    role: Literal["system", "user", "assistant"]
    content: str


class AdvisoryRequest(BaseModel):
    """
    The JSON body POSTed to the advisory endpoint.
    'messages' is ordered: system context, prior turns, latest user message.
    """
    prompt_id: Optional[str] = Field(
        None,
        description="Identifier of the prompt the conversation is about."
    )
    skill_type: SkillCategory
    messages: List[ChatMessage] = Field(default_factory=list)


class ReplyMessage(BaseModel):
    content: str


class ReplyChoice(BaseModel):
    message: ReplyMessage


class CompletionReply(BaseModel):
    """Chat-completion style reply: {choices: [{message: {content}}]}"""
    choices: List[ReplyChoice] = Field(..., min_length=1)


class OutputReply(BaseModel):
    """Fallback reply shape: {output}"""
    output: str

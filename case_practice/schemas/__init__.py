"""
Schemas - Wire Models for the Advisory Service

Defines Pydantic models for requests sent to, and replies parsed from,
the remote advisory service.
"""

from case_practice.schemas.advisory import (
    AdvisoryRequest,
    ChatMessage,
    CompletionReply,
    OutputReply,
)

__all__ = [
    "AdvisoryRequest",
    "ChatMessage",
    "CompletionReply",
    "OutputReply",
]

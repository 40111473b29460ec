"""
Advisory Request Building.

Assembles the message list sent to the advisory service for a user turn:
a per-skill system context, the prior turns, and the latest user message.
Which exhibit content goes into the system context depends on the skill:

- Analysis: only the exhibit being analysed, with its data serialized.
- Recommendation: one line per exhibit title.
- Clarifying / Frameworks: every exhibit title with its summary.
- Hypothesis: the prompt plus the conversation so far as a transcript.
"""

import json
import logging
from typing import List, Optional, Sequence

from ..domain.models import ChartKind, ExhibitRecord, PromptRecord
from ..schemas.advisory import AdvisoryRequest, ChatMessage
from ..state.ledger import render_transcript
from ..state.models import Turn
from .prompts import Template, render
from .skills import SkillProfile

logger = logging.getLogger(__name__)


def serialize_exhibit(exhibit: ExhibitRecord) -> str:
    """
    Text form of an exhibit's content for the model.
    Tables become a JSON record of their columns; other exhibits use their
    summary text, falling back to a listing of the chart's series.
    """
    if exhibit.chart_type == ChartKind.TABLE:
        return json.dumps(exhibit.data, ensure_ascii=False)
    if exhibit.summary_lines:
        return "\n".join(exhibit.summary_lines)
    if exhibit.data:
        series = "; ".join(
            f"{name}: {', '.join(str(v) for v in values)}"
            for name, values in exhibit.data.items()
        )
        return f"{exhibit.chart_type.value} chart data - {series}"
    return ""


def summarize_exhibits(exhibits: Sequence[ExhibitRecord]) -> List[dict]:
    return [
        {
            "title": exhibit.exhibit_title or f"Exhibit {number}",
            "summary": " ".join(exhibit.summary_lines) or exhibit.description or "",
        }
        for number, exhibit in enumerate(exhibits, start=1)
    ]


def build_system_context(
    profile: SkillProfile,
    prompt: PromptRecord,
    exhibit: Optional[ExhibitRecord],
    exhibit_index: int,
    history: Sequence[Turn],
) -> str:
    """
    Renders the skill's system-context template.

    'history' holds the turns BEFORE the latest user message; it only shows
    up in templates that embed a transcript (Hypothesis).
    """
    system_prompt = render(
        profile.context_template,
        prompt=prompt,
        exhibits=summarize_exhibits(prompt.exhibits),
        exhibit=exhibit,
        exhibit_number=exhibit_index + 1,
        exhibit_total=len(prompt.exhibits),
        exhibit_body=serialize_exhibit(exhibit) if exhibit is not None else "",
        history=render_transcript(history),
    )
    logger.debug(f"Built system context for {profile.category.value} / {prompt.id}")
    return system_prompt


def build_advisory_request(
    profile: SkillProfile,
    prompt: PromptRecord,
    exhibit: Optional[ExhibitRecord],
    exhibit_index: int,
    history: Sequence[Turn],
    latest_user_message: str,
) -> AdvisoryRequest:
    messages = [
        ChatMessage(
            role="system",
            content=build_system_context(profile, prompt, exhibit, exhibit_index, history),
        )
    ]
    for turn in history:
        messages.append(ChatMessage(role=turn.role, content=turn.content))
    messages.append(ChatMessage(role="user", content=latest_user_message))

    return AdvisoryRequest(
        prompt_id=prompt.id,
        skill_type=profile.category,
        messages=messages,
    )


def build_feedback_request(
    profile: SkillProfile,
    prompt: PromptRecord,
    turns: Sequence[Turn],
) -> AdvisoryRequest:
    system_prompt = render(
        Template.SKILL_FEEDBACK,
        skill=profile.category.value,
        focus=profile.feedback_focus,
        prompt=prompt,
    )
    return AdvisoryRequest(
        prompt_id=prompt.id,
        skill_type=profile.category,
        messages=[
            ChatMessage(role="system", content=system_prompt),
            ChatMessage(role="user", content=render_transcript(turns)),
        ],
    )

"""
Practice Service - Application Orchestration Layer

This service is the entry point for all practice operations coming from the
API. It creates SkillSessions around the shared prompt repository and
advisory gateway, keeps them in the session registry, and forwards each
operation to the right session.
"""

import logging
from typing import Optional, Tuple

from ..config import settings
from ..domain.charts import ChartRenderer
from ..domain.models import SkillCategory
from ..execution.session import SkillSession
from ..llm.interface import AdvisoryGateway
from ..repositories.prompts import PromptRepository
from ..repositories.session import SessionRepository
from ..state.models import SkillSessionState
from .exceptions import SessionNotFoundError

logger = logging.getLogger(__name__)


class PracticeService:
    def __init__(
        self,
        session_repository: SessionRepository,
        prompt_repository: PromptRepository,
        gateway: AdvisoryGateway,
        chart_renderer: Optional[ChartRenderer] = None,
    ):
        self.session_repo = session_repository
        self.prompt_repo = prompt_repository
        self.gateway = gateway
        self.chart_renderer = chart_renderer

    async def create_session(
        self, skill: Optional[SkillCategory] = None
    ) -> Tuple[str, SkillSessionState]:
        """
        Creates a session and starts its first skill.
        The corpus is fetched the first time; later sessions reuse it.
        """
        session = SkillSession(
            repository=self.prompt_repo,
            gateway=self.gateway,
            chart_renderer=self.chart_renderer,
        )
        if self.prompt_repo.is_loaded:
            state = session.select_skill(skill or SkillCategory(settings.DEFAULT_SKILL))
        else:
            state = await session.initialize(skill)

        session_id = self.session_repo.add(session)
        logger.info(f"Created session {session_id} ({state.skill.value if state.skill else 'no skill'})")
        return session_id, state

    def get_session(self, session_id: str) -> SkillSession:
        session = self.session_repo.get(session_id)
        if session is None:
            raise SessionNotFoundError(f"Session {session_id} not found")
        return session

    def delete_session(self, session_id: str) -> bool:
        return self.session_repo.delete(session_id)

    def select_skill(self, session_id: str, skill: SkillCategory) -> SkillSessionState:
        return self.get_session(session_id).select_skill(skill)

    async def submit_turn(self, session_id: str, text: str) -> Tuple[bool, SkillSessionState]:
        session = self.get_session(session_id)
        accepted = await session.submit_user_turn(text)
        return accepted, session.state

    def invoke_completion_action(self, session_id: str) -> Tuple[bool, SkillSessionState]:
        session = self.get_session(session_id)
        accepted = session.invoke_completion_action()
        return accepted, session.state

    async def request_feedback(self, session_id: str) -> SkillSessionState:
        session = self.get_session(session_id)
        await session.request_feedback()
        return session.state

    async def reload_corpus(self, session_id: str) -> SkillSessionState:
        return await self.get_session(session_id).reload_corpus()

"""
Dependency Injection Wiring (Composition Root).

This module acts as the central "container" for the application's services.
It is responsible for:
1. Instantiating the core Singleton services (Repositories, Gateway, Service).
2. Wiring them together (e.g., injecting the Prompt Repository and Advisory
   Gateway into the PracticeService).
3. Managing the lifecycle of these objects using @lru_cache to ensure
   they are created only once per application process.

By consolidating construction logic here, we keep the API layer (main.py)
clean and strictly focused on routing, while allowing for easy dependency
overrides during testing.
"""


from functools import lru_cache
from fastapi import Depends

from ..config import settings
from ..data.sample_prompts import SAMPLE_PROMPTS
from ..llm.interface import AdvisoryGateway
from ..llm.adapters.http_adapter import HttpAdvisoryGateway
from ..llm.adapters.openai_adapter import OpenAIAdvisoryGateway
from ..repositories.prompts import PromptRepository, StaticPromptRepository, HttpPromptRepository
from ..repositories.session import SessionRepository, InMemorySessionRepository
from ..services.practice import PracticeService

# Advisory Gateway (Singleton)
@lru_cache()
def get_advisory_gateway() -> AdvisoryGateway:
    if settings.ADVISORY_PROVIDER == "openai":
        return OpenAIAdvisoryGateway(
            api_key=settings.OPENAI_API_KEY,
            model_name=settings.OPENAI_MODEL,
        )
    return HttpAdvisoryGateway(
        url=settings.ADVISORY_URL,
        timeout=settings.ADVISORY_TIMEOUT_SECONDS,
    )

# Prompt Repository (Singleton)
# Note: the corpus is loaded once and shared by every session.
@lru_cache()
def get_prompt_repository() -> PromptRepository:
    if settings.CORPUS_SOURCE == "static":
        return StaticPromptRepository(SAMPLE_PROMPTS)
    return HttpPromptRepository(
        url=settings.PROMPTS_URL,
        timeout=settings.ADVISORY_TIMEOUT_SECONDS,
    )

# Session Repository (Singleton)
# Note: In-memory storage must be a singleton so sessions persist across requests!
@lru_cache()
def get_session_repository() -> SessionRepository:
    return InMemorySessionRepository()

# The Practice Service (Singleton Service)
@lru_cache()
def get_practice_service(
    session_repo: SessionRepository = Depends(get_session_repository),
    prompt_repo: PromptRepository = Depends(get_prompt_repository),
    gateway: AdvisoryGateway = Depends(get_advisory_gateway),
) -> PracticeService:
    """
    Injects all necessary components into the PracticeService.
    """
    return PracticeService(
        session_repository=session_repo,
        prompt_repository=prompt_repo,
        gateway=gateway,
    )

"""
Shared pytest fixtures for the case_practice test suite.
"""

import asyncio
import random
from typing import List
from unittest.mock import AsyncMock

import pytest

from case_practice.llm.interface import AdvisoryGateway
from case_practice.repositories.prompts import StaticPromptRepository
from case_practice.schemas.advisory import AdvisoryRequest

from tests.factories import LINE_EXHIBIT, TABLE_EXHIBIT, make_prompt


@pytest.fixture
def corpus() -> List[dict]:
    """One prompt per skill; the Analysis prompt carries two exhibits."""
    return [
        make_prompt("clar-1", "Clarifying"),
        make_prompt("hyp-1", "Hypothesis"),
        make_prompt("fw-1", "Frameworks"),
        make_prompt("an-1", "Analysis", exhibits=[TABLE_EXHIBIT, LINE_EXHIBIT]),
        make_prompt("rec-1", "Recommendation", exhibits=[TABLE_EXHIBIT, LINE_EXHIBIT]),
    ]


@pytest.fixture
async def repository(corpus) -> StaticPromptRepository:
    repo = StaticPromptRepository(corpus, rng=random.Random(7))
    await repo.load()
    return repo


@pytest.fixture
def gateway() -> AsyncMock:
    mock = AsyncMock(spec=AdvisoryGateway)
    mock.ask.return_value = "Good question. Costs rose 8%."
    return mock


class BlockingGateway(AdvisoryGateway):
    """Holds every reply until 'release' is set, to simulate slow requests."""

    def __init__(self, reply: str = "late reply"):
        self.reply = reply
        self.release = asyncio.Event()
        self.requests: List[AdvisoryRequest] = []

    async def ask(self, request: AdvisoryRequest) -> str:
        self.requests.append(request)
        await self.release.wait()
        return self.reply

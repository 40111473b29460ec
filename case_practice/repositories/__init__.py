"""
Repositories - Access to the Practice Corpus
"""

from case_practice.repositories.exceptions import (
    LoadErrorCode,
    PromptCorpusError,
    PromptCorpusMalformed,
    PromptCorpusUnavailable,
)
from case_practice.repositories.prompts import (
    HttpPromptRepository,
    PromptRepository,
    StaticPromptRepository,
    parse_corpus,
)

__all__ = [
    "LoadErrorCode",
    "PromptCorpusError",
    "PromptCorpusMalformed",
    "PromptCorpusUnavailable",
    "HttpPromptRepository",
    "PromptRepository",
    "StaticPromptRepository",
    "parse_corpus",
]

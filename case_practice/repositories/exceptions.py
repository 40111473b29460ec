"""
Repository Exceptions

Raised while loading the prompt corpus. The SkillSession turns these into
notices; they never reach the user as unhandled errors.
"""

from enum import Enum


class LoadErrorCode(str, Enum):
    UNAVAILABLE = "UNAVAILABLE"
    MALFORMED = "MALFORMED"


class PromptCorpusError(Exception):
    """Base class for corpus loading failures."""
    code: LoadErrorCode


class PromptCorpusUnavailable(PromptCorpusError):
    """The corpus could not be fetched (network error or non-2xx status)."""
    code = LoadErrorCode.UNAVAILABLE


class PromptCorpusMalformed(PromptCorpusError):
    """The corpus was fetched but is not a non-empty list of valid records."""
    code = LoadErrorCode.MALFORMED

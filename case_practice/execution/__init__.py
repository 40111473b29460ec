"""
Execution Layer - Practice Session Orchestration

Defines the SkillSession (deterministic state machine), the per-skill
behaviour table, and the advisory request builders.
"""

from case_practice.execution.session import SkillSession
from case_practice.execution.skills import SKILL_PROFILES, SkillProfile, get_profile


__all__ = [
    "SKILL_PROFILES",
    "SkillProfile",
    "SkillSession",
    "get_profile",
]

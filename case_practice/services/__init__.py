"""
Service Layer - Application Orchestration
"""

from case_practice.services.exceptions import SessionNotFoundError
from case_practice.services.practice import PracticeService

__all__ = ["PracticeService", "SessionNotFoundError"]

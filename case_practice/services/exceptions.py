"""
Service Layer Exceptions

Custom exceptions for the PracticeService.
"""


class SessionNotFoundError(Exception):
    """Raised when no live session exists for the given ID."""
    pass

import uuid
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Dict, Optional

if TYPE_CHECKING:
    from ..execution.session import SkillSession


class SessionRepository(ABC):
    """
    Defines how the application keeps live practice sessions.
    Sessions live only as long as the process.
    """

    @abstractmethod
    def add(self, session: "SkillSession") -> str:
        """Registers a session under a new unique ID and returns the ID."""
        pass

    @abstractmethod
    def get(self, session_id: str) -> Optional["SkillSession"]:
        """Retrieves a session by ID."""
        pass

    @abstractmethod
    def delete(self, session_id: str) -> bool:
        """Deletes a session. Returns True if found and deleted."""
        pass


class InMemorySessionRepository(SessionRepository):
    """
    Uses in-memory dictionary for session storage.
    """

    def __init__(self):
        self._store: Dict[str, "SkillSession"] = {}

    def add(self, session: "SkillSession") -> str:
        new_id = str(uuid.uuid4())
        self._store[new_id] = session
        return new_id

    def get(self, session_id: str) -> Optional["SkillSession"]:
        return self._store.get(session_id)

    def delete(self, session_id: str) -> bool:
        if session_id in self._store:
            del self._store[session_id]
            return True
        return False

    def __len__(self) -> int:
        return len(self._store)

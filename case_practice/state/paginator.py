"""
Exhibit Paginator.

Walks a prompt's exhibits one at a time for paginated skills (Analysis).
Other skills show every exhibit at once and never advance the index.
"""

from enum import Enum, auto
from typing import List, Optional

from ..domain.models import ExhibitRecord, PromptRecord


class AdvanceResult(Enum):
    CONTINUE = auto()  # Moved to the next exhibit
    FINAL = auto()  # Already on the last exhibit; index unchanged


class ExhibitPaginator:
    def __init__(self):
        self._index = 0

    @property
    def index(self) -> int:
        return self._index

    def reset(self) -> None:
        self._index = 0

    def current(self, prompt: Optional[PromptRecord]) -> Optional[ExhibitRecord]:
        if prompt is None or not prompt.exhibits:
            return None
        if 0 <= self._index < len(prompt.exhibits):
            return prompt.exhibits[self._index]
        return None

    def advance(self, prompt: Optional[PromptRecord]) -> AdvanceResult:
        total = len(prompt.exhibits) if prompt is not None else 0
        if self._index + 1 < total:
            self._index += 1
            return AdvanceResult.CONTINUE
        return AdvanceResult.FINAL

    def is_last(self, prompt: Optional[PromptRecord]) -> bool:
        total = len(prompt.exhibits) if prompt is not None else 0
        return self._index + 1 >= total

    def visible(self, prompt: Optional[PromptRecord], paginated: bool) -> List[ExhibitRecord]:
        """Exhibits to display: the current one when paginated, otherwise all."""
        if prompt is None:
            return []
        if not paginated:
            return list(prompt.exhibits)
        exhibit = self.current(prompt)
        return [exhibit] if exhibit is not None else []

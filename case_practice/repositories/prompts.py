import logging
import random
from abc import ABC, abstractmethod
from collections import Counter
from typing import Any, Dict, List, Optional, Sequence

import httpx
from pydantic import TypeAdapter, ValidationError

from ..domain.models import PromptRecord, SkillCategory
from .exceptions import PromptCorpusMalformed, PromptCorpusUnavailable

logger = logging.getLogger(__name__)

_RECORDS = TypeAdapter(List[PromptRecord])


def parse_corpus(payload: Any) -> List[PromptRecord]:
    """
    Validates a decoded corpus payload.
    Raises PromptCorpusMalformed unless it is a non-empty list of valid records
    with unique ids.
    """
    if not isinstance(payload, list) or not payload:
        raise PromptCorpusMalformed("Prompts data is not a valid array or is empty.")
    try:
        records = _RECORDS.validate_python(payload)
    except ValidationError as e:
        raise PromptCorpusMalformed(f"Invalid prompt record: {e}") from e

    counts = Counter(record.id for record in records)
    duplicates = sorted(prompt_id for prompt_id, count in counts.items() if count > 1)
    if duplicates:
        raise PromptCorpusMalformed(f"Duplicate prompt ids: {', '.join(duplicates)}")
    return records


class PromptRepository(ABC):
    """
    Defines how the application accesses the practice corpus.
    Subclasses only decide WHERE the records come from (memory, HTTP);
    selection and lookup work on the loaded, read-only collection.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self._records: List[PromptRecord] = []
        self._index: Dict[str, PromptRecord] = {}
        self._rng = rng or random.Random()

    @abstractmethod
    async def _fetch(self) -> Any:
        """Returns the raw decoded corpus payload."""
        pass

    async def load(self) -> List[PromptRecord]:
        """
        Fetches and parses the corpus, replacing the current collection.
        On failure the previously loaded collection is kept.
        """
        records = parse_corpus(await self._fetch())
        self._records = records
        # Index for O(1) lookup
        self._index = {record.id: record for record in records}
        logger.info(f"Prompts loaded successfully: {len(records)} prompts found.")
        return list(records)

    @property
    def is_loaded(self) -> bool:
        return bool(self._records)

    def select_random(self, skill: SkillCategory) -> Optional[PromptRecord]:
        candidates = [record for record in self._records if record.skill_type == skill]
        if not candidates:
            logger.warning(f"No prompts found for skill: {skill.value}")
            return None
        selected = self._rng.choice(candidates)
        logger.info(f"Selected prompt ID: {selected.id} for skill: {skill.value}")
        return selected

    def find_by_id(self, prompt_id: str) -> Optional[PromptRecord]:
        return self._index.get(prompt_id)

    def __len__(self) -> int:
        return len(self._records)


class StaticPromptRepository(PromptRepository):
    """
    Serves prompts from an in-memory list of corpus-shaped dicts.
    """

    def __init__(self, records: Sequence[Dict[str, Any]], rng: Optional[random.Random] = None):
        super().__init__(rng=rng)
        self._raw = list(records)

    async def _fetch(self) -> Any:
        return self._raw


class HttpPromptRepository(PromptRepository):
    """
    Fetches the corpus JSON from a URL.
    """

    def __init__(
        self,
        url: str,
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = 30.0,
        rng: Optional[random.Random] = None,
    ):
        super().__init__(rng=rng)
        self.url = url
        self._client = client
        self._timeout = timeout

    async def _fetch(self) -> Any:
        logger.info(f"Attempting to load prompts from: {self.url}")
        try:
            if self._client is not None:
                response = await self._client.get(self.url, timeout=self._timeout)
            else:
                async with httpx.AsyncClient(timeout=self._timeout) as client:
                    response = await client.get(self.url)
        except httpx.HTTPError as e:
            raise PromptCorpusUnavailable(f"Could not fetch prompts from {self.url}: {e}") from e

        if response.is_error:
            raise PromptCorpusUnavailable(
                f"HTTP error loading prompts! Status: {response.status_code} from {self.url}"
            )

        try:
            return response.json()
        except ValueError as e:
            raise PromptCorpusMalformed(f"Prompts payload is not valid JSON: {e}") from e

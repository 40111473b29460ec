import logging
from typing import Any, Optional

import httpx
from pydantic import ValidationError

from ..exceptions import AdvisoryMalformedError, AdvisoryTransportError
from ..interface import AdvisoryGateway
from ...config import settings
from ...schemas.advisory import AdvisoryRequest, CompletionReply, OutputReply

logger = logging.getLogger(__name__)


def extract_reply_text(payload: Any, raw_text: str, preview_chars: int = settings.RAW_PREVIEW_CHARS) -> str:
    """
    Unwraps either reply shape. Anything else raises AdvisoryMalformedError
    carrying a truncated copy of the raw payload for display.
    """
    try:
        return CompletionReply.model_validate(payload).choices[0].message.content
    except ValidationError:
        pass
    try:
        return OutputReply.model_validate(payload).output
    except ValidationError:
        pass
    raise AdvisoryMalformedError(
        "Unexpected reply format from advisory service.",
        raw_preview=raw_text[:preview_chars],
    )


class HttpAdvisoryGateway(AdvisoryGateway):
    """
    POSTs the request as JSON to the hosted advisory proxy.
    Single attempt; a timeout surfaces as a transport error.
    """

    def __init__(
        self,
        url: str = settings.ADVISORY_URL,
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = settings.ADVISORY_TIMEOUT_SECONDS,
    ):
        self.url = url
        self._client = client
        self._timeout = timeout

    async def ask(self, request: AdvisoryRequest) -> str:
        body = request.model_dump(mode="json")
        try:
            if self._client is not None:
                response = await self._client.post(self.url, json=body, timeout=self._timeout)
            else:
                async with httpx.AsyncClient(timeout=self._timeout) as client:
                    response = await client.post(self.url, json=body)
        except httpx.HTTPError as e:
            raise AdvisoryTransportError(f"Advisory request failed: {e}") from e

        if response.is_error:
            raise AdvisoryTransportError(
                f"Advisory service responded {response.status_code}",
                status_code=response.status_code,
                body=response.text,
            )

        try:
            payload = response.json()
        except ValueError:
            payload = None
        return extract_reply_text(payload, response.text)

import openai
from openai import AsyncOpenAI

from ..exceptions import AdvisoryMalformedError, AdvisoryTransportError
from ..interface import AdvisoryGateway
from ...config import settings
from ...schemas.advisory import AdvisoryRequest


class OpenAIAdvisoryGateway(AdvisoryGateway):
    def __init__(
        self,
        api_key: str | None,
        model_name: str = settings.OPENAI_MODEL,
        temperature: float = settings.LLM_TEMPERATURE,
        client: AsyncOpenAI | None = None,
    ):
        self.client = client or AsyncOpenAI(
            api_key=api_key,
            max_retries=settings.MAX_RETRIES,
            timeout=settings.ADVISORY_TIMEOUT_SECONDS,
        )
        self.model_name = model_name
        self.temperature = temperature

    async def ask(self, request: AdvisoryRequest) -> str:
        # All OpenAI specifics stay in this file; the session only sees gateway errors.
        try:
            completion = await self.client.chat.completions.create(
                model=self.model_name,
                messages=[message.model_dump() for message in request.messages],
                temperature=self.temperature,
            )
        except openai.APIStatusError as e:
            raise AdvisoryTransportError(
                f"OpenAI responded {e.status_code}",
                status_code=e.status_code,
                body=e.response.text,
            ) from e
        except openai.APIError as e:
            raise AdvisoryTransportError(f"OpenAI request failed: {e}") from e

        content = completion.choices[0].message.content if completion.choices else None
        if not content:
            raise AdvisoryMalformedError(
                "OpenAI returned an empty completion.",
                raw_preview=completion.model_dump_json()[: settings.RAW_PREVIEW_CHARS],
            )
        return content

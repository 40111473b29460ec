"""
Tests for the advisory gateway adapters.

Tests:
- Request body shape sent to the proxy
- Both accepted reply shapes ('choices' and 'output')
- Transport failures (status codes, connection errors)
- Malformed replies with a truncated raw preview
- OpenAI adapter error mapping
"""

import json
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import httpx
import openai
import pytest

from case_practice.domain.models import SkillCategory
from case_practice.llm.adapters.http_adapter import HttpAdvisoryGateway, extract_reply_text
from case_practice.llm.adapters.openai_adapter import OpenAIAdvisoryGateway
from case_practice.llm.exceptions import (
    AdvisoryMalformedError,
    AdvisoryTransportError,
    GatewayErrorCode,
)
from case_practice.schemas.advisory import AdvisoryRequest, ChatMessage

ADVISORY_URL = "https://advisor.example.test/"


@pytest.fixture
def request_body() -> AdvisoryRequest:
    return AdvisoryRequest(
        prompt_id="hyp-1",
        skill_type=SkillCategory.HYPOTHESIS,
        messages=[
            ChatMessage(role="system", content="You are a case interviewer."),
            ChatMessage(role="user", content="rev declines"),
        ],
    )


def http_gateway(handler) -> HttpAdvisoryGateway:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return HttpAdvisoryGateway(url=ADVISORY_URL, client=client)


class TestExtractReplyText:
    def test_choices_shape(self):
        payload = {"choices": [{"message": {"role": "assistant", "content": "Costs rose."}}]}
        assert extract_reply_text(payload, json.dumps(payload)) == "Costs rose."

    def test_output_shape(self):
        assert extract_reply_text({"output": "Volume fell."}, "") == "Volume fell."

    def test_empty_choices_falls_back_to_output(self):
        assert extract_reply_text({"choices": [], "output": "fallback"}, "") == "fallback"

    def test_unknown_shape_is_malformed_with_preview(self):
        raw = json.dumps({"error": "x" * 500})
        with pytest.raises(AdvisoryMalformedError) as exc:
            extract_reply_text(json.loads(raw), raw, preview_chars=50)
        assert exc.value.code == GatewayErrorCode.MALFORMED
        assert exc.value.raw_preview == raw[:50]


class TestHttpAdvisoryGateway:
    async def test_posts_request_json(self, request_body):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["method"] = request.method
            seen["url"] = str(request.url)
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json={"choices": [{"message": {"content": "Noted."}}]})

        reply = await http_gateway(handler).ask(request_body)

        assert reply == "Noted."
        assert seen["method"] == "POST"
        assert seen["url"] == ADVISORY_URL
        assert seen["body"] == {
            "prompt_id": "hyp-1",
            "skill_type": "Hypothesis",
            "messages": [
                {"role": "system", "content": "You are a case interviewer."},
                {"role": "user", "content": "rev declines"},
            ],
        }

    async def test_output_fallback(self, request_body):
        gateway = http_gateway(lambda request: httpx.Response(200, json={"output": "Plain reply"}))
        assert await gateway.ask(request_body) == "Plain reply"

    async def test_error_status_is_transport_error(self, request_body):
        gateway = http_gateway(lambda request: httpx.Response(502, text="upstream down"))

        with pytest.raises(AdvisoryTransportError) as exc:
            await gateway.ask(request_body)

        assert exc.value.code == GatewayErrorCode.TRANSPORT
        assert exc.value.status_code == 502
        assert exc.value.body == "upstream down"

    async def test_connection_error_is_transport_error(self, request_body):
        def handler(request):
            raise httpx.ConnectTimeout("timed out", request=request)

        with pytest.raises(AdvisoryTransportError) as exc:
            await http_gateway(handler).ask(request_body)
        assert exc.value.status_code is None

    async def test_non_json_reply_is_malformed(self, request_body):
        gateway = http_gateway(lambda request: httpx.Response(200, text="<html>maintenance</html>"))

        with pytest.raises(AdvisoryMalformedError) as exc:
            await gateway.ask(request_body)
        assert exc.value.raw_preview == "<html>maintenance</html>"


class TestOpenAIAdvisoryGateway:
    @pytest.fixture
    def client(self):
        client = MagicMock()
        client.chat.completions.create = AsyncMock()
        return client

    async def test_returns_completion_content(self, client, request_body):
        client.chat.completions.create.return_value = SimpleNamespace(
            choices=[SimpleNamespace(message=SimpleNamespace(content="Margins shrank."))]
        )
        gateway = OpenAIAdvisoryGateway(api_key="test-key", model_name="gpt-test", client=client)

        assert await gateway.ask(request_body) == "Margins shrank."
        kwargs = client.chat.completions.create.call_args.kwargs
        assert kwargs["model"] == "gpt-test"
        assert kwargs["messages"][1] == {"role": "user", "content": "rev declines"}

    async def test_status_error_is_transport_error(self, client, request_body):
        http_request = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")
        response = httpx.Response(429, request=http_request, text="rate limited")
        client.chat.completions.create.side_effect = openai.APIStatusError(
            "rate limited", response=response, body=None
        )
        gateway = OpenAIAdvisoryGateway(api_key="test-key", client=client)

        with pytest.raises(AdvisoryTransportError) as exc:
            await gateway.ask(request_body)
        assert exc.value.status_code == 429

    async def test_connection_error_is_transport_error(self, client, request_body):
        http_request = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")
        client.chat.completions.create.side_effect = openai.APIConnectionError(request=http_request)
        gateway = OpenAIAdvisoryGateway(api_key="test-key", client=client)

        with pytest.raises(AdvisoryTransportError):
            await gateway.ask(request_body)

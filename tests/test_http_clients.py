"""Tests for the OpenAI generation adapter."""

import asyncio
import json

import httpx
import pytest
from openai import AsyncOpenAI

from macro_planner.adapters.openai_generation_client import OpenAIGenerationClient
from macro_planner.domain.errors import GenerationFailure
from macro_planner.domain.regions import Region
from macro_planner.services.generation import RecipeRequestClient
from macro_planner.services.prompts import compose_shake_request
from tests.conftest import SHAKE_PAYLOAD


class _FakeResponses:
    def __init__(self, output_text: str) -> None:
        self.output_text = output_text
        self.last_payload: dict[str, object] | None = None

    async def create(self, **kwargs):  # type: ignore[no-untyped-def]
        self.last_payload = kwargs
        return type("Resp", (), {"output_text": self.output_text})()


class _FakeOpenAI:
    def __init__(self, output_text: str = "{}") -> None:
        self.responses = _FakeResponses(output_text)


def _generate(client: OpenAIGenerationClient, **overrides: object) -> str:
    options: dict[str, object] = {
        "model": "gpt-5.2",
        "reasoning_effort": "low",
        "store": False,
        "prompt": "Plan my day",
        "system_instruction": "You are a pragmatic nutritionist.",
        "schema_name": "daily_plan",
        "schema": {"type": "object"},
    }
    options.update(overrides)
    return asyncio.run(client.generate(**options))


def test_openai_generation_client_builds_structured_request() -> None:
    fake = _FakeOpenAI(output_text='{"meals": []}')
    client = OpenAIGenerationClient(client=fake)

    result = _generate(client)

    payload = fake.responses.last_payload
    assert result == '{"meals": []}'
    assert payload is not None
    assert payload["input"][0] == {
        "role": "system",
        "content": "You are a pragmatic nutritionist.",
    }
    assert payload["input"][1]["role"] == "user"
    assert payload["text"]["format"]["type"] == "json_schema"
    assert payload["text"]["format"]["name"] == "daily_plan"
    assert payload["text"]["format"]["strict"] is True
    assert payload["reasoning"] == {"effort": "low"}


def test_openai_generation_client_omits_optional_fields() -> None:
    fake = _FakeOpenAI()
    client = OpenAIGenerationClient(client=fake)

    _generate(client, system_instruction=None, reasoning_effort=None)

    payload = fake.responses.last_payload
    assert payload is not None
    assert [message["role"] for message in payload["input"]] == ["user"]
    assert "reasoning" not in payload


def _openai_over(handler) -> AsyncOpenAI:  # type: ignore[no-untyped-def]
    return AsyncOpenAI(
        api_key="openai-key",
        base_url="https://api.test/v1",
        max_retries=0,
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )


def test_openai_generation_client_reads_output_text() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path.endswith("/responses")
        body = json.loads(request.content.decode())
        assert body["text"]["format"]["name"] == "shake_recipe"
        return httpx.Response(
            200,
            json={
                "id": "resp_1",
                "object": "response",
                "created_at": 1700000000,
                "model": "gpt-5.2",
                "status": "completed",
                "output": [
                    {
                        "type": "message",
                        "id": "msg_1",
                        "role": "assistant",
                        "status": "completed",
                        "content": [
                            {
                                "type": "output_text",
                                "text": json.dumps(SHAKE_PAYLOAD),
                                "annotations": [],
                            }
                        ],
                    }
                ],
            },
        )

    client = OpenAIGenerationClient(client=_openai_over(handler))
    recipe_client = RecipeRequestClient(
        client=client, model="gpt-5.2", reasoning_effort=None, store=False
    )
    request = compose_shake_request(["Banana", "Peanut Butter"], Region.WORLDWIDE)

    recipe = asyncio.run(recipe_client.fetch_recipe(request))

    assert recipe.name == SHAKE_PAYLOAD["name"]


def test_provider_http_error_is_sent_once_and_wrapped() -> None:
    calls: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request.url.path)
        return httpx.Response(429, json={"error": {"message": "quota exceeded"}})

    client = OpenAIGenerationClient(client=_openai_over(handler))
    recipe_client = RecipeRequestClient(
        client=client, model="gpt-5.2", reasoning_effort=None, store=False
    )
    request = compose_shake_request(["Banana", "Oats"], Region.LOCAL)

    with pytest.raises(GenerationFailure) as exc_info:
        asyncio.run(recipe_client.fetch_recipe(request))

    assert len(calls) == 1
    assert "quota" not in str(exc_info.value)


def test_create_disables_sdk_retries() -> None:
    client = OpenAIGenerationClient.create("openai-key")

    assert client.client.max_retries == 0
    asyncio.run(client.close())

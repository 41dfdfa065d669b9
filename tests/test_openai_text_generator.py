import json

import httpx
import pytest

from review_summary.exceptions import GenerationError
from review_summary.repositories import OpenAITextGenerator

MESSAGES = [
    {"role": "system", "content": "sys"},
    {"role": "user", "content": "hello"},
]


def make_generator(handler) -> OpenAITextGenerator:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return OpenAITextGenerator(
        model_name="test-model",
        base_url="http://llm.test/v1/",
        api_key="secret",
        client=client,
    )


def completion(content) -> dict:
    return {"choices": [{"message": {"role": "assistant", "content": content}}]}


async def test_generate_posts_chat_completion():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json=completion("Summary text"))

    generator = make_generator(handler)

    assert await generator.generate(MESSAGES) == "Summary text"
    assert seen["url"] == "http://llm.test/v1/chat/completions"
    assert seen["body"] == {"model": "test-model", "messages": MESSAGES}
    await generator.close()


@pytest.mark.parametrize(
    "payload",
    [completion(None), completion(["part"]), {"choices": []}, {}, []],
)
async def test_unusable_content_becomes_empty_string(payload):
    generator = make_generator(lambda request: httpx.Response(200, json=payload))

    assert await generator.generate(MESSAGES) == ""


async def test_http_error_raises_generation_error():
    generator = make_generator(lambda request: httpx.Response(500, json={"error": "boom"}))

    with pytest.raises(GenerationError) as exc_info:
        await generator.generate(MESSAGES)
    assert isinstance(exc_info.value.__cause__, httpx.HTTPStatusError)


async def test_transport_error_raises_generation_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    generator = make_generator(handler)

    with pytest.raises(GenerationError, match="connection refused"):
        await generator.generate(MESSAGES)


async def test_invalid_json_raises_generation_error():
    generator = make_generator(lambda request: httpx.Response(200, content=b"not json"))

    with pytest.raises(GenerationError):
        await generator.generate(MESSAGES)


async def test_default_client_sends_bearer_token():
    generator = OpenAITextGenerator(model_name="m", base_url="http://llm.test", api_key="secret")

    assert generator.client.headers["Authorization"] == "Bearer secret"
    await generator.close()

"""Tests for tool dispatch: payloads, response shaping and error results."""

import json

import httpx
import pytest

from tests.conftest import API_KEY, BASE_URL


def ok(payload):
    return lambda request: httpx.Response(200, json=payload)


@pytest.mark.asyncio
async def test_chat_returns_first_choice(make_dispatcher):
    """A chat call relays the first completion choice as a single text block."""
    dispatcher, _ = make_dispatcher(ok({"choices": [{"message": {"content": "hi there"}}]}))

    result = await dispatcher.call_tool("zai_chat", {"message": "hello"})

    assert result.isError is False
    assert len(result.content) == 1
    assert result.content[0].type == "text"
    assert "hi there" in result.content[0].text
    assert json.loads(result.content[0].text) == {"response": "hi there"}


@pytest.mark.asyncio
async def test_chat_includes_usage_and_model(make_dispatcher):
    dispatcher, _ = make_dispatcher(
        ok(
            {
                "model": "glm-4",
                "usage": {"total_tokens": 12},
                "choices": [{"message": {"content": "answer"}}],
            }
        )
    )

    result = await dispatcher.call_tool("zai_chat", {"message": "q"})

    assert json.loads(result.content[0].text) == {
        "response": "answer",
        "usage": {"total_tokens": 12},
        "model": "glm-4",
    }


@pytest.mark.asyncio
async def test_chat_payload_defaults(make_dispatcher, config):
    """Chat requests use the configured model, token limit and temperature."""
    dispatcher, upstream = make_dispatcher(ok({"choices": []}))

    await dispatcher.call_tool("zai_chat", {"message": "hello"})

    request = upstream.requests[0]
    assert request.method == "POST"
    assert str(request.url) == f"{BASE_URL}/v1/chat/completions"
    assert request.headers["Authorization"] == f"Bearer {API_KEY}"
    assert request.headers["Content-Type"] == "application/json"
    assert upstream.last_body == {
        "model": config.zai.model,
        "messages": [{"role": "user", "content": "hello"}],
        "max_tokens": config.zai.max_tokens,
        "temperature": config.zai.temperature,
    }


@pytest.mark.asyncio
async def test_chat_payload_with_system_and_history(make_dispatcher):
    """System prompt, history and message are sent in order."""
    dispatcher, upstream = make_dispatcher(ok({"choices": []}))
    history = [
        {"role": "user", "content": "first"},
        {"role": "assistant", "content": "reply"},
    ]

    await dispatcher.call_tool(
        "zai_chat",
        {
            "message": "second",
            "system": "be brief",
            "conversationHistory": history,
            "temperature": 0,
            "maxTokens": 50,
        },
    )

    body = upstream.last_body
    assert body["messages"] == [
        {"role": "system", "content": "be brief"},
        {"role": "user", "content": "first"},
        {"role": "assistant", "content": "reply"},
        {"role": "user", "content": "second"},
    ]
    assert body["temperature"] == 0
    assert body["max_tokens"] == 50


@pytest.mark.asyncio
async def test_chat_without_choices_fails_closed(make_dispatcher):
    """A response lacking choices yields the placeholder text, not an error."""
    dispatcher, _ = make_dispatcher(ok({"id": "x"}))

    result = await dispatcher.call_tool("zai_chat", {"message": "hello"})

    assert result.isError is False
    assert json.loads(result.content[0].text)["response"] == "No response from z.ai"


@pytest.mark.asyncio
async def test_search_empty_results(make_dispatcher):
    """An empty search is a normal result reporting zero matches."""
    dispatcher, upstream = make_dispatcher(ok({"results": []}))

    result = await dispatcher.call_tool("zai_search", {"query": "x"})

    assert result.isError is False
    assert '"count": 0' in result.content[0].text
    assert json.loads(result.content[0].text) == {"results": [], "count": 0, "query": "x"}
    assert upstream.last_body == {"query": "x", "max_results": 10}
    assert str(upstream.requests[0].url) == f"{BASE_URL}/v1/search"


@pytest.mark.asyncio
async def test_search_with_filters_and_limit(make_dispatcher):
    results = [{"title": "a", "url": "https://a.example"}, {"title": "b"}]
    dispatcher, upstream = make_dispatcher(ok({"results": results}))
    filters = {"dateRange": "last_week", "domains": ["example.com"]}

    result = await dispatcher.call_tool(
        "zai_search", {"query": "news", "maxResults": 5, "filters": filters}
    )

    assert upstream.last_body == {"query": "news", "max_results": 5, "filters": filters}
    payload = json.loads(result.content[0].text)
    assert payload["count"] == 2
    assert payload["results"] == results


@pytest.mark.asyncio
async def test_search_missing_results_counts_zero(make_dispatcher):
    dispatcher, _ = make_dispatcher(ok({}))

    result = await dispatcher.call_tool("zai_search", {"query": "x"})

    assert result.isError is False
    assert json.loads(result.content[0].text)["count"] == 0


@pytest.mark.asyncio
async def test_summarize_payload_defaults(make_dispatcher):
    dispatcher, upstream = make_dispatcher(ok({"summary": "short"}))

    result = await dispatcher.call_tool("zai_summarize", {"text": "a long text"})

    assert str(upstream.requests[0].url) == f"{BASE_URL}/v1/summarize"
    assert upstream.last_body == {
        "text": "a long text",
        "length": "medium",
        "style": "paragraph",
    }
    assert json.loads(result.content[0].text) == {
        "summary": "short",
        "original_length": 11,
        "summary_length": 5,
    }


@pytest.mark.asyncio
async def test_summarize_is_idempotent(make_dispatcher):
    """The same call against a deterministic upstream yields identical results."""
    dispatcher, _ = make_dispatcher(ok({"summary": "same every time"}))
    arguments = {"text": "some text", "length": "short", "style": "bullet_points"}

    first = await dispatcher.call_tool("zai_summarize", arguments)
    second = await dispatcher.call_tool("zai_summarize", arguments)

    assert first.model_dump_json() == second.model_dump_json()
    assert first.isError is False


@pytest.mark.asyncio
async def test_summarize_without_summary(make_dispatcher):
    dispatcher, _ = make_dispatcher(ok({}))

    result = await dispatcher.call_tool("zai_summarize", {"text": "abc"})

    payload = json.loads(result.content[0].text)
    assert payload["summary"] == "No response from z.ai"
    assert payload["summary_length"] == 0


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "name,arguments",
    [
        ("zai_chat", {"message": "hello"}),
        ("zai_search", {"query": "x"}),
        ("zai_summarize", {"text": "abc"}),
    ],
)
async def test_upstream_http_error(make_dispatcher, name, arguments):
    """Non-2xx answers become error results naming the tool and carrying the body."""
    dispatcher, upstream = make_dispatcher(
        lambda request: httpx.Response(500, text="server error")
    )

    result = await dispatcher.call_tool(name, arguments)

    assert result.isError is True
    text = result.content[0].text
    assert name in text
    assert "server error" in text
    assert text == f"Error executing {name}: z.ai API error (500): server error"
    assert len(upstream.requests) == 1


@pytest.mark.asyncio
async def test_transport_error(make_dispatcher):
    """Network failures are reported as connection errors without retrying."""

    def refuse(request):
        raise httpx.ConnectError("connection refused", request=request)

    dispatcher, upstream = make_dispatcher(refuse)

    result = await dispatcher.call_tool("zai_search", {"query": "x"})

    assert result.isError is True
    assert result.content[0].text == (
        "Error executing zai_search: Failed to connect to z.ai API: connection refused"
    )
    assert len(upstream.requests) == 1


@pytest.mark.asyncio
async def test_invalid_json_response(make_dispatcher):
    dispatcher, _ = make_dispatcher(lambda request: httpx.Response(200, text="not json"))

    result = await dispatcher.call_tool("zai_chat", {"message": "hello"})

    assert result.isError is True
    assert result.content[0].text.startswith(
        "Error executing zai_chat: Invalid JSON in z.ai API response"
    )


@pytest.mark.asyncio
async def test_unknown_tool(make_dispatcher):
    dispatcher, upstream = make_dispatcher(ok({}))

    result = await dispatcher.call_tool("zai_unknown", {"message": "hello"})

    assert result.isError is True
    assert result.content[0].text == "Unknown tool: zai_unknown"
    assert upstream.requests == []


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "name,arguments",
    [
        ("zai_chat", {}),
        ("zai_search", {"maxResults": 3}),
        ("zai_summarize", {"text": None}),
    ],
)
async def test_missing_required_field(make_dispatcher, name, arguments):
    """A missing required field is an error result and no request is sent."""
    dispatcher, upstream = make_dispatcher(ok({}))

    result = await dispatcher.call_tool(name, arguments)

    assert result.isError is True
    assert result.content[0].text.startswith(
        f"Error executing {name}: Invalid arguments for {name}"
    )
    assert upstream.requests == []


@pytest.mark.asyncio
async def test_none_arguments_are_treated_as_empty(make_dispatcher):
    dispatcher, _ = make_dispatcher(ok({}))

    result = await dispatcher.call_tool("zai_chat", None)

    assert result.isError is True
    assert "message" in result.content[0].text


@pytest.mark.asyncio
async def test_unexpected_error_becomes_error_result(make_dispatcher, monkeypatch):
    """Errors outside the taxonomy are still converted, never raised."""
    dispatcher, _ = make_dispatcher(ok({}))

    async def explode(request):
        raise RuntimeError("boom")

    monkeypatch.setattr(dispatcher.client, "send", explode)

    result = await dispatcher.call_tool("zai_chat", {"message": "hello"})

    assert result.isError is True
    assert result.content[0].text == "Error executing zai_chat: boom"


@pytest.mark.asyncio
async def test_chat_forwards_fractional_max_tokens(make_dispatcher):
    """Any number the catalog schema accepts is forwarded as given."""
    dispatcher, upstream = make_dispatcher(ok({"choices": []}))

    result = await dispatcher.call_tool("zai_chat", {"message": "m", "maxTokens": 100.5})

    assert result.isError is False
    assert upstream.last_body["max_tokens"] == 100.5


@pytest.mark.asyncio
async def test_search_forwards_fractional_max_results(make_dispatcher):
    dispatcher, upstream = make_dispatcher(ok({"results": []}))

    result = await dispatcher.call_tool("zai_search", {"query": "q", "maxResults": 2.5})

    assert result.isError is False
    assert upstream.last_body["max_results"] == 2.5


@pytest.mark.asyncio
async def test_search_forwards_empty_filters(make_dispatcher):
    dispatcher, upstream = make_dispatcher(ok({"results": []}))

    await dispatcher.call_tool("zai_search", {"query": "q", "filters": {}})

    assert upstream.last_body == {"query": "q", "max_results": 10, "filters": {}}


@pytest.mark.asyncio
async def test_chat_keeps_null_usage(make_dispatcher):
    """A null field from z.ai is relayed; only absent fields are left out."""
    dispatcher, _ = make_dispatcher(
        ok({"usage": None, "choices": [{"message": {"content": "answer"}}]})
    )

    result = await dispatcher.call_tool("zai_chat", {"message": "q"})

    assert json.loads(result.content[0].text) == {"response": "answer", "usage": None}

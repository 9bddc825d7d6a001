import json

import pytest
from unittest.mock import AsyncMock, MagicMock, Mock, patch
from openai import OpenAIError

from agent_relay.adapters.openai_adapter import (
    DEFAULT_CHAT_MODEL,
    OpenAIAdapter,
    message_to_openai,
    parse_tool_arguments,
)
from agent_relay.domains.errors import GatewayError
from agent_relay.domains.messages import FinishReason, Message, ToolCall, ToolResult

# Fixtures


@pytest.fixture
def mock_openai():
    with patch("agent_relay.adapters.openai_adapter.AsyncOpenAI") as mock:
        mock.return_value.chat.completions.create = AsyncMock()
        yield mock


@pytest.fixture
def adapter(mock_openai):
    return OpenAIAdapter(api_key="test-key", model="gpt-4o-mini")


def create_mock_response(content=None, tool_calls=None, finish_reason="stop", usage=True):
    message = Mock()
    message.content = content
    message.tool_calls = tool_calls
    choice = Mock()
    choice.message = message
    choice.finish_reason = finish_reason
    response = Mock()
    response.choices = [choice]
    if usage:
        response.usage = Mock(prompt_tokens=10, completion_tokens=5, total_tokens=15)
    else:
        response.usage = None
    return response


def create_mock_tool_call(call_id, name, arguments):
    tool_call = Mock()
    tool_call.id = call_id
    tool_call.function.name = name
    tool_call.function.arguments = arguments
    return tool_call

# Message translation


def test_user_message_to_openai():
    assert message_to_openai(Message.user("hi")) == {"role": "user", "content": "hi"}


def test_structured_content_is_json_encoded():
    message = Message(role="user", content={"question": "status?"})
    assert message_to_openai(message) == {
        "role": "user",
        "content": json.dumps({"question": "status?"}),
    }


def test_assistant_tool_calls_to_openai():
    message = Message.assistant_tool_calls(
        [ToolCall(id="t1", name="addNumbers", arguments={"a": 1, "b": 2})]
    )

    assert message_to_openai(message) == {
        "role": "assistant",
        "content": None,
        "tool_calls": [
            {
                "id": "t1",
                "type": "function",
                "function": {"name": "addNumbers", "arguments": '{"a": 1, "b": 2}'},
            }
        ],
    }


def test_raw_string_arguments_pass_through():
    message = Message.assistant_tool_calls(
        [ToolCall(id="t1", name="addNumbers", arguments="{broken")]
    )
    wire = message_to_openai(message)
    assert wire["tool_calls"][0]["function"]["arguments"] == "{broken"


def test_tool_message_to_openai():
    result = ToolResult(tool_call_id="t1", tool_name="addNumbers", value={"result": 3})
    assert message_to_openai(Message.tool_result(result)) == {
        "role": "tool",
        "tool_call_id": "t1",
        "content": '{"result": 3}',
    }


@pytest.mark.parametrize(
    "raw,expected",
    [
        ('{"a": 1}', {"a": 1}),
        ("", {}),
        (None, {}),
        ("not json", "not json"),
    ],
)
def test_parse_tool_arguments(raw, expected):
    assert parse_tool_arguments(raw) == expected

# Completion


def test_default_model(mock_openai):
    assert OpenAIAdapter(api_key="test-key").text_model == DEFAULT_CHAT_MODEL
    mock_openai.assert_called_once_with(api_key="test-key")


@pytest.mark.asyncio
async def test_complete_text(adapter, mock_openai):
    create = mock_openai.return_value.chat.completions.create
    create.return_value = create_mock_response(content="Hello!")

    result = await adapter.complete([Message.system("Be nice."), Message.user("hi")])

    assert result.text == "Hello!"
    assert result.finish_reason == FinishReason.STOP
    assert result.tool_calls == []
    assert result.usage == {"input_tokens": 10, "output_tokens": 5, "total_tokens": 15}

    call_kwargs = create.call_args.kwargs
    assert call_kwargs["model"] == "gpt-4o-mini"
    assert call_kwargs["messages"] == [
        {"role": "system", "content": "Be nice."},
        {"role": "user", "content": "hi"},
    ]
    assert "tools" not in call_kwargs


@pytest.mark.asyncio
async def test_complete_with_tools_and_model_override(adapter, mock_openai):
    create = mock_openai.return_value.chat.completions.create
    create.return_value = create_mock_response(
        content=None,
        tool_calls=[
            create_mock_tool_call("call_1", "querySalesAgent", '{"company": "Acme"}'),
            create_mock_tool_call("call_2", "askResearchAgent", '{"query": "qubits"}'),
        ],
        finish_reason="tool_calls",
        usage=False,
    )
    tools = [{"type": "function", "function": {"name": "querySalesAgent"}}]

    result = await adapter.complete([Message.user("hi")], tools=tools, model="gpt-4o")

    assert result.text == ""
    assert result.finish_reason == FinishReason.TOOL_CALLS
    assert result.tool_calls == [
        ToolCall(id="call_1", name="querySalesAgent", arguments={"company": "Acme"}),
        ToolCall(id="call_2", name="askResearchAgent", arguments={"query": "qubits"}),
    ]
    assert result.usage is None
    assert create.call_args.kwargs["tools"] == tools
    assert create.call_args.kwargs["model"] == "gpt-4o"


@pytest.mark.asyncio
async def test_complete_unknown_finish_reason(adapter, mock_openai):
    create = mock_openai.return_value.chat.completions.create
    create.return_value = create_mock_response(content="x", finish_reason="weird")

    result = await adapter.complete([Message.user("hi")])

    assert result.finish_reason == FinishReason.OTHER


@pytest.mark.asyncio
async def test_complete_openai_error(adapter, mock_openai):
    mock_openai.return_value.chat.completions.create.side_effect = OpenAIError("rate limited")

    with pytest.raises(GatewayError, match="rate limited"):
        await adapter.complete([Message.user("hi")])


@pytest.mark.asyncio
async def test_complete_unexpected_error(adapter, mock_openai):
    mock_openai.return_value.chat.completions.create.side_effect = RuntimeError("boom")

    with pytest.raises(GatewayError, match="boom"):
        await adapter.complete([Message.user("hi")])


@pytest.mark.asyncio
async def test_complete_no_choices(adapter, mock_openai):
    response = MagicMock()
    response.choices = []
    mock_openai.return_value.chat.completions.create.return_value = response

    with pytest.raises(GatewayError, match="no choices"):
        await adapter.complete([Message.user("hi")])

# Logfire instrumentation


def test_logfire_instrumentation(mock_openai):
    with patch("agent_relay.adapters.openai_adapter.logfire") as mock_logfire:
        adapter = OpenAIAdapter(api_key="test-key", instrument_logfire=True)

    mock_logfire.instrument_openai.assert_called_once_with(adapter.client)
    assert adapter.logfire is True


def test_logfire_instrumentation_failure(mock_openai):
    with patch("agent_relay.adapters.openai_adapter.logfire") as mock_logfire:
        mock_logfire.instrument_openai.side_effect = Exception("no token")
        adapter = OpenAIAdapter(api_key="test-key", instrument_logfire=True)

    assert adapter.logfire is False


def test_logfire_not_instrumented_by_default(mock_openai):
    with patch("agent_relay.adapters.openai_adapter.logfire") as mock_logfire:
        OpenAIAdapter(api_key="test-key")

    mock_logfire.instrument_openai.assert_not_called()

"""Tests for data models."""

import json

import pytest
from pydantic import ValidationError

from toolchat.models.chat import ChatOptions, ChatResponse, Message, ToolCall, ToolCallFunction
from toolchat.models.tools import FunctionSpec, ToolDescriptor


class TestMessageModels:
    """Tests for conversation message models."""

    def test_message_valid(self):
        """Test valid user message."""
        message = Message(role="user", content="Hello")
        assert message.role == "user"
        assert message.content == "Hello"
        assert message.tool_calls is None
        assert message.tool_name is None

    def test_message_is_immutable(self):
        """Test that messages cannot be changed once constructed."""
        message = Message(role="user", content="Hello")
        with pytest.raises(ValidationError):
            message.content = "Changed"  # type: ignore

    def test_message_missing_content_defaults_to_empty(self):
        """Test tool-call turns without content."""
        message = Message.model_validate({"role": "assistant", "content": None})
        assert message.content == ""

    def test_message_empty_tool_calls_normalised(self):
        """Test that an empty tool call list is treated as no tool calls."""
        message = Message(role="assistant", content="Hi", tool_calls=[])
        assert message.tool_calls is None

    def test_message_to_wire_drops_unset_fields(self):
        """Test that unset optional fields are not sent to the backend."""
        message = Message(role="user", content="Hello")
        assert message.to_wire() == {"role": "user", "content": "Hello"}

    def test_tool_message_to_wire(self):
        """Test tool result messages carry the tool name."""
        message = Message(role="tool", content='{"ok": true}', tool_name="get_weather")
        assert message.to_wire() == {"role": "tool", "content": '{"ok": true}', "tool_name": "get_weather"}

    def test_assistant_message_from_ollama_json(self):
        """Test parsing an Ollama assistant message with a tool call."""
        json_data = (
            '{"role": "assistant", "content": "", "thinking": "",'
            ' "tool_calls": [{"function": {"name": "get_weather", "arguments": {"city": "Paris"}}}]}'
        )
        message = Message.model_validate(json.loads(json_data))
        assert message.tool_calls is not None
        assert len(message.tool_calls) == 1
        assert message.tool_calls[0].function.name == "get_weather"
        assert message.tool_calls[0].function.arguments == {"city": "Paris"}


class TestToolCallModels:
    """Tests for tool call models."""

    def test_tool_call_valid(self):
        """Test valid tool call."""
        call = ToolCall(function=ToolCallFunction(name="get_time", arguments={"city": "Rome"}))
        assert call.function.name == "get_time"
        assert call.function.arguments == {"city": "Rome"}
        assert call.id is None

    def test_tool_call_arguments_from_json_string(self):
        """Test arguments encoded as a JSON string are decoded."""
        call = ToolCall.model_validate(
            {"id": "call_1", "function": {"name": "get_time", "arguments": '{"city": "Rome"}'}}
        )
        assert call.id == "call_1"
        assert call.function.arguments == {"city": "Rome"}

    def test_tool_call_arguments_default_empty(self):
        """Test a call without arguments."""
        call = ToolCall.model_validate({"function": {"name": "get_time"}})
        assert call.function.arguments == {}

    def test_tool_call_arguments_keep_rich_types(self):
        """Test non-string argument values survive validation."""
        call = ToolCall.model_validate({"function": {"name": "f", "arguments": {"days": 3, "metric": True}}})
        assert call.function.arguments == {"days": 3, "metric": True}


class TestChatOptions:
    """Tests for chat options."""

    def test_options_defaults(self):
        """Test that all recognised options default to unset."""
        options = ChatOptions()
        assert options.model is None
        assert options.tools is None
        assert options.temperature is None
        assert options.max_tokens is None
        assert options.extras == {}

    def test_max_tokens_accepts_both_names(self):
        """Test max_tokens by field name and by its maxTokens alias."""
        assert ChatOptions(max_tokens=256).max_tokens == 256

        options = ChatOptions(maxTokens=512)
        assert options.max_tokens == 512
        assert options.extras == {}

    def test_options_keep_backend_extras(self):
        """Test that unknown keys are kept as backend extras."""
        options = ChatOptions(model="llama3.2", keep_alive="5m", format="json")
        assert options.model == "llama3.2"
        assert options.extras == {"keep_alive": "5m", "format": "json"}


class TestChatResponse:
    """Tests for chat response parsing."""

    def test_response_from_ollama_json(self):
        """Test parsing a full Ollama /api/chat response."""
        data = {
            "model": "functiongemma",
            "created_at": "2025-01-01T00:00:00Z",
            "message": {"role": "assistant", "content": "It is sunny."},
            "done": True,
            "total_duration": 12345,
        }
        response = ChatResponse.model_validate(data)
        assert response.message.role == "assistant"
        assert response.message.content == "It is sunny."

    def test_response_missing_message(self):
        """Test that a response without a message is rejected."""
        with pytest.raises(ValidationError):
            ChatResponse.model_validate({"done": True})


class TestToolDescriptor:
    """Tests for tool descriptors."""

    def test_descriptor_dump_shape(self):
        """Test the wire shape of a descriptor."""
        descriptor = ToolDescriptor(
            function=FunctionSpec(
                name="echo",
                description="Echo the input.",
                parameters={"type": "object", "properties": {}, "required": []},
            )
        )
        assert descriptor.name == "echo"
        assert descriptor.model_dump() == {
            "type": "function",
            "function": {
                "name": "echo",
                "description": "Echo the input.",
                "parameters": {"type": "object", "properties": {}, "required": []},
            },
        }

    def test_descriptor_invalid_type(self):
        """Test that only function tools are accepted."""
        with pytest.raises(ValidationError):
            ToolDescriptor(
                type="retrieval",  # type: ignore
                function=FunctionSpec(name="x", description="x", parameters={}),
            )

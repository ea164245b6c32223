"""Data models exchanged with chat backends."""

from toolchat.models.chat import ChatOptions, ChatResponse, Message, ToolCall, ToolCallFunction
from toolchat.models.tools import FunctionSpec, ToolDescriptor

__all__ = [
    "ChatOptions",
    "ChatResponse",
    "FunctionSpec",
    "Message",
    "ToolCall",
    "ToolCallFunction",
    "ToolDescriptor",
]

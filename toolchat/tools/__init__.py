"""Local tools the chat backend can ask to run."""

from toolchat.tools.catalog import default_tool_catalog
from toolchat.tools.dispatcher import ToolDispatcher, ToolName

__all__ = ["ToolDispatcher", "ToolName", "default_tool_catalog"]

"""Tool dispatcher resolving tool names to local functions."""

import inspect
from collections.abc import Awaitable, Callable, Mapping
from enum import StrEnum
from typing import Any

from toolchat.errors import UnknownToolError
from toolchat.tools.functions import get_time, get_weather
from toolchat.utils.logging import get_logger

logger = get_logger(__name__)

ToolFunction = Callable[[dict[str, Any]], str | Awaitable[str]]


class ToolName(StrEnum):
    """Names of the tools the dispatcher can run."""

    GET_WEATHER = "get_weather"
    GET_TIME = "get_time"


class ToolDispatcher:
    """Fixed table of tool functions keyed by tool name."""

    def __init__(self, registry: Mapping[ToolName, ToolFunction]):
        """Initialize dispatcher.

        Args:
            registry: Tool name to function table; copied, never mutated afterwards
        """
        self._registry: dict[ToolName, ToolFunction] = dict(registry)

    @classmethod
    def default(cls) -> "ToolDispatcher":
        """Create a dispatcher for the shipped tools."""
        return cls(
            {
                ToolName.GET_WEATHER: get_weather,
                ToolName.GET_TIME: get_time,
            }
        )

    @property
    def names(self) -> list[str]:
        """Get list of all registered tool names."""
        return [str(name) for name in self._registry]

    def has_tool(self, name: str) -> bool:
        """Check if a tool is registered."""
        return self._lookup(name) is not None

    async def dispatch(self, name: str, arguments: dict[str, Any]) -> str:
        """Run the tool registered under ``name``.

        Arguments are passed through unvalidated; the catalog schema is only
        advisory for the backend model.

        Args:
            name: Tool name requested by the backend
            arguments: Argument mapping from the tool call

        Returns:
            The tool's string result, unchanged

        Raises:
            UnknownToolError: If no function is registered under ``name``
        """
        tool = self._lookup(name)
        if tool is None:
            logger.error(f"Unknown tool requested: {name}")
            raise UnknownToolError(name)

        logger.debug(f"Executing tool: {name} with input: {arguments}")
        result = tool(arguments)
        if inspect.isawaitable(result):
            result = await result

        logger.debug(f"Tool {name} returned: {result[:100]}")
        return result

    def _lookup(self, name: str) -> ToolFunction | None:
        try:
            return self._registry.get(ToolName(name))
        except ValueError:
            return None

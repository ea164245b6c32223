"""Tool catalog advertised to the chat backend.

Every descriptor here needs a function registered under the same name in
``toolchat.tools.dispatcher``; a mismatch only surfaces at dispatch time.
"""

from toolchat.models.tools import FunctionSpec, ToolDescriptor
from toolchat.tools.dispatcher import ToolName


def _city_parameters() -> dict:
    return {
        "type": "object",
        "properties": {
            "city": {"type": "string", "description": "The name of the city"},
        },
        "required": ["city"],
    }


def default_tool_catalog() -> tuple[ToolDescriptor, ...]:
    """Build the descriptors for the shipped tools, in advertising order."""
    return (
        ToolDescriptor(
            function=FunctionSpec(
                name=ToolName.GET_WEATHER.value,
                description="Get the weather forecast for a specific city.",
                parameters=_city_parameters(),
            )
        ),
        ToolDescriptor(
            function=FunctionSpec(
                name=ToolName.GET_TIME.value,
                description="Get the current time for a city.",
                parameters=_city_parameters(),
            )
        ),
    )

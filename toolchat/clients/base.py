"""Chat strategy interface."""

from collections.abc import Sequence
from typing import Protocol

from toolchat.models.chat import ChatOptions, ChatResponse, Message


class ChatStrategy(Protocol):
    """Interface for chat backends."""

    async def chat(self, messages: Sequence[Message], options: ChatOptions | None = None) -> ChatResponse:
        """Send a conversation and get the backend's next message.

        Args:
            messages: Conversation so far, oldest first
            options: Per-call model, tools and sampling overrides

        Returns:
            The backend's response
        """
        ...

"""Chat facade holding the active backend strategy."""

from collections.abc import Sequence

from toolchat.clients.base import ChatStrategy
from toolchat.models.chat import ChatOptions, ChatResponse, Message
from toolchat.utils.logging import get_logger

logger = get_logger(__name__)


class Chat:
    """Delegates chat calls to a swappable strategy.

    Not safe for concurrent use: ``set_strategy`` mutates shared state, so each
    concurrent conversation needs its own facade.
    """

    def __init__(self, strategy: ChatStrategy):
        self._strategy = strategy

    async def chat(self, messages: Sequence[Message], options: ChatOptions | None = None) -> ChatResponse:
        return await self._strategy.chat(messages, options)

    def set_strategy(self, strategy: ChatStrategy) -> None:
        logger.debug(f"Switching chat strategy to {type(strategy).__name__}")
        self._strategy = strategy

    def get_strategy(self) -> ChatStrategy:
        return self._strategy

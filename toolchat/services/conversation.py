"""Single-round tool calling conversation."""

from collections.abc import Sequence
from dataclasses import dataclass, field

from toolchat.models.chat import ChatOptions, Message, ToolCall
from toolchat.models.tools import ToolDescriptor
from toolchat.services.chat import Chat
from toolchat.tools.dispatcher import ToolDispatcher
from toolchat.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass
class ConversationResult:
    """Result from running a tool calling conversation."""

    content: str
    messages: list[Message]
    tool_call: ToolCall | None = None
    ignored_tool_calls: list[ToolCall] = field(default_factory=list)

    @property
    def used_tool(self) -> bool:
        return self.tool_call is not None


class ToolCallingConversation:
    """Runs a conversation with at most one round of tool execution.

    Only the first tool call of a response is executed. Any further calls in the
    same response are logged and reported in ``ConversationResult.ignored_tool_calls``.
    """

    def __init__(self, chat: Chat, dispatcher: ToolDispatcher, catalog: Sequence[ToolDescriptor]):
        """Initialize conversation.

        Args:
            chat: Facade used for both backend calls
            dispatcher: Runs the requested tool
            catalog: Tool descriptors advertised on every call
        """
        self.chat = chat
        self.dispatcher = dispatcher
        self.catalog = list(catalog)

    async def run(self, prompt: str) -> ConversationResult:
        """Ask a single user question.

        Args:
            prompt: User message opening the conversation

        Returns:
            Final answer with the conversation history
        """
        return await self.run_messages([Message(role="user", content=prompt)])

    async def run_messages(self, messages: Sequence[Message]) -> ConversationResult:
        """Continue an existing conversation.

        Args:
            messages: Opening conversation; the caller's sequence is not modified

        Returns:
            Final answer with the extended conversation history

        Raises:
            TransportError: If a backend call fails
            DecodeError: If a backend response cannot be decoded
            UnknownToolError: If the backend requests an unregistered tool
        """
        conversation = list(messages)
        options = ChatOptions(tools=self.catalog)

        logger.info(f"Starting conversation with {len(conversation)} messages, {len(self.catalog)} tools")
        response = await self.chat.chat(list(conversation), options)

        tool_calls = response.message.tool_calls
        if not tool_calls:
            logger.info("No tool requested, returning first response")
            conversation.append(response.message)
            return ConversationResult(content=response.message.content, messages=conversation)

        tool_call, *ignored = tool_calls
        if ignored:
            logger.warning(
                f"Backend requested {len(tool_calls)} tools; only running {tool_call.function.name}, "
                f"ignoring {[call.function.name for call in ignored]}"
            )

        name = tool_call.function.name
        logger.info(f"Backend requested tool {name}")
        result = await self.dispatcher.dispatch(name, tool_call.function.arguments)

        conversation.append(response.message)
        conversation.append(Message(role="tool", content=result, tool_name=name))

        final = await self.chat.chat(list(conversation), options)
        conversation.append(final.message)

        logger.info("Conversation completed after tool round")
        return ConversationResult(
            content=final.message.content,
            messages=conversation,
            tool_call=tool_call,
            ignored_tool_calls=ignored,
        )

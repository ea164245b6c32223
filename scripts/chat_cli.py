#!/usr/bin/env python3
"""Ask one question to a local Ollama model with tool support."""

import asyncio
import sys

from rich.console import Console
from rich.markdown import Markdown
from rich.panel import Panel

from toolchat.clients.ollama import OllamaChatStrategy
from toolchat.errors import ToolChatError
from toolchat.services.chat import Chat
from toolchat.services.conversation import ConversationResult, ToolCallingConversation
from toolchat.tools import ToolDispatcher, default_tool_catalog
from toolchat.utils.logging import setup_logging

DEFAULT_QUESTION = "What's the weather in Paris?"


class ChatCLI:
    """One-shot chat runner printing the answer to the console."""

    def __init__(self, conversation: ToolCallingConversation):
        self.conversation = conversation
        self.console = Console()

    async def ask(self, question: str) -> ConversationResult:
        self.console.print(f"[bold cyan]You:[/bold cyan] {question}")
        self.console.print("[dim]💭 Thinking...[/dim]")

        result = await self.conversation.run(question)
        self._display_response(result)
        return result

    def _display_response(self, result: ConversationResult) -> None:
        """Display the answer, noting which tool was used."""
        if result.tool_call:
            self.console.print(f"[yellow]🔧 Used tool {result.tool_call.function.name}[/yellow]")
        for ignored in result.ignored_tool_calls:
            self.console.print(f"[dim]Skipped extra tool call {ignored.function.name}[/dim]")

        self.console.print(
            Panel(
                Markdown(result.content or "No response"),
                title="[bold green]Response[/bold green]",
                border_style="green",
                padding=(1, 2),
            )
        )


def main():
    """Main entry point for the chat CLI."""
    setup_logging()
    question = sys.argv[1] if len(sys.argv) > 1 else DEFAULT_QUESTION

    conversation = ToolCallingConversation(
        chat=Chat(OllamaChatStrategy()),
        dispatcher=ToolDispatcher.default(),
        catalog=default_tool_catalog(),
    )
    cli = ChatCLI(conversation)

    try:
        asyncio.run(cli.ask(question))
    except ToolChatError as e:
        cli.console.print(f"[red]❌ {e}[/red]")
        sys.exit(1)


if __name__ == "__main__":
    main()

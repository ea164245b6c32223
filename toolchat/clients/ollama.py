"""Ollama chat strategy over the /api/chat HTTP endpoint."""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

import httpx
from pydantic import ValidationError

from toolchat.errors import DecodeError, TransportError
from toolchat.models.chat import ChatOptions, ChatResponse, Message
from toolchat.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass
class OllamaConfig:
    """Configuration for the Ollama chat strategy."""

    host: str = "http://localhost:11434"
    model: str = "functiongemma"


class OllamaChatStrategy:
    """Chat strategy posting non-streaming requests to a local Ollama server."""

    def __init__(
        self,
        host: str | None = None,
        model: str | None = None,
        config: OllamaConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize Ollama strategy.

        Args:
            host: Server base address, overrides config.host
            model: Default model id, overrides config.model
            config: Strategy configuration
            transport: HTTP transport for the request client (tests inject a mock one)
        """
        self.config = config or OllamaConfig()
        self._host = (host or self.config.host).rstrip("/")
        self._default_model = model or self.config.model
        self._transport = transport

    @property
    def host(self) -> str:
        return self._host

    @property
    def default_model(self) -> str:
        return self._default_model

    async def chat(self, messages: Sequence[Message], options: ChatOptions | None = None) -> ChatResponse:
        """Send the conversation to Ollama in a single request.

        Raises:
            TransportError: On any non-2xx status
            DecodeError: If the body is not UTF-8 JSON shaped like a chat response
        """
        payload = self._build_payload(messages, options)
        url = f"{self._host}/api/chat"

        logger.debug(
            f"POST {url} model={payload['model']} messages={len(payload['messages'])} "
            f"tools={len(payload.get('tools', []))}"
        )
        async with httpx.AsyncClient(transport=self._transport) as client:
            response = await client.post(url, json=payload)

        if not response.is_success:
            logger.warning(f"Ollama returned HTTP {response.status_code}")
            raise TransportError(response.status_code, response.text)

        try:
            data = response.json()
        except ValueError as e:  # JSONDecodeError or UnicodeDecodeError
            raise DecodeError(f"Response body is not JSON: {response.text[:200]}") from e

        try:
            chat_response = ChatResponse.model_validate(data)
        except ValidationError as e:
            raise DecodeError(f"Unexpected chat response shape: {e}") from e

        logger.debug(
            f"Response received - role: {chat_response.message.role}, "
            f"tool calls: {len(chat_response.message.tool_calls or [])}"
        )
        return chat_response

    def _build_payload(self, messages: Sequence[Message], options: ChatOptions | None) -> dict[str, Any]:
        options = options or ChatOptions()

        payload: dict[str, Any] = dict(options.extras)
        payload.update(
            {
                "model": options.model or self._default_model,
                "messages": [message.to_wire() for message in messages],
                "stream": False,
            }
        )
        if options.tools:
            payload["tools"] = [tool.model_dump() for tool in options.tools]

        sampling: dict[str, Any] = {}
        if options.temperature is not None:
            sampling["temperature"] = options.temperature
        if options.max_tokens is not None:
            sampling["num_predict"] = options.max_tokens
        if sampling:
            payload["options"] = {**payload.get("options", {}), **sampling}

        return payload

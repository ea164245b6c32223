"""Chat backend strategies."""

from toolchat.clients.base import ChatStrategy
from toolchat.clients.ollama import OllamaChatStrategy, OllamaConfig

__all__ = ["ChatStrategy", "OllamaChatStrategy", "OllamaConfig"]

"""Error types raised by the chat client and tool dispatcher."""


class ToolChatError(Exception):
    """Base class for all toolchat errors."""


class TransportError(ToolChatError):
    """Chat backend answered with a non-success HTTP status."""

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"HTTP error: {status_code} {body}")


class DecodeError(ToolChatError):
    """Chat backend response could not be decoded as a chat response."""


class UnknownToolError(ToolChatError):
    """Requested tool has no registered function."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f'Tool "{name}" not found')

"""Chat-completion client with single-round tool calling."""

__version__ = "0.1.0"

"""
Errors raised by the plant bot core.
"""


class PlantBotError(Exception):
    """Base class for plant bot errors."""


class DecodeError(PlantBotError):
    """Uploaded file could not be decoded into plant records."""


class UnrecognizedToken(PlantBotError):
    """Callback token matches none of the known commands."""

    def __init__(self, token: str):
        super().__init__(f"Unknown callback token: {token!r}")
        self.token = token


class EmptyWorkingSet(PlantBotError):
    """Action requested while the chat has no loaded data."""

    def __init__(self, chat_id: int):
        super().__init__(f"No data loaded for chat {chat_id}")
        self.chat_id = chat_id


class TransportFailure(PlantBotError):
    """Sending a response to the chat failed."""

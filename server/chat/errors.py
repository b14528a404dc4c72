"""
Chat registry errors.

The string form of every error is the one-line reply sent back to the
client that triggered it.
"""


class ChatError(Exception):
    """Base class for errors returned by the chat registry."""


class NotFoundError(ChatError):
    """The client is not seated in any room."""

    def __init__(self, nick: str):
        super().__init__(f"{nick} does not have a room")
        self.nick = nick


class NameTakenError(ChatError):
    """The requested nickname already belongs to a connected client."""

    def __init__(self, nick: str):
        super().__init__(f"user [{nick}] already exists")
        self.nick = nick


class UnknownClientError(ChatError):
    """The nickname does not belong to any connected client."""

    def __init__(self, nick: str):
        super().__init__(f"user [{nick}] does not exist")
        self.nick = nick


class RegistryError(ChatError):
    """An internal registry invariant was violated."""

"""
Command parsing for chat sessions.

Each input line becomes exactly one of the command types below, carrying
its already-validated arguments.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from common.constants import Commands


@dataclass(frozen=True)
class EmptyCommand:
    """Blank or whitespace-only line."""


@dataclass(frozen=True)
class HelpCommand:
    """Show the help banner."""


@dataclass(frozen=True)
class QuitCommand:
    """Leave the server."""


@dataclass(frozen=True)
class BlastCommand:
    """Message every connected client."""
    words: Tuple[str, ...]


@dataclass(frozen=True)
class RoomCommand:
    """Switch rooms. room_name is None when no name was given."""
    room_name: Optional[str]


@dataclass(frozen=True)
class NickCommand:
    """Rename. new_nick is None when no name was given."""
    new_nick: Optional[str]


@dataclass(frozen=True)
class MessageCommand:
    """Plain chat text for the current room."""
    words: Tuple[str, ...]


COMMAND_TYPES = (
    EmptyCommand, HelpCommand, QuitCommand, BlastCommand,
    RoomCommand, NickCommand, MessageCommand
)


def parse_room_name(tokens) -> Optional[str]:
    """Join room name tokens with a space and lower-case the result."""
    if not tokens:
        return None
    return ' '.join(tokens).lower()


def parse_command(line: str):
    """Parse one input line into a command."""
    tokens = line.split()
    if not tokens:
        return EmptyCommand()

    head, args = tokens[0], tokens[1:]

    if head == Commands.HELP:
        return HelpCommand()
    if head == Commands.QUIT:
        return QuitCommand()
    if head == Commands.BLAST:
        return BlastCommand(tuple(args))
    if head == Commands.ROOM:
        return RoomCommand(parse_room_name(args))
    if head == Commands.NICK:
        return NickCommand(args[0] if args else None)

    return MessageCommand(tuple(tokens))

#!/usr/bin/env python3
"""
TinyChat Server

Accepts line-oriented TCP connections, gives each one a client in the
default room and turns every input line into a registry operation.
"""

import asyncio
import time
from typing import Optional

from common.constants import DEFAULT_NICK_PREFIX, ENCODING, MAX_LINE_LENGTH, NICK_ATTEMPTS
from common.protocol_definitions import (
    create_banner, create_not_recognized_reply, create_joining_room_reply,
    create_unable_to_join_reply, create_nick_changed_reply, create_nick_unchanged_reply,
    create_goodbye_reply, create_error_reply
)
from server.chat.chat_server import ChatServer
from server.chat.client import Client
from server.chat.commands import (
    COMMAND_TYPES, EmptyCommand, HelpCommand, QuitCommand, BlastCommand,
    RoomCommand, NickCommand, MessageCommand, parse_command
)
from server.chat.errors import ChatError, RegistryError
from server.utils.config import ServerConfig
from server.utils.logger import logger


def generate_nickname() -> str:
    """Default nickname derived from a nanosecond timestamp."""
    return f"{DEFAULT_NICK_PREFIX}{time.time_ns()}"


class TinyChatServer:
    """Main server class: accept loop plus one session per connection."""

    def __init__(self, config: Optional[ServerConfig] = None, chat_server: Optional[ChatServer] = None):
        self.config = config or ServerConfig()
        self.chat_server = chat_server or ChatServer()

        self._handlers = {
            EmptyCommand: self._handle_empty,
            HelpCommand: self._handle_help,
            QuitCommand: self._handle_quit,
            BlastCommand: self._handle_blast,
            RoomCommand: self._handle_room,
            NickCommand: self._handle_nick,
            MessageCommand: self._handle_message,
        }
        missing = set(COMMAND_TYPES) - set(self._handlers)
        if missing:
            raise RuntimeError(f"No handler for commands: {sorted(t.__name__ for t in missing)}")

    async def register_client(self, writer: asyncio.StreamWriter) -> Optional[Client]:
        """Create a client with a fresh nickname and seat it in the default room."""
        for _ in range(NICK_ATTEMPTS):
            client = Client(generate_nickname(), writer)
            try:
                await self.chat_server.join_room(self.config.default_room, client)
                return client
            except RegistryError as e:
                logger.warning(f"Default nickname collision: {e}")
        return None

    async def handle_client(self, reader: asyncio.StreamReader, writer: asyncio.StreamWriter):
        """Handle individual client connection."""
        addr = writer.get_extra_info('peername')

        client = await self.register_client(writer)
        if client is None:
            logger.error(f"Could not assign a nickname to {addr}")
            writer.close()
            return

        logger.log_connection(addr, client.nick)

        try:
            await client.deliver(create_banner(client.nick))

            while not client.closed:
                data = await self.read_line(reader, client)
                if not data:
                    break

                try:
                    await self.handle_line(client, data.decode(ENCODING, errors='replace'))
                except (ConnectionError, OSError):
                    raise
                except Exception as e:
                    logger.log_error(f"command from {client.nick}", e)

        except asyncio.CancelledError:
            logger.info(f"Connection cancelled for {client.nick}")
            raise
        except (ConnectionError, OSError) as e:
            logger.error(f"Socket error for {client.nick}: {e}")
        finally:
            await self.chat_server.close_client(client)

    async def read_line(self, reader: asyncio.StreamReader, client: Client) -> bytes:
        """
        Read the next input line, skipping lines longer than the stream limit.

        An oversized line is dropped up to and including its line ending, even
        when it arrives in several chunks. Returns b'' at end of stream.
        """
        discarding = False
        while True:
            try:
                data = await reader.readuntil(b'\n')
            except asyncio.IncompleteReadError as e:
                return b'' if discarding else e.partial
            except asyncio.LimitOverrunError as e:
                # The overrun bytes are already buffered
                await reader.readexactly(e.consumed)
                discarding = True
                continue

            if discarding:
                logger.warning(f"Oversized line from {client.nick} discarded")
                discarding = False
                continue
            return data

    async def handle_line(self, client: Client, line: str):
        """Parse one input line and run it, replying with any registry error."""
        command = parse_command(line)
        handler = self._handlers[type(command)]
        try:
            await handler(client, command)
        except ChatError as e:
            logger.warning(f"{type(e).__name__} for {client.nick}: {e}")
            await client.deliver(create_error_reply(e))

    async def _handle_empty(self, client: Client, command: EmptyCommand):
        await client.deliver(create_not_recognized_reply())

    async def _handle_help(self, client: Client, command: HelpCommand):
        await client.deliver(create_banner(await client.current_nickname()))

    async def _handle_quit(self, client: Client, command: QuitCommand):
        await client.deliver(create_goodbye_reply())
        await self.chat_server.close_client(client)

    async def _handle_blast(self, client: Client, command: BlastCommand):
        await self.chat_server.blast(list(command.words), client)

    async def _handle_room(self, client: Client, command: RoomCommand):
        if command.room_name is None:
            await client.deliver(create_unable_to_join_reply())
            return
        await self.chat_server.join_room(command.room_name, client)
        await client.deliver(create_joining_room_reply(command.room_name))

    async def _handle_nick(self, client: Client, command: NickCommand):
        old_nick = await client.current_nickname()
        if command.new_nick is None:
            await client.deliver(create_nick_unchanged_reply(old_nick))
            return
        await self.chat_server.change_nick(old_nick, command.new_nick)
        await client.deliver(create_nick_changed_reply(old_nick, command.new_nick))

    async def _handle_message(self, client: Client, command: MessageCommand):
        await self.chat_server.message(list(command.words), client)

    async def start(self):
        """Start the server."""
        server = await asyncio.start_server(
            self.handle_client,
            self.config.host,
            self.config.port,
            limit=MAX_LINE_LENGTH
        )

        addr = ', '.join(str(sock.getsockname()) for sock in server.sockets)
        logger.info(f"Server listening on {addr}")

        async with server:
            await server.serve_forever()

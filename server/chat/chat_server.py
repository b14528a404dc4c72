"""
Chat server module.

This module holds the room/client registry. Every mutating operation and
every fan-out runs under one registry-wide lock, so joins, renames and
broadcasts are totally ordered. Client locks are only taken while the
registry lock is held, never the other way round.
"""

import asyncio
from typing import Dict, List, Optional

from common.protocol_definitions import create_chat_line
from server.chat.client import Client
from server.chat.errors import NotFoundError, NameTakenError, UnknownClientError, RegistryError
from server.chat.room import Room
from server.utils.logger import logger


class ChatServer:
    """Registry of all rooms and connected clients."""

    def __init__(self):
        self.rooms: Dict[str, Room] = {}  # room name -> Room
        self.clients: Dict[str, Client] = {}  # nick -> Client
        self.lock = asyncio.Lock()  # Protect shared state

    async def join_room(self, room_name: str, client: Client) -> Room:
        """
        Move a client into a room, creating the room if needed.

        The client leaves whatever room it occupied before and is added to the
        flat index. Joining the room the client is already in changes nothing.
        Raises RegistryError if another client already holds the nickname.
        """
        async with self.lock:
            nick = client.nick
            holder = self.clients.get(nick)
            if holder is not None and holder is not client:
                raise RegistryError(f"nick [{nick}] is held by another client")

            current = self._find_room(client)
            if current is not None:
                current.remove(nick)

            room = self.rooms.get(room_name)
            if room is None:
                room = self._create_room(room_name)

            room.add(client)
            self.clients[nick] = client

        logger.log_join(nick, room_name)
        return room

    async def find_room(self, client: Client) -> Room:
        """Return the room the client is seated in, or raise NotFoundError."""
        async with self.lock:
            room = self._find_room(client)
            if room is None:
                raise NotFoundError(client.nick)
            return room

    async def change_nick(self, old_nick: str, new_nick: str):
        """
        Rename a connected client.

        Raises NameTakenError if new_nick is in use, UnknownClientError if
        old_nick is not connected and NotFoundError if the client is not seated
        in a room. The room key and the flat index are updated together.
        """
        async with self.lock:
            if new_nick in self.clients:
                raise NameTakenError(new_nick)

            client = self.clients.get(old_nick)
            if client is None:
                raise UnknownClientError(old_nick)

            room = self._find_room(client)
            if room is None:
                raise NotFoundError(old_nick)

            await client.set_nickname(new_nick)

            # No awaits below: both maps switch keys in one step.
            room.remove(old_nick)
            del self.clients[old_nick]
            room.add(client)
            self.clients[new_nick] = client

        logger.log_nick_change(old_nick, new_nick)

    async def message(self, words: List[str], client: Client) -> int:
        """
        Send a chat line to every member of the sender's room, sender included.

        Returns the number of members the line was delivered to.
        """
        async with self.lock:
            room = self._find_room(client)
            if room is None:
                raise NotFoundError(client.nick)

            nick = await client.current_nickname()
            line = create_chat_line(nick, words)
            logger.log_message(nick, room.name, words)
            return await self._fan_out(line, room.clients())

    async def blast(self, words: List[str], client: Client):
        """Send a chat line to every connected client regardless of room."""
        async with self.lock:
            nick = await client.current_nickname()
            line = create_chat_line(nick, words)
            recipients = list(self.clients.values())
            logger.log_blast(nick, len(recipients), words)
            await self._fan_out(line, recipients)

    async def close_client(self, client: Client):
        """
        Drop a client from its room and the flat index, then close its transport.

        The flush of the closed transport is awaited after the registry lock is
        released, so a peer that stopped reading cannot hold up other clients.
        """
        async with self.lock:
            nick = client.nick
            registered = self.clients.get(nick) is client
            if registered:
                del self.clients[nick]

            room = self._find_room(client)
            if room is not None:
                room.remove(nick)

            closing = await client.close()

        if registered:
            logger.log_disconnect(nick)
        if closing:
            await client.wait_closed()

    def get_client_count(self) -> int:
        """Get the number of connected clients."""
        return len(self.clients)

    def get_room_names(self) -> List[str]:
        """Get the names of all rooms, empty ones included."""
        return sorted(self.rooms)

    def get_room_members(self, room_name: str) -> List[str]:
        """Get the nicknames seated in a room."""
        room = self.rooms.get(room_name)
        if room is None:
            return []
        return sorted(room.members)

    def _create_room(self, room_name: str) -> Room:
        room = Room(room_name)
        self.rooms[room_name] = room
        logger.debug(f"Created room '{room_name}'")
        return room

    def _find_room(self, client: Client) -> Optional[Room]:
        # Caller holds self.lock
        for room in self.rooms.values():
            if room.contains(client):
                return room
        return None

    async def _fan_out(self, line: str, recipients: List[Client]) -> int:
        """
        Deliver a line to each recipient concurrently.

        Failures are logged and skipped. Returns the number of successful
        deliveries.
        """
        results = await asyncio.gather(
            *(recipient.deliver(line) for recipient in recipients),
            return_exceptions=True
        )

        delivered = 0
        for recipient, result in zip(recipients, results):
            if isinstance(result, (ConnectionError, OSError)):
                logger.log_delivery_failure(recipient.nick, result)
            elif isinstance(result, BaseException):
                raise result
            else:
                delivered += 1
        return delivered

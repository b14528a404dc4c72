"""
Chat room membership container.

Rooms do no locking of their own; every mutation happens while the
registry lock is held.
"""

from typing import Dict, List, Optional

from server.chat.client import Client


class Room:
    """A named set of clients keyed by nickname."""

    def __init__(self, name: str):
        self.name = name
        self.members: Dict[str, Client] = {}

    def add(self, client: Client):
        self.members[client.nick] = client

    def remove(self, nick: str) -> Optional[Client]:
        return self.members.pop(nick, None)

    def contains(self, client: Client) -> bool:
        """True when the client is seated here under its current nickname."""
        return self.members.get(client.nick) is client

    def clients(self) -> List[Client]:
        return list(self.members.values())

    def __repr__(self):
        return f"Room(name={self.name!r}, members={sorted(self.members)})"

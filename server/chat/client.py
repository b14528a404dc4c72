"""
Connected client state.

A Client holds the nickname of one connection and the stream writer used to
deliver lines to it. Both are guarded by the client's own lock.
"""

import asyncio

from common.constants import CLOSE_TIMEOUT, ENCODING
from server.utils.logger import logger


class Client:
    """Per-connection state shared between the session and the registry."""

    def __init__(self, nick: str, writer: asyncio.StreamWriter):
        self._nick = nick
        self._writer = writer
        self._lock = asyncio.Lock()
        self.closed = False

    @property
    def nick(self) -> str:
        """Unlocked nickname read, only valid while the registry lock is held."""
        return self._nick

    async def current_nickname(self) -> str:
        """Return the nickname under the client lock."""
        async with self._lock:
            return self._nick

    async def set_nickname(self, nick: str):
        # Called by the registry only, with the registry lock held.
        async with self._lock:
            self._nick = nick

    async def deliver(self, line: str):
        """
        Write one line to the client's transport.

        Transport errors propagate to the caller.
        """
        async with self._lock:
            if self.closed:
                raise ConnectionResetError(f"connection for {self._nick} is closed")
            self._writer.write(line.encode(ENCODING))
            await self._writer.drain()

    async def close(self) -> bool:
        """
        Start closing the transport without waiting for the flush.

        Returns False if the client was already closed.
        """
        async with self._lock:
            if self.closed:
                return False
            self.closed = True
            self._writer.close()
            return True

    async def wait_closed(self, timeout: float = CLOSE_TIMEOUT):
        """Wait, at most timeout seconds, for a closed transport to finish flushing."""
        try:
            await asyncio.wait_for(self._writer.wait_closed(), timeout)
        except asyncio.TimeoutError:
            logger.warning(f"Connection for {self._nick} did not close within {timeout}s")
        except (ConnectionError, OSError):
            # Peer already gone
            pass

    def __repr__(self):
        return f"Client(nick={self._nick!r})"

"""
Chat client module.

This module handles the terminal side of a TinyChat session: it forwards
typed lines to the server and prints every line the server sends back.
"""

import asyncio
import sys
from typing import Callable, Optional

from common.constants import Commands, ENCODING, LINE_ENDING
from client.utils.config import ClientConfig
from client.utils.logger import logger


class ChatClient:
    """Client-side chat functionality."""

    def __init__(self, config: Optional[ClientConfig] = None, output: Optional[Callable[[str], None]] = None):
        self.config = config or ClientConfig()
        self.output = output or self._print_line
        self.reader: Optional[asyncio.StreamReader] = None
        self.writer: Optional[asyncio.StreamWriter] = None
        self.running = False

    @staticmethod
    def _print_line(line: str):
        print(line, flush=True)

    async def connect(self, retry_count: Optional[int] = None, base_delay: Optional[float] = None) -> bool:
        """Establish connection to the server with retry logic and exponential backoff."""
        retry_count = retry_count or self.config.retry_attempts
        base_delay = self.config.retry_delay_base if base_delay is None else base_delay

        for attempt in range(1, retry_count + 1):
            try:
                self.reader, self.writer = await asyncio.open_connection(self.config.host, self.config.port)
                logger.log_connection(self.config.host, self.config.port, True)
                self.running = True
                return True
            except OSError as e:
                logger.log_connection(self.config.host, self.config.port, False)
                logger.log_error("connection", e)

                if attempt < retry_count:
                    delay = base_delay * (2 ** (attempt - 1))
                    logger.log_retry(delay, attempt, retry_count)
                    await asyncio.sleep(delay)

        logger.error(f"Failed to connect after {retry_count} attempts")
        return False

    async def send_line(self, text: str) -> bool:
        """Send one command or message line to the server."""
        if not self.writer:
            logger.error("Not connected to server")
            return False

        try:
            self.writer.write((text.rstrip('\r\n') + LINE_ENDING).encode(ENCODING))
            await self.writer.drain()
            return True
        except (ConnectionError, OSError) as e:
            logger.log_connection_lost(e)
            self.running = False
            return False

    async def listen_for_messages(self):
        """Print server lines until the server closes the connection."""
        while self.running:
            try:
                data = await self.reader.readline()
            except (ConnectionError, OSError) as e:
                logger.log_connection_lost(e)
                break
            if not data:
                logger.log_server_closed()
                break
            self.output(data.decode(ENCODING, errors='replace').rstrip('\r\n'))
        self.running = False

    async def interactive_mode(self):
        """Run client with interactive chat input from stdin."""
        if not await self.connect():
            return

        listener_task = asyncio.create_task(self.listen_for_messages())
        loop = asyncio.get_running_loop()

        try:
            while self.running:
                user_input = await loop.run_in_executor(None, sys.stdin.readline)
                if not user_input:
                    # stdin closed
                    await self.send_line(Commands.QUIT)
                    break
                if not self.running:
                    break
                await self.send_line(user_input)
                if user_input.split()[:1] == [Commands.QUIT]:
                    break
        finally:
            await self.close(listener_task)

    async def close(self, listener_task: Optional[asyncio.Task] = None):
        """Stop listening and close the connection."""
        self.running = False

        if listener_task is not None:
            listener_task.cancel()
            try:
                await listener_task
            except asyncio.CancelledError:
                pass

        if self.writer:
            self.writer.close()
            try:
                await self.writer.wait_closed()
            except (ConnectionError, OSError):
                pass
            self.writer = None

        logger.log_disconnected()

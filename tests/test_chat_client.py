#!/usr/bin/env python3
"""
Unit tests for the terminal client in client/chat/chat_client.py
"""

import asyncio
import unittest
from unittest.mock import patch

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

from client.chat.chat_client import ChatClient
from client.utils.config import ClientConfig
from tests.fakes import FakeWriter


class TestChatClient(unittest.IsolatedAsyncioTestCase):
    """Test cases for ChatClient."""

    def setUp(self):
        self.received = []
        self.client = ChatClient(ClientConfig('localhost', 8091), output=self.received.append)

    async def test_send_line_terminates_with_crlf(self):
        writer = FakeWriter()
        self.client.writer = writer

        self.assertTrue(await self.client.send_line('/nick batman\n'))
        self.assertTrue(await self.client.send_line('hello'))

        self.assertEqual(writer.text, '/nick batman\r\nhello\r\n')

    async def test_send_line_without_connection(self):
        self.assertFalse(await self.client.send_line('hello'))

    async def test_send_line_failure_stops_client(self):
        self.client.writer = FakeWriter(fail=True)
        self.client.running = True

        self.assertFalse(await self.client.send_line('hello'))
        self.assertFalse(self.client.running)

    async def test_listen_prints_lines_until_eof(self):
        reader = asyncio.StreamReader()
        reader.feed_data(b'Joining room gotham\r\n[2026-10-18T12:00:00+00:00:batman] hi\r\n')
        reader.feed_eof()
        self.client.reader = reader
        self.client.running = True

        await self.client.listen_for_messages()

        self.assertEqual(self.received, [
            'Joining room gotham',
            '[2026-10-18T12:00:00+00:00:batman] hi',
        ])
        self.assertFalse(self.client.running)

    async def test_listen_logs_server_close(self):
        reader = asyncio.StreamReader()
        reader.feed_eof()
        self.client.reader = reader
        self.client.running = True

        with patch('client.chat.chat_client.logger') as mock_logger:
            await self.client.listen_for_messages()

        mock_logger.log_server_closed.assert_called_once_with()
        mock_logger.log_connection_lost.assert_not_called()

    async def test_send_failure_logs_lost_connection(self):
        self.client.writer = FakeWriter(fail=True)

        with patch('client.chat.chat_client.logger') as mock_logger:
            await self.client.send_line('hello')

        mock_logger.log_connection_lost.assert_called_once()
        self.assertIsInstance(mock_logger.log_connection_lost.call_args[0][0], ConnectionResetError)

    async def test_connect_gives_up_after_retries(self):
        with patch('asyncio.open_connection', side_effect=ConnectionRefusedError('refused')) as mock_open:
            connected = await self.client.connect(retry_count=2, base_delay=0)

        self.assertFalse(connected)
        self.assertEqual(mock_open.call_count, 2)

    async def test_close_closes_writer(self):
        writer = FakeWriter()
        self.client.writer = writer
        self.client.running = True

        await self.client.close()

        self.assertTrue(writer.closed)
        self.assertIsNone(self.client.writer)
        self.assertFalse(self.client.running)


if __name__ == '__main__':
    unittest.main()

#!/usr/bin/env python3
"""
Unit tests for reply and chat line rendering in common/protocol_definitions.py
"""

import unittest
from datetime import datetime, timedelta, timezone

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

from common.protocol_definitions import (
    create_banner, create_chat_line, create_error_reply, create_nick_changed_reply,
    create_nick_unchanged_reply, create_joining_room_reply
)
from server.chat.errors import NameTakenError


class TestChatLine(unittest.TestCase):
    """Test cases for create_chat_line."""

    def setUp(self):
        self.when = datetime(2026, 10, 18, 12, 30, 5, 123456, tzinfo=timezone.utc)

    def test_words_joined_with_spaces(self):
        line = create_chat_line('batman', ['hi', 'freeze'], self.when)
        self.assertEqual(line, '[2026-10-18T12:30:05Z:batman] hi freeze\r\n')

    def test_no_words(self):
        line = create_chat_line('batman', [], self.when)
        self.assertEqual(line, '[2026-10-18T12:30:05Z:batman]\r\n')

    def test_non_utc_offset_is_kept(self):
        when = datetime(2026, 10, 18, 12, 30, 5, tzinfo=timezone(timedelta(hours=-5)))
        line = create_chat_line('batman', ['hi'], when)
        self.assertEqual(line, '[2026-10-18T12:30:05-05:00:batman] hi\r\n')

    def test_default_timestamp_is_local_rfc3339(self):
        line = create_chat_line('batman', ['x'])
        self.assertRegex(line, r'^\[\d{4}-\d\d-\d\dT\d\d:\d\d:\d\d(?:Z|[+-]\d\d:\d\d):batman\] x\r\n$')


class TestReplies(unittest.TestCase):
    """Test cases for one-line replies and the banner."""

    def test_banner(self):
        banner = create_banner('user42')
        self.assertIn('You are user [user42], Welcome to TinyChat.', banner)
        self.assertIn('{no flag needed}', banner)
        self.assertNotIn('\r\r', banner)
        self.assertEqual(banner.count('\n'), banner.count('\r\n'))

    def test_replies_are_single_lines(self):
        for reply in (
            create_nick_changed_reply('a', 'b'),
            create_nick_unchanged_reply('a'),
            create_joining_room_reply('gotham'),
            create_error_reply(NameTakenError('b')),
        ):
            self.assertTrue(reply.endswith('\r\n'))
            self.assertEqual(reply.count('\n'), 1)

    def test_error_reply_text(self):
        self.assertEqual(create_error_reply(NameTakenError('b')), 'user [b] already exists\r\n')


if __name__ == '__main__':
    unittest.main()

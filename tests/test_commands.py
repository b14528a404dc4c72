#!/usr/bin/env python3
"""
Unit tests for command parsing in server/chat/commands.py
"""

import unittest

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

from server.chat.commands import (
    EmptyCommand, HelpCommand, QuitCommand, BlastCommand, RoomCommand,
    NickCommand, MessageCommand, parse_command, parse_room_name
)


class TestParseCommand(unittest.TestCase):
    """Test cases for parse_command."""

    def test_empty_lines(self):
        for line in ('', '\r\n', '   \t  \r\n'):
            self.assertEqual(parse_command(line), EmptyCommand())

    def test_simple_commands(self):
        self.assertEqual(parse_command('/help\r\n'), HelpCommand())
        self.assertEqual(parse_command('/quit'), QuitCommand())
        # Extra arguments are ignored
        self.assertEqual(parse_command('/quit now please'), QuitCommand())

    def test_blast_drops_command_token(self):
        self.assertEqual(
            parse_command('/blast the ice  man cometh\r\n'),
            BlastCommand(('the', 'ice', 'man', 'cometh'))
        )
        self.assertEqual(parse_command('/blast'), BlastCommand(()))

    def test_room(self):
        self.assertEqual(parse_command('/room'), RoomCommand(None))
        self.assertEqual(parse_command('/room Gotham'), RoomCommand('gotham'))
        self.assertEqual(parse_command('/room Gotham   City'), RoomCommand('gotham city'))

    def test_nick(self):
        self.assertEqual(parse_command('/nick'), NickCommand(None))
        self.assertEqual(parse_command('/nick batman'), NickCommand('batman'))
        # Only the first token is used
        self.assertEqual(parse_command('/nick bat man'), NickCommand('bat'))

    def test_message_keeps_every_token(self):
        self.assertEqual(
            parse_command("hi freeze, i'm batman\r\n"),
            MessageCommand(('hi', 'freeze,', "i'm", 'batman'))
        )

    def test_commands_are_case_sensitive(self):
        self.assertEqual(parse_command('/HELP'), MessageCommand(('/HELP',)))


class TestParseRoomName(unittest.TestCase):
    """Test cases for parse_room_name."""

    def test_no_tokens(self):
        self.assertIsNone(parse_room_name([]))

    def test_lower_cased_and_space_joined(self):
        self.assertEqual(parse_room_name(['The', 'BatCave']), 'the batcave')


if __name__ == '__main__':
    unittest.main()

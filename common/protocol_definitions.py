"""
Protocol definitions for TinyChat.

This module defines the text lines exchanged between client and server:
the welcome/help banner, chat lines and one-line command replies.
"""

from datetime import datetime
from typing import List, Optional

from common.constants import LINE_ENDING


BANNER = """
--|Welcome|--------------------------------------------------------------------------------------

You are user [{nick}], Welcome to TinyChat.

--|Help|-----------------------------------------------------------------------------------------

{{no flag needed}}
send a message to the room you are in
(example: hi freeze, i'm batman)

/help
prints this banner
(example: /help)

/quit
quits the application
(example: /quit)

/nick
sets your nickname
(example: /nick batman)

/room
change chat room, only 1 room may be joined
(example: /room gotham)

/blast
blast a message to all connected clients
(example: /blast the ice man cometh)

-------------------------------------------------------------------------------------------------
"""


def terminate(line: str) -> str:
    """Append the wire line ending."""
    return line + LINE_ENDING


def create_banner(nick: str) -> str:
    """Create the welcome/help banner for a user."""
    return BANNER.format(nick=nick).replace('\n', LINE_ENDING)


def create_chat_line(nick: str, words: List[str], when: Optional[datetime] = None) -> str:
    """
    Create a chat line tagged with an RFC 3339 timestamp and the sender's nickname.

    Words are joined with single spaces. An empty word list yields just the tag.
    """
    when = when or datetime.now().astimezone()
    stamp = when.isoformat(timespec='seconds')
    if stamp.endswith('+00:00'):
        stamp = stamp[:-len('+00:00')] + 'Z'
    tag = f"[{stamp}:{nick}]"
    if not words:
        return terminate(tag)
    return terminate(f"{tag} {' '.join(words)}")


def create_not_recognized_reply() -> str:
    return terminate("Command not recognized")


def create_joining_room_reply(room_name: str) -> str:
    return terminate(f"Joining room {room_name}")


def create_unable_to_join_reply() -> str:
    return terminate("Unable to join room")


def create_nick_changed_reply(old_nick: str, new_nick: str) -> str:
    return terminate(f"Nick changed from [{old_nick}] to [{new_nick}]")


def create_nick_unchanged_reply(nick: str) -> str:
    return terminate(f"Nick unchanged and is currently [{nick}]")


def create_goodbye_reply() -> str:
    return terminate("Goodbye")


def create_error_reply(error: Exception) -> str:
    """Render an error as a single reply line."""
    return terminate(str(error))

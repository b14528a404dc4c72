"""
Shared constants for TinyChat.

This module contains all constants used across client and server components.
"""

# Network Configuration
DEFAULT_HOST = 'localhost'
DEFAULT_PORT = 8091

# Environment variables read at startup
ENV_HOST = 'TCHost'
ENV_PORT = 'TCPort'
ENV_LOG_PATH = 'TCLogPath'

# Logging
LOG_FILE_NAME = 'tinychat.log'

# Rooms
DEFAULT_ROOM = 'gotham city'

# Nicknames
DEFAULT_NICK_PREFIX = 'user'
NICK_ATTEMPTS = 5

# Wire format
LINE_ENDING = '\r\n'
ENCODING = 'utf-8'
MAX_LINE_LENGTH = 64 * 1024

# Seconds to wait for a closed connection to finish flushing
CLOSE_TIMEOUT = 5.0


# Command tokens
class Commands:
    HELP = '/help'
    QUIT = '/quit'
    BLAST = '/blast'
    ROOM = '/room'
    NICK = '/nick'

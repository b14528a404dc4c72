"""
Server logging module.

This module handles server-side logging functionality.
"""

import logging
from pathlib import Path
from typing import List, Optional


class ServerLogger:
    """Server logging class."""

    def __init__(self, log_level: int = logging.INFO):
        self.logger = logging.getLogger('tinychat_server')
        self.logger.setLevel(log_level)
        self.log_path: Optional[Path] = None

        # Remove existing handlers
        for handler in self.logger.handlers[:]:
            self.logger.removeHandler(handler)

        # Create formatter
        self.formatter = logging.Formatter(
            '%(asctime)s [%(levelname)s] %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

        # Create console handler
        console_handler = logging.StreamHandler()
        console_handler.setLevel(log_level)
        console_handler.setFormatter(self.formatter)
        self.logger.addHandler(console_handler)

        self._file_handler: Optional[logging.FileHandler] = None

    def attach_log_file(self, log_path):
        """Append log records to the given file in addition to the console."""
        log_path = Path(log_path)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        self.detach_log_file()

        file_handler = logging.FileHandler(log_path, mode='a', encoding='utf-8')
        file_handler.setLevel(self.logger.level)
        file_handler.setFormatter(self.formatter)
        self.logger.addHandler(file_handler)

        self._file_handler = file_handler
        self.log_path = log_path

    def detach_log_file(self):
        """Stop writing to the log file, if one is attached."""
        if self._file_handler is None:
            return
        self.logger.removeHandler(self._file_handler)
        self._file_handler.close()
        self._file_handler = None
        self.log_path = None

    def info(self, message: str):
        """Log info message."""
        self.logger.info(message)

    def error(self, message: str):
        """Log error message."""
        self.logger.error(message)

    def warning(self, message: str):
        """Log warning message."""
        self.logger.warning(message)

    def debug(self, message: str):
        """Log debug message."""
        self.logger.debug(message)

    def log_connection(self, addr, nick: str):
        """Log client connection."""
        self.info(f"New connection from {addr}, assigned nick={nick}")

    def log_join(self, nick: str, room_name: str):
        """Log room join."""
        self.info(f"User {nick} joined room '{room_name}'")

    def log_nick_change(self, old_nick: str, new_nick: str):
        """Log nickname change."""
        self.info(f"User {old_nick} is now known as {new_nick}")

    def log_message(self, nick: str, room_name: str, words: List[str]):
        """Log room message."""
        self.debug(f"Message from {nick} in '{room_name}': {' '.join(words)}")

    def log_blast(self, nick: str, recipients: int, words: List[str]):
        """Log blast message."""
        self.info(f"BLAST from {nick} to {recipients} clients: {' '.join(words)}")

    def log_disconnect(self, nick: str):
        """Log client disconnect."""
        self.info(f"User {nick} disconnected")

    def log_delivery_failure(self, nick: str, error: Exception):
        """Log a failed line delivery during fan-out."""
        self.error(f"Failed to deliver to {nick}: {error}")

    def log_error(self, operation: str, error: Exception):
        """Log error with operation context."""
        self.error(f"Error in {operation}: {error}")


# Global logger instance
logger = ServerLogger()

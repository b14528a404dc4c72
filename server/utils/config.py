"""
Server configuration module.

This module handles server-side configuration settings.
"""

import os
from pathlib import Path
from typing import Mapping, Optional

from common.constants import (
    DEFAULT_HOST, DEFAULT_PORT, DEFAULT_ROOM, LOG_FILE_NAME,
    ENV_HOST, ENV_PORT, ENV_LOG_PATH
)


def parse_port(value) -> int:
    """Convert a port setting to int, rejecting values outside 0-65535."""
    try:
        port = int(value)
    except (TypeError, ValueError):
        raise ValueError(f"invalid port: {value!r}")
    if not 0 <= port <= 65535:
        raise ValueError(f"port out of range: {port}")
    return port


class ServerConfig:
    """Server configuration class."""

    def __init__(self, host: str = DEFAULT_HOST, port: int = DEFAULT_PORT, log_dir: Optional[str] = None):
        self.host = host
        self.port = parse_port(port)

        # Logging configuration, defaults to the working directory
        self.log_dir = Path(log_dir) if log_dir else Path.cwd()

        # Chat settings
        self.default_room = DEFAULT_ROOM

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'ServerConfig':
        """Build a configuration from TCHost, TCPort and TCLogPath."""
        if environ is None:
            environ = os.environ

        return cls(
            host=environ.get(ENV_HOST) or DEFAULT_HOST,
            port=environ.get(ENV_PORT) or DEFAULT_PORT,
            log_dir=environ.get(ENV_LOG_PATH) or None
        )

    @property
    def log_path(self) -> Path:
        """Full path of the server log file."""
        return self.log_dir / LOG_FILE_NAME

"""
Client configuration module.

This module handles client-side configuration settings.
"""

import os
from typing import Mapping, Optional

from common.constants import DEFAULT_HOST, DEFAULT_PORT, ENV_HOST, ENV_PORT


class ClientConfig:
    """Client configuration class."""

    def __init__(self, host: str = DEFAULT_HOST, port: int = DEFAULT_PORT):
        self.host = host
        self.port = int(port)

        # Connection settings
        self.retry_attempts = 3
        self.retry_delay_base = 1.0  # seconds

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'ClientConfig':
        """Use the server's TCHost/TCPort so both ends agree by default."""
        if environ is None:
            environ = os.environ
        return cls(
            host=environ.get(ENV_HOST) or DEFAULT_HOST,
            port=environ.get(ENV_PORT) or DEFAULT_PORT
        )

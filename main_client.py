#!/usr/bin/env python3
"""
TinyChat Client - Main Entry Point

Line-oriented terminal client. Everything typed is sent to the server as-is,
so all server commands (/help, /room, /nick, /blast, /quit) work directly.

Usage:
    python main_client.py [--host HOST] [--port PORT]
"""

import argparse
import asyncio
import sys

from client.chat.chat_client import ChatClient
from client.utils.config import ClientConfig
from client.utils.logger import logger


def main(argv=None):
    """Main entry point."""
    env_config = ClientConfig.from_env()

    parser = argparse.ArgumentParser(description='TinyChat Client')
    parser.add_argument('--host', type=str, default=env_config.host,
                        help=f'Server host (default: {env_config.host})')
    parser.add_argument('--port', type=int, default=env_config.port,
                        help=f'Server port (default: {env_config.port})')
    args = parser.parse_args(argv)

    client = ChatClient(ClientConfig(args.host, args.port))

    try:
        asyncio.run(client.interactive_mode())
    except KeyboardInterrupt:
        print("\n[INFO] Interrupted by user")
    except OSError as e:
        logger.log_error("client", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

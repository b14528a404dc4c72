#!/usr/bin/env python3
"""
TinyChat Server - Main Entry Point

Usage:
    python main_server.py

Settings come from the environment and may be overridden on the command line:
    --host HOST       Bind address (env TCHost, default: localhost)
    --port PORT       TCP port (env TCPort, default: 8091)
    --log-dir DIR     Directory for tinychat.log (env TCLogPath, default: working directory)
"""

import argparse
import asyncio
import sys
from datetime import datetime

from server.main_server import TinyChatServer
from server.utils.config import ServerConfig, parse_port
from server.utils.logger import logger


def build_config(argv=None) -> ServerConfig:
    """Merge environment settings with command line overrides."""
    env_config = ServerConfig.from_env()

    parser = argparse.ArgumentParser(description='TinyChat Server')
    parser.add_argument('--host', type=str, default=env_config.host,
                        help=f'Host to bind to (default: {env_config.host})')
    parser.add_argument('--port', type=parse_port, default=env_config.port,
                        help=f'TCP port (default: {env_config.port})')
    parser.add_argument('--log-dir', type=str, default=str(env_config.log_dir),
                        help=f'Directory for the log file (default: {env_config.log_dir})')

    args = parser.parse_args(argv)
    return ServerConfig(host=args.host, port=args.port, log_dir=args.log_dir)


def main(argv=None):
    """Main entry point."""
    try:
        config = build_config(argv)
    except ValueError as e:
        logger.log_error("configuration", e)
        return 1

    try:
        logger.attach_log_file(config.log_path)
    except OSError as e:
        logger.error(f"error opening file: {e}")
        return 1

    logger.info(f"Application Starting {datetime.now().astimezone().isoformat(timespec='seconds')}")
    logger.info(f"Server binding to {config.host}:{config.port}")

    server = TinyChatServer(config)
    try:
        asyncio.run(server.start())
    except KeyboardInterrupt:
        logger.info("Server shutting down...")
    except OSError as e:
        logger.log_error("server", e)
        return 1
    finally:
        logger.detach_log_file()
    return 0


if __name__ == "__main__":
    sys.exit(main())

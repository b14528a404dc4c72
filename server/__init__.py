"""
Server package for TinyChat.

This package contains all server-side functionality including:
- Room and client registry
- Command parsing and per-connection sessions
- Configuration and utilities
"""

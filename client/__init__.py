"""
Client package for TinyChat.

This package contains the terminal client and its configuration and utilities.
"""

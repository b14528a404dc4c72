"""
Definitions shared by the TinyChat client and server.
"""

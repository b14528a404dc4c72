"""
Chat module for server-side messaging functionality.

Handles:
- Client and room bookkeeping
- Room joins and nickname changes
- Room messages and server-wide blasts
"""

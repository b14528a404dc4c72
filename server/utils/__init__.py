"""Server configuration and logging."""

"""Core configuration and logging for the Employee API."""

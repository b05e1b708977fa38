"""
Top‑level package for the Employee API.

The HTTP service lives under ``employee_api.app``; a small
``requests`` based client is provided in ``employee_api.client``.
"""

__all__ = []

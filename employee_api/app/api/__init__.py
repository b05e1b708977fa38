"""
API package containing versioned routes.

A version subpackage (e.g. ``v1``) exposes a top‑level ``router``
that includes all of its domain‑specific endpoints.
"""

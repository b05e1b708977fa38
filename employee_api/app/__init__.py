"""FastAPI application for the Employee API."""

"""
Top‑level router for version 1 of the API.

Aggregates the domain routers.  The employee router defines its own
``/employee`` and ``/employees`` paths, so it is included without a
prefix; the version prefix itself is applied in ``main``.
"""

from fastapi import APIRouter

from .endpoints import employees

router = APIRouter()

router.include_router(employees.router, tags=["employees"])

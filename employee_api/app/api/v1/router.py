"""
Top‑level router for version 1 of the API.

Aggregates the domain routers.  The health route sits at the root and
employee CRUD under ``/employees``.
"""

from fastapi import APIRouter

from .endpoints import employees, health

router = APIRouter()

router.include_router(health.router, tags=["health"])
router.include_router(employees.router, prefix="/employees", tags=["employees"])

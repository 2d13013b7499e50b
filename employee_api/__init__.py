"""
Top‑level package for the Employee API.

All functionality lives in submodules under ``app``; the ASGI
application is ``employee_api.app.main:app``.
"""

__all__ = []

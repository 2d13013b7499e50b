"""
Application package initializer.

This package contains the main entrypoint for the API and its
submodules: ``core`` (configuration, logging, error handlers),
``schemas`` (pydantic models), ``services`` (store and business
logic) and ``api`` (routers and dependencies).
"""

from .main import app  # noqa: F401

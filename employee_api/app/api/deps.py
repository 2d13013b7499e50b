"""
FastAPI dependencies shared by the endpoints.

The employee store lives on ``app.state`` and is created by
``create_app``; handlers receive an ``EmployeeService`` bound to it.
"""

from fastapi import Depends, Request

from ..services.employee_service import EmployeeService
from ..services.store import EmployeeStore


def get_store(request: Request) -> EmployeeStore:
    return request.app.state.store


def get_employee_service(store: EmployeeStore = Depends(get_store)) -> EmployeeService:
    return EmployeeService(store)

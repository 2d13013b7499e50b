"""
Employee endpoints for API v1.

CRUD routes over the in-memory employee store.  Handlers read the raw
JSON body and path id and leave validation to ``EmployeeService`` so
that every failure, including a malformed id, answers with the same
``{"success": false, "message": ...}`` envelope and the status code of
its error kind (400, 404 or 409).
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, status
from fastapi.responses import JSONResponse

from employee_api.app.api.deps import get_employee_service
from employee_api.app.api.responses import to_response
from employee_api.app.schemas.common import ErrorResponse
from employee_api.app.schemas.employee import EmployeeListResponse, EmployeeResponse
from employee_api.app.services.employee_service import EmployeeService

router = APIRouter()

_ID_ERRORS = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
    status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
}


@router.get("", response_model=EmployeeListResponse)
@router.get("/", response_model=EmployeeListResponse, include_in_schema=False)
async def list_employees(
    service: EmployeeService = Depends(get_employee_service),
) -> JSONResponse:
    """Return every employee in insertion order together with the count."""
    return to_response(service.list_employees())


@router.get("/{employee_id}", response_model=EmployeeResponse, responses=_ID_ERRORS)
async def get_employee(
    employee_id: str,
    service: EmployeeService = Depends(get_employee_service),
) -> JSONResponse:
    """Retrieve a single employee.

    ``employee_id`` must consist of digits only; anything else (``abc``,
    ``1.5``, ``-1``) is answered with 400.  Unknown ids give 404.
    """
    return to_response(service.get_employee(employee_id))


@router.post(
    "",
    response_model=EmployeeResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_409_CONFLICT: {"model": ErrorResponse},
    },
)
@router.post("/", status_code=status.HTTP_201_CREATED, include_in_schema=False)
async def create_employee(
    payload: Any = Body(None),
    service: EmployeeService = Depends(get_employee_service),
) -> JSONResponse:
    """Create an employee.

    ``id`` is optional; without it the next auto id is assigned.  A
    duplicate id is answered with 409.
    """
    return to_response(service.create_employee(payload))


@router.put("/{employee_id}", response_model=EmployeeResponse, responses=_ID_ERRORS)
async def update_employee(
    employee_id: str,
    payload: Any = Body(None),
    service: EmployeeService = Depends(get_employee_service),
) -> JSONResponse:
    """Replace the name and age of an employee; the id never changes."""
    return to_response(service.update_employee(employee_id, payload))


@router.delete("/{employee_id}", response_model=EmployeeResponse, responses=_ID_ERRORS)
async def delete_employee(
    employee_id: str,
    service: EmployeeService = Depends(get_employee_service),
) -> JSONResponse:
    """Delete an employee and return the removed record."""
    return to_response(service.delete_employee(employee_id))

"""
Business logic for employees.

``EmployeeService`` validates incoming payloads, applies create, read,
update and delete operations to an ``EmployeeStore`` and reports the
outcome as a ``ServiceResult``.  The store is passed in explicitly so
each application (or test) works on its own data.

Every operation completes without yielding control, so a mutation is
never interleaved with another request.
"""

import logging
import re
from typing import Any, Optional, Tuple, Type, TypeVar

from pydantic import BaseModel, ValidationError

from ..schemas.employee import EmployeeCreate, EmployeeRead, EmployeeUpdate
from .result import ErrorKind, Failure, ServiceResult, Success
from .store import EmployeeStore

logger = logging.getLogger(__name__)

# Digits only: rejects signs, decimals and any other text.
_ID_PATTERN = re.compile(r"[0-9]+")

INVALID_ID_MESSAGE = "Invalid ID format. ID must be a number."
NOT_FOUND_MESSAGE = "Employee not found"

# Stored ids start at 1, so 0 never matches a record.
UNKNOWN_ID = 0

PayloadT = TypeVar("PayloadT", bound=BaseModel)


def _first_error_message(exc: ValidationError) -> str:
    """Pick the message to report for a failed payload.

    Missing fields are reported before any other problem; after that
    errors follow field declaration order (name, age, id).
    """
    errors = sorted(exc.errors(), key=lambda err: err["type"] != "missing")
    first = errors[0]
    if first["type"] == "missing":
        return f"{first['loc'][0]} is required"
    return first["msg"]


def parse_payload(
    model: Type[PayloadT], payload: Any
) -> Tuple[Optional[PayloadT], Optional[Failure]]:
    """Validate a decoded JSON body against ``model``.

    Returns ``(instance, None)`` on success or ``(None, failure)``.
    """
    if not isinstance(payload, dict):
        return None, Failure(ErrorKind.VALIDATION, "body must be an object")
    try:
        return model.model_validate(payload), None
    except ValidationError as exc:
        return None, Failure(ErrorKind.VALIDATION, _first_error_message(exc))


def parse_employee_id(raw_id: str) -> Optional[int]:
    """Return the integer id for a strict digit string, else ``None``.

    Digit strings too long for ``int()`` are well formed but cannot name
    a stored employee; they map to ``UNKNOWN_ID``, which never matches.
    """
    if not _ID_PATTERN.fullmatch(raw_id):
        return None
    try:
        return int(raw_id)
    except ValueError:
        return UNKNOWN_ID


class EmployeeService:
    """Employee CRUD over an in-memory store."""

    def __init__(self, store: EmployeeStore) -> None:
        self.store = store

    def _find_index(self, employee_id: int) -> int:
        for index, employee in enumerate(self.store.list()):
            if employee.id == employee_id:
                return index
        return -1

    def list_employees(self) -> ServiceResult:
        employees = list(self.store.list())
        return Success(
            data=employees,
            message="Employees retrieved successfully",
            count=len(employees),
        )

    def get_employee(self, raw_id: str) -> ServiceResult:
        employee_id = parse_employee_id(raw_id)
        if employee_id is None:
            return Failure(ErrorKind.INVALID_ID, INVALID_ID_MESSAGE)
        index = self._find_index(employee_id)
        if index == -1:
            return Failure(ErrorKind.NOT_FOUND, NOT_FOUND_MESSAGE)
        return Success(
            data=self.store.list()[index],
            message="Employee retrieved successfully",
        )

    def create_employee(self, payload: Any) -> ServiceResult:
        """Validate ``payload`` and append a new employee.

        An explicit ``id`` is used as given; otherwise the store's
        counter supplies one and is advanced by exactly one.  The counter
        is never reconciled with explicit ids, so an auto id can land on
        a taken value; that case is reported as a conflict like any
        other duplicate and the next auto create moves past it.
        """
        data, failure = parse_payload(EmployeeCreate, payload)
        if failure is not None:
            logger.debug("Rejected employee create: %s", failure.message)
            return failure

        if data.id is not None:
            employee_id = data.id
        else:
            employee_id = self.store.next_id()
            self.store.set_next_id(employee_id + 1)

        if self._find_index(employee_id) != -1:
            logger.debug("Rejected employee create: id %s is taken", employee_id)
            return Failure(ErrorKind.CONFLICT, f"Employee with ID {employee_id} already exists")

        employee = EmployeeRead(id=employee_id, name=data.name, age=data.age)
        employees = self.store.list()
        employees.append(employee)
        self.store.replace_all(employees)
        logger.info("Created employee %s", employee_id)
        return Success(
            data=employee,
            message="Employee created successfully",
            status_code=201,
        )

    def update_employee(self, raw_id: str, payload: Any) -> ServiceResult:
        """Replace name and age of an existing employee.

        The id and the record's position in the list are kept.
        """
        employee_id = parse_employee_id(raw_id)
        if employee_id is None:
            return Failure(ErrorKind.INVALID_ID, INVALID_ID_MESSAGE)
        data, failure = parse_payload(EmployeeUpdate, payload)
        if failure is not None:
            logger.debug("Rejected employee update: %s", failure.message)
            return failure
        index = self._find_index(employee_id)
        if index == -1:
            return Failure(ErrorKind.NOT_FOUND, NOT_FOUND_MESSAGE)

        employees = self.store.list()
        employees[index] = EmployeeRead(id=employee_id, name=data.name, age=data.age)
        self.store.replace_all(employees)
        logger.info("Updated employee %s", employee_id)
        return Success(data=employees[index], message="Employee updated successfully")

    def delete_employee(self, raw_id: str) -> ServiceResult:
        employee_id = parse_employee_id(raw_id)
        if employee_id is None:
            return Failure(ErrorKind.INVALID_ID, INVALID_ID_MESSAGE)
        index = self._find_index(employee_id)
        if index == -1:
            return Failure(ErrorKind.NOT_FOUND, NOT_FOUND_MESSAGE)

        employees = self.store.list()
        deleted = employees.pop(index)
        self.store.replace_all(employees)
        logger.info("Deleted employee %s", employee_id)
        return Success(data=deleted, message="Employee deleted successfully")

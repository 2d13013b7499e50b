"""
Outcome types returned by the service layer.

Services never raise for expected failures.  They return either a
``Success`` carrying the payload and the HTTP status to answer with,
or a ``Failure`` tagged with an ``ErrorKind``.  The API layer turns
both into the JSON envelopes clients see.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Union


class ErrorKind(str, Enum):
    """Classes of expected failure and their HTTP status codes."""

    VALIDATION = "validation"
    INVALID_ID = "invalid_id"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"

    @property
    def status_code(self) -> int:
        return _STATUS_CODES[self]


_STATUS_CODES = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.INVALID_ID: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.CONFLICT: 409,
}


@dataclass(frozen=True)
class Success:
    data: Any
    message: str
    status_code: int = 200
    # Only set for list results.
    count: Optional[int] = None

    ok = True


@dataclass(frozen=True)
class Failure:
    kind: ErrorKind
    message: str

    ok = False

    @property
    def status_code(self) -> int:
        return self.kind.status_code


ServiceResult = Union[Success, Failure]

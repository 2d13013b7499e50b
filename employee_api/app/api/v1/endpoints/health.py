"""
Liveness endpoint.

``GET /`` answers with a fixed message so that load balancers and
humans can check the service is up.
"""

from fastapi import APIRouter

from employee_api.app.schemas.common import MessageResponse

router = APIRouter()

HEALTH_MESSAGE = "Employee API is running!"


@router.get("/", response_model=MessageResponse)
async def health() -> MessageResponse:
    return MessageResponse(message=HEALTH_MESSAGE)

"""Student Routes — HTTP adapter for the create-student controller.

Invariants:
    - Any JSON body (or none) reaches the controller unparsed
    - Status code and body come from the controller's HttpResponse unchanged
    - Route contains no business logic

Design Decisions:
    - Body(None) typed Any over a Pydantic model: validation messages belong to the controller
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from student_api.api.dependencies import get_create_student_controller
from student_api.core.capability_protocols import Controller
from student_api.core.http_types import HttpRequest
from student_api.schemas.student import CREATE_STUDENT_RESPONSES

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/students", tags=["students"])


@router.post("", responses=CREATE_STUDENT_RESPONSES)
async def create_student(
    body: Any = Body(None),
    controller: Controller = Depends(get_create_student_controller),
):
    """Register a new student."""
    response = await controller.handle(HttpRequest(body=body))
    return JSONResponse(
        status_code=response.status_code,
        content=jsonable_encoder(response.to_dict()["body"]),
    )

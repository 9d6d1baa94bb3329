"""
Rodrise School Management Backend — Class Route Handlers
=========================================================

What:  GET /api/classes (list active) and POST /api/classes (create).
How:   Parses the body, delegates to ClassService, returns JSON.
Who:   Called by the dashboard's class management screens.

Status codes:
    200  list of active classes, ordered by level
    201  created class
    400  {"error": "Name and level are required"}
         {"error": "Level and capacity must be positive whole numbers"}
         {"error": "Class with this name and level already exists"}
    500  {"error": "Failed to fetch classes"} / {"error": "Failed to create class"}
"""

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.schemas.common import ErrorResponse
from app.schemas.school_class import ClassCreate, ClassResponse
from app.services.class_service import class_service

router = APIRouter(prefix="/api", tags=["Classes"])


@router.get(
    "/classes",
    response_model=List[ClassResponse],
    responses={500: {"description": "Server error", "model": ErrorResponse}},
    summary="List active classes",
    description="Returns every active class ordered by level (lowest first).",
)
async def list_classes(
    db: AsyncSession = Depends(get_db_session),
) -> List[ClassResponse]:
    return await class_service.list_classes(db)


@router.post(
    "/classes",
    response_model=ClassResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"description": "Missing field or duplicate class", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Create a class",
    description=(
        "Creates a class from a name and level. Level and capacity may be sent "
        "as numbers or numeric strings; capacity defaults to 40. A class whose "
        "name (ignoring case) and level match an existing one is rejected."
    ),
)
async def create_class(
    payload: ClassCreate,
    db: AsyncSession = Depends(get_db_session),
) -> ClassResponse:
    """
    Create a class.

    Example:
        POST /api/classes {"name": "Grade 1", "level": "1", "capacity": "30"}
        → 201 {"id": "...", "name": "Grade 1", "level": 1, "capacity": 30,
               "isActive": true, ...}
    """
    return await class_service.create_class(db, payload)

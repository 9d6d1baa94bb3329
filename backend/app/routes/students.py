"""
Rodrise School Management Backend — Student Route Handlers
===========================================================

What:  Student records: list/create on /api/students, read/update/delete on
       /api/students/{student_id}.

Status codes:
    200  list (with pagination), detail, update, delete
    201  created student
    400  {"error": "Missing required fields"}
         {"error": "Admission number already exists"}
         {"error": "Cannot delete student with existing payments or balances"}
    404  {"error": "Student not found"}
    500  {"error": "Failed to fetch students"} and the other per-operation messages
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.schemas.common import ErrorResponse
from app.schemas.student import (
    StudentCreate,
    StudentDeletedResponse,
    StudentDetailResponse,
    StudentListResponse,
    StudentResponse,
    StudentUpdate,
)
from app.services.student_service import student_service

router = APIRouter(prefix="/api", tags=["Students"])

_NOT_FOUND = {404: {"description": "No such student", "model": ErrorResponse}}
_SERVER_ERROR = {500: {"description": "Server error", "model": ErrorResponse}}


@router.get(
    "/students",
    response_model=StudentListResponse,
    responses={400: {"description": "Bad filter", "model": ErrorResponse}, **_SERVER_ERROR},
    summary="List students (newest first, paginated)",
)
async def list_students(
    search: Optional[str] = Query(default=None, description="Name, admission number or parent"),
    status_filter: Optional[str] = Query(default=None, alias="status"),
    page: Optional[str] = Query(default=None, description="Page number, from 1"),
    limit: Optional[str] = Query(default=None, description="Page size (default 10, max 100)"),
    db: AsyncSession = Depends(get_db_session),
) -> StudentListResponse:
    return await student_service.list_students(
        db, search=search, status=status_filter, page=page, limit=limit
    )


@router.post(
    "/students",
    response_model=StudentResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"description": "Missing field, bad reference or duplicate", "model": ErrorResponse},
        **_SERVER_ERROR,
    },
    summary="Create a student",
)
async def create_student(
    payload: StudentCreate,
    db: AsyncSession = Depends(get_db_session),
) -> StudentResponse:
    return await student_service.create_student(db, payload)


@router.get(
    "/students/{student_id}",
    response_model=StudentDetailResponse,
    responses={**_NOT_FOUND, **_SERVER_ERROR},
    summary="Get one student with their payments",
)
async def get_student(
    student_id: str,
    db: AsyncSession = Depends(get_db_session),
) -> StudentDetailResponse:
    return await student_service.get_student(db, student_id)


@router.put(
    "/students/{student_id}",
    response_model=StudentResponse,
    responses={
        400: {"description": "Bad field or duplicate", "model": ErrorResponse},
        **_NOT_FOUND,
        **_SERVER_ERROR,
    },
    summary="Update a student",
)
async def update_student(
    student_id: str,
    payload: StudentUpdate,
    db: AsyncSession = Depends(get_db_session),
) -> StudentResponse:
    return await student_service.update_student(db, student_id, payload)


@router.delete(
    "/students/{student_id}",
    response_model=StudentDeletedResponse,
    responses={
        400: {"description": "Student has payments", "model": ErrorResponse},
        **_NOT_FOUND,
        **_SERVER_ERROR,
    },
    summary="Delete a student without payments",
)
async def delete_student(
    student_id: str,
    db: AsyncSession = Depends(get_db_session),
) -> StudentDeletedResponse:
    return await student_service.delete_student(db, student_id)

"""
Student endpoints for API v1.

CRUD routes over the in‑memory student store.  Handlers receive the
store through the ``get_store`` dependency and let ``StudentError``
exceptions propagate; the application's exception handler turns them
into ``{"success": false, "error": ..., "errors": [...]}`` responses
with the matching status code (400, 404 or 409).
"""

from typing import List

from fastapi import APIRouter, Depends, Response, status

from student_records_api.app.core.store import StudentStore, get_store
from student_records_api.app.schemas.student import (
    StudentCreate,
    StudentListItem,
    StudentRead,
    StudentUpdate,
)
from student_records_api.app.services.student_service import StudentService

router = APIRouter()


@router.get("/", response_model=List[StudentListItem])
async def list_students(store: StudentStore = Depends(get_store)) -> List[StudentListItem]:
    """Return all students in insertion order.

    Each entry carries its birth date formatted as ``DD/MM/YYYY`` in
    ``formatted_birth`` and the current ``age``.
    """
    return StudentService.list_students(store)


@router.post("/", response_model=StudentRead, status_code=status.HTTP_201_CREATED)
async def create_student(
    student_in: StudentCreate,
    store: StudentStore = Depends(get_store),
) -> StudentRead:
    """Add a student.  The name must be unique, ignoring case."""
    return StudentService.create_student(store, student_in)


@router.get("/{student_id}", response_model=StudentRead)
async def get_student(student_id: str, store: StudentStore = Depends(get_store)) -> StudentRead:
    """Retrieve a single student by id."""
    return StudentService.get_student(store, student_id)


@router.put("/{student_id}", response_model=StudentRead)
async def update_student(
    student_id: str,
    student_in: StudentUpdate,
    store: StudentStore = Depends(get_store),
) -> StudentRead:
    """Replace the name and birth date of a student."""
    return StudentService.update_student(store, student_id, student_in)


@router.delete("/{student_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_student(student_id: str, store: StudentStore = Depends(get_store)) -> Response:
    """Delete a student."""
    StudentService.delete_student(store, student_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

"""Student records router."""

import logging
from uuid import UUID

from fastapi import APIRouter, Response, status

from roster.domain.students import Student, StudentNotFoundError
from roster.presentation.api.dependencies import (
    CurrentAccount,
    StaffAccount,
    StudentRepo,
)
from roster.presentation.api.schemas.students import (
    CreateStudentRequest,
    StudentResponse,
    UpdateStudentRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create a student record",
    responses={
        201: {"description": "Student created"},
        401: {"description": "Not authenticated"},
        403: {"description": "Requires the admin or teacher role"},
        409: {"description": "Email already used by another student"},
    },
)
async def create_student(
    request: CreateStudentRequest,
    current: StaffAccount,
    repository: StudentRepo,
) -> StudentResponse:
    """Create a student record together with its grades."""
    student = Student.create(
        name=request.name,
        email=request.email,
        gender=request.gender,
        subjects=request.subjects,
        age=request.age,
        grades=[g.to_input() for g in request.grades],
    )
    student = await repository.create(student)

    logger.info("Student %s created by %s", student.id, current.email)
    return StudentResponse.from_domain(student)


@router.get(
    "/{student_id}",
    summary="Get a student record",
    responses={
        200: {"description": "Student record with grades"},
        401: {"description": "Not authenticated"},
        404: {"description": "Student not found"},
    },
)
async def get_student(
    student_id: UUID,
    current: CurrentAccount,
    repository: StudentRepo,
) -> StudentResponse:
    student = await repository.find_by_id(student_id)
    if student is None:
        raise StudentNotFoundError(student_id)

    logger.debug("Student %s read by %s", student_id, current.email)
    return StudentResponse.from_domain(student)


@router.patch(
    "/{student_id}",
    summary="Update a student record",
    responses={
        200: {"description": "Updated student record"},
        401: {"description": "Not authenticated"},
        403: {"description": "Requires the admin or teacher role"},
        404: {"description": "Student not found"},
        409: {"description": "Email already used by another student"},
        500: {"description": "Update failed and was rolled back"},
    },
)
async def update_student(
    student_id: UUID,
    request: UpdateStudentRequest,
    current: StaffAccount,
    repository: StudentRepo,
) -> StudentResponse:
    """
    Apply a partial update to a student record.

    When `grades` is present it replaces every existing grade; an empty
    list removes them all. Either the whole update is applied or none
    of it is.
    """
    student = await repository.update(
        student_id,
        changes=request.changes(),
        grades=request.grade_inputs(),
    )

    logger.info("Student %s updated by %s", student_id, current.email)
    return StudentResponse.from_domain(student)


@router.delete(
    "/{student_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a student record",
    responses={
        204: {"description": "Student deleted"},
        401: {"description": "Not authenticated"},
        403: {"description": "Requires the admin or teacher role"},
        404: {"description": "Student not found"},
    },
)
async def delete_student(
    student_id: UUID,
    current: StaffAccount,
    repository: StudentRepo,
) -> Response:
    """Delete a student record and all of its grades."""
    await repository.remove(student_id)

    logger.info("Student %s deleted by %s", student_id, current.email)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

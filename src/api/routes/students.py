"""Student routes. Every operation is scoped to the caller's own students."""

from fastapi import APIRouter

from core.dependencies import CurrentPrincipal, StudentManagerDep
from schemas.student import CreateStudentRequest, Student, UpdateStudentRequest

router = APIRouter(prefix="/api/students", tags=["Students"])


@router.get("", summary="List students")
def list_students(principal: CurrentPrincipal, manager: StudentManagerDep) -> dict:
    models = manager.list_for_owner(principal.subject_id)
    return {"students": [Student.model_validate(m) for m in models]}


@router.post("", summary="Create a student")
def create_student(
    req: CreateStudentRequest,
    principal: CurrentPrincipal,
    manager: StudentManagerDep,
) -> dict:
    model = manager.create_for_owner(principal.subject_id, req.model_dump())
    return {
        "message": "Student created successfully",
        "student": Student.model_validate(model),
    }


@router.put("/{student_id}", summary="Update a student")
def update_student(
    student_id: str,
    req: UpdateStudentRequest,
    principal: CurrentPrincipal,
    manager: StudentManagerDep,
) -> dict:
    model = manager.update_for_owner(
        principal.subject_id, student_id, req.model_dump(exclude_unset=True)
    )
    return {
        "message": "Student updated successfully",
        "student": Student.model_validate(model),
    }


@router.delete("/{student_id}", summary="Delete a student")
def delete_student(
    student_id: str,
    principal: CurrentPrincipal,
    manager: StudentManagerDep,
) -> dict:
    manager.delete_for_owner(principal.subject_id, student_id)
    return {"message": "Student deleted successfully"}

"""Teacher routes."""

from fastapi import APIRouter

from core.dependencies import CurrentPrincipal, TeacherManagerDep
from schemas.teacher import CreateTeacherRequest, Teacher, UpdateTeacherRequest

router = APIRouter(prefix="/api/teachers", tags=["Teachers"])


@router.get("", summary="List teachers")
def list_teachers(principal: CurrentPrincipal, manager: TeacherManagerDep) -> dict:
    models = manager.list_for_owner(principal.subject_id)
    return {"teachers": [Teacher.model_validate(m) for m in models]}


@router.post("", summary="Create a teacher")
def create_teacher(
    req: CreateTeacherRequest,
    principal: CurrentPrincipal,
    manager: TeacherManagerDep,
) -> dict:
    model = manager.create_for_owner(principal.subject_id, req.model_dump())
    return {
        "message": "Teacher created successfully",
        "teacher": Teacher.model_validate(model),
    }


@router.put("/{teacher_id}", summary="Update a teacher")
def update_teacher(
    teacher_id: str,
    req: UpdateTeacherRequest,
    principal: CurrentPrincipal,
    manager: TeacherManagerDep,
) -> dict:
    model = manager.update_for_owner(
        principal.subject_id, teacher_id, req.model_dump(exclude_unset=True)
    )
    return {
        "message": "Teacher updated successfully",
        "teacher": Teacher.model_validate(model),
    }


@router.delete("/{teacher_id}", summary="Delete a teacher")
def delete_teacher(
    teacher_id: str,
    principal: CurrentPrincipal,
    manager: TeacherManagerDep,
) -> dict:
    manager.delete_for_owner(principal.subject_id, teacher_id)
    return {"message": "Teacher deleted successfully"}

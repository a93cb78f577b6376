"""Subject routes."""

from fastapi import APIRouter

from core.dependencies import CurrentPrincipal, SubjectManagerDep
from schemas.subject import CreateSubjectRequest, Subject, UpdateSubjectRequest

router = APIRouter(prefix="/api/subjects", tags=["Subjects"])


@router.get("", summary="List subjects")
def list_subjects(principal: CurrentPrincipal, manager: SubjectManagerDep) -> dict:
    models = manager.list_for_owner(principal.subject_id)
    return {"subjects": [Subject.model_validate(m) for m in models]}


@router.post("", summary="Create a subject")
def create_subject(
    req: CreateSubjectRequest,
    principal: CurrentPrincipal,
    manager: SubjectManagerDep,
) -> dict:
    model = manager.create_for_owner(principal.subject_id, req.model_dump())
    return {
        "message": "Subject created successfully",
        "subject": Subject.model_validate(model),
    }


@router.put("/{subject_id}", summary="Update a subject")
def update_subject(
    subject_id: str,
    req: UpdateSubjectRequest,
    principal: CurrentPrincipal,
    manager: SubjectManagerDep,
) -> dict:
    model = manager.update_for_owner(
        principal.subject_id, subject_id, req.model_dump(exclude_unset=True)
    )
    return {
        "message": "Subject updated successfully",
        "subject": Subject.model_validate(model),
    }


@router.delete("/{subject_id}", summary="Delete a subject")
def delete_subject(
    subject_id: str,
    principal: CurrentPrincipal,
    manager: SubjectManagerDep,
) -> dict:
    manager.delete_for_owner(principal.subject_id, subject_id)
    return {"message": "Subject deleted successfully"}

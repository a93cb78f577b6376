"""Level routes.

Level names are unique per owner and referenced by students as their grade.
"""

from fastapi import APIRouter

from core.dependencies import CurrentPrincipal, LevelManagerDep
from schemas.level import CreateLevelRequest, Level, UpdateLevelRequest

router = APIRouter(prefix="/api/levels", tags=["Levels"])


@router.get("", summary="List levels")
def list_levels(principal: CurrentPrincipal, manager: LevelManagerDep) -> dict:
    """List the caller's levels ordered by ``order`` then name."""
    models = manager.list_for_owner(principal.subject_id)
    return {"levels": [Level.model_validate(m) for m in models]}


@router.post("", summary="Create a level")
def create_level(
    req: CreateLevelRequest,
    principal: CurrentPrincipal,
    manager: LevelManagerDep,
) -> dict:
    """Create a level.

    Raises:
        ValidationError: 400 if the name is blank.
        ConflictError: 409 if the caller already has a level with this name.
    """
    model = manager.create_for_owner(principal.subject_id, req.model_dump())
    return {"message": "Level created successfully", "level": Level.model_validate(model)}


@router.put("/{level_id}", summary="Update a level")
def update_level(
    level_id: str,
    req: UpdateLevelRequest,
    principal: CurrentPrincipal,
    manager: LevelManagerDep,
) -> dict:
    model = manager.update_for_owner(
        principal.subject_id, level_id, req.model_dump(exclude_unset=True)
    )
    return {"message": "Level updated successfully", "level": Level.model_validate(model)}


@router.delete("/{level_id}", summary="Delete a level")
def delete_level(
    level_id: str,
    principal: CurrentPrincipal,
    manager: LevelManagerDep,
) -> dict:
    """Delete a level.

    Raises:
        ValidationError: 400 while any of the caller's students has this level as grade.
    """
    manager.delete_for_owner(principal.subject_id, level_id)
    return {"message": "Level deleted successfully"}

"""Account management routes for admins.

These operate across all accounts and are not tenant-scoped.
"""

from fastapi import APIRouter

from core.dependencies import AdminPrincipal, UserManagerDep
from schemas.user import CreateAccountRequest, UpdateAccountRequest

router = APIRouter(prefix="/api/admin/users", tags=["Admin"])


@router.get("", summary="List accounts")
def list_users(admin: AdminPrincipal, user_manager: UserManagerDep) -> dict:
    """List every account except the calling admin."""
    users = user_manager.list_users(exclude_user_id=admin.subject_id)
    return {"users": [user.to_public() for user in users]}


@router.post("", summary="Create an account")
def create_user(
    req: CreateAccountRequest,
    admin: AdminPrincipal,
    user_manager: UserManagerDep,
) -> dict:
    user = user_manager.create_user(
        username=req.username,
        password=req.password,
        role=req.role,
        email=req.email,
        is_active=req.is_active,
    )
    return {"message": "User created successfully", "user": user.to_public()}


@router.put("/{user_id}", summary="Update an account")
def update_user(
    user_id: str,
    req: UpdateAccountRequest,
    admin: AdminPrincipal,
    user_manager: UserManagerDep,
) -> dict:
    """Partially update an account. Omitted fields are left unchanged."""
    user = user_manager.update_user(user_id, req.model_dump(exclude_unset=True))
    return {"message": "User updated successfully", "user": user.to_public()}


@router.delete("/{user_id}", summary="Delete an account")
def delete_user(
    user_id: str,
    admin: AdminPrincipal,
    user_manager: UserManagerDep,
) -> dict:
    """Delete an account. An admin cannot delete their own account."""
    user_manager.delete_user(user_id, acting_user_id=admin.subject_id)
    return {"message": "User deleted successfully"}

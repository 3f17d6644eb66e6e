"""
Users router.

A signed-in user creates their own profile; the profile id is their token
subject. Reading, editing and deleting a profile is open to its owner and
to admins. Role changes are admin-only and also update the role claim.
"""

import logging

from fastapi import APIRouter, Depends, status

from api.deps import authorize, get_current_identity, get_user_service
from api.routers.policies import ADMIN_ONLY, ADMIN_OR_SELF
from api.schemas import CreateUserRequest, UpdateUserRequest, UpgradeRoleRequest, success_response
from application.services import UserService
from domain.models import Identity, Role

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/users",
    tags=["Users"],
)


@router.post("", status_code=status.HTTP_201_CREATED)
def create_user(
    body: CreateUserRequest,
    identity: Identity = Depends(get_current_identity),
    service: UserService = Depends(get_user_service),
):
    """
    Create the caller's profile.

    The stored role always mirrors the caller's role claim (Lite when the
    token has none), so a profile can never claim more than the token.
    """
    document = body.to_document()
    document["role"] = (identity.role or Role.LITE).value
    user = service.create(document, identity.subject_id)
    return success_response(user, "User Created")


@router.get("/{user_id}")
def get_user(
    user_id: str,
    identity: Identity = Depends(authorize(ADMIN_OR_SELF)),
    service: UserService = Depends(get_user_service),
):
    user = service.get_by_id(user_id)
    return success_response(user, f'User with ID "{user_id}" retrieved successfully')


@router.put("/{user_id}")
def update_user(
    user_id: str,
    body: UpdateUserRequest,
    identity: Identity = Depends(authorize(ADMIN_OR_SELF)),
    service: UserService = Depends(get_user_service),
):
    user = service.update(user_id, body.to_document())
    return success_response(user, "User Updated")


@router.delete("/{user_id}")
def delete_user(
    user_id: str,
    identity: Identity = Depends(authorize(ADMIN_OR_SELF)),
    service: UserService = Depends(get_user_service),
):
    service.delete(user_id)
    return success_response(None, "User Deleted")


@router.post("/{user_id}/upgrade")
def upgrade_user_role(
    user_id: str,
    body: UpgradeRoleRequest,
    identity: Identity = Depends(authorize(ADMIN_ONLY)),
    service: UserService = Depends(get_user_service),
):
    """Change a user's role in both the profile and the role claim."""
    user = service.change_role(user_id, body.role)
    logger.info(f"Admin {identity.subject_id} set role of {user_id} to {body.role.value}")
    return success_response(user, f"User role changed to {body.role.value}")

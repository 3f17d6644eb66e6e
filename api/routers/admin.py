"""
Admin router for identity provider claim management.
"""

import logging

from fastapi import APIRouter, Depends

from api.deps import authorize, get_identity_provider
from api.routers.policies import ADMIN_ONLY
from api.schemas import SetCustomClaimsRequest, success_response
from application.ports import IdentityProvider
from domain.models import Identity

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/admin",
    tags=["Admin"],
)


@router.post("/set-custom-claims")
def set_custom_claims(
    body: SetCustomClaimsRequest,
    identity: Identity = Depends(authorize(ADMIN_ONLY)),
    identity_provider: IdentityProvider = Depends(get_identity_provider),
):
    """
    Replace the custom claims of a user.

    Claims take effect on the user's next token refresh.
    """
    identity_provider.set_custom_claims(body.uid, body.claims)
    logger.info(f"Admin {identity.subject_id} set custom claims for {body.uid}")
    return success_response({}, f"Custom claims set for user: {body.uid}")

"""
User profile service.

Profiles are keyed by the identity provider's subject id, so a user's
document id always equals the ``sub`` of their tokens. Role changes are
written both to the profile and to the identity provider's custom claims,
which is where authorization reads them from.
"""

import logging
from typing import Any, Dict, Optional

from application.collections import COLLECTION_USERS
from application.exceptions import ServiceError, wrap_service_error
from application.ports import DocumentStore, IdentityProvider
from application.services.base import DocumentService
from domain.models import Role

logger = logging.getLogger(__name__)


class UserService(DocumentService):
    """CRUD over the users collection plus role management."""

    collection = COLLECTION_USERS
    entity_name = "user"

    def __init__(
        self,
        store: DocumentStore,
        identity_provider: Optional[IdentityProvider] = None,
    ):
        """
        Initialize the service.

        Args:
            store: Document store
            identity_provider: Needed only for change_role
        """
        super().__init__(store)
        self._identity_provider = identity_provider

    def create(self, data: Dict[str, Any], user_id: Optional[str] = None) -> Dict[str, Any]:
        """
        Create a user profile.

        Args:
            data: Profile fields
            user_id: Identity provider subject id to use as document id.
                The store generates an id when omitted.
        """
        return self._insert(data, user_id)

    def change_role(self, user_id: str, role: Role) -> Dict[str, Any]:
        """
        Change a user's role.

        The profile must exist. The role claim is written to the identity
        provider first so that a failed claim update leaves the stored
        profile unchanged.

        Returns:
            ``{"id": user_id, "role": role}``
        """
        if self._identity_provider is None:
            raise ServiceError(
                "Identity provider not configured", "AUTH_NOT_CONFIGURED", 500
            )

        self.get_by_id(user_id)

        try:
            self._identity_provider.set_custom_claims(user_id, {"role": role.value})
        except Exception as e:
            raise wrap_service_error(f"Failed to set role claim for user {user_id}", e)

        updated = self.update(user_id, {"role": role.value})
        logger.info(f"Changed role of user {user_id} to {role.value}")
        return updated

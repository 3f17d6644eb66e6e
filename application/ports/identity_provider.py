"""
Identity Provider Interface (Port).

The identity provider is the authentication oracle: it turns a bearer
token into a verified Identity and manages the role claim attached to a
subject.
"""
from typing import Any, Dict, Protocol

from domain.models import Identity


class IdentityProvider(Protocol):
    """Abstract interface for token verification and claim management."""

    def verify(self, token: str) -> Identity:
        """
        Verify a bearer token.

        Args:
            token: Raw token (without the "Bearer " prefix)

        Returns:
            Identity with the token's subject id and role claim (role may
            be None)

        Raises:
            AuthenticationError: TOKEN_INVALID, TOKEN_EXPIRED,
                TOKEN_MISSING_SUBJECT, or IDENTITY_PROVIDER_UNAVAILABLE
        """
        ...

    def set_custom_claims(self, subject_id: str, claims: Dict[str, Any]) -> None:
        """
        Replace the custom claims attached to a subject.

        Raises:
            ServiceError: If the provider rejects the update
        """
        ...

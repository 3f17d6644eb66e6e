"""
Firebase ID token verification and custom claim management.

ID tokens are RS256 JWTs signed with Google's securetoken keys. They are
validated with PyJWT against the published JWKS, with the audience set to
the Firebase project id and the issuer to
``https://securetoken.google.com/<project id>``. The subject (``sub``) is
the user's uid and the optional ``role`` custom claim carries the user's
permission tier.

Custom claims are written through the Firebase Admin SDK.
"""
import logging
from typing import Any, Dict, Optional

import firebase_admin
import jwt
from firebase_admin import auth as firebase_auth
from firebase_admin import exceptions as firebase_exceptions

from application.exceptions import AuthenticationError, ServiceError, wrap_service_error
from domain.models import Identity, Role

logger = logging.getLogger(__name__)

TOKEN_EXPIRED = "TOKEN_EXPIRED"
TOKEN_INVALID = "TOKEN_INVALID"
TOKEN_MISSING_SUBJECT = "TOKEN_MISSING_SUBJECT"
IDENTITY_PROVIDER_UNAVAILABLE = "IDENTITY_PROVIDER_UNAVAILABLE"

ROLE_CLAIM = "role"


class FirebaseIdentityProvider:
    """IdentityProvider backed by Firebase Authentication."""

    def __init__(
        self,
        project_id: str,
        jwks_url: str,
        app: Optional[firebase_admin.App] = None,
        jwks_client: Optional[jwt.PyJWKClient] = None,
    ):
        """
        Args:
            project_id: Firebase project id (expected token audience)
            jwks_url: JWKS endpoint for signature keys
            app: firebase-admin App used for claim updates
            jwks_client: Pre-built JWKS client, mainly for tests
        """
        self._project_id = project_id
        self._issuer = f"https://securetoken.google.com/{project_id}"
        self._app = app
        self._jwks_client = jwks_client or jwt.PyJWKClient(jwks_url)

    def verify(self, token: str) -> Identity:
        """Validate an ID token and return the caller's identity."""
        try:
            signing_key = self._jwks_client.get_signing_key_from_jwt(token)
        except jwt.PyJWKClientConnectionError as e:
            logger.error(f"JWKS endpoint unreachable: {e}")
            raise AuthenticationError(
                f"Unauthorized: {e}", IDENTITY_PROVIDER_UNAVAILABLE
            )
        except (jwt.PyJWKClientError, jwt.InvalidTokenError) as e:
            logger.warning(f"Rejected token: {e}")
            raise AuthenticationError(f"Unauthorized: {e}", TOKEN_INVALID)

        try:
            payload = jwt.decode(
                token,
                signing_key.key,
                algorithms=["RS256"],
                audience=self._project_id,
                issuer=self._issuer,
            )
        except jwt.ExpiredSignatureError:
            raise AuthenticationError("Unauthorized: Token expired", TOKEN_EXPIRED)
        except jwt.InvalidTokenError as e:
            logger.warning(f"Rejected token: {e}")
            raise AuthenticationError(f"Unauthorized: {e}", TOKEN_INVALID)

        subject_id = payload.get("sub")
        if not subject_id:
            raise AuthenticationError(
                "Unauthorized: Token missing subject", TOKEN_MISSING_SUBJECT
            )

        return Identity(subject_id=subject_id, role=Role.from_claim(payload.get(ROLE_CLAIM)))

    def set_custom_claims(self, subject_id: str, claims: Dict[str, Any]) -> None:
        """Replace the custom claims on a Firebase user."""
        try:
            firebase_auth.set_custom_user_claims(subject_id, claims, app=self._app)
        except firebase_auth.UserNotFoundError:
            raise ServiceError(f"User {subject_id} not found", "USER_NOT_FOUND", 404)
        except firebase_exceptions.FirebaseError as e:
            raise wrap_service_error(f"Failed to set custom claims for {subject_id}", e)
        logger.info(f"Set custom claims {sorted(claims)} for {subject_id}")

"""
Authorization engine.

A pure decision function shared by every protected route. It performs no
I/O: the identity comes from the identity provider, the policy is declared
when routes are wired, and the target subject id comes from the request.

Evaluation order (first match wins):
1. Same-subject exception: policy allows it and the target is the requester
2. No role claim: deny with ROLE_NOT_FOUND
3. Role is one of the allowed roles: allow
4. Otherwise: deny with INSUFFICIENT_ROLE

The same-subject check runs before the role check, so a subject without
a role claim can still reach their own resource.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from application.exceptions import AuthorizationError
from domain.models import AuthorizationPolicy, Identity

logger = logging.getLogger(__name__)

ROLE_NOT_FOUND = "ROLE_NOT_FOUND"
INSUFFICIENT_ROLE = "INSUFFICIENT_ROLE"


@dataclass(frozen=True)
class AuthorizationDecision:
    """Outcome of an authorization check."""

    allowed: bool
    code: Optional[str] = None
    reason: Optional[str] = None

    @classmethod
    def allow(cls) -> "AuthorizationDecision":
        return cls(allowed=True)

    @classmethod
    def deny(cls, code: str, reason: str) -> "AuthorizationDecision":
        return cls(allowed=False, code=code, reason=reason)


def decide(
    policy: AuthorizationPolicy,
    identity: Identity,
    target_subject_id: Optional[str] = None,
) -> AuthorizationDecision:
    """
    Decide whether ``identity`` may perform an operation guarded by ``policy``.

    Args:
        policy: The route's declared policy
        identity: The authenticated requester
        target_subject_id: Subject id the request targets, if any

    Returns:
        AuthorizationDecision
    """
    if (
        policy.allow_same_subject
        and target_subject_id
        and identity.subject_id == target_subject_id
    ):
        return AuthorizationDecision.allow()

    if identity.role is None:
        return AuthorizationDecision.deny(ROLE_NOT_FOUND, "Forbidden: No role found")

    if identity.role in policy.allowed_roles:
        return AuthorizationDecision.allow()

    return AuthorizationDecision.deny(INSUFFICIENT_ROLE, "Forbidden: Insufficient role")


def enforce(
    policy: AuthorizationPolicy,
    identity: Identity,
    target_subject_id: Optional[str] = None,
) -> None:
    """
    Raise AuthorizationError unless ``decide`` allows the request.

    Raises:
        AuthorizationError: 403 with ROLE_NOT_FOUND or INSUFFICIENT_ROLE
    """
    decision = decide(policy, identity, target_subject_id)
    if decision.allowed:
        return

    logger.warning(
        f"Authorization denied for subject {identity.subject_id} "
        f"(role={identity.role.value if identity.role else None}): {decision.code}"
    )
    raise AuthorizationError(decision.reason, decision.code)

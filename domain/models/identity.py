"""
Identity claim and authorization policy value objects.
"""

from dataclasses import dataclass, field
from typing import FrozenSet, Optional

from domain.models.role import Role


@dataclass(frozen=True)
class Identity:
    """
    Authenticated principal for the lifetime of one request.

    Produced by the identity provider from a verified token. ``role`` is
    None when the token carries no (recognised) role claim.
    """

    subject_id: str
    role: Optional[Role] = None


@dataclass(frozen=True)
class AuthorizationPolicy:
    """
    Declarative access rule attached to a protected operation.

    Attributes:
        allowed_roles: Roles permitted to perform the operation
        allow_same_subject: Allow a subject to act on a resource identified
            by their own subject id regardless of role
        target_param: Name of the path parameter holding the target
            subject id for the same-subject check
    """

    allowed_roles: FrozenSet[Role] = field(default_factory=frozenset)
    allow_same_subject: bool = False
    target_param: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "allowed_roles", frozenset(self.allowed_roles))
        if not self.allowed_roles and not (
            self.allow_same_subject and self.target_param
        ):
            raise ValueError(
                "A policy without allowed roles must allow the same subject "
                "and declare a target parameter"
            )

    @classmethod
    def roles(
        cls,
        *roles: Role,
        allow_same_subject: bool = False,
        target_param: Optional[str] = None,
    ) -> "AuthorizationPolicy":
        """Shorthand constructor: ``AuthorizationPolicy.roles(Role.ADMIN)``."""
        return cls(
            allowed_roles=frozenset(roles),
            allow_same_subject=allow_same_subject,
            target_param=target_param,
        )

"""
Authorization policies shared by the routers.
"""

from domain.models import ALL_ROLES, AuthorizationPolicy, Role

ANY_ROLE = AuthorizationPolicy(allowed_roles=ALL_ROLES)
ADMIN_ONLY = AuthorizationPolicy.roles(Role.ADMIN)
TRAINER_ONLY = AuthorizationPolicy.roles(Role.TRAINER)
PAID_TIERS = AuthorizationPolicy.roles(Role.PREMIUM, Role.TRAINER, Role.ADMIN)
ADMIN_OR_SELF = AuthorizationPolicy.roles(
    Role.ADMIN, allow_same_subject=True, target_param="user_id"
)

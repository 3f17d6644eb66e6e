"""
Role and intensity enums.

Roles are the coarse permission tiers carried as a custom claim on the
identity provider's tokens. Parsing is case-insensitive so that stored
values like "Trainer" and claim values like "trainer" resolve to the same
member.
"""

import logging
from enum import Enum
from typing import Optional

logger = logging.getLogger(__name__)


class Role(str, Enum):
    """Permission tier of an authenticated subject."""

    LITE = "lite"
    PREMIUM = "premium"
    TRAINER = "trainer"
    ADMIN = "admin"

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            lowered = value.strip().lower()
            for member in cls:
                if member.value == lowered:
                    return member
        return None

    @classmethod
    def from_claim(cls, value: object) -> Optional["Role"]:
        """
        Parse a role claim.

        Returns None for an absent claim and for any value outside the
        closed set, so an unknown role can never satisfy a policy.
        """
        if value is None or value == "":
            return None
        try:
            return cls(value)
        except ValueError:
            logger.warning(f"Ignoring unrecognised role claim: {value!r}")
            return None


ALL_ROLES = frozenset(Role)


class Intensity(str, Enum):
    """Exercise intensity level."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            lowered = value.strip().lower()
            for member in cls:
                if member.value.lower() == lowered:
                    return member
        return None

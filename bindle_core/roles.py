# bindle_core/roles.py

from __future__ import annotations
from enum import Enum
from .errors import InvalidRoleError


class Role(str, Enum):
    """
    Closed set of roles a signature (and the key behind it) can attest to.
    New roles cannot be added at runtime.
    """
    CREATOR = "creator"
    APPROVER = "approver"
    PROXY = "proxy"
    HOST = "host"

    def __str__(self) -> str:
        return self.value


def parse_role(value) -> Role:
    """Parse a wire role token. Matching is exact and case-sensitive."""
    if isinstance(value, Role):
        return value
    if isinstance(value, str):
        for role in Role:
            if role.value == value:
                return role
    raise InvalidRoleError(value)

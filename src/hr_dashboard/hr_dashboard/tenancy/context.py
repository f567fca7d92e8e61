from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Optional

from ..core.enums import Role
from ..core.exceptions import AuthenticationError, AuthorizationError

_PATH_UNSAFE = re.compile(r"[@.]")


def tenant_key(email: str) -> str:
    """Storage key of a tenant: the login e-mail with '@' and '.' replaced by '_'."""

    email = (email or "").strip()
    if not email:
        raise AuthenticationError("No authenticated user found")
    return _PATH_UNSAFE.sub("_", email)


@dataclass(frozen=True)
class AuthContext:
    """Current identity as provided by the external auth collaborator."""

    email: str
    role: Role
    name: Optional[str] = None

    @classmethod
    def from_session(cls, session) -> "AuthContext":
        email = session.get("email")
        role = session.get("role")
        if not email or not role:
            raise AuthenticationError("No authenticated user found")
        try:
            return cls(email=str(email), role=Role(role), name=session.get("name"))
        except ValueError:
            raise AuthenticationError(f"Unknown role {role!r}")

    @property
    def tenant(self) -> str:
        return tenant_key(self.email)

    def require_role(self, allowed: Iterable[Role]) -> None:
        if self.role not in set(allowed):
            raise AuthorizationError("You do not have permission for this action")

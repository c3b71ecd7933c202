"""Identity lookup for the current request.

The session framework itself lives outside this package; all we need is
who is asking and in what role.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from shopease.domain.exceptions import AuthorizationError

ADMIN_ROLE = "admin"


@dataclass(frozen=True)
class SessionUser:
    id: str
    email: str
    role: str = "user"


@dataclass(frozen=True)
class Session:
    user: SessionUser


class SessionProvider(ABC):

    @abstractmethod
    def current_session(self) -> Session | None:
        """Return the signed-in session, or None for anonymous callers."""


def require_user(sessions: SessionProvider) -> SessionUser:
    """Return the signed-in user; anonymous callers are refused."""
    session = sessions.current_session()
    if session is None:
        raise AuthorizationError("Sign-in required")
    return session.user


def require_role(sessions: SessionProvider, role: str = ADMIN_ROLE) -> SessionUser:
    """Return the current user, or raise AuthorizationError.

    Anonymous callers and users without *role* are both refused.
    """
    user = require_user(sessions)
    if user.role != role:
        raise AuthorizationError(f"{role.capitalize()} access required")
    return user

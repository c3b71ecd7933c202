"""File-backed session provider for the admin CLI.

The web front end owns real sign-in.  For maintenance work an operator
drops a small JSON file describing who they are:

    {"user": {"id": "u-1", "email": "admin@rushk.pk", "role": "admin"}}

A missing file means anonymous.
"""

from __future__ import annotations

import json
from pathlib import Path

from shopease.domain.exceptions import PersistenceError
from shopease.domain.service.session import Session, SessionProvider, SessionUser


class FileSessionProvider(SessionProvider):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    def current_session(self) -> Session | None:
        if not self._file_path.exists():
            return None
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise PersistenceError(f"Cannot read session file: {exc}") from exc

        user = raw.get("user") if isinstance(raw, dict) else None
        if not isinstance(user, dict) or not user.get("id"):
            return None
        return Session(
            user=SessionUser(
                id=str(user["id"]),
                email=str(user.get("email", "")),
                role=str(user.get("role", "user")),
            )
        )

"""Runtime settings read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

# When installed in editable mode the project root is the repo root.
_PROJECT_ROOT = Path(__file__).resolve().parents[3]


@dataclass(frozen=True)
class Settings:
    data_dir: Path
    environment: str = "development"
    smtp_host: str | None = None
    smtp_port: int = 587
    smtp_user: str | None = None
    smtp_password: str | None = None
    smtp_secure: bool = False
    session_file: Path | None = None

    @property
    def expose_error_details(self) -> bool:
        return self.environment != "production"

    @property
    def smtp_configured(self) -> bool:
        return bool(self.smtp_user and self.smtp_password)

    @staticmethod
    def from_env(env: dict[str, str] | None = None) -> Settings:
        env = dict(os.environ) if env is None else env
        data_dir = Path(env.get("SHOPEASE_DATA_DIR") or _PROJECT_ROOT / "data")
        session_file = env.get("SHOPEASE_SESSION_FILE")
        return Settings(
            data_dir=data_dir,
            environment=env.get("SHOPEASE_ENV", "development"),
            smtp_host=env.get("SMTP_HOST") or None,
            smtp_port=int(env.get("SMTP_PORT") or 587),
            smtp_user=env.get("SMTP_USER") or None,
            smtp_password=env.get("SMTP_PASS") or None,
            smtp_secure=env.get("SMTP_SECURE", "").lower() == "true",
            session_file=Path(session_file) if session_file else data_dir / "session.json",
        )

"""Saved sessions, so a login survives between processes."""

import json
import os
from dataclasses import dataclass, field
from pathlib import Path

from tasty_client.auth.session import Session


def default_session_path() -> Path:
    """``$XDG_DATA_HOME/tasty-client/session.json``"""
    data_home = os.environ.get("XDG_DATA_HOME")
    root = Path(data_home) if data_home else Path.home() / ".local" / "share"
    return root / "tasty-client" / "session.json"


@dataclass
class TokenStore:
    """A session and remember token kept in a JSON file only its owner can read."""

    path: Path = field(default_factory=default_session_path)

    def save(self, session: Session) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = {
            "session_token": session.session_token,
            "remember_token": session.remember_token,
        }
        self.path.write_text(json.dumps(payload, indent=2))
        self.path.chmod(0o600)

    def load(self) -> Session | None:
        """Read the saved session.

        A missing file, unreadable JSON or an empty session token all mean
        there is nothing to resume, so None is returned.
        """
        try:
            saved = json.loads(self.path.read_text())
            session_token = saved["session_token"]
        except (FileNotFoundError, json.JSONDecodeError, KeyError, TypeError):
            return None

        if not session_token:
            return None
        return Session(session_token=session_token, remember_token=saved.get("remember_token"))

    def clear(self) -> None:
        self.path.unlink(missing_ok=True)

    def has_token(self) -> bool:
        return self.path.is_file()

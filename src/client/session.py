"""Local persistence of the issued token and display name."""

import json
import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

TOKEN_KEY = "authToken"
NAME_KEY = "userName"
DEFAULT_SESSION_FILE = Path.home() / ".authservice" / "session.json"


class SessionStore:
    """Keeps the session in a small JSON file, like browser local storage."""

    def __init__(self, path: Path | str | None = None):
        if path is None:
            path = os.getenv("AUTH_SESSION_FILE") or DEFAULT_SESSION_FILE
        self.path = Path(path)

    def _read(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Ignoring unreadable session file", extra={"path": str(self.path), "error": str(e)})
            return {}
        return data if isinstance(data, dict) else {}

    @property
    def token(self) -> str | None:
        return self._read().get(TOKEN_KEY)

    @property
    def user_name(self) -> str | None:
        return self._read().get(NAME_KEY)

    def save(self, token: str, user_name: str) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps({TOKEN_KEY: token, NAME_KEY: user_name}), encoding="utf-8")
        try:
            self.path.chmod(0o600)
        except OSError:
            logger.debug("Could not restrict session file permissions", extra={"path": str(self.path)})

    def clear(self) -> None:
        self.path.unlink(missing_ok=True)

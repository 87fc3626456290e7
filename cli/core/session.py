# cli/core/session.py
import json
from typing import Optional

from .config import APP_DIR, SESSION_FILE


def save_token(access_token: str) -> None:
    """
    Stores the operator access token in SESSION_FILE.
    """
    APP_DIR.mkdir(parents=True, exist_ok=True)
    data = {"access_token": access_token}
    with open(SESSION_FILE, "w", encoding="utf-8") as f:
        json.dump(data, f)
    SESSION_FILE.chmod(0o600)


def load_token() -> Optional[str]:
    """
    Reads the operator access token.
    Returns None if there is no session file or it is unreadable.
    """
    if not SESSION_FILE.exists():
        return None

    try:
        with open(SESSION_FILE, "r", encoding="utf-8") as f:
            data = json.load(f)
        return data.get("access_token")
    except (OSError, ValueError):
        # An unreadable session file counts as no session
        return None


def clear_token() -> None:
    if SESSION_FILE.exists():
        SESSION_FILE.unlink()


def is_logged_in() -> bool:
    return load_token() is not None

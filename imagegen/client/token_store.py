"""
Bearer token persistence for the client.

The token is kept in a small JSON file in the user's config directory so a
session survives restarts, the way a browser keeps it in local storage.
"""
import json
import logging
import sys
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


def get_config_dir() -> Path:
    """Get the configuration directory for the current platform."""
    if sys.platform == "win32":
        base = Path.home() / "AppData" / "Roaming"
    elif sys.platform == "darwin":
        base = Path.home() / "Library" / "Application Support"
    else:
        base = Path.home() / ".config"
    return base / "imagegen"


class TokenStore:
    """Load, save and clear the stored bearer token."""
    
    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path is not None else get_config_dir() / "session.json"
    
    def load(self) -> Optional[str]:
        """Return the stored token, or None if absent or unreadable."""
        if not self.path.exists():
            return None
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Could not read token file {self.path}: {e}")
            return None
        token = data.get("token") if isinstance(data, dict) else None
        return token or None
    
    def save(self, token: str) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps({"token": token}), encoding="utf-8")
    
    def clear(self) -> None:
        self.path.unlink(missing_ok=True)

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_API_URL = "http://localhost:5000/api"


@dataclass(frozen=True)
class ClientSettings:
    api_url: str
    storage_dir: Path | None  # None when client-side storage is unavailable
    log_level: str = "WARNING"


def get_settings() -> ClientSettings:
    """Read client settings from the environment.

    NOTES_STORAGE_DISABLED=1 runs without client-side storage, so the
    token operations become no-ops.
    """
    disabled = os.getenv("NOTES_STORAGE_DISABLED", "0") == "1"
    storage_dir = None
    if not disabled:
        storage_dir = Path(os.getenv("NOTES_STORAGE_DIR", "~/.notes_client")).expanduser()
    return ClientSettings(
        api_url=os.getenv("NOTES_API_URL", DEFAULT_API_URL),
        storage_dir=storage_dir,
        log_level=os.getenv("NOTES_LOG_LEVEL", "WARNING").upper(),
    )

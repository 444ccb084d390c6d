"""Per-user directory lookup."""

from __future__ import annotations

import os
from pathlib import Path

from todocli.storage.base import StorageUnavailableError


def documents_dir() -> Path:
    """Return the current user's documents directory.

    Honours XDG_DOCUMENTS_DIR when set, otherwise ~/Documents.

    Raises:
        StorageUnavailableError: If the home directory cannot be determined.
    """
    xdg = os.environ.get("XDG_DOCUMENTS_DIR")
    if xdg:
        return Path(xdg).expanduser()
    try:
        home = Path.home()
    except (RuntimeError, KeyError) as e:
        raise StorageUnavailableError(f"cannot determine home directory: {e}") from e
    return home / "Documents"

"""Start-up configuration for the todo CLI."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class AppConfig:
    """Options chosen when the CLI starts.

    The defaults give the plain interactive loop backed by todos.json in
    the user's documents directory.
    """

    storage: str = "file"             # "file" or "memory"
    data_dir: Optional[str] = None    # Overrides the documents directory
    log_level: str = "WARNING"        # Diagnostics go to stderr

    def cache_options(self) -> dict:
        """Constructor arguments for the selected storage backend."""
        if self.storage == "file" and self.data_dir:
            return {"directory": self.data_dir}
        return {}


def config_from_args(args) -> AppConfig:
    """Build an AppConfig from parsed argparse options."""
    return AppConfig(
        storage=getattr(args, "storage", "file"),
        data_dir=getattr(args, "data_dir", None),
        log_level=getattr(args, "log_level", "WARNING"),
    )

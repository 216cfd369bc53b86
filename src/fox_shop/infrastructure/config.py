"""Runtime settings, read from the environment when the app is built."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DEFAULT_DB_PATH = Path(__file__).resolve().parents[3] / "data" / "db.json"


@dataclass(frozen=True)
class Settings:
    db_path: Path
    host: str = "127.0.0.1"
    port: int = 3000
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> Settings:
        return cls(
            db_path=Path(os.environ.get("FOX_SHOP_DB", str(_DEFAULT_DB_PATH))),
            host=os.environ.get("FOX_SHOP_HOST", "127.0.0.1"),
            port=int(os.environ.get("FOX_SHOP_PORT", "3000")),
            log_level=os.environ.get("FOX_SHOP_LOG_LEVEL", "INFO").upper(),
        )

"""Runtime settings, read from the environment once at import."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

# When installed in editable mode the project root is the repo root.
_PROJECT_ROOT = Path(__file__).resolve().parents[3]


@dataclass(frozen=True)
class Settings:
    data_dir: Path
    outbox_dir: Path
    log_level: str
    business_email: str


def load_settings() -> Settings:
    data_dir = Path(os.getenv("PRODUCTOR_DATA_DIR", str(_PROJECT_ROOT / "data")))
    return Settings(
        data_dir=data_dir,
        outbox_dir=Path(os.getenv("PRODUCTOR_OUTBOX_DIR", str(data_dir / "outbox"))),
        log_level=os.getenv("PRODUCTOR_LOG_LEVEL", "WARNING").upper(),
        business_email=os.getenv("PRODUCTOR_BUSINESS_EMAIL", "orders@productor.local"),
    )

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from .detect import UNKNOWN_FLAVOR


@dataclass(frozen=True)
class DBFlavorConfig:
    # Installation root scanned when no path is given on the command line
    basedir: Optional[str] = None
    log_level: str = "WARNING"
    unknown_flavor: str = UNKNOWN_FLAVOR

    @classmethod
    def from_env(cls) -> "DBFlavorConfig":
        return cls(
            basedir=os.getenv("DBFLAVOR_BASEDIR") or None,
            log_level=os.getenv("DBFLAVOR_LOG_LEVEL", "WARNING").upper(),
        )

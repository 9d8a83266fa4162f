"""Environment settings"""

import os
from dataclasses import dataclass, field
from pathlib import Path

from opendocx.wordml.base import to_bool


@dataclass
class Settings:
    pretty_print: bool = False
    log_level: str = "WARNING"
    host: str = "0.0.0.0"
    port: int = 8080
    # API image sources must resolve inside this directory
    media_root: Path = field(default_factory=Path.cwd)

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            pretty_print=to_bool(os.getenv("OPENDOCX_PRETTY_PRINT", "")),
            log_level=os.getenv("OPENDOCX_LOG_LEVEL", "WARNING").upper(),
            host=os.getenv("OPENDOCX_HOST", "0.0.0.0"),
            port=int(os.getenv("OPENDOCX_PORT", "8080")),
            media_root=Path(os.getenv("OPENDOCX_MEDIA_ROOT") or Path.cwd()),
        )

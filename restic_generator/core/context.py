from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

PROGRAM_NAME = "restic-generator"


@dataclass(frozen=True)
class GeneratorContext:
    config_path: Path
    hostname: str
    program_name: str = PROGRAM_NAME

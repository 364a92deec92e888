from __future__ import annotations

from pathlib import Path
from typing import Protocol

from .generator_config import GeneratorConfig


class ConfigLoaderProtocol(Protocol):
    def resolve_path(self, explicit_path: str | None = None) -> Path:
        ...

    def load(self, path: Path) -> GeneratorConfig:
        ...


class HostnameProviderProtocol(Protocol):
    def hostname(self) -> str:
        ...


class UnitWriterProtocol(Protocol):
    def write(self, path: Path, text: str) -> None:
        ...

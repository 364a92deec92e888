from __future__ import annotations

from pathlib import Path

from ..core.config_loader import ConfigLoader
from ..core.context import GeneratorContext
from ..core.hostname import HostnameResolver
from ..core.protocols import (
    ConfigLoaderProtocol,
    HostnameProviderProtocol,
    UnitWriterProtocol,
)
from ..core.unit_writer import UnitWriter
from .generate_command import GenerateCommand


class CommandFactory:
    def __init__(
        self,
        *,
        config_loader: ConfigLoaderProtocol | None = None,
        hostname_provider: HostnameProviderProtocol | None = None,
        writer: UnitWriterProtocol | None = None,
    ) -> None:
        self._config_loader = config_loader or ConfigLoader()
        self._hostname_provider = hostname_provider or HostnameResolver()
        self._writer = writer or UnitWriter()

    def create(self, config_file: str | None, output_dir: Path) -> GenerateCommand:
        config_path = self._config_loader.resolve_path(config_file)
        hostname = self._hostname_provider.hostname()
        config = self._config_loader.load(config_path)
        context = GeneratorContext(config_path=config_path, hostname=hostname)
        return GenerateCommand(config, context, self._writer, output_dir)

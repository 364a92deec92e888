from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path

from .errors import ConfigParseError, ConfigReadError
from .generator_config import GeneratorConfig

CONFIG_ENV_VAR = "RESTIC_GENERATOR_CONFIG"
USER_CONFIG_PATH = Path(".config") / "restic-generator" / "config.toml"
SYSTEM_CONFIG_PATH = Path("/etc/restic-generator/config.toml")

logger = logging.getLogger(__name__)


class ConfigLoader:
    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = os.environ if environ is None else environ

    @property
    def default_config_file(self) -> Path:
        # systemd sets USER only when running the user-level generators.
        if "USER" not in self._environ:
            return SYSTEM_CONFIG_PATH
        home = self._environ.get("HOME")
        if home is None:
            raise ConfigReadError("HOME environment variable not found")
        return Path(home) / USER_CONFIG_PATH

    def resolve_path(self, explicit_path: str | None = None) -> Path:
        if explicit_path:
            return Path(explicit_path).expanduser()
        override = self._environ.get(CONFIG_ENV_VAR)
        if override is not None:
            return Path(override)
        return self.default_config_file

    def load(self, path: Path) -> GeneratorConfig:
        logger.info("Using config file %s", path)
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise ConfigReadError(f"{path}: error reading config: {exc}") from exc
        try:
            return GeneratorConfig.from_toml(text)
        except ConfigParseError as exc:
            raise ConfigParseError(f"{path}: {exc}") from exc

from __future__ import annotations

import tomllib
from collections.abc import Mapping
from dataclasses import dataclass
from functools import cached_property
from typing import Any

from .errors import ConfigParseError

RETENTION_COUNT_FIELDS = (
    "keep_last",
    "keep_hourly",
    "keep_daily",
    "keep_weekly",
    "keep_monthly",
    "keep_yearly",
)
RETENTION_TEXT_FIELDS = ("keep_tag", "keep_within")
RETENTION_FIELDS = RETENTION_COUNT_FIELDS + RETENTION_TEXT_FIELDS

CREDENTIAL_FIELDS = (
    "password_command",
    "password_file",
    "aws_access_key",
    "aws_secret_access_key",
)


@dataclass(frozen=True)
class RepositoryConfig:
    name: str
    location: str
    password_command: str | None = None
    password_file: str | None = None
    aws_access_key: str | None = None
    aws_secret_access_key: str | None = None
    keep_last: int | None = None
    keep_hourly: int | None = None
    keep_daily: int | None = None
    keep_weekly: int | None = None
    keep_monthly: int | None = None
    keep_yearly: int | None = None
    keep_tag: str | None = None
    keep_within: str | None = None

    @cached_property
    def has_forget_policy(self) -> bool:
        """True when any keep-* rule is set; gates both forget and prune units."""
        return any(getattr(self, name) is not None for name in RETENTION_FIELDS)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], index: int = 0) -> RepositoryConfig:
        where = f"repositories[{index}]"
        if not isinstance(data, Mapping):
            raise ConfigParseError(f"{where}: expected a table")

        values: dict[str, Any] = {
            "name": _required_str(data, "name", where),
            "location": _required_str(data, "location", where),
        }
        for name in CREDENTIAL_FIELDS + RETENTION_TEXT_FIELDS:
            values[name] = _optional_str(data, _toml_key(name), where)
        for name in RETENTION_COUNT_FIELDS:
            values[name] = _optional_count(data, _toml_key(name), where)

        _validate_name(values["name"], where)
        return cls(**values)


@dataclass(frozen=True)
class GeneratorConfig:
    source: str
    exclude: tuple[str, ...] = ()
    repositories: tuple[RepositoryConfig, ...] = ()
    host: str | None = None

    @classmethod
    def from_toml(cls, text: str) -> GeneratorConfig:
        try:
            data = tomllib.loads(text)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigParseError(f"invalid TOML: {exc}") from exc
        return cls.from_mapping(data)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> GeneratorConfig:
        source = _required_str(data, "source", "config")
        host = _optional_str(data, "host", "config")

        exclude = data.get("exclude", [])
        if not isinstance(exclude, list) or not all(isinstance(item, str) for item in exclude):
            raise ConfigParseError("config: 'exclude' must be a list of strings")

        raw_repositories = data.get("repositories", [])
        if not isinstance(raw_repositories, list):
            raise ConfigParseError("config: 'repositories' must be an array of tables")
        repositories = tuple(
            RepositoryConfig.from_mapping(item, index)
            for index, item in enumerate(raw_repositories)
        )

        seen: set[str] = set()
        for repository in repositories:
            if repository.name in seen:
                raise ConfigParseError(f"config: duplicate repository name: {repository.name}")
            seen.add(repository.name)

        return cls(
            source=source,
            exclude=tuple(exclude),
            repositories=repositories,
            host=host,
        )


def has_forget_policy(repository: RepositoryConfig) -> bool:
    return repository.has_forget_policy


def _toml_key(name: str) -> str:
    return name.replace("_", "-")


def _required_str(data: Mapping[str, Any], key: str, where: str) -> str:
    if key not in data:
        raise ConfigParseError(f"{where}: missing required field '{key}'")
    value = data[key]
    if not isinstance(value, str):
        raise ConfigParseError(f"{where}: '{key}' must be a string")
    return value


def _optional_str(data: Mapping[str, Any], key: str, where: str) -> str | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigParseError(f"{where}: '{key}' must be a string")
    return value


def _optional_count(data: Mapping[str, Any], key: str, where: str) -> int | None:
    value = data.get(key)
    if value is None:
        return None
    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ConfigParseError(f"{where}: '{key}' must be a non-negative integer")
    return value


def _validate_name(name: str, where: str) -> None:
    if name in ("", ".", "..") or "/" in name or "\0" in name:
        raise ConfigParseError(f"{where}: invalid repository name: {name!r}")

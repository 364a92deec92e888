from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from restic_generator.core.context import GeneratorContext
from restic_generator.core.generator_config import GeneratorConfig, RepositoryConfig
from restic_generator.core.logging_setup import LOGGER_NAME


class FixedHostname:
    def __init__(self, name: str = "laptop") -> None:
        self._name = name
        self.calls = 0

    def hostname(self) -> str:
        self.calls += 1
        return self._name


class RecordingWriter:
    def __init__(self) -> None:
        self.files: dict[Path, str] = {}

    def write(self, path: Path, text: str) -> None:
        self.files[path] = text


@pytest.fixture(autouse=True)
def reset_generator_logger() -> Iterator[None]:
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def fixed_hostname() -> FixedHostname:
    return FixedHostname()


@pytest.fixture
def recording_writer() -> RecordingWriter:
    return RecordingWriter()


@pytest.fixture
def context() -> GeneratorContext:
    return GeneratorContext(
        config_path=Path("/etc/restic-generator/config.toml"),
        hostname="laptop",
    )


@pytest.fixture
def local_repository() -> RepositoryConfig:
    return RepositoryConfig(
        name="myrepo",
        location="/media/backup",
        password_file="/etc/restic.password",
        keep_daily=7,
        keep_weekly=4,
    )


@pytest.fixture
def remote_repository() -> RepositoryConfig:
    return RepositoryConfig(
        name="sftprepo",
        location="sftp:user@host:/srv/restic-repo",
        password_command="pass show restic",
    )


@pytest.fixture
def sample_config(
    local_repository: RepositoryConfig,
    remote_repository: RepositoryConfig,
) -> GeneratorConfig:
    return GeneratorConfig(
        source="/home",
        exclude=("*.tmp", "/home/*/.cache"),
        repositories=(local_repository, remote_repository),
    )

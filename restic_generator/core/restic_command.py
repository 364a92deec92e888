from __future__ import annotations

from collections.abc import Iterable

from .generator_config import RETENTION_FIELDS, RepositoryConfig

RESTIC = "restic"
UNLOCK_COMMAND = f"{RESTIC} unlock"
PRUNE_COMMAND = f"{RESTIC} prune"


def _option(name: str, value: object) -> str:
    # Values are quoted verbatim, embedded double quotes are not escaped.
    return f'--{name}="{value}"'


def build_backup_command(source: str, host: str, excludes: Iterable[str]) -> str:
    args = [RESTIC, "backup", _option("host", host)]
    args.extend(_option("exclude", pattern) for pattern in excludes)
    args.append(source)
    return " ".join(args)


def build_forget_command(host: str, source_path: str, repository: RepositoryConfig) -> str:
    args = [
        RESTIC,
        "forget",
        _option("host", host),
        _option("path", source_path),
    ]
    for name in RETENTION_FIELDS:
        value = getattr(repository, name)
        if value is not None:
            args.append(_option(name.replace("_", "-"), value))
    return " ".join(args)

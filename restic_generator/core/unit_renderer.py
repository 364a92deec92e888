"""Rendering of systemd service units for a single restic repository.

Every unit kind shares the same skeleton: a provenance comment, a ``[Unit]``
section tying the unit to the config file, and a one-shot ``[Service]``
section that exports the repository credentials, unlocks the repository and
then runs the kind-specific restic command at idle priority.
"""
from __future__ import annotations

from enum import Enum

from .context import GeneratorContext
from .generator_config import GeneratorConfig, RepositoryConfig
from .location import is_local
from .restic_command import (
    PRUNE_COMMAND,
    UNLOCK_COMMAND,
    build_backup_command,
    build_forget_command,
)

UNIT_EXTENSION = "service"

# (variable, repository field), emitted in this order when the field is set.
ENVIRONMENT_FIELDS = (
    ("RESTIC_PASSWORD_FILE", "password_file"),
    ("RESTIC_PASSWORD_COMMAND", "password_command"),
    ("AWS_ACCESS_KEY", "aws_access_key"),
    ("AWS_SECRET_ACCESS_KEY", "aws_secret_access_key"),
)

# restic exits with 3 when some source files could not be read, e.g. a file
# removed while the snapshot was being taken.
PARTIAL_BACKUP_EXIT_STATUS = 3


class UnitKind(str, Enum):
    BACKUP = "backup"
    FORGET = "forget"
    PRUNE = "prune"

    @property
    def needs_forget_policy(self) -> bool:
        return self is not UnitKind.BACKUP


def unit_kinds_for(repository: RepositoryConfig) -> tuple[UnitKind, ...]:
    if repository.has_forget_policy:
        return (UnitKind.BACKUP, UnitKind.FORGET, UnitKind.PRUNE)
    return (UnitKind.BACKUP,)


def unit_file_name(repository: RepositoryConfig, kind: UnitKind) -> str:
    return f"restic-{repository.name}-{kind.value}.{UNIT_EXTENSION}"


def render_unit(
    kind: UnitKind,
    config: GeneratorConfig,
    context: GeneratorContext,
    repository: RepositoryConfig,
) -> list[str] | None:
    """Return the lines of the unit, or ``None`` when the kind does not apply.

    Forget and prune units only exist for repositories with a retention
    policy.
    """
    if kind.needs_forget_policy and not repository.has_forget_policy:
        return None

    host = config.host if config.host is not None else context.hostname
    lines = [
        f"# generated by {context.program_name}",
        "[Unit]",
        f"Description={_description(kind, config, repository)}",
        f"SourcePath={context.config_path}",
    ]
    if kind is UnitKind.BACKUP:
        lines.append(f"ConditionPathExists={config.source}")
    if is_local(repository.location):
        lines.append(f"ConditionPathExists={repository.location}")

    lines.extend(["", "[Service]"])
    lines.extend(_environment(repository))
    lines.extend(
        [
            "Type=oneshot",
            f"ExecStartPre={UNLOCK_COMMAND}",
        ]
    )

    if kind is UnitKind.BACKUP:
        lines.append(f"ExecStart={build_backup_command(config.source, host, config.exclude)}")
        lines.append(f"SuccessExitStatus={PARTIAL_BACKUP_EXIT_STATUS}")
    elif kind is UnitKind.FORGET:
        lines.append(f"ExecStart={build_forget_command(host, config.source, repository)}")
    else:
        lines.append(f"ExecStart={PRUNE_COMMAND}")

    lines.extend(
        [
            "Nice=10",
            "IOSchedulingClass=idle",
        ]
    )
    return lines


def format_unit(lines: list[str]) -> str:
    return "\n".join(lines) + "\n"


def _description(kind: UnitKind, config: GeneratorConfig, repository: RepositoryConfig) -> str:
    if kind is UnitKind.BACKUP:
        return f"backup {config.source} to {repository.location}"
    if kind is UnitKind.FORGET:
        return f"forget {config.source} from {repository.location}"
    return f"Prune {repository.location}"


def _environment(repository: RepositoryConfig) -> list[str]:
    lines = [f'Environment=RESTIC_REPOSITORY="{repository.location}"']
    for variable, field_name in ENVIRONMENT_FIELDS:
        value = getattr(repository, field_name)
        if value is not None:
            lines.append(f'Environment={variable}="{value}"')
    return lines

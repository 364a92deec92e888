#!/usr/bin/env python3

from __future__ import annotations

import argparse
from pathlib import Path

from .commands.factory import CommandFactory
from .core.context import PROGRAM_NAME
from .core.errors import GeneratorError
from .core.logging_setup import setup_logging


class CliApplication:
    def __init__(self, factory: CommandFactory | None = None) -> None:
        self._factory = factory or CommandFactory()

    def build_parser(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(
            prog=PROGRAM_NAME,
            description="Generate systemd units running restic backups",
        )
        parser.add_argument(
            "-c",
            "--config",
            default=None,
            help="Path to the config file (default: $RESTIC_GENERATOR_CONFIG, "
            "~/.config/restic-generator/config.toml for user units, "
            "/etc/restic-generator/config.toml otherwise)",
        )
        parser.add_argument(
            "-v",
            "--verbose",
            action="store_true",
            help="Log debug messages",
        )
        parser.add_argument("normal_dir", type=Path, help="Directory for generated units")
        # Part of the systemd generator calling convention, nothing is written there.
        parser.add_argument("early_dir", type=Path, nargs="?", default=None)
        parser.add_argument("late_dir", type=Path, nargs="?", default=None)
        return parser

    def run(self, argv: list[str] | None = None) -> int:
        args = self.build_parser().parse_args(argv)
        setup_logging(args.verbose)
        command = self._factory.create(args.config, args.normal_dir)
        return command.run()


def main(argv: list[str] | None = None) -> int:
    app = CliApplication()
    try:
        return app.run(argv)
    except GeneratorError as exc:
        raise SystemExit(f"{PROGRAM_NAME}: {exc}") from exc


if __name__ == "__main__":
    raise SystemExit(main())

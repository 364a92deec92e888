from __future__ import annotations

import logging
from pathlib import Path

from ..core.context import GeneratorContext
from ..core.generator_config import GeneratorConfig
from ..core.protocols import UnitWriterProtocol
from ..core.unit_renderer import format_unit, render_unit, unit_file_name, unit_kinds_for
from .base import Command

logger = logging.getLogger(__name__)


class GenerateCommand(Command):
    def __init__(
        self,
        config: GeneratorConfig,
        context: GeneratorContext,
        writer: UnitWriterProtocol,
        output_dir: Path,
    ) -> None:
        self._config = config
        self._context = context
        self._writer = writer
        self._output_dir = output_dir

    def run(self) -> int:
        for repository in self._config.repositories:
            kinds = unit_kinds_for(repository)
            if not repository.has_forget_policy:
                logger.debug(
                    "Repository %s has no retention policy; skipping forget and prune units",
                    repository.name,
                )

            for kind in kinds:
                lines = render_unit(kind, self._config, self._context, repository)
                if lines is None:
                    continue
                path = self._output_dir / unit_file_name(repository, kind)
                self._writer.write(path, format_unit(lines))
                logger.info("Wrote %s", path)
        return 0

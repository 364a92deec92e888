from __future__ import annotations

from pathlib import Path

from .errors import OutputWriteError


class UnitWriter:
    def write(self, path: Path, text: str) -> None:
        try:
            path.write_text(text, encoding="utf-8")
        except OSError as exc:
            raise OutputWriteError(f"{path}: error creating file: {exc.strerror or exc}") from exc

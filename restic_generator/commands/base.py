from __future__ import annotations

from abc import ABC, abstractmethod


class Command(ABC):
    """A unit of work run by the CLI; ``run`` returns the process exit status."""

    @abstractmethod
    def run(self) -> int:
        raise NotImplementedError

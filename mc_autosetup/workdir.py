from __future__ import annotations
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator
from .logging_setup import get_logger

log = get_logger("mc.autosetup.workdir")

@dataclass(frozen=True)
class WorkDirectory:
    """Explicit working context. Components resolve relative files against
    ``root`` instead of the process-wide current directory."""

    root: Path

    def path(self, name: str) -> Path:
        return self.root / name

    def subdir(self, name: str) -> "WorkDirectory":
        return WorkDirectory(self.root / name)

    @contextmanager
    def excursion(self, name: str) -> Iterator["WorkDirectory"]:
        sub = self.subdir(name)
        sub.root.mkdir(parents=True, exist_ok=True)
        log.debug("Entering %s", sub.root)
        try:
            yield sub
        finally:
            log.debug("Back in %s", self.root)

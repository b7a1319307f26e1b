"""Loader abstraction: one strategy per way of obtaining a server jar"""
from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from ..workdir import WorkDirectory


class LoaderChoice(Enum):
    VANILLA = "vanilla"
    FABRIC = "fabric"

    @property
    def display_name(self) -> str:
        return self.value.title()

    @classmethod
    def parse(cls, answer: str) -> "LoaderChoice":
        value = answer.strip().lower()
        for number, choice in enumerate(cls, start=1):
            if value in (str(number), choice.value):
                return choice
        raise ValueError(f"unknown loader {answer!r}")


@dataclass(frozen=True)
class InstallationResult:
    artifact_stem: str
    resolved_version: str


class LoaderInstaller(ABC):
    choice: LoaderChoice

    @abstractmethod
    def install(self, workdir: WorkDirectory) -> InstallationResult:
        """Materialize a runnable server artifact inside ``workdir``."""
        ...

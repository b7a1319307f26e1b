"""Loader strategies for obtaining a Minecraft server artifact"""
from __future__ import annotations
from typing import Optional
from ..catalog import CatalogClient
from ..process_runner import ProcessRunner
from ..prompts import Prompter
from ..resolver import LoaderResolver
from ..settings import Settings
from .base import InstallationResult, LoaderChoice, LoaderInstaller
from .fabric import FabricInstaller
from .vanilla import VanillaInstaller


def build_installer(choice: LoaderChoice, settings: Settings, catalog: CatalogClient,
                    runner: ProcessRunner, prompter: Prompter,
                    requested: Optional[str] = None) -> LoaderInstaller:
    if choice is LoaderChoice.VANILLA:
        return VanillaInstaller(settings, catalog, LoaderResolver(catalog, prompter), requested)
    if choice is LoaderChoice.FABRIC:
        return FabricInstaller(settings, catalog, runner, prompter, requested)
    raise ValueError(f"unsupported loader {choice}")


__all__ = [
    "LoaderChoice",
    "InstallationResult",
    "LoaderInstaller",
    "VanillaInstaller",
    "FabricInstaller",
    "build_installer",
]

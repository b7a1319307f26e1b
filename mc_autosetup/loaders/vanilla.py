"""Vanilla server jar straight from the version catalog"""
from __future__ import annotations
from typing import Optional
from ..catalog import ArtifactDescriptor, CatalogClient
from ..http import download
from ..logging_setup import get_logger
from ..resolver import LoaderResolver
from ..settings import Settings
from ..workdir import WorkDirectory
from .base import InstallationResult, LoaderChoice, LoaderInstaller

log = get_logger("mc.autosetup.loader.vanilla")


class VanillaInstaller(LoaderInstaller):
    choice = LoaderChoice.VANILLA

    def __init__(self, settings: Settings, catalog: CatalogClient, resolver: LoaderResolver,
                 requested: Optional[str] = None):
        self.settings = settings
        self.catalog = catalog
        self.resolver = resolver
        self.requested = requested

    def install(self, workdir: WorkDirectory) -> InstallationResult:
        log.debug("Vanilla loader setup")
        entry = self.resolver.resolve(self.requested)

        log.info("Downloading vanilla loader...")
        metadata = self.catalog.fetch_metadata(entry)
        artifact = ArtifactDescriptor.from_url(metadata.downloads.server.url)
        download(artifact.download_url, workdir.path(artifact.file_name), timeout=self.settings.http_timeout)

        log.info("Vanilla server installation complete")
        return InstallationResult(
            artifact_stem=artifact.file_name.replace(".jar", ""),
            resolved_version=entry.id,
        )

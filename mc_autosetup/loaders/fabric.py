"""Fabric server through the pinned Fabric installer jar"""
from __future__ import annotations
from typing import List, Optional
from ..catalog import ArtifactDescriptor, CatalogClient
from ..http import download
from ..logging_setup import get_logger
from ..process_runner import ProcessRunner
from ..prompts import Prompter
from ..settings import Settings
from ..versions import is_valid_version_string
from ..workdir import WorkDirectory
from .base import InstallationResult, LoaderChoice, LoaderInstaller

log = get_logger("mc.autosetup.loader.fabric")

FABRIC_LAUNCH_STEM = "fabric-server-launch"
VERSION_PROMPT = "Which version of Minecraft do you want to use? [latest]"


def installer_args(installer: str, version: str) -> List[str]:
    args = ["-jar", installer, "server"]
    if version:
        args += ["-mcversion", version]
    args.append("-downloadMinecraft")
    return args


class FabricInstaller(LoaderInstaller):
    choice = LoaderChoice.FABRIC

    def __init__(self, settings: Settings, catalog: CatalogClient, runner: ProcessRunner,
                 prompter: Prompter, requested: Optional[str] = None):
        self.settings = settings
        self.catalog = catalog
        self.runner = runner
        self.prompter = prompter
        self.requested = requested

    def _ask_version(self) -> str:
        answer = self.requested
        while True:
            if answer is None:
                answer = self.prompter.text("mc_version", VERSION_PROMPT)
            version = answer.strip()
            answer = None
            if version and not is_valid_version_string(version):
                log.warning("Minecraft version provided contain invalid characters")
                continue
            return version

    def install(self, workdir: WorkDirectory) -> InstallationResult:
        log.debug("Fabric Loader setup")
        artifact = ArtifactDescriptor.from_url(self.settings.fabric_installer_url)
        installer = workdir.path(artifact.file_name)

        log.info("Downloading fabric loader...")
        download(artifact.download_url, installer, timeout=self.settings.http_timeout)

        version = self._ask_version()
        log.info("Minecraft version selected: %s", version or "latest")

        log.debug("Installing fabric server...")
        self.runner.run(
            "fabric-installer",
            [self.settings.java_bin] + installer_args(artifact.file_name, version),
            cwd=workdir.root,
            timeout=self.settings.process_timeout,
        )
        log.info("Fabric server installation complete")
        installer.unlink()

        # the installer picks the latest release itself; mirror it for the EULA gate
        resolved = version or self.catalog.latest_release()
        return InstallationResult(artifact_stem=FABRIC_LAUNCH_STEM, resolved_version=resolved)

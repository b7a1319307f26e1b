from __future__ import annotations
import platform
from dataclasses import dataclass
from typing import Optional
from .catalog import CatalogClient
from .config_patch import ConfigPatcher
from .environment import EnvironmentProbe
from .first_run import FirstRunController
from .loaders import LoaderChoice, build_installer
from .logging_setup import get_logger
from .management import ManagementLayerInstaller
from .process_runner import ProcessRunner
from .prompts import Prompter
from .scripts import generate_launch_scripts, management_command, start_command
from .settings import Settings
from .workdir import WorkDirectory
from .workspace import initialize_workspace

log = get_logger("mc.autosetup.orch")

FOLDER_PROMPT = "Enter the server folder name"
LOADER_PROMPT = "Select a option"
MCDR_PROMPT = "Do you want to use MCDR?"


@dataclass
class RunSummary:
    workdir: WorkDirectory
    loader: LoaderChoice
    managed: bool
    artifact_stem: str
    resolved_version: str
    launch_command: str
    eula_accepted: bool


class Orchestrator:
    def __init__(self, settings: Settings, prompter: Prompter, *,
                 runner: Optional[ProcessRunner] = None,
                 catalog: Optional[CatalogClient] = None,
                 system: Optional[str] = None):
        self.settings = settings
        self.prompter = prompter
        self.runner = runner or ProcessRunner()
        self.catalog = catalog or CatalogClient(settings)
        self.system = system or platform.system()
        self.patcher = ConfigPatcher(settings.patch_mode)

    def choose_loader(self) -> LoaderChoice:
        log.info("Which loader do you want to use?")
        for number, choice in enumerate(LoaderChoice, start=1):
            log.info("%d | %s", number, choice.display_name)
        options = [str(n) for n in range(1, len(LoaderChoice) + 1)] + [c.value for c in LoaderChoice]
        return LoaderChoice.parse(self.prompter.choice("loader", LOADER_PROMPT, options))

    def run(self) -> RunSummary:
        log.info("Auto server script is starting up")
        python = EnvironmentProbe(self.settings, self.runner, self.system).probe()

        folder = self.prompter.text("name", FOLDER_PROMPT, default=self.settings.fallback_folder)
        workdir = initialize_workspace(self.settings.base_dir, folder, self.settings.fallback_folder)

        loader = self.choose_loader()
        installer = build_installer(loader, self.settings, self.catalog, self.runner, self.prompter)

        managed = self.prompter.confirm("mcdr", MCDR_PROMPT, default=True)
        if managed:
            layer = ManagementLayerInstaller(self.settings, self.runner, self.prompter, self.patcher, python)
            result = layer.install(workdir, installer)
            command = management_command(python, self.settings.management_package)
        else:
            result = installer.install(workdir)
            command = start_command(result.artifact_stem, self.settings)

        generate_launch_scripts(workdir, command)

        first_run = FirstRunController(self.settings, self.runner, self.prompter, self.patcher,
                                       workdir, self.system)
        accepted = first_run.run(managed, result.resolved_version)

        log.info("Script done")
        return RunSummary(
            workdir=workdir,
            loader=loader,
            managed=managed,
            artifact_stem=result.artifact_stem,
            resolved_version=result.resolved_version,
            launch_command=command,
            eula_accepted=accepted,
        )

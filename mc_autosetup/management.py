"""
MCDReforged management layer: ``mcdreforged init`` in the workspace, the
loader nested under its ``server`` folder, then config.yml/permission.yml
wired up.
"""
from __future__ import annotations
from .config_patch import ConfigPatcher
from .loaders.base import InstallationResult, LoaderInstaller
from .logging_setup import get_logger
from .process_runner import ProcessRunner
from .prompts import Prompter
from .scripts import start_command
from .settings import Settings
from .workdir import WorkDirectory

log = get_logger("mc.autosetup.mcdr")

MANAGEMENT_CONFIG = "config.yml"
PERMISSION_FILE = "permission.yml"
OWNER_PROMPT = "Set the nickname of the server owner? [Skip]"


class ManagementLayerInstaller:
    def __init__(self, settings: Settings, runner: ProcessRunner, prompter: Prompter,
                 patcher: ConfigPatcher, python: str):
        self.settings = settings
        self.runner = runner
        self.prompter = prompter
        self.patcher = patcher
        self.python = python

    def install(self, workdir: WorkDirectory, installer: LoaderInstaller) -> InstallationResult:
        log.info("Using MCDReforged")
        self.runner.run(
            "mcdr-init",
            [self.python, "-m", self.settings.management_package, "init"],
            cwd=workdir.root,
            timeout=self.settings.process_timeout,
        )

        with workdir.excursion(self.settings.management_subdir) as server_dir:
            result = installer.install(server_dir)

        self.patcher.set(
            workdir.path(MANAGEMENT_CONFIG),
            "start_command",
            start_command(result.artifact_stem, self.settings),
        )

        nickname = self.prompter.text("owner", OWNER_PROMPT)
        if nickname:
            log.info("Nickname to set: %s", nickname)
            self.patcher.set(workdir.path(PERMISSION_FILE), "owner", [nickname])
        return result

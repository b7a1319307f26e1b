from __future__ import annotations
import platform
from typing import Optional
from .config_patch import ConfigPatcher
from .errors import UnsupportedPlatformError
from .logging_setup import get_logger
from .management import MANAGEMENT_CONFIG
from .process_runner import ProcessRunner
from .prompts import Prompter
from .scripts import launch_script_for
from .settings import Settings
from .versions import has_eula
from .workdir import WorkDirectory

log = get_logger("mc.autosetup.first_run")

EULA_FILE = "eula.txt"
FIRST_BOOT_PROMPT = "Do you want to start the server and set EULA=true?"


class FirstRunController:
    def __init__(self, settings: Settings, runner: ProcessRunner, prompter: Prompter,
                 patcher: ConfigPatcher, workdir: WorkDirectory, system: Optional[str] = None):
        self.settings = settings
        self.runner = runner
        self.prompter = prompter
        self.patcher = patcher
        self.workdir = workdir
        self.system = system or platform.system()

    def run(self, is_managed: bool, resolved_version: str) -> bool:
        """Returns True when the EULA was accepted."""
        if not has_eula(resolved_version):
            log.warning("Minecraft version too old, EULA doesn't exist")
            return False
        if not self.prompter.confirm("first_boot", FIRST_BOOT_PROMPT, default=False):
            return False
        if self.system not in ("Windows", "Linux"):
            raise UnsupportedPlatformError(f"Cannot launch the server on {self.system}")

        log.info("Starting the server for the first time...")
        log.warning("May take some time...")
        config = self.workdir.path(MANAGEMENT_CONFIG)
        if is_managed:
            self.patcher.set(config, "disable_console_thread", True)

        script = launch_script_for(self.workdir, self.system)
        result = self.runner.run(
            "first-boot",
            [str(script)],
            cwd=self.workdir.root,
            timeout=self.settings.first_boot_timeout,
            check=False,
        )
        if result.returncode != 0:
            log.warning("Server exited with rc=%s", result.returncode)
        log.info("First time server start complete")

        server_dir = self.workdir
        if is_managed:
            self.patcher.set(config, "disable_console_thread", False)
            server_dir = self.workdir.subdir(self.settings.management_subdir)

        self.patcher.set(server_dir.path(EULA_FILE), "eula", True)
        log.info("EULA set to true complete")
        return True

from __future__ import annotations
import platform
from typing import List, Optional
from .errors import MissingRuntimeError, ProcessError, UnsupportedPlatformError
from .logging_setup import get_logger
from .process_runner import ProcessRunner
from .settings import Settings

log = get_logger("mc.autosetup.env")

INTERPRETERS = {
    "Windows": "py",
    "Linux": "python3",
}

def companion_interpreter(system: Optional[str] = None) -> str:
    system = system or platform.system()
    try:
        return INTERPRETERS[system]
    except KeyError:
        raise UnsupportedPlatformError(f"OS {system} is currently not supported") from None

def installed_packages(freeze_output: str) -> List[str]:
    return [line.split("==")[0].strip() for line in freeze_output.splitlines() if line.strip()]

class EnvironmentProbe:
    def __init__(self, settings: Settings, runner: ProcessRunner, system: Optional[str] = None):
        self.settings = settings
        self.runner = runner
        self.system = system

    def probe(self) -> str:
        log.debug("Check environment...")
        python = companion_interpreter(self.system)

        try:
            self.runner.run("java", [self.settings.java_bin, "-version"],
                            timeout=self.settings.process_timeout, check=False)
        except ProcessError as e:
            log.warning("Java is needed")
            raise MissingRuntimeError(f"System can't find java ({self.settings.java_bin})") from e

        freeze = self.runner.run("pip-list", [python, "-m", "pip", "list", "--format", "freeze"],
                                 timeout=self.settings.process_timeout)
        package = self.settings.management_package
        names = {name.lower() for name in installed_packages(freeze.stdout)}
        if package.lower() not in names:
            log.warning("%s package not detected", package)
            log.info("Installing %s...", package)
            self.runner.run("pip-install", [python, "-m", "pip", "install", package],
                            timeout=self.settings.process_timeout)
        return python

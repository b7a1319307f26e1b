from __future__ import annotations
import subprocess
import threading
import time
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple
from .errors import ProcessError
from .logging_setup import get_logger

log = get_logger("mc.autosetup.proc")

@dataclass
class ProcessResult:
    name: str
    returncode: int
    stdout: str
    stderr: str

def _log_output(name: str, text: str) -> None:
    for line in text.splitlines():
        log.debug("[%s] %s", name, line)

class ProcessRunner:
    """Runs child processes one at a time, each with a deadline and a
    cancellation flag that ``cancel()`` sets from any thread."""

    def __init__(self, poll_interval: float = 0.5, kill_grace: float = 10.0):
        self.poll_interval = poll_interval
        self.kill_grace = kill_grace
        self._cancel = threading.Event()

    def cancel(self) -> None:
        self._cancel.set()

    @property
    def cancelled(self) -> bool:
        return self._cancel.is_set()

    def run(self, name: str, cmd: List[str], *, cwd: Optional[Path] = None,
            timeout: Optional[float] = None, check: bool = True) -> ProcessResult:
        log.debug("Running %s: %s", name, " ".join(cmd))
        try:
            proc = subprocess.Popen(cmd, cwd=str(cwd) if cwd else None, stdout=subprocess.PIPE,
                                    stderr=subprocess.PIPE, text=True)
        except OSError as e:
            raise ProcessError(f"{name}: failed to start {cmd[0]}: {e}") from e

        deadline = None if timeout is None else time.monotonic() + timeout
        try:
            stdout, stderr = self._wait(name, proc, deadline, timeout)
        except KeyboardInterrupt:
            self._stop(name, proc)
            raise

        _log_output(name, stdout or "")
        _log_output(name, stderr or "")
        result = ProcessResult(name=name, returncode=proc.returncode, stdout=stdout or "", stderr=stderr or "")
        if check and proc.returncode != 0:
            raise ProcessError(f"{name} failed (rc={proc.returncode})", returncode=proc.returncode)
        return result

    def _stop(self, name: str, proc: subprocess.Popen) -> None:
        if proc.poll() is not None:
            return
        log.info("Stopping %s (pid=%s)", name, proc.pid)
        proc.terminate()
        try:
            proc.communicate(timeout=self.kill_grace)
        except subprocess.TimeoutExpired:
            log.warning("Killing %s (pid=%s)", name, proc.pid)
            proc.kill()
            proc.communicate()

    def _wait(self, name: str, proc: subprocess.Popen, deadline: Optional[float],
              timeout: Optional[float]) -> Tuple[str, str]:
        while True:
            if self._cancel.is_set():
                self._stop(name, proc)
                raise ProcessError(f"{name}: cancelled")
            wait = self.poll_interval
            if deadline is not None:
                remaining = deadline - time.monotonic()
                if remaining <= 0:
                    self._stop(name, proc)
                    raise ProcessError(f"{name}: timed out after {timeout:g}s")
                wait = min(wait, remaining)
            try:
                return proc.communicate(timeout=wait)
            except subprocess.TimeoutExpired:
                continue

"""
Shared fixtures: a scripted prompter, an in-memory catalog and a process
runner that records commands instead of spawning them.
"""

import pytest
from pathlib import Path
from typing import Callable, Dict, List, Optional

from mc_autosetup.catalog import CatalogClient, VersionCatalog, VersionEntry, VersionMetadata
from mc_autosetup.process_runner import ProcessResult
from mc_autosetup.prompts import Prompter
from mc_autosetup.settings import Settings
from mc_autosetup.workdir import WorkDirectory


class ScriptedPrompter(Prompter):
    """Answers questions from per-key queues; an unexpected question fails the test."""

    def __init__(self, **answers):
        super().__init__()
        self.answers: Dict[str, List] = {k: list(v) if isinstance(v, list) else [v] for k, v in answers.items()}
        self.asked: List[str] = []

    def _next(self, key: str):
        self.asked.append(key)
        queue = self.answers.get(key)
        if not queue:
            raise AssertionError(f"unexpected prompt {key!r}")
        return queue.pop(0)

    def text(self, key, message, default=""):
        return str(self._next(key)).strip()

    def confirm(self, key, message, default=False):
        return bool(self._next(key))

    def choice(self, key, message, options):
        return str(self._next(key))


class FakeCatalog(CatalogClient):
    def __init__(self, settings: Settings, latest: str, versions: List[str],
                 server_urls: Optional[Dict[str, str]] = None):
        super().__init__(settings)
        self.catalog = VersionCatalog.model_validate({
            "latest": {"release": latest, "snapshot": latest + "-pre"},
            "versions": [{"id": v, "url": f"https://meta.example/v1/packages/{v}.json"} for v in versions],
        })
        self.server_urls = server_urls or {}
        self.fetches = 0

    def fetch(self) -> VersionCatalog:
        self.fetches += 1
        return self.catalog

    def fetch_metadata(self, entry: VersionEntry) -> VersionMetadata:
        url = self.server_urls.get(entry.id, f"https://piston-data.mojang.com/v1/objects/abc123/server.jar")
        return VersionMetadata.model_validate({"downloads": {"server": {"url": url}}})


class RecordingRunner:
    """Stands in for ProcessRunner. ``effects`` maps a process name to a
    callable run before the result is returned (e.g. to create files)."""

    def __init__(self, stdout: Optional[Dict[str, str]] = None,
                 effects: Optional[Dict[str, Callable]] = None,
                 missing: Optional[List[str]] = None):
        self.calls: List[dict] = []
        self.stdout = stdout or {}
        self.effects = effects or {}
        self.missing = missing or []
        self.cancelled = False

    def run(self, name, cmd, *, cwd=None, timeout=None, check=True):
        from mc_autosetup.errors import ProcessError

        self.calls.append({"name": name, "cmd": list(cmd), "cwd": cwd, "timeout": timeout, "check": check})
        if cmd[0] in self.missing:
            raise ProcessError(f"{name}: failed to start {cmd[0]}")
        if name in self.effects:
            self.effects[name](cmd, cwd)
        return ProcessResult(name=name, returncode=0, stdout=self.stdout.get(name, ""), stderr="")

    def cancel(self):
        self.cancelled = True

    def names(self) -> List[str]:
        return [c["name"] for c in self.calls]


@pytest.fixture
def settings(tmp_path):
    return Settings(base_dir=tmp_path)


@pytest.fixture
def workdir(tmp_path):
    root = tmp_path / "server_root"
    root.mkdir()
    return WorkDirectory(root)


@pytest.fixture
def fake_download(monkeypatch):
    """Replace HTTP downloads with a local write; returns the list of URLs fetched."""
    fetched = []

    def _download(url, dest, *, timeout=60.0):
        fetched.append(url)
        Path(dest).write_bytes(b"PK\x03\x04 fake jar")
        return Path(dest)

    monkeypatch.setattr("mc_autosetup.loaders.vanilla.download", _download)
    monkeypatch.setattr("mc_autosetup.loaders.fabric.download", _download)
    return fetched


MCDR_CONFIG_LINES = (
    ["# Configuration file for MCDReforged"]
    + [f"# comment {i}" for i in range(1, 19)]
    + ["start_command: java -Xms1G -Xmx2G -jar minecraft_server.jar nogui"]
    + [f"# comment {i}" for i in range(20, 77)]
    + ["disable_console_thread: false"]
    + ["# trailer"]
)

PERMISSION_LINES = [
    "# Permission file",
    "default_level: user",
    "# level owners",
    "",
    "# level admins",
    "admin: []",
    "# helpers",
    "helper: []",
    "# users",
    "user: []",
    "# guests",
    "guest: []",
    "owner:",
    "- Steve",
]

EULA_LINES = [
    "#By changing the setting below to TRUE you are indicating your agreement to our EULA.",
    "#Mon Oct 19 12:00:00 UTC 2026",
    "eula=false",
]


def write_lines(path: Path, lines: List[str]) -> Path:
    path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
    return path

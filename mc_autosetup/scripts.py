from __future__ import annotations
import os
import stat
from pathlib import Path
from typing import Dict, List
from .logging_setup import get_logger
from .settings import Settings
from .workdir import WorkDirectory

log = get_logger("mc.autosetup.scripts")

WINDOWS_SCRIPT = "start.bat"
POSIX_SCRIPT = "start.sh"

def start_command(stem: str, settings: Settings) -> str:
    return f"{settings.java_bin} -Xms{settings.xms} -Xmx{settings.xmx} -jar {stem}.jar nogui"

def management_command(python: str, package: str = "mcdreforged") -> str:
    return f"{python} -m {package} start"

def _write_script(path: Path, lines: List[str]) -> None:
    path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")

def generate_launch_scripts(workdir: WorkDirectory, command: str) -> Dict[str, Path]:
    log.info("Creating launch scripts...")
    bat = workdir.path(WINDOWS_SCRIPT)
    sh = workdir.path(POSIX_SCRIPT)
    _write_script(bat, ["@echo off", command, ""])
    _write_script(sh, ["#!/bin/bash", command, ""])
    if os.name == "posix":
        sh.chmod(sh.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return {"windows": bat, "posix": sh}

def launch_script_for(workdir: WorkDirectory, system: str) -> Path:
    if system == "Windows":
        return workdir.path(WINDOWS_SCRIPT)
    return workdir.path(POSIX_SCRIPT)

from __future__ import annotations
import re
from pathlib import Path
from .errors import WorkspaceError, WorkspaceExistsError
from .logging_setup import get_logger
from .workdir import WorkDirectory

log = get_logger("mc.autosetup.workspace")

_NON_WORD = re.compile(r"\W")
DEFAULT_FOLDER = "minecraft_server"

def sanitize_name(raw: str, fallback: str = DEFAULT_FOLDER) -> str:
    name = _NON_WORD.sub("", raw.strip().replace(" ", "_")).lower()
    return name or fallback

def initialize_workspace(base: Path, raw_name: str, fallback: str = DEFAULT_FOLDER) -> WorkDirectory:
    target = Path(base) / sanitize_name(raw_name, fallback)
    if target.exists():
        log.warning("Folder already exists: %s", target)
        raise WorkspaceExistsError(f"Folder already exists: {target}")
    try:
        target.mkdir()
    except OSError as e:
        raise WorkspaceError(f"Something failed while the folder was being created: {e}") from e
    target = target.resolve()
    log.info("Making directory: %s", target)
    return WorkDirectory(target)

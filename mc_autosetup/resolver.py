from __future__ import annotations
from typing import Optional
from .catalog import CatalogClient, VersionEntry
from .errors import UnsupportedVersionError
from .logging_setup import get_logger
from .prompts import Prompter
from .versions import is_supported_version, is_valid_version_string

log = get_logger("mc.autosetup.resolver")

VERSION_PROMPT = "Which minecraft version do you want to use? [latest]"

class LoaderResolver:
    """Turns a requested version string into a catalog entry, asking again
    until the catalog knows it."""

    def __init__(self, catalog: CatalogClient, prompter: Prompter):
        self.catalog = catalog
        self.prompter = prompter

    def resolve(self, requested: Optional[str] = None) -> VersionEntry:
        answer = requested
        while True:
            if answer is None:
                answer = self.prompter.text("mc_version", VERSION_PROMPT)
            version = answer.strip() or self.catalog.latest_release()
            answer = None

            if not is_valid_version_string(version):
                log.warning("Version provided contain invalid characters")
                continue
            if not is_supported_version(version):
                raise UnsupportedVersionError(f"Version {version} is currently unsupported by the script")

            log.info("Version selected: %s", version)
            entry = self.catalog.fetch().find(version)
            if entry is not None:
                return entry
            log.warning("Version not found")

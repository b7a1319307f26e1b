from __future__ import annotations
from typing import Any, Dict, Optional, Sequence
import click
from .logging_setup import get_logger

log = get_logger("mc.autosetup.prompts")

class Prompter:
    """Terminal questions. Answers given up front (CLI options) are used once
    per key instead of asking."""

    def __init__(self, presets: Optional[Dict[str, Any]] = None):
        self.presets: Dict[str, Any] = dict(presets or {})

    def _preset(self, key: str):
        if key in self.presets:
            value = self.presets.pop(key)
            log.debug("Using preset answer for %s: %r", key, value)
            return True, value
        return False, None

    def text(self, key: str, message: str, default: str = "") -> str:
        found, value = self._preset(key)
        if found:
            return str(value).strip()
        answer = click.prompt(f" INPUT {message}", default=default, show_default=False)
        return str(answer).strip()

    def confirm(self, key: str, message: str, default: bool = False) -> bool:
        found, value = self._preset(key)
        if found:
            return bool(value)
        return click.confirm(f" INPUT {message}", default=default)

    def choice(self, key: str, message: str, options: Sequence[str]) -> str:
        found, value = self._preset(key)
        if found:
            return str(value)
        return click.prompt(f" INPUT {message}", type=click.Choice(list(options), case_sensitive=False))

"""
Config patching for generated server files.

Two ways to change a value:

- ``patch_line`` swaps one line at a fixed zero-based index. It knows
  nothing about the file format, so the offsets only hold for the config
  schema they were taken from (see ``LEGACY_LINE_OFFSETS``).
- ``ConfigPatcher.set`` in ``key`` mode parses the document (YAML, or
  ``key=value`` properties such as eula.txt) and writes by key path.
"""
from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Tuple
import yaml
from .errors import ConfigKeyError, LineOutOfRangeError, PatchError
from .logging_setup import get_logger

log = get_logger("mc.autosetup.patch")

# (file name, key) -> (line index, line template)
LEGACY_LINE_OFFSETS: Dict[Tuple[str, str], Tuple[int, str]] = {
    ("config.yml", "start_command"): (19, "start_command: {value}"),
    ("config.yml", "disable_console_thread"): (77, "disable_console_thread: {value}"),
    ("permission.yml", "owner"): (13, "- {value}"),
    ("eula.txt", "eula"): (2, "eula={value}"),
}

YAML_SUFFIXES = {".yml", ".yaml"}


@dataclass(frozen=True)
class ConfigPatch:
    path: Path
    line_index: int
    replacement: str

    def apply(self) -> None:
        patch_line(self.path, self.line_index, self.replacement)


def _read_lines(path: Path) -> List[str]:
    try:
        return Path(path).read_text(encoding="utf-8").splitlines()
    except OSError as e:
        raise PatchError(f"Cannot read {path}: {e}") from e


def _write_lines(path: Path, lines: List[str]) -> None:
    try:
        Path(path).write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
    except OSError as e:
        raise PatchError(f"Cannot write {path}: {e}") from e


def patch_line(path: Path, index: int, replacement: str) -> None:
    lines = _read_lines(path)
    if index < 0 or index >= len(lines):
        raise LineOutOfRangeError(path, index, len(lines))
    lines[index] = replacement
    _write_lines(path, lines)
    log.debug("Patched %s:%d -> %s", path, index, replacement)


def _render(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ", ".join(_render(v) for v in value)
    return str(value)


def set_yaml_key(path: Path, key_path: str, value: Any) -> None:
    try:
        doc = yaml.safe_load(Path(path).read_text(encoding="utf-8"))
    except OSError as e:
        raise PatchError(f"Cannot read {path}: {e}") from e
    except yaml.YAMLError as e:
        raise PatchError(f"{path} is not valid YAML: {e}") from e
    if not isinstance(doc, dict):
        raise ConfigKeyError(f"{path}: document root is not a mapping")

    *parents, leaf = key_path.split(".")
    node = doc
    for part in parents:
        child = node.get(part)
        if not isinstance(child, dict):
            raise ConfigKeyError(f"{path}: no mapping at {part!r} in {key_path!r}")
        node = child
    if leaf not in node:
        raise ConfigKeyError(f"{path}: key {key_path!r} not found")
    node[leaf] = value

    try:
        Path(path).write_text(
            yaml.safe_dump(doc, sort_keys=False, allow_unicode=True, default_flow_style=False),
            encoding="utf-8",
        )
    except OSError as e:
        raise PatchError(f"Cannot write {path}: {e}") from e


def set_property(path: Path, key: str, value: Any) -> None:
    lines = _read_lines(path)
    for i, line in enumerate(lines):
        stripped = line.strip()
        if not stripped or stripped.startswith("#") or "=" not in stripped:
            continue
        if stripped.split("=", 1)[0].strip() == key:
            lines[i] = f"{key}={_render(value)}"
            _write_lines(path, lines)
            return
    raise ConfigKeyError(f"{path}: property {key!r} not found")


class ConfigPatcher:
    def __init__(self, mode: str = "key"):
        if mode not in ("key", "line"):
            raise ValueError(f"unknown patch mode {mode!r}")
        self.mode = mode

    def set(self, path: Path, key: str, value: Any) -> None:
        path = Path(path)
        log.debug("Setting %s in %s (%s mode)", key, path.name, self.mode)
        if self.mode == "line":
            self._set_by_offset(path, key, value)
        elif path.suffix.lower() in YAML_SUFFIXES:
            set_yaml_key(path, key, value)
        else:
            set_property(path, key, value)

    def _set_by_offset(self, path: Path, key: str, value: Any) -> None:
        try:
            index, template = LEGACY_LINE_OFFSETS[(path.name, key)]
        except KeyError:
            raise ConfigKeyError(f"No line offset known for {key!r} in {path.name}") from None
        if isinstance(value, (list, tuple)):
            # the legacy layout holds a single list entry
            value = value[0]
        ConfigPatch(path, index, template.format(value=_render(value))).apply()

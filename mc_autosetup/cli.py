from __future__ import annotations
import argparse
from pathlib import Path
from typing import Any, Dict
import click
from .errors import SetupError
from .logging_setup import get_logger, setup_logging
from .orchestrator import Orchestrator
from .prompts import Prompter
from .settings import Settings

log = get_logger("mc.autosetup.cli")

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="mc-autosetup",
                                     description="Set up a local Minecraft server (Vanilla or Fabric, optional MCDReforged)")
    parser.add_argument("--base-dir", type=Path, help="Directory the server folder is created in")
    parser.add_argument("--name", help="Server folder name")
    parser.add_argument("--loader", choices=["vanilla", "fabric"], help="Server loader")
    parser.add_argument("--mc-version", help="Minecraft version (empty for latest)")
    mcdr = parser.add_mutually_exclusive_group()
    mcdr.add_argument("--mcdr", dest="mcdr", action="store_true", default=None, help="Install MCDReforged")
    mcdr.add_argument("--no-mcdr", dest="mcdr", action="store_false", help="Skip MCDReforged")
    parser.add_argument("--owner", help="MCDReforged owner nickname")
    boot = parser.add_mutually_exclusive_group()
    boot.add_argument("--first-boot", dest="first_boot", action="store_true", default=None,
                      help="Start the server once and set eula=true")
    boot.add_argument("--no-first-boot", dest="first_boot", action="store_false")
    parser.add_argument("--patch-mode", choices=["key", "line"], help="How generated configs are patched")
    parser.add_argument("--log-level", help="DEBUG, INFO, WARNING, ERROR")
    return parser

def presets_from_args(args: argparse.Namespace) -> Dict[str, Any]:
    presets: Dict[str, Any] = {}
    for key, value in (
        ("name", args.name),
        ("loader", args.loader),
        ("mc_version", args.mc_version),
        ("mcdr", args.mcdr),
        ("owner", args.owner),
        ("first_boot", args.first_boot),
    ):
        if value is not None:
            presets[key] = value
    return presets

def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    overrides: Dict[str, Any] = {}
    if args.base_dir is not None:
        overrides["base_dir"] = args.base_dir
    if args.patch_mode:
        overrides["patch_mode"] = args.patch_mode
    if args.log_level:
        overrides["log_level"] = args.log_level
    settings = Settings(**overrides)
    setup_logging(settings)

    orch = Orchestrator(settings, Prompter(presets_from_args(args)))
    try:
        orch.run()
    except SetupError as e:
        if e.exit_code == 0:
            log.warning("%s", e.message)
        else:
            log.error("%s", e.message)
        return e.exit_code
    except (KeyboardInterrupt, click.exceptions.Abort):
        orch.runner.cancel()
        log.error("Interrupted")
        return 130
    return 0

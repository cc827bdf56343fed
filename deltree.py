from __future__ import annotations

import json
import logging
import os
import platform
import sys
from pathlib import Path

from commands import commandHelper
from commands.models import ResolutionFailure


DELTREE_VERSION = "0.1.0"
CONFIG_DIR = Path.home() / ".deltree"
CONFIG_PATH = CONFIG_DIR / ".deltree.conf"
DEBUG_ENV = "DELTREE_DEBUG"
DELTREE_NAME = "deltree"
DELTREE_DISPLAY_NAME = f"{DELTREE_NAME} v{DELTREE_VERSION}"

USAGE = "Usage: deltree [-f|--force] SOURCE_PATH"

DEFAULT_CONFIG: dict[str, object] = {
    "color": True,
    "log_level": "WARNING",
}

logger = logging.getLogger(__name__)


if platform.system() == "Windows":
    try:
        import colorama

        try:
            colorama.just_fix_windows_console()
        except AttributeError:
            colorama.init()
    except Exception:
        pass


class UsageError(Exception):
    pass


def _default_config_copy() -> dict[str, object]:
    return json.loads(json.dumps(DEFAULT_CONFIG))


def load_config() -> dict[str, object]:
    try:
        with CONFIG_PATH.open("r", encoding="utf-8") as handle:
            loaded = json.load(handle)
        if isinstance(loaded, dict):
            config = _default_config_copy()
            config.update(loaded)
            return config
        raise ValueError("Configuration root must be an object")
    except FileNotFoundError:
        config = _default_config_copy()
        try:
            CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
            with CONFIG_PATH.open("w", encoding="utf-8") as handle:
                json.dump(config, handle, indent=2)
        except OSError as exc:
            print(f"deltree: Could not write default config ({CONFIG_PATH}): {exc}", file=sys.stderr)
        return config
    except (json.JSONDecodeError, ValueError) as exc:
        print(f"deltree: Failed to parse config ({CONFIG_PATH}): {exc}", file=sys.stderr)
    except OSError as exc:
        print(f"deltree: Could not read config ({CONFIG_PATH}): {exc}", file=sys.stderr)
    return _default_config_copy()


def configure_logging(config: dict[str, object]) -> None:
    if os.environ.get(DEBUG_ENV):
        level = logging.DEBUG
    else:
        name = config.get("log_level", "WARNING")
        level = logging.getLevelName(name.upper()) if isinstance(name, str) else logging.WARNING
        if not isinstance(level, int):
            level = logging.WARNING

    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def parse_args(argv: list[str]) -> tuple[str | None, bool, str | None]:
    """Returns ``(source, force, action)`` where action is "help" or "version"."""
    parts = []
    force = False
    parsing_flags = True
    for arg in argv:
        if parsing_flags and arg == "--":
            parsing_flags = False
            continue
        if parsing_flags and arg in {"-h", "--help"}:
            return None, force, "help"
        if parsing_flags and arg in {"-v", "--version", "-version"}:
            return None, force, "version"
        if parsing_flags and arg == "--force":
            force = True
            continue
        if parsing_flags and arg.startswith("-") and len(arg) > 1:
            for ch in arg[1:]:
                if ch == "f":
                    force = True
                else:
                    raise UsageError(f"unknown option '-{ch}'")
            continue
        parts.append(arg)

    if parts == ["version"]:
        return None, force, "version"
    if not parts:
        raise UsageError("missing operand SOURCE_PATH")
    if len(parts) > 1:
        raise UsageError(f"expected 1 positional argument, got {len(parts)} instead")
    return parts[0], force, None


def resolve_target(raw: str) -> Path:
    expanded = os.path.expanduser(os.path.expandvars(raw))
    try:
        return Path(expanded).resolve(strict=True)
    except (OSError, RuntimeError) as exc:
        raise ResolutionFailure(raw, str(exc)) from exc


def main(argv: list[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv

    try:
        source, force, action = parse_args(argv)
    except UsageError as exc:
        print(f"deltree: {exc}")
        print(USAGE)
        return 2

    if action == "help":
        print(USAGE)
        print()
        print("Recursively delete SOURCE_PATH after asking for confirmation.")
        print()
        print("  -f, --force    delete without asking")
        print("  -h, --help     show this message and exit")
        print("  -v, --version  show the version and exit")
        return 0
    if action == "version":
        print(DELTREE_DISPLAY_NAME)
        return 0

    config = load_config()
    configure_logging(config)

    try:
        target = resolve_target(source)
    except ResolutionFailure as exc:
        print(f"deltree: {exc}")
        return 1
    logger.debug("resolved %r to %s", source, target)

    try:
        return commandHelper.run(
            target,
            force=force,
            input_source=sys.stdin,
            output_sink=sys.stdout,
            color=bool(config.get("color", True)),
        )
    except KeyboardInterrupt:
        print()
        return 130


if __name__ == "__main__":
    sys.exit(main())

"""rdrop - dropdown terminal toggle for Hyprland (cli entry point)."""

import argparse
import asyncio
import contextlib
import pathlib
import sys
from collections.abc import Sequence

import shtab

from . import VERSION
from .config_loader import ConfigLoader
from .constants import CONFIG_FILE
from .dispatch import DispatchGateway
from .lock import invocation_lock
from .logging_setup import LogSettings, get_logger, init_logger
from .models import Action, ConfigError, DispatchError, ExitCode, LockError, NotFoundError, QueryError
from .state import StateQuery
from .toggle import DropdownToggle

__all__ = ["get_parser", "main", "run"]

TOML_FILE = {
    "bash": "_shtab_rdrop_compgen_TOMLFiles",
    "zsh": "_files -g '(*.toml|*.TOML)'",
    "tcsh": "f:*.toml",
}

PREAMBLE = {
    "bash": """
# $1=COMP_WORDS[1]
_shtab_rdrop_compgen_TOMLFiles() {
  compgen -d -- $1  # recurse into subdirs
  compgen -f -X '!*?.toml' -- $1
  compgen -f -X '!*?.TOML' -- $1
}
""",
    "zsh": "",
    "tcsh": "",
}

# checked in order, NotFoundError before its QueryError parent
ERROR_CODES: tuple[tuple[type[Exception], ExitCode], ...] = (
    (ConfigError, ExitCode.CONFIG_ERROR),
    (NotFoundError, ExitCode.NOT_FOUND),
    (QueryError, ExitCode.QUERY_ERROR),
    (DispatchError, ExitCode.DISPATCH_ERROR),
    (LockError, ExitCode.LOCKED),
)


def get_parser() -> argparse.ArgumentParser:
    """Parses the command line arguments."""
    parser = argparse.ArgumentParser(prog="rdrop", description="Terminal dropdown utils for Hyprland (based on hyprctl)", allow_abbrev=False)
    parser.add_argument(
        "-c",
        "--config",
        help=f"Use a different configuration file (default: {CONFIG_FILE})",
        metavar="filename",
        type=pathlib.Path,
    ).complete = TOML_FILE  # type: ignore[attr-defined]
    parser.add_argument(
        "--debug",
        help="Enable debug mode, optionally logging to a file too",
        metavar="filename",
        nargs="?",
        const="",
        default=None,
    ).complete = shtab.FILE  # type: ignore[attr-defined]
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    shtab.add_argument_to(parser, preamble=PREAMBLE)
    return parser


async def run(config_filename: pathlib.Path | None = None) -> Action:
    """Load the configuration and toggle the dropdown window once."""
    log = get_logger()
    config = await ConfigLoader(get_logger("config")).load(config_filename)
    query = StateQuery(get_logger("query"))
    gateway = DispatchGateway(config.class_name, get_logger("dispatch"))
    toggle = DropdownToggle(config, query, gateway, log)

    with invocation_lock(config.class_name, log) if config.lock else contextlib.nullcontext():
        return await toggle.run()


def exit_code_for(error: Exception) -> ExitCode:
    """Return the exit code matching `error`."""
    for error_type, code in ERROR_CODES:
        if isinstance(error, error_type):
            return code
    return ExitCode.UNEXPECTED


def main(argv: Sequence[str] | None = None) -> None:
    """Run the command."""
    args = get_parser().parse_args(argv)
    init_logger(LogSettings(debug=args.debug is not None, filename=args.debug or None))
    log = get_logger("startup")

    code = ExitCode.SUCCESS
    try:
        action = asyncio.run(run(args.config))
    except KeyboardInterrupt:
        code = ExitCode.INTERRUPTED
    except (ConfigError, QueryError, DispatchError, LockError) as e:
        code = exit_code_for(e)
        log.critical("%s: %s", type(e).__name__, e)
    except Exception:  # pylint: disable=W0718
        code = ExitCode.UNEXPECTED
        log.critical("Unhandled exception:", exc_info=True)
    else:
        log.debug("done: %s", action)
    sys.exit(code)


if __name__ == "__main__":
    main()

"""Interact with Hyprland through the `hyprctl` command."""

__all__ = [
    "TransportError",
    "hyprctl_dispatch",
    "hyprctl_json",
    "run_hyprctl",
]

import asyncio
import json
from collections.abc import Sequence
from logging import Logger
from typing import Any

from .constants import HYPRCTL
from .models import DispatchError, QueryError, RdropError


class TransportError(RdropError):
    """`hyprctl` could not be launched or exited with an error."""

    def __init__(self, args: Sequence[str], returncode: int | None, stderr: str) -> None:
        self.args_list = list(args)
        self.returncode = returncode
        self.stderr = stderr
        detail = stderr or "no output"
        if returncode is None:
            super().__init__(f"cannot run {HYPRCTL}: {detail}")
        else:
            super().__init__(f"{HYPRCTL} {' '.join(args)} exited with status {returncode}: {detail}")


async def run_hyprctl(args: Sequence[str], *, log: Logger) -> str:
    """Run `hyprctl` with `args`, wait for it and return its output.

    Args:
        args: arguments passed to the binary, in order
        log: logger to use

    Raises:
        TransportError: if the process can't be started or returns non-zero
    """
    log.debug("%s %s", HYPRCTL, " ".join(args))
    try:
        proc = await asyncio.create_subprocess_exec(
            HYPRCTL,
            *args,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
    except OSError as e:
        raise TransportError(args, None, str(e)) from e

    stdout, stderr = await proc.communicate()
    if proc.returncode != 0:
        raise TransportError(args, proc.returncode, stderr.decode("utf-8", errors="replace").strip())
    return stdout.decode("utf-8", errors="replace")


async def hyprctl_json(request: str, *, log: Logger) -> Any:  # noqa: ANN401
    """Run a `hyprctl -j` query and return the decoded JSON.

    Args:
        request: the query name, eg. "clients" or "monitors"
        log: logger to use

    Raises:
        QueryError: on transport failure or malformed output
    """
    try:
        output = await run_hyprctl(["-j", request], log=log)
    except TransportError as e:
        raise QueryError(f"{request} query failed: {e}") from e
    try:
        return json.loads(output)
    except json.JSONDecodeError as e:
        log.debug("unparsable %s output: %r", request, output[:200])
        raise QueryError(f"{request} query returned invalid JSON: {e}") from e


async def hyprctl_dispatch(args: Sequence[str], *, log: Logger) -> None:
    """Run one `hyprctl dispatch` command.

    Hyprland answers "ok" on success. Some errors are reported as text with a
    zero exit status, those are treated as failures too.

    Args:
        args: dispatcher name followed by its arguments
        log: logger to use

    Raises:
        DispatchError: if the dispatcher failed
    """
    try:
        output = await run_hyprctl(["dispatch", "--", *args], log=log)
    except TransportError as e:
        raise DispatchError(f"{args[0]} failed: {e}") from e
    response = "".join(output.split("\n")).strip()
    if response != "ok":
        log.warning("FAILED %s: %s", " ".join(args), response)
        raise DispatchError(f"{args[0]} failed: {response or 'empty response'}")

"""Building and executing the command line for a chosen menu entry."""

from __future__ import annotations

import enum
import logging
import os
from dataclasses import dataclass
from typing import NoReturn

__all__ = [
    "PathType",
    "Executable",
    "assemble_command",
    "i3_assemble_command",
    "execute_app",
]

logger = logging.getLogger(__name__)

_SHELL = "/bin/sh"


class PathType(enum.Enum):
    """How the first argument of an :class:`Executable` is resolved."""

    PATHNAME = "pathname"  # used as given
    FILE = "file"  # looked up in $PATH


@dataclass(frozen=True)
class Executable:
    """A program invocation: its argument vector and how to find the program."""

    args: tuple[str, ...]
    path_type: PathType

    def create_argv(self) -> list[str]:
        """Return the argument vector to hand to exec."""
        return list(self.args)

    def cmdline_string(self) -> str:
        """Return the arguments joined by spaces, for display and logging."""
        return " ".join(self.args)


def assemble_command(raw_command: str, terminal: str, is_custom: bool) -> Executable:
    """Wrap ``raw_command`` in a shell, and in ``terminal`` if it is not empty.

    Commands from desktop entries are prefixed with ``exec`` so that the shell
    is replaced by the program; custom commands are left as typed because they
    may be compound shell expressions.
    """
    if not is_custom:
        raw_command = "exec " + raw_command
    if not terminal:
        return Executable((_SHELL, "-c", raw_command), PathType.PATHNAME)
    return Executable((terminal, "-e", _SHELL, "-c", raw_command), PathType.FILE)


def i3_assemble_command(raw_command: str, terminal: str, is_custom: bool) -> str:
    """Return the command string to send over i3 IPC.

    Without a terminal the command is passed through unchanged.
    """
    if not terminal:
        return raw_command
    command = "exec " + raw_command if is_custom else raw_command
    return f"{terminal} -e {_SHELL} -c '{command}'"


def execute_app(executable: Executable) -> NoReturn:
    """Replace the current process with ``executable``.

    If the program cannot be executed, an error is logged and the process
    exits with status 1.
    """
    cmdline = executable.cmdline_string()
    logger.info("Executing command: %s", cmdline)
    argv = executable.create_argv()
    try:
        if executable.path_type is PathType.PATHNAME:
            os.execv(argv[0], argv)
        else:
            os.execvp(argv[0], argv)
    except OSError as exc:
        logger.error("Couldn't execute command: %s (%s)", cmdline, exc)
    os._exit(1)
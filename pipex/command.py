"""Parsing command strings and locating their executables on PATH."""

from __future__ import annotations

import os
from collections.abc import Mapping, Sequence

from pipex.textutil import split


class CommandNotFoundError(LookupError):
    """Raised when a command cannot be found in any PATH directory."""

    def __init__(self, name: str) -> None:
        super().__init__(f"command not found: {name}")
        self.name = name


def get_path(env: Mapping[str, str]) -> str | None:
    """Return the PATH value from ``env``, or None when it is not set."""
    return env.get("PATH")


def parse_command(text: str) -> list[str]:
    """Split a command string into its words on single spaces."""
    return split(text, " ")


def find_command_path(argv: Sequence[str], env: Mapping[str, str]) -> str:
    """Return the first executable ``<dir>/<argv[0]>`` for the PATH in ``env``.

    Directories are tried in PATH order; empty entries are ignored.
    """
    if not argv:
        raise CommandNotFoundError("")
    name = argv[0]
    for directory in split(get_path(env), ":"):
        candidate = f"{directory}/{name}"
        if os.access(candidate, os.X_OK):
            return candidate
    raise CommandNotFoundError(name)
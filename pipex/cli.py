"""Run ``< infile cmd1 | cmd2 > outfile`` from four arguments."""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Mapping, Sequence
from contextlib import ExitStack
from typing import BinaryIO

from pipex.command import CommandNotFoundError, find_command_path, parse_command

COMMAND_NOT_FOUND_STATUS = 127


class PipelineError(OSError):
    """Raised when the pipeline's files or processes cannot be set up."""


def open_infile(path: str) -> BinaryIO:
    """Open ``path`` for reading."""
    try:
        return open(path, "rb")
    except OSError as exc:
        raise PipelineError(f"Open error: {path}: {exc.strerror}") from exc


def open_outfile(path: str) -> BinaryIO:
    """Create or truncate ``path`` with mode 0644 and open it for writing."""
    try:
        fd = os.open(path, os.O_CREAT | os.O_WRONLY | os.O_TRUNC, 0o644)
    except OSError as exc:
        raise PipelineError(f"Write error: {path}: {exc.strerror}") from exc
    return os.fdopen(fd, "wb")


def _resolve(text: str, env: Mapping[str, str]) -> tuple[list[str], str | None]:
    argv = parse_command(text)
    try:
        return argv, find_command_path(argv, env)
    except CommandNotFoundError as exc:
        print(f"pipex: Path error: {exc}", file=sys.stderr)
        return argv, None


def _spawn(argv: list[str], executable: str, env: Mapping[str, str], **streams):
    try:
        return subprocess.Popen(argv, executable=executable, env=dict(env), **streams)
    except OSError as exc:
        raise PipelineError(f"Execve error: {argv[0]}: {exc.strerror}") from exc


def run_pipeline(
    infile: str,
    first: str,
    second: str,
    outfile: str,
    env: Mapping[str, str] | None = None,
) -> int:
    """Feed ``infile`` through ``first`` then ``second`` into ``outfile``.

    Both files are opened before either error is reported. A command that
    cannot be found is reported on stderr and its stage is skipped. Returns
    the exit status of the second command, or 127 when it was not found.
    """
    env = dict(os.environ) if env is None else dict(env)
    with ExitStack() as stack:
        failure: PipelineError | None = None
        source = sink = None
        try:
            source = stack.enter_context(open_infile(infile))
        except PipelineError as exc:
            failure = exc
        try:
            sink = stack.enter_context(open_outfile(outfile))
        except PipelineError as exc:
            failure = failure or exc
        if failure is not None:
            raise failure

        first_argv, first_path = _resolve(first, env)
        second_argv, second_path = _resolve(second, env)

        first_proc = None
        if first_path is not None:
            first_proc = _spawn(
                first_argv,
                first_path,
                env,
                stdin=source,
                stdout=subprocess.PIPE if second_path else subprocess.DEVNULL,
            )
        try:
            second_proc = None
            if second_path is not None:
                upstream = first_proc.stdout if first_proc else subprocess.DEVNULL
                second_proc = _spawn(
                    second_argv, second_path, env, stdin=upstream, stdout=sink
                )
        except PipelineError:
            if first_proc is not None:
                first_proc.kill()
                first_proc.wait()
            raise
        finally:
            if first_proc is not None and first_proc.stdout is not None:
                first_proc.stdout.close()

        if first_proc is not None:
            first_proc.wait()
        if second_proc is None:
            return COMMAND_NOT_FOUND_STATUS
        return second_proc.wait()


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point: ``pipex infile cmd1 cmd2 outfile``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 4:
        print("usage: pipex infile cmd1 cmd2 outfile", file=sys.stderr)
        return 1
    try:
        return run_pipeline(*args, env=os.environ)
    except PipelineError as exc:
        print(f"pipex: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
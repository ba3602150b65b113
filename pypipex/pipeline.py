"""Run ``infile | cmd1 | cmd2 > outfile`` with two child processes."""

from __future__ import annotations

import os
import subprocess
import sys
from typing import IO, Optional, Sequence, Union

from pypipex.path import find_command, search_dirs
from pypipex.printf import print_formatted
from pypipex.strings import split

USAGE = "Command usage: pypipex file1 cmd1 cmd2 file2\n"
EXIT_FAILURE = 1
OUTFILE_MODE = 0o600

_Stream = Union[int, IO[bytes], None]


class PipexError(Exception):
    """A stage of the pipeline could not be started."""


def _words(text: str, number: int) -> Optional[list[str]]:
    words = split(text, " ")
    if not words:
        print_formatted("Command %i null\n", number)
        return None
    return words


def _exec_path(executable: str) -> str:
    # The file is executed as named, never looked up again: a bare name
    # refers to the working directory.
    return executable if "/" in executable else f"./{executable}"


def _spawn(
    words: list[str], executable: str, stdin: _Stream, stdout: _Stream
) -> subprocess.Popen:
    try:
        return subprocess.Popen(
            words,
            executable=_exec_path(executable),
            stdin=stdin,
            stdout=stdout,
            env={},
        )
    except OSError as exc:
        raise PipexError(f"execve: {exc.strerror or exc}") from exc


def _start_producer(
    infile: str, text: str, path: Optional[Sequence[str]]
) -> Optional[subprocess.Popen]:
    words = _words(text, 1)
    executable = find_command(path, words[0]) if words else None
    if executable is None:
        return None
    try:
        source = open(infile, "rb")
    except OSError as exc:
        raise PipexError(f"{infile}: {exc.strerror}") from exc
    with source:
        return _spawn(words, executable, source, subprocess.PIPE)


def _start_consumer(
    outfile: str, text: str, path: Optional[Sequence[str]], stdin: _Stream
) -> Optional[subprocess.Popen]:
    words = _words(text, 2)
    executable = find_command(path, words[0]) if words else None
    if executable is None:
        return None
    try:
        fd = os.open(outfile, os.O_CREAT | os.O_WRONLY | os.O_TRUNC, OUTFILE_MODE)
    except OSError as exc:
        raise PipexError(f"{outfile}: {exc.strerror}") from exc
    try:
        return _spawn(words, executable, stdin, fd)
    finally:
        os.close(fd)


def run_pipeline(
    infile: str,
    first: str,
    second: str,
    outfile: str,
    path: Optional[Sequence[str]] = None,
) -> int:
    """Feed ``infile`` to ``first``, pipe its output to ``second``, write ``outfile``.

    Commands are split on spaces and run with an empty environment. Returns
    the exit status of the second command, or 1 when it could not be run or
    was killed by a signal.
    """
    try:
        producer = _start_producer(infile, first, path)
    except PipexError as exc:
        print(exc, file=sys.stderr)
        producer = None

    consumer: Optional[subprocess.Popen] = None
    try:
        stdin = producer.stdout if producer is not None else subprocess.DEVNULL
        consumer = _start_consumer(outfile, second, path, stdin)
    except PipexError as exc:
        print(exc, file=sys.stderr)
    finally:
        if producer is not None and producer.stdout is not None:
            producer.stdout.close()

    if producer is not None:
        producer.wait()
    if consumer is None:
        return EXIT_FAILURE
    status = consumer.wait()
    return status if status >= 0 else EXIT_FAILURE


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command entry point: ``pypipex file1 cmd1 cmd2 file2``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 4:
        sys.stderr.write(USAGE)
        return EXIT_FAILURE
    infile, first, second, outfile = args
    return run_pipeline(infile, first, second, outfile, search_dirs(os.environ))


if __name__ == "__main__":
    sys.exit(main())
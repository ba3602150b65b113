"""Locating commands through the ``PATH`` environment variable."""

from __future__ import annotations

import os
from typing import Iterable, Mapping, Optional, Sequence, Union

from pypipex.printf import print_formatted
from pypipex.strings import split

Environment = Union[Mapping[str, str], Iterable[str]]


def get_env(name: str, envp: Optional[Environment]) -> Optional[str]:
    """Return the value of ``name`` in ``envp``, or None when it is absent.

    ``envp`` is either a mapping or a sequence of ``KEY=VALUE`` entries.
    """
    if envp is None:
        return None
    if isinstance(envp, Mapping):
        return envp.get(name)
    for entry in envp:
        key, sep, value = entry.partition("=")
        if sep and key == name:
            return value
    return None


def search_dirs(envp: Optional[Environment]) -> Optional[list[str]]:
    """Directories listed in ``PATH``, empty entries dropped; None without ``PATH``."""
    value = get_env("PATH", envp)
    if value is None:
        return None
    return split(value, ":")


def find_command(path: Optional[Sequence[str]], cmd: str) -> Optional[str]:
    """Resolve ``cmd`` to the file that should be executed.

    A command containing ``/`` is used as given when it is executable;
    otherwise a message is printed and None returned. Without a search path
    the command is returned unchanged. Otherwise each directory is tried in
    order and the first executable match is returned, or None.
    """
    if "/" in cmd:
        if os.access(cmd, os.X_OK):
            return cmd
        print_formatted("Command %s not found\n", cmd)
        return None
    if path is None:
        return cmd
    for directory in path:
        candidate = f"{directory}/{cmd}"
        if os.access(candidate, os.F_OK | os.X_OK):
            return candidate
    return None
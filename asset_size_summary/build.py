"""Run the project's production asset build before measuring sizes."""

from __future__ import annotations

import subprocess
from collections.abc import Callable, Mapping
from pathlib import Path

AUTO = "auto"
SKIP = "false"

YARN_LOCKFILE = "yarn.lock"

YARN_COMMANDS = [
    ["yarn", "--frozen-lockfile"],
    ["yarn", "run", "prod"],
]
NPM_COMMANDS = [
    ["npm", "ci"],
    ["npm", "run", "prod"],
]


def build_commands(selector: str, exists: Callable[[str], bool]) -> list[list[str]]:
    """Map a build-assets setting to the commands that should run, in order.

    ``exists`` reports whether a file is present in the working directory.
    """
    if selector == AUTO:
        if exists(YARN_LOCKFILE):
            return [list(command) for command in YARN_COMMANDS]
        return [list(command) for command in NPM_COMMANDS]

    if selector == SKIP:
        return []

    return [["bash", "-lc", selector]]


def build_assets(
    selector: str,
    cwd: Path,
    *,
    env: Mapping[str, str] | None = None,
    runner: Callable[..., subprocess.CompletedProcess] = subprocess.run,
) -> list[list[str]]:
    cwd = Path(cwd)
    commands = build_commands(selector, lambda name: (cwd / name).exists())
    for argv in commands:
        print(f"asset-size-summary: running {' '.join(argv)}")
        runner(argv, cwd=cwd, env=dict(env) if env is not None else None, check=True)
    return commands

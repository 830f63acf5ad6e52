"""Collect raw and gzip sizes for the files matching a set of glob patterns.

A reporter measures the files and writes a single JSON document through the
``log`` sink it is given; ``get_asset_sizes`` parses whatever was written.
"""

from __future__ import annotations

import glob
import gzip
import json
import subprocess
from collections.abc import Callable, Sequence
from pathlib import Path

from .fingerprint import Fingerprint

Sink = Callable[[str], None]
Reporter = Callable[[Sequence[str], Path, Sink], None]

GZIP_LEVEL = 9


def _split_options(body: str) -> list[str]:
    options: list[str] = []
    depth = 0
    current = ""
    for ch in body:
        if ch == "," and depth == 0:
            options.append(current)
            current = ""
            continue
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
        current += ch
    options.append(current)
    return options


def expand_braces(pattern: str) -> list[str]:
    """Expand ``{a,b}`` sets the way globby does, nested sets included."""
    depth = 0
    start = 0
    for i, ch in enumerate(pattern):
        if ch == "{":
            if depth == 0:
                start = i
            depth += 1
        elif ch == "}" and depth:
            depth -= 1
            if depth:
                continue
            options = _split_options(pattern[start + 1 : i])
            # A set without a comma is literal text.
            if len(options) < 2:
                continue
            prefix, suffix = pattern[:start], pattern[i + 1 :]
            expanded: list[str] = []
            for option in options:
                expanded.extend(expand_braces(prefix + option + suffix))
            return expanded
    return [pattern]


def _glob_files(pattern: str, cwd: Path) -> set[str]:
    found: set[str] = set()
    for expanded in expand_braces(pattern):
        for name in glob.glob(expanded, root_dir=cwd, recursive=True):
            if (Path(cwd) / name).is_file():
                found.add(Path(name).as_posix())
    return found


def expand_patterns(patterns: Sequence[str], cwd: Path) -> list[str]:
    """Files matching any pattern, minus those matching a ``!`` pattern."""
    matches: set[str] = set()
    excluded: set[str] = set()
    for pattern in patterns:
        if pattern.startswith("!"):
            excluded |= _glob_files(pattern[1:], cwd)
        else:
            matches |= _glob_files(pattern, cwd)
    return sorted(matches - excluded)


def gzip_size(data: bytes) -> int:
    return len(gzip.compress(data, compresslevel=GZIP_LEVEL))


def measure_patterns(patterns: Sequence[str], cwd: Path, log: Sink) -> None:
    sizes: Fingerprint = {}
    for name in expand_patterns(patterns, cwd):
        data = (Path(cwd) / name).read_bytes()
        sizes[name] = {"raw": len(data), "gzip": gzip_size(data)}
    log(json.dumps(sizes))


def npx_reporter(
    patterns: Sequence[str],
    cwd: Path,
    log: Sink,
    *,
    runner: Callable[..., subprocess.CompletedProcess] = subprocess.run,
) -> None:
    """Delegate measurement to the ``asset-size-reporter`` npm package."""
    argv = ["npx", "--no-install", "asset-size-reporter", "--json", *patterns]
    result = runner(argv, cwd=cwd, capture_output=True, text=True, check=True)
    log(result.stdout)


def get_asset_sizes(
    patterns: Sequence[str],
    cwd: Path,
    reporter: Reporter = measure_patterns,
) -> Fingerprint:
    output: list[str] = []
    reporter(list(patterns), Path(cwd), output.append)
    if not output:
        raise ValueError("size reporter produced no output")
    return json.loads(output[-1])

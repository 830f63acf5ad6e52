"""Settings read from the GitHub Actions environment."""

from __future__ import annotations

import os
import re
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from .build import AUTO
from .github import DEFAULT_API_URL
from .report import HELP_URL

DEFAULT_FILES = "dist/**/*.js,dist/**/*.css"
VALID_REPORTERS = {"builtin", "npx"}

TRUE_VALUES = {"1", "true", "yes", "on"}
FALSE_VALUES = {"", "0", "false", "no", "off"}


@dataclass(frozen=True)
class Settings:
    files: list[str]
    build_assets: str
    with_same: bool
    with_removed: bool
    reporter: str
    help_url: str
    token: str
    api_url: str
    event_name: str
    event_path: str
    workspace: Path
    output_file: str


def parse_bool(value: str | None, *, default: bool = False) -> bool:
    if value is None:
        return default
    text = value.strip().lower()
    if text in TRUE_VALUES:
        return True
    if text in FALSE_VALUES:
        return False
    raise ValueError(f"invalid boolean value '{value}'")


def parse_patterns(value: str | None) -> list[str]:
    if not value:
        return []
    return [part.strip() for part in re.split(r"[,\n]", value) if part.strip()]


def ensure_reporter(value: str) -> str:
    reporter = value.strip().lower()
    if reporter not in VALID_REPORTERS:
        raise ValueError(
            f"invalid reporter '{value}'. expected one of: {', '.join(sorted(VALID_REPORTERS))}"
        )
    return reporter


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    env = os.environ if environ is None else environ
    return Settings(
        files=parse_patterns(env.get("INPUT_FILES") or DEFAULT_FILES),
        build_assets=(env.get("INPUT_BUILD_ASSETS") or AUTO).strip(),
        with_same=parse_bool(env.get("INPUT_WITH_SAME")),
        with_removed=parse_bool(env.get("INPUT_WITH_REMOVED")),
        reporter=ensure_reporter(env.get("INPUT_REPORTER") or "builtin"),
        help_url=env.get("INPUT_HELP_URL") or HELP_URL,
        token=env.get("INPUT_REPO_TOKEN") or env.get("GITHUB_TOKEN", ""),
        api_url=env.get("GITHUB_API_URL") or DEFAULT_API_URL,
        event_name=env.get("GITHUB_EVENT_NAME", ""),
        event_path=env.get("GITHUB_EVENT_PATH", ""),
        workspace=Path(env.get("GITHUB_WORKSPACE") or "."),
        output_file=env.get("GITHUB_OUTPUT", ""),
    )

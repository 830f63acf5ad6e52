"""Command line entry point for the asset size pull request comment.

Typical workflow:
- ``asset-size-summary measure --output head.json`` on the PR checkout
- check out the base branch
- ``asset-size-summary measure --output base.json``
- ``asset-size-summary report --base base.json --head head.json``
"""

from __future__ import annotations

import argparse
import dataclasses
import json
import os
import sys
from pathlib import Path

from .build import build_assets
from .collect import get_asset_sizes, measure_patterns, npx_reporter
from .comments import create_or_update_comment
from .config import Settings, ensure_reporter, load_settings, parse_bool, parse_patterns
from .fingerprint import diff_sizes, normalise_fingerprint, removed_files
from .github import GitHubClient
from .pull_request import get_pull_request, load_event_context
from .report import build_output_text

REPORTERS = {
    "builtin": measure_patterns,
    "npx": npx_reporter,
}


def fail(message: str, code: int = 2) -> None:
    print(f"asset-size-summary: {message}", file=sys.stderr)
    sys.exit(code)


def read_json(path: Path) -> dict:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        fail(f"unable to read {path}: {exc}")
    except json.JSONDecodeError as exc:
        fail(f"invalid JSON in {path}: {exc}")


def write_output(output_file: str, **values: object) -> None:
    if not output_file:
        return
    with open(output_file, "a", encoding="utf-8") as fh:
        for key, value in values.items():
            fh.write(f"{key}={value}\n")


def measure(settings: Settings, output_path: Path) -> int:
    build_assets(settings.build_assets, settings.workspace, env=os.environ)
    sizes = get_asset_sizes(
        settings.files, settings.workspace, reporter=REPORTERS[settings.reporter]
    )
    fingerprint = normalise_fingerprint(sizes)
    output_path.write_text(json.dumps(fingerprint, indent=2, sort_keys=True), encoding="utf-8")
    print(f"asset-size-summary: measured {len(fingerprint)} files -> {output_path}")
    write_output(settings.output_file, files=len(fingerprint))
    return 0


def report(
    settings: Settings,
    base_path: Path,
    head_path: Path,
    *,
    dry_run: bool = False,
    client: GitHubClient | None = None,
) -> int:
    base = normalise_fingerprint(read_json(base_path))
    head = normalise_fingerprint(read_json(head_path))
    delta = diff_sizes(base, head)
    removed = removed_files(base, head) if settings.with_removed else None
    body = build_output_text(delta, settings.with_same, removed, help_url=settings.help_url)

    if dry_run:
        print(body)
        return 0

    if client is None:
        if not settings.token:
            fail("GITHUB_TOKEN is required")
        client = GitHubClient(settings.token, settings.api_url)

    context = load_event_context(settings.event_name, settings.event_path)
    pull = get_pull_request(context, client)
    if pull is None:
        write_output(settings.output_file, comment="none")
        return 0

    action = create_or_update_comment(
        owner=pull["base"]["repo"]["owner"]["login"],
        repo=pull["base"]["repo"]["name"],
        issue_number=pull["number"],
        body=body,
        client=client,
    )
    print(f"asset-size-summary: pr#{pull['number']}: comment {action}")
    write_output(settings.output_file, comment=action)
    return 0


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="asset-size-summary",
        description="Compare production asset sizes and comment on the pull request.",
    )
    parser.add_argument("--files", help="Comma- or newline-separated glob patterns to measure.")
    parser.add_argument(
        "--build-assets",
        help="'auto' to detect yarn/npm, 'false' to skip, or a build command.",
    )
    parser.add_argument("--with-same", help="Also list files whose size stayed the same.")
    parser.add_argument("--with-removed", help="Also list files missing from the head branch.")
    parser.add_argument("--reporter", help="Size reporter to use: builtin or npx.")
    parser.add_argument("--workspace", help="Directory to build and measure in.")
    sub = parser.add_subparsers(dest="command", required=True)

    measure_parser = sub.add_parser("measure", help="Build assets and write their sizes as JSON.")
    measure_parser.add_argument("--output", required=True, help="Path for the sizes JSON.")

    report_parser = sub.add_parser("report", help="Diff two size files and upsert the PR comment.")
    report_parser.add_argument("--base", required=True, help="Sizes JSON for the base branch.")
    report_parser.add_argument("--head", required=True, help="Sizes JSON for the PR branch.")
    report_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the comment body instead of posting it.",
    )
    return parser.parse_args(argv)


def resolve_settings(args: argparse.Namespace, settings: Settings) -> Settings:
    overrides: dict[str, object] = {}
    if args.files is not None:
        overrides["files"] = parse_patterns(args.files)
    if args.build_assets is not None:
        overrides["build_assets"] = args.build_assets.strip()
    if args.with_same is not None:
        overrides["with_same"] = parse_bool(args.with_same)
    if args.with_removed is not None:
        overrides["with_removed"] = parse_bool(args.with_removed)
    if args.reporter is not None:
        overrides["reporter"] = ensure_reporter(args.reporter)
    if args.workspace is not None:
        overrides["workspace"] = Path(args.workspace)
    return dataclasses.replace(settings, **overrides)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    try:
        settings = resolve_settings(args, load_settings())
    except ValueError as exc:
        fail(str(exc))

    if args.command == "measure":
        if not settings.files:
            fail("no file patterns configured")
        return measure(settings, Path(args.output))
    return report(settings, Path(args.base), Path(args.head), dry_run=args.dry_run)


if __name__ == "__main__":
    sys.exit(main())

"""Resolve the pull request a workflow run was triggered for."""

from __future__ import annotations

import json
from pathlib import Path


def load_event_context(event_name: str, event_path: str | None) -> dict:
    """Read the webhook payload GitHub Actions writes to ``GITHUB_EVENT_PATH``."""
    payload: dict = {}
    if event_path and Path(event_path).exists():
        payload = json.loads(Path(event_path).read_text(encoding="utf-8"))
    return {"event_name": event_name, "payload": payload}


def get_pull_request(context: dict, client) -> dict | None:
    pr = context.get("payload", {}).get("pull_request")

    if not pr:
        print("asset-size-summary: Could not get pull request number from context, exiting")
        return None

    return client.get_pull(
        pr["base"]["repo"]["owner"]["login"],
        pr["base"]["repo"]["name"],
        pr["number"],
    )

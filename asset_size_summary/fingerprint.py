"""Size fingerprints and the per-file deltas between two of them."""

from __future__ import annotations

from typing import Any

Fingerprint = dict[str, dict[str, Any]]


def normalise_fingerprint(obj: dict[str, Any]) -> Fingerprint:
    """Copy a size report into a plain dict that shares nothing with the input."""
    normalised: Fingerprint = {}
    for file_name in obj:
        sizes = obj[file_name]
        normalised[file_name] = dict(sizes) if isinstance(sizes, dict) else sizes
    return normalised


def diff_sizes(base: Fingerprint, head: Fingerprint) -> Fingerprint:
    delta: Fingerprint = {}
    for key, new_size in head.items():
        origin_size = base.get(key)

        # New file: the whole size counts as the change.
        if origin_size is None:
            delta[key] = {"raw": new_size["raw"], "gzip": new_size["gzip"]}
        else:
            delta[key] = {
                "raw": new_size["raw"] - origin_size["raw"],
                "gzip": new_size["gzip"] - origin_size["gzip"],
            }
    return delta


def removed_files(base: Fingerprint, head: Fingerprint) -> Fingerprint:
    """Return base-only entries; these never appear in the delta."""
    return {
        key: {"raw": sizes["raw"], "gzip": sizes["gzip"]}
        for key, sizes in base.items()
        if key not in head
    }

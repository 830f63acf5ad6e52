"""Render a size delta as the markdown body of the pull request comment."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal

from .fingerprint import Fingerprint

TITLE = "Production Asset Change Summary"
HELP_URL = (
    "https://betterup.atlassian.net/browse/BUAPP-14856"
    "?jql=resolution%20%3D%20Unresolved%20AND%20labels%20%3D%20asset-size-reporter"
)

# Raw byte change a file must exceed to count as bigger or smaller.
THRESHOLD = 2000

BYTE_UNITS = ["B", "kB", "MB", "GB", "TB", "PB", "EB", "ZB", "YB"]

SECTION_HEADINGS = {
    "bigger": "Files that got Bigger 🚨:",
    "smaller": "Files that got Smaller 🎉:",
    "same": "Files that stayed the same size 🤷‍:",
    "removed": "Files that were removed 🗑️:",
}


def _to_precision(value: float, digits: int = 3) -> float:
    """Round to ``digits`` significant digits, ties away from zero."""
    if value == 0:
        return 0.0
    exact = Decimal(value)
    quantum = Decimal(1).scaleb(exact.adjusted() - digits + 1)
    return float(exact.quantize(quantum, rounding=ROUND_HALF_UP))


def pretty_bytes(number: float, *, signed: bool = True) -> str:
    """Human readable byte count: base 1000, three significant digits."""
    if signed and number == 0:
        return " 0 B"

    negative = number < 0
    prefix = "-" if negative else ("+" if signed else "")
    number = abs(number)

    if number < 1:
        return f"{prefix}{number:g} B"

    exponent = min(int(math.floor(math.log10(number) / 3)), len(BYTE_UNITS) - 1)
    scaled = _to_precision(number / 1000**exponent)
    return f"{prefix}{scaled:g} {BYTE_UNITS[exponent]}"


def bucket_for(raw: int) -> str:
    if raw > THRESHOLD:
        return "bigger"
    if raw < -THRESHOLD:
        return "smaller"
    return "same"


def report_table(rows: list[dict]) -> str:
    table = "File | raw | gzip\n--- | --- | ---\n"
    for row in rows:
        table += f"{row['file']}|{pretty_bytes(row['raw'])}|{pretty_bytes(row['gzip'])}\n"
    return table


def build_output_text(
    delta: Fingerprint,
    with_same: bool,
    removed: Fingerprint | None = None,
    *,
    help_url: str = HELP_URL,
) -> str:
    files = [
        {"file": key, "raw": sizes["raw"], "gzip": sizes["gzip"]}
        for key, sizes in delta.items()
    ]

    buckets: dict[str, list[dict]] = {"bigger": [], "smaller": [], "same": []}
    for row in files:
        buckets[bucket_for(row["raw"])].append(row)

    output = ""

    if buckets["bigger"]:
        output += f"{SECTION_HEADINGS['bigger']}\n\n{report_table(buckets['bigger'])}\n"

    if buckets["smaller"]:
        output += f"{SECTION_HEADINGS['smaller']}\n\n{report_table(buckets['smaller'])}\n\n"

    if buckets["same"] and with_same:
        output += f"{SECTION_HEADINGS['same']}\n\n{report_table(buckets['same'])}\n\n"

    if removed:
        rows = [
            {"file": key, "raw": -sizes["raw"], "gzip": -sizes["gzip"]}
            for key, sizes in removed.items()
        ]
        output += f"{SECTION_HEADINGS['removed']}\n\n{report_table(rows)}\n\n"

    if output.strip():
        output = (
            f"{TITLE}\n\n{output}\n\n"
            f"Does something not look right? [Check for open issues]({help_url})"
        )

    return output.strip()

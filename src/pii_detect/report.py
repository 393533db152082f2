"""Grouping, counting and rendering of detected PII."""

from __future__ import annotations
from typing import Iterable, Protocol

from .types import PIICategory, Report

NO_PII_MESSAGE = "No PII detected in the document."
REPORT_HEADER = "PII Detection Results:"


class _HasValue(Protocol):
    category: PIICategory
    value: str


def build_report(matches: Iterable[_HasValue]) -> Report:
    """Group unique values by category, keeping first-seen order."""
    seen: dict[PIICategory, dict[str, None]] = {}
    for m in matches:
        seen.setdefault(m.category, {})[m.value] = None
    return Report(groups=tuple(
        (category, tuple(seen[category]))
        for category in PIICategory
        if category in seen
    ))


def render_report(report: Report) -> str:
    if report.empty:
        return NO_PII_MESSAGE
    lines = [REPORT_HEADER]
    for category, values in report.groups:
        lines.append(f"\n{category.value}:")
        lines.extend(f"- {v}" for v in values)
    return "\n".join(lines)


def format_report(matches: Iterable[_HasValue]) -> str:
    """Build and render a report in one step."""
    return render_report(build_report(matches))


def summarize(matches: Iterable[_HasValue]) -> dict[PIICategory, int]:
    """Count matches per category (duplicates included), catalog order."""
    counts = dict.fromkeys(PIICategory, 0)
    for m in matches:
        counts[m.category] += 1
    return {c: n for c, n in counts.items() if n}


def summary_line(matches: Iterable[_HasValue]) -> str:
    """One-line status, e.g. "Found 4 potential PII items: 3 email, 1 phone"."""
    counts = summarize(matches)
    if not counts:
        return "No PII detected."
    total = sum(counts.values())
    parts = ", ".join(f"{n} {c.value}" for c, n in counts.items())
    return f"Found {total} potential PII items: {parts}"

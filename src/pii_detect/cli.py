"""CLI interface for pii-detect.

Usage:
    # Detect PII in plain text (stdin), JSON matches with offsets on stdout
    echo 'Mail alice@example.com' | python -m pii_detect.cli detect

    # Detect PII across chat messages (stdin: JSON array of strings or
    # OpenAI-format messages), JSON values on stdout
    echo '[{"role":"user","content":"I am john@x.com"}]' | \
        python -m pii_detect.cli detect-messages

    # Human-readable grouped report / one-line summary
    python -m pii_detect.cli report < document.txt
    python -m pii_detect.cli summary < document.txt
"""

from __future__ import annotations
import argparse
import json
import logging
import os
import sys

from .config import create_detector, load_from_yaml
from .detector import Detector
from .report import format_report, summary_line

DEFAULT_CONFIG = os.environ.get("PII_DETECT_CONFIG", "")


def _split(value: str) -> list[str]:
    return [v.strip() for v in value.split(",") if v.strip()]


def _build_detector(args: argparse.Namespace) -> Detector:
    cfg = load_from_yaml(args.config) if args.config else {}
    if args.skip_types:
        cfg["skip_categories"] = [
            *cfg.get("skip_categories", ()), *_split(args.skip_types),
        ]
    if args.allow_list:
        cfg["allow_list"] = [*cfg.get("allow_list", ()), *_split(args.allow_list)]
    return create_detector(cfg)


def cmd_detect(args: argparse.Namespace, detector: Detector) -> None:
    """Detect PII in plain text on stdin."""
    matches = detector.detect(sys.stdin.read())
    output = [
        {"type": m.category.value, "value": m.value, "start": m.start, "end": m.end}
        for m in matches
    ]
    json.dump(output, sys.stdout, ensure_ascii=False)
    sys.stdout.write("\n")


def cmd_detect_messages(args: argparse.Namespace, detector: Detector) -> None:
    """Detect PII across a JSON array of messages on stdin."""
    messages = json.loads(sys.stdin.read())
    if not isinstance(messages, list):
        raise ValueError("expected a JSON array of messages")
    values = detector.detect_messages(messages)
    json.dump(
        [{"type": v.category.value, "value": v.value} for v in values],
        sys.stdout,
        ensure_ascii=False,
    )
    sys.stdout.write("\n")


def cmd_report(args: argparse.Namespace, detector: Detector) -> None:
    """Render a grouped report for plain text on stdin."""
    sys.stdout.write(format_report(detector.detect(sys.stdin.read())))
    sys.stdout.write("\n")


def cmd_summary(args: argparse.Namespace, detector: Detector) -> None:
    """Print a one-line count summary for plain text on stdin."""
    sys.stdout.write(summary_line(detector.detect(sys.stdin.read())))
    sys.stdout.write("\n")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="pii_detect",
        description="Pattern-based PII detection",
    )
    parser.add_argument("--config", default=DEFAULT_CONFIG, help="YAML config path")
    parser.add_argument("--skip-types", default="", help="Comma-separated categories to skip")
    parser.add_argument("--allow-list", default="", help="Comma-separated values to never report")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging on stderr")

    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("detect", help="Detect PII in plain text (stdin)")
    sub.add_parser("detect-messages", help="Detect PII in messages (JSON stdin)")
    sub.add_parser("report", help="Grouped PII report (stdin)")
    sub.add_parser("summary", help="One-line PII summary (stdin)")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    cmds = {
        "detect": cmd_detect,
        "detect-messages": cmd_detect_messages,
        "report": cmd_report,
        "summary": cmd_summary,
    }
    try:
        detector = _build_detector(args)
        cmds[args.command](args, detector)
    except ValueError as e:
        # ConfigError, json.JSONDecodeError
        sys.stderr.write(f"pii_detect: {e}\n")
        sys.exit(2)


if __name__ == "__main__":
    main()

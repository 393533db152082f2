"""Detector — the main API.  Scan, validate, filter.

Usage:
    from pii_detect import Detector, format_report

    detector = Detector()        # reusable, holds no per-call state

    matches = detector.detect("Contact alice@example.com or 555-123-4567")
    # [PIIMatch(EMAIL, 'alice@example.com', 8, 25),
    #  PIIMatch(PHONE, '555-123-4567', 29, 41)]

    print(format_report(detector.detect_messages(chat_history)))
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from collections.abc import Mapping
from typing import Any, Iterable, Sequence

from .patterns import CATALOG, scan
from .types import PIICategory, PIIMatch, PIIValue, Recognizer
from .validators import validate

logger = logging.getLogger(__name__)


@dataclass
class DetectorConfig:
    """Configuration for the Detector."""
    categories: tuple[PIICategory, ...] = tuple(PIICategory)
    # Categories never reported
    skip_categories: set[PIICategory] = field(default_factory=set)
    # Allow-list: exact values that are never reported
    allow_list: set[str] = field(default_factory=set)


class Detector:
    """Pattern-based PII detector over a fixed recognizer catalog."""

    def __init__(
        self,
        config: DetectorConfig | None = None,
        catalog: Sequence[Recognizer] = CATALOG,
    ) -> None:
        self.config = config or DetectorConfig()
        wanted = set(self.config.categories) - self.config.skip_categories
        self.catalog = tuple(r for r in catalog if r.category in wanted)

    def detect(self, text: str) -> list[PIIMatch]:
        """Return validated matches in text, ordered by start offset."""
        matches: list[PIIMatch] = []
        rejected = 0
        for raw in scan(text, self.catalog):
            if not validate(raw.category, raw.text):
                rejected += 1
                continue
            if raw.text in self.config.allow_list:
                continue
            matches.append(PIIMatch(
                category=raw.category,
                value=raw.text,
                start=raw.start,
                end=raw.end,
            ))
        if rejected:
            logger.debug("validators rejected %d candidates", rejected)
        # Stable: ties keep catalog order
        return sorted(matches, key=lambda m: m.start)

    def detect_messages(
        self,
        messages: Iterable[str | dict[str, Any]],
        *,
        content_key: str = "content",
    ) -> list[PIIValue]:
        """Detect PII across strings or chat-format messages, in input order.

        Items that are neither strings nor mappings, and messages without
        string content, are skipped.
        """
        out: list[PIIValue] = []
        for msg in messages:
            if isinstance(msg, str):
                content = msg
            elif isinstance(msg, Mapping):
                content = msg.get(content_key)
            else:
                continue
            if isinstance(content, str) and content:
                out.extend(m.to_value() for m in self.detect(content))
        logger.debug("found %d PII values across messages", len(out))
        return out


class NullDetector(Detector):
    """Pass-through detector used when detection is disabled."""

    def __init__(self) -> None:
        super().__init__(DetectorConfig(categories=()))

    def detect(self, text: str) -> list[PIIMatch]:
        return []


_default = Detector()


def detect_pii(text: str) -> list[PIIMatch]:
    """Detect PII in one string with the default catalog."""
    return _default.detect(text)


def detect_pii_in_messages(
    messages: Iterable[str | dict[str, Any]],
    *,
    content_key: str = "content",
) -> list[PIIValue]:
    """Detect PII across messages with the default catalog."""
    return _default.detect_messages(messages, content_key=content_key)

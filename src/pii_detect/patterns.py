"""Pattern catalog and scanner for structured PII.

Every recognizer is applied to the whole text and yields all of its
non-overlapping occurrences.  Different categories may overlap on the
same span; each is kept independently.
"""

from __future__ import annotations
import logging
import re
from typing import Iterable

from .types import PIICategory, RawMatch, Recognizer

logger = logging.getLogger(__name__)

CATALOG: tuple[Recognizer, ...] = (
    # local-part@domain.tld, alphabetic tld of 2+ chars
    Recognizer(PIICategory.EMAIL, re.compile(
        r"[a-zA-Z0-9._%+\-]+@[a-zA-Z0-9.\-]+\.[a-zA-Z]{2,}"
    )),

    # Optional country code, area code (may be parenthesized), 3 + 4 digits, optional extension
    Recognizer(PIICategory.PHONE, re.compile(
        r"(?:\+?\d{1,3}[\-. ]*)?(?:\(\d{3}\)|\d{3})[\-. ]*\d{3}[\-. ]*\d{4}(?: *x\d+)?"
    )),

    # 3-2-4 digits, same separator (dash, space or none) in both positions
    Recognizer(PIICategory.NATIONAL_ID, re.compile(
        r"\b(?!000|666|9\d{2})\d{3}(?P<sep>[\- ]?)(?!00)\d{2}(?P=sep)(?!0000)\d{4}\b"
    )),

    # 13-19 digits, spaces or dashes allowed between any of them
    Recognizer(PIICategory.PAYMENT_CARD, re.compile(
        r"\b(?:\d[ \-]*?){13,19}\b"
    )),

    # Two consecutive capitalized words
    Recognizer(PIICategory.PERSON_NAME, re.compile(
        r"\b[A-Z][a-z]+ [A-Z][a-z]+\b"
    )),
)


def scan(text: str, catalog: Iterable[Recognizer] = CATALOG) -> list[RawMatch]:
    """Run every recognizer against text. Returns raw candidates, unvalidated."""
    matches: list[RawMatch] = []
    for recognizer in catalog:
        for m in recognizer.pattern.finditer(text):
            if m.end() == m.start():
                continue
            matches.append(RawMatch(
                category=recognizer.category,
                text=m.group(),
                start=m.start(),
                end=m.end(),
            ))
    logger.debug("scanned %d chars, %d raw candidates", len(text), len(matches))
    return matches

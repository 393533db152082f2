"""Checksum and structural validators.

Only payment cards and national IDs carry a validator; every other
category accepts whatever its pattern matched.  Validators never raise:
a malformed candidate is simply rejected.
"""

from __future__ import annotations
import re
from typing import Callable

from .types import PIICategory

_NON_DIGIT = re.compile(r"\D")


def luhn_valid(text: str) -> bool:
    """Mod-10 (Luhn) check over the digits in text."""
    digits = [int(c) for c in _NON_DIGIT.sub("", text)]
    if len(digits) < 2:
        return False
    check = digits.pop()
    total = 0
    for i, d in enumerate(reversed(digits)):
        if i % 2 == 0:
            d *= 2
            if d > 9:
                d -= 9
        total += d
    return (total + check) % 10 == 0


def national_id_valid(text: str) -> bool:
    """Area/group/serial rules for a 9-digit national ID."""
    digits = _NON_DIGIT.sub("", text)
    if len(digits) != 9:
        return False
    area, group, serial = digits[:3], digits[3:5], digits[5:]
    if area in ("000", "666") or area.startswith("9"):
        return False
    if group == "00":
        return False
    if serial == "0000":
        return False
    return True


VALIDATORS: dict[PIICategory, Callable[[str], bool]] = {
    PIICategory.PAYMENT_CARD: luhn_valid,
    PIICategory.NATIONAL_ID: national_id_valid,
}


def validate(category: PIICategory, text: str) -> bool:
    """True if text is acceptable for category."""
    check = VALIDATORS.get(category)
    return check is None or check(text)

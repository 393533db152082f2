"""Core types."""

from __future__ import annotations
import re
from dataclasses import dataclass
from enum import Enum


class PIICategory(str, Enum):
    """Closed set of PII categories, in catalog order."""
    EMAIL = "email"
    PHONE = "phone"
    NATIONAL_ID = "national_id"
    PAYMENT_CARD = "payment_card"
    PERSON_NAME = "person_name"

    @classmethod
    def parse(cls, name: str | PIICategory) -> PIICategory:
        """Look up a category by value or member name, case-insensitively."""
        if isinstance(name, cls):
            return name
        key = str(name).strip().lower()
        for category in cls:
            if key in (category.value, category.name.lower()):
                return category
        raise ValueError(f"unknown PII category: {name!r}")


@dataclass(frozen=True, slots=True)
class Recognizer:
    """A pattern bound to the category it detects."""
    category: PIICategory
    pattern: re.Pattern


@dataclass(frozen=True, slots=True)
class RawMatch:
    """A candidate occurrence, before validation."""
    category: PIICategory
    text: str
    start: int
    end: int


@dataclass(frozen=True, slots=True)
class PIIValue:
    """A detected value without its position."""
    category: PIICategory
    value: str


@dataclass(frozen=True, slots=True)
class PIIMatch:
    """A candidate that passed its category's validator."""
    category: PIICategory
    value: str
    start: int
    end: int

    def to_value(self) -> PIIValue:
        return PIIValue(self.category, self.value)


@dataclass(frozen=True, slots=True)
class Report:
    """Unique detected values grouped by category, first-seen order.

    ``groups`` holds ``(category, values)`` pairs in catalog order, only
    for categories with at least one value.
    """
    groups: tuple[tuple[PIICategory, tuple[str, ...]], ...]

    def get(self, category: PIICategory) -> tuple[str, ...]:
        for c, values in self.groups:
            if c == category:
                return values
        return ()

    def as_dict(self) -> dict[PIICategory, tuple[str, ...]]:
        return dict(self.groups)

    @property
    def empty(self) -> bool:
        return not self.groups

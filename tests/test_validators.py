"""Tests for the checksum and structural validators."""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

import pytest

from pii_detect import PIICategory, luhn_valid, national_id_valid, validate


# ── Luhn ─────────────────────────────────────────────────────────────

@pytest.mark.parametrize("number", [
    "4532015112830366",
    "4111 1111 1111 1111",
    "4111-1111-1111-1111",
    "79927398713",
])
def test_luhn_accepts_valid(number):
    assert luhn_valid(number)


@pytest.mark.parametrize("number", [
    "4532015112830367",
    "4111111111111112",
    "79927398710",
])
def test_luhn_rejects_altered_check_digit(number):
    assert not luhn_valid(number)


@pytest.mark.parametrize("degenerate", ["", "7", "0", "- -", "abc"])
def test_luhn_rejects_degenerate_input(degenerate):
    assert luhn_valid(degenerate) is False


# ── National ID ──────────────────────────────────────────────────────

@pytest.mark.parametrize("ssn", ["123-45-6789", "078-05-1120", "123 45 6789", "123456789"])
def test_national_id_accepts(ssn):
    assert national_id_valid(ssn)


@pytest.mark.parametrize("ssn", [
    "000-45-6789",
    "666-45-6789",
    "912-45-6789",
    "123-00-6789",
    "123-45-0000",
    "123-45-678",
    "1234-56-7890",
])
def test_national_id_rejects(ssn):
    assert not national_id_valid(ssn)


# ── Dispatch ─────────────────────────────────────────────────────────

def test_validate_dispatches_by_category():
    assert validate(PIICategory.PAYMENT_CARD, "4532015112830366")
    assert not validate(PIICategory.PAYMENT_CARD, "4532015112830367")
    assert not validate(PIICategory.NATIONAL_ID, "666-45-6789")


def test_unvalidated_categories_always_pass():
    assert validate(PIICategory.EMAIL, "anything")
    assert validate(PIICategory.PHONE, "")
    assert validate(PIICategory.PERSON_NAME, "New York")

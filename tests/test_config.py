"""Tests for the dict/YAML config loader."""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

import pytest

from pii_detect import ConfigError, PIICategory, create_detector, load_config, load_from_yaml

SAMPLE = "Contact alice@example.com or 555-123-4567"


def test_defaults():
    cfg = load_config({})
    assert cfg["enabled"] is True
    assert cfg["categories"] == tuple(PIICategory)
    assert cfg["skip_categories"] == set()
    assert cfg["allow_list"] == set()


def test_nested_and_category_names():
    cfg = load_config({"pii_detect": {
        "skip_categories": ["PHONE", "person_name"],
        "allow_list": ["x@y.com"],
    }})
    assert cfg["skip_categories"] == {PIICategory.PHONE, PIICategory.PERSON_NAME}
    assert cfg["allow_list"] == {"x@y.com"}


def test_unknown_category():
    with pytest.raises(ConfigError, match="ssn_number"):
        load_config({"skip_categories": ["ssn_number"]})


def test_bad_types():
    with pytest.raises(ConfigError):
        load_config({"categories": "email"})
    with pytest.raises(ConfigError):
        load_config({"allow_list": "x@y.com"})
    with pytest.raises(ConfigError):
        load_config(["email"])


def test_nested_section_must_be_mapping():
    with pytest.raises(ConfigError, match="pii_detect"):
        load_config({"pii_detect": ["email"]})


def test_load_from_yaml(tmp_path):
    path = tmp_path / "pii.yaml"
    path.write_text(
        "pii_detect:\n"
        "  categories: [email, phone]\n"
        "  allow_list:\n"
        "    - alice@example.com\n"
    )
    cfg = load_from_yaml(path)
    assert cfg["categories"] == (PIICategory.EMAIL, PIICategory.PHONE)
    assert cfg["allow_list"] == {"alice@example.com"}


def test_load_from_empty_yaml(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert load_from_yaml(path)["enabled"] is True


def test_load_from_yaml_malformed(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("pii_detect: [unclosed\n")
    with pytest.raises(ConfigError, match="invalid YAML"):
        load_from_yaml(path)


def test_load_from_yaml_missing_file(tmp_path):
    with pytest.raises(ConfigError, match="cannot read config"):
        load_from_yaml(tmp_path / "missing.yaml")


def test_create_detector_applies_filters():
    detector = create_detector({"skip_categories": ["email"]})
    assert [m.value for m in detector.detect(SAMPLE)] == ["555-123-4567"]


def test_create_detector_from_normalized_config():
    cfg = load_config({"allow_list": ["555-123-4567"]})
    detector = create_detector(cfg)
    assert [m.value for m in detector.detect(SAMPLE)] == ["alice@example.com"]


def test_disabled_detector_reports_nothing():
    detector = create_detector({"enabled": False})
    assert detector.detect(SAMPLE) == []
    assert detector.detect_messages([SAMPLE]) == []

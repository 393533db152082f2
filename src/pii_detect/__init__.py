"""PII Detect — pattern-based PII detection with checksum validation."""

from .detector import Detector, DetectorConfig, detect_pii, detect_pii_in_messages
from .patterns import CATALOG, scan
from .validators import validate, luhn_valid, national_id_valid
from .report import build_report, render_report, format_report, summarize, summary_line
from .config import ConfigError, create_detector, load_config, load_from_yaml
from .types import PIICategory, PIIMatch, PIIValue, RawMatch, Recognizer, Report

__all__ = [
    "Detector", "DetectorConfig", "detect_pii", "detect_pii_in_messages",
    "CATALOG", "scan",
    "validate", "luhn_valid", "national_id_valid",
    "build_report", "render_report", "format_report", "summarize", "summary_line",
    "ConfigError", "create_detector", "load_config", "load_from_yaml",
    "PIICategory", "PIIMatch", "PIIValue", "RawMatch", "Recognizer", "Report",
]
__version__ = "0.1.0"

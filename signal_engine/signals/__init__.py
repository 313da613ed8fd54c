"""Signal extraction: raw repository telemetry -> normalized weighted signals."""

from .extractor import extract_signals, normalize_value, detect_tests, detect_contracts

__all__ = ["extract_signals", "normalize_value", "detect_tests", "detect_contracts"]

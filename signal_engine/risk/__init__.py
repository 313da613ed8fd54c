"""Risk detection over telemetry and derived signals."""

from .detector import detect_risk_flags

__all__ = ["detect_risk_flags"]

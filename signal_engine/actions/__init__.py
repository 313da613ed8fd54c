"""Next-action generation from risks and signal gaps."""

from .generator import generate_next_actions

__all__ = ["generate_next_actions"]

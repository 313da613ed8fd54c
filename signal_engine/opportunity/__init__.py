"""Opportunity card synthesis, export and action tracking."""

from .synthesizer import analyze_repository, generate_opportunity_card, momentum_label
from .export import card_to_markdown
from .progress import ActionProgress

__all__ = [
    "analyze_repository",
    "generate_opportunity_card",
    "momentum_label",
    "card_to_markdown",
    "ActionProgress",
]

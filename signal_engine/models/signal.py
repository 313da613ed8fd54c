"""Signal - Normalized, weighted observation derived from one telemetry metric."""

from typing import Literal, Union

from pydantic import BaseModel, Field

SignalCategory = Literal[
    "activity",
    "community",
    "code_quality",
    "documentation",
    "deployment",
    "team",
]


class Signal(BaseModel):
    """One normalized observation.

    Signals are recomputed on every analysis and never persisted on their own.
    """

    key: str = Field(..., description="Stable identifier, e.g. 'commits30d'")
    category: SignalCategory = Field(..., description="Signal category")
    raw_value: Union[bool, int, float, str] = Field(..., description="Original metric value")
    normalized_value: float = Field(..., ge=0.0, le=1.0, description="Normalized value in [0, 1]")
    label: str = Field(..., description="Human label")
    description: str = Field(..., description="Human description citing the raw value")
    weight: float = Field(..., ge=0.0, description="Fixed weight from the signal table")

    model_config = {"frozen": True}

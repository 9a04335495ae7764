# Licensed under the PolyForm Noncommercial License 1.0.0
"""Rocket Staging Calculator - delta-v, TWR and payload capacity of multi-stage rockets."""

from .models import (
    g0,
    Fuel,
    Engine,
    StagingError,
    ConfigurationError,
    DegenerateStageError,
)

from .core import (
    Stage,
    SimpleStage,
    BoostedStage,
    StageWithPayload,
    Rocket,
)
from .missions import (
    MissionConfig,
    reachable_destinations,
    max_payloads,
    max_payload_exact,
)
from .plotting import plot_flight_sequence

__version__ = "0.1.0"
__all__ = [
    "Fuel",
    "Engine",
    "Stage",
    "SimpleStage",
    "BoostedStage",
    "StageWithPayload",
    "Rocket",
    "MissionConfig",
    "reachable_destinations",
    "max_payloads",
    "max_payload_exact",
    "plot_flight_sequence",
    "StagingError",
    "ConfigurationError",
    "DegenerateStageError",
    "g0",
]

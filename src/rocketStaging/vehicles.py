# Licensed under the PolyForm Noncommercial License 1.0.0
"""Example launch vehicles assembled from the engine catalogue.

Structural masses are rough public figures; they are good enough to compare
configurations, not to reproduce flight data.
"""

from typing import Callable, Dict

from .core import BoostedStage, Rocket, SimpleStage
from .engines import (
    ALTAIR,
    AJ10_142,
    BELL_8081,
    CASTOR_1,
    H1,
    LR79_NA_11,
    LR89_NA_5,
    LR101_NA_3,
    LR101_NA_11,
    LR105_NA_5,
    RL10A_3_1,
    THRUSTER_2,
)

ATLAS_DECOUPLER_MASS = 1610.0  # Booster section dropped at staging (kg)


def probe(dry_mass: float, burn_time: float) -> SimpleStage:
    """A spacecraft with a single storable-propellant thruster, used as the top stage."""
    return SimpleStage(dry_mass, [THRUSTER_2.with_burn_time(burn_time)])


def atlas_agena(payload_mass: float = 0.0) -> Rocket:
    """Atlas LV-3 stage-and-a-half with an Agena B upper stage."""
    sustainer = SimpleStage(2600.0, [LR105_NA_5]).with_verniers(LR101_NA_3)
    booster_section = SimpleStage(ATLAS_DECOUPLER_MASS, [LR89_NA_5, LR89_NA_5])
    agena = SimpleStage(700.0, [BELL_8081])

    return Rocket([
        BoostedStage(sustainer, booster_section, 1),
        agena,
    ], payload_mass=payload_mass)


def thor_delta(payload_mass: float = 0.0) -> Rocket:
    """Thrust-augmented Thor with three Castor strap-ons, a Delta second stage and an Altair kick stage."""
    thor = SimpleStage(3000.0, [LR79_NA_11]).with_verniers(LR101_NA_11)
    castor = SimpleStage(700.0, [CASTOR_1])

    return Rocket([
        BoostedStage(thor, castor, 3),
        SimpleStage(690.0, [AJ10_142]),
        SimpleStage(60.0, [ALTAIR]),
    ], payload_mass=payload_mass)


def saturn_i(payload_mass: float = 0.0) -> Rocket:
    """Saturn I block II: eight H-1 engines under a six-RL10 S-IV."""
    return Rocket([
        SimpleStage(45000.0, [H1] * 8),
        SimpleStage(5200.0, [RL10A_3_1] * 6),
    ], payload_mass=payload_mass)


VEHICLES: Dict[str, Callable[..., Rocket]] = {
    "atlas-agena": atlas_agena,
    "thor-delta": thor_delta,
    "saturn-i": saturn_i,
}

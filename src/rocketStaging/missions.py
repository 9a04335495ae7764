# Licensed under the PolyForm Noncommercial License 1.0.0
"""Mission delta-v budgets and what a rocket can do with them."""

from dataclasses import dataclass
from typing import List, NamedTuple, Optional
import logging
from scipy.optimize import brentq

from .core import Rocket

logger = logging.getLogger(__name__)

# Delta-v budgets from the launch pad (m/s)
DV_TO_ORBIT = 9400.0
DV_TO_GTO = DV_TO_ORBIT + 2440.0
DV_TO_GEO = DV_TO_GTO + 1850.0
DV_TO_TLI = DV_TO_GTO + 680.0  # 3120 from orbit
DV_TO_LLO = DV_TO_TLI + 140.0 + 680.0
DV_TO_VENUS = DV_TO_TLI + 370.0  # 3490 from orbit
DV_TO_VENUS_ORBIT = DV_TO_VENUS + 3800.0
DV_TO_MARS = DV_TO_TLI + 480.0
DV_TO_MARS_ORBIT = DV_TO_MARS + 1200.0
DV_TO_MERCURY = DV_TO_VENUS + 2060.0
DV_TO_JUPITER = DV_TO_MARS + 2700.0


@dataclass(frozen=True)
class Destination:
    """
    A mission target.

    Attributes:
        name: Name used for reachability messages
        delta_v: Budget from the launch pad (m/s)
        payload_name: Name used in the max payload list
    """
    name: str
    delta_v: float
    payload_name: str


ORBIT = Destination("Orbit", DV_TO_ORBIT, "orbit")

DESTINATIONS = (
    Destination("GTO", DV_TO_GTO, "GTO"),
    Destination("GEO", DV_TO_GEO, "GEO"),
    Destination("The Moon", DV_TO_TLI, "TLI"),
    Destination("Lunar Orbit", DV_TO_LLO, "Lunar Orbit"),
    Destination("Venus", DV_TO_VENUS, "Venus"),
    Destination("Low Venus Orbit", DV_TO_VENUS_ORBIT, "Low Venus Orbit"),
    Destination("Mars", DV_TO_MARS, "Mars"),
    Destination("Low Martian Orbit", DV_TO_MARS_ORBIT, "Low Mars Orbit"),
    Destination("Mercury", DV_TO_MERCURY, "Mercury"),
    Destination("Jupiter", DV_TO_JUPITER, "Jupiter"),
)


@dataclass
class MissionConfig:
    # A destination counts as comfortably reachable above budget * margin
    comfortable_margin: float = 1.05
    # Max payloads beyond orbit are searched against budget * factor
    payload_safety_factor: float = 1.015


class Reachability(NamedTuple):
    destination: Destination
    comfortable: bool
    excess_delta_v: float


class ReachabilityReport(NamedTuple):
    delta_v: float
    reaches_orbit: bool
    destinations: List[Reachability]
    assumes_no_gravity_assists: bool


class PayloadCapacity(NamedTuple):
    destination: Destination
    payload_mass: float


def reachable_destinations(delta_v: float, config: Optional[MissionConfig] = None) -> ReachabilityReport:
    """
    Classify every destination beyond orbit for a given delta-v.

    Destinations the rocket cannot reach are left out. The rest are either
    comfortable (more than the configured margin above budget) or reachable
    without safety margins.
    """
    config = config or MissionConfig()

    reachable = []
    for destination in DESTINATIONS:
        if delta_v > destination.delta_v * config.comfortable_margin:
            reachable.append(Reachability(destination, True, delta_v - destination.delta_v))
        elif delta_v > destination.delta_v:
            reachable.append(Reachability(destination, False, delta_v - destination.delta_v))

    return ReachabilityReport(
        delta_v=delta_v,
        reaches_orbit=delta_v > DV_TO_ORBIT,
        destinations=reachable,
        assumes_no_gravity_assists=delta_v > DV_TO_GTO,
    )


def max_payloads(rocket: Rocket, config: Optional[MissionConfig] = None) -> List[PayloadCapacity]:
    """
    Largest stepped payload the rocket can send to each destination.

    Orbit is searched against its bare budget, everything further out against
    the budget times the safety factor. Destinations the rocket cannot carry
    any payload to are left out. The rocket's payload mass is restored
    afterwards.
    """
    config = config or MissionConfig()

    targets = [(ORBIT, ORBIT.delta_v)]
    targets += [(destination, destination.delta_v * config.payload_safety_factor) for destination in DESTINATIONS]

    original_payload = rocket.payload_mass
    capacities = []
    try:
        for destination, required_dv in targets:
            payload = rocket.set_payload_for_target_deltav(required_dv)
            logger.debug("Max payload to %s (%.0f m/s): %.0f kg", destination.payload_name, required_dv, payload)
            if payload > 0:
                capacities.append(PayloadCapacity(destination, payload))
    finally:
        rocket.payload_mass = original_payload

    return capacities


def max_payload_exact(rocket: Rocket, target_delta_v: float, xtol: float = 1e-3) -> float:
    """
    Payload mass at which the rocket's delta-v drops exactly to a target.

    Unlike ``Rocket.set_payload_for_target_deltav`` this brackets the root
    and refines it with Brent's method, and it leaves the rocket untouched.

    Args:
        rocket: Rocket to evaluate, its current payload mass is ignored
        target_delta_v: Delta-v the rocket must reach (m/s)
        xtol: Absolute tolerance on the returned mass (kg)

    Returns:
        Payload mass (kg), or 0 if the rocket cannot beat the target at all
    """
    if not target_delta_v > 0:
        raise ValueError(f"Target delta-v must be positive, got {target_delta_v}")

    def excess(payload_mass):
        return rocket.with_payload_mass(payload_mass).delta_v() - target_delta_v

    if excess(0.0) <= 0:
        return 0.0

    upper = 100.0
    while excess(upper) > 0:
        upper *= 2.0
    logger.debug("Bracketed payload for %.0f m/s in [%.0f, %.0f] kg", target_delta_v, upper / 2.0, upper)

    return float(brentq(excess, 0.0, upper, xtol=xtol))


def format_burn_time(seconds: float) -> str:
    """Format whole seconds as '2m', '45s' or '2m 30s'."""
    minutes, seconds = divmod(int(seconds), 60)
    if seconds == 0:
        return f"{minutes}m"
    if minutes == 0:
        return f"{seconds}s"
    return f"{minutes}m {seconds}s"


class StageRow(NamedTuple):
    index: int
    delta_v: float
    wet_mass: float
    dry_mass: float
    twr: float
    max_g_force: float
    burn_time: float


def stage_table(rocket: Rocket) -> List[StageRow]:
    """Performance figures for each segment of the flight sequence, top segment first."""
    rows = [
        StageRow(index, stage.delta_v(), stage.wet_mass(), stage.dry_mass(),
                 stage.twr(), stage.max_g_force(), stage.burn_time())
        for index, stage in enumerate(rocket.stages())
    ]
    return rows[::-1]

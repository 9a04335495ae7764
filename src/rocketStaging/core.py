# Licensed under the PolyForm Noncommercial License 1.0.0
"""Core staging logic: stage variants, payload stacking and the rocket flight sequence."""

from abc import ABC, abstractmethod
from typing import Dict, Iterator, List, Optional, Sequence
import logging
import numpy as np

from .models import g0, Engine, ConfigurationError, DegenerateStageError

logger = logging.getLogger(__name__)


class Stage(ABC):
    """
    A set of engines firing together, and the mass they push.

    Concrete stages only provide ``engines``, ``dry_mass`` and ``wet_mass``;
    every performance figure is derived from those three.
    """

    @abstractmethod
    def engines(self) -> List[Engine]:
        """Every engine firing during this stage, repeated once per installed unit."""

    @abstractmethod
    def dry_mass(self) -> float:
        """Mass at the end of this stage's burn (kg)."""

    @abstractmethod
    def wet_mass(self) -> float:
        """Mass at ignition (kg)."""

    def next_stage(self) -> Optional["Stage"]:
        """Stage left over once this one ends, for stages that shed parts mid-burn."""
        return None

    def burn_time(self) -> float:
        return max((engine.burn_time for engine in self.engines()), default=0.0)

    def isp(self) -> float:
        """Thrust-weighted specific impulse of all engines (s)."""
        engines = self.engines()
        if not engines:
            raise DegenerateStageError(f"{type(self).__name__} has no engines, specific impulse is undefined")

        thrust = np.array([engine.thrust for engine in engines])
        isp = np.array([engine.isp for engine in engines])
        return float(thrust.sum() / (thrust / isp).sum())

    def delta_v(self) -> float:
        """Ideal velocity change from the rocket equation (m/s)."""
        return float(self.isp() * np.log(self.wet_mass() / self.dry_mass()) * g0)

    def thrust_newtons(self) -> float:
        return float(sum(engine.thrust * 1000.0 for engine in self.engines()))

    def twr(self) -> float:
        """Thrust-to-weight ratio at ignition."""
        return self.thrust_newtons() / self.wet_mass() / g0

    def max_g_force(self) -> float:
        """Acceleration in g once this stage's propellant is spent."""
        return self.thrust_newtons() / self.dry_mass() / g0

    def propellants_required(self) -> Dict[str, float]:
        """Total consumption of each fuel over the stage, keyed by fuel name."""
        result: Dict[str, float] = {}
        for engine in self.engines():
            for fuel, amount in engine.propellants_required().items():
                result[fuel.name] = result.get(fuel.name, 0.0) + amount
        return result


class SimpleStage(Stage):
    """
    Structure plus a group of engines that light together and burn in parallel.

    Engines are expected to be time-aligned already: an engine whose nominal
    burn differs from the stage's (verniers, for example) should be passed in
    through ``Engine.with_burn_time``.
    """

    def __init__(self, dry_mass: float, engines: Sequence[Engine]):
        """
        Args:
            dry_mass: Stage hardware mass without propellant (kg), engines included
            engines: Engines firing during this stage
        """
        if not dry_mass > 0:
            raise ConfigurationError(f"Stage dry mass must be positive, got {dry_mass}")
        if not engines:
            raise ConfigurationError("A stage needs at least one engine")

        self._dry_mass = float(dry_mass)
        self._engines = tuple(engines)

    def __repr__(self):
        names = ", ".join(engine.name for engine in self._engines)
        return f"SimpleStage(dry_mass={self._dry_mass}, engines=[{names}])"

    def engines(self) -> List[Engine]:
        return list(self._engines)

    def dry_mass(self) -> float:
        return self._dry_mass

    def wet_mass(self) -> float:
        return self._dry_mass + sum(engine.propellant_mass_for_full_burn() for engine in self._engines)

    def with_remaining_burn_time(self, burn_time: float) -> "SimpleStage":
        """Copy of this stage with every engine cut to ``burn_time`` seconds."""
        return SimpleStage(self._dry_mass, [engine.with_burn_time(burn_time) for engine in self._engines])

    def with_verniers(self, vernier: Engine) -> "SimpleStage":
        """Copy of this stage with a pair of verniers burning as long as the first engine."""
        vernier = vernier.with_burn_time(self._engines[0].burn_time)
        return SimpleStage(self._dry_mass, list(self._engines) + [vernier, vernier])


class BoostedStage(Stage):
    """
    A core stage with identical strap-on boosters that burn alongside it.

    The boosted configuration only lasts until the boosters burn out, so
    ``burn_time`` reports the booster's burn time rather than the longest
    engine's. At that point the boosters are dropped and ``next_stage``
    returns the core alone with whatever burn time it has left.
    """

    def __init__(self, core: SimpleStage, booster: SimpleStage, booster_count: int):
        """
        Args:
            core: The central stage, with its full nominal burn
            booster: A single booster unit
            booster_count: Number of booster units strapped to the core
        """
        if booster_count < 0:
            raise ConfigurationError(f"Booster count must not be negative, got {booster_count}")
        if core.burn_time() < booster.burn_time():
            raise ConfigurationError(
                f"Boosters burn for {booster.burn_time()} s but the core only burns for "
                f"{core.burn_time()} s; boosters must separate before the core burns out"
            )

        self.core = core
        self.booster = booster
        self.booster_count = int(booster_count)

    def __repr__(self):
        return f"BoostedStage(core={self.core!r}, booster={self.booster!r}, booster_count={self.booster_count})"

    def stage_after_booster_separation(self) -> SimpleStage:
        return self.core.with_remaining_burn_time(self.core.burn_time() - self.booster.burn_time())

    def engines(self) -> List[Engine]:
        return self.core.engines() + self.booster.engines() * self.booster_count

    def burn_time(self) -> float:
        return self.booster.burn_time()

    def dry_mass(self) -> float:
        # The core still holds its remaining propellant when the boosters burn out
        return self.stage_after_booster_separation().wet_mass() + self.booster.dry_mass() * self.booster_count

    def wet_mass(self) -> float:
        return self.core.wet_mass() + self.booster.wet_mass() * self.booster_count

    def next_stage(self) -> Optional[Stage]:
        return self.stage_after_booster_separation()


class StageWithPayload(Stage):
    """A stage carrying inert mass: the stages stacked above it plus the final payload."""

    def __init__(self, stage: Stage, payload_mass: float):
        if not payload_mass >= 0:
            raise ConfigurationError(f"Payload mass must not be negative, got {payload_mass}")

        self.stage = stage
        self.payload_mass = float(payload_mass)

    def __repr__(self):
        return f"StageWithPayload(stage={self.stage!r}, payload_mass={self.payload_mass})"

    def engines(self) -> List[Engine]:
        return self.stage.engines()

    def dry_mass(self) -> float:
        return self.stage.dry_mass() + self.payload_mass

    def wet_mass(self) -> float:
        return self.stage.wet_mass() + self.payload_mass

    def burn_time(self) -> float:
        return self.stage.burn_time()

    def next_stage(self) -> Optional[Stage]:
        inner = self.stage.next_stage()
        if inner is None:
            return None
        return StageWithPayload(inner, self.payload_mass)


class Rocket:
    """
    A stack of stages, bottom first, with a payload on top.

    The stack is what gets assembled; what actually flies is the flight
    sequence from ``stages()``, where every stage carries everything above
    it and boosted stages are split at booster separation.
    """

    def __init__(self, stages: Optional[Sequence[Stage]] = None, payload_mass: float = 0.0):
        """
        Initialize the rocket.

        Args:
            stages: Stages in firing order (bottom stage first)
            payload_mass: Mass carried above the top stage (kg)
        """
        stages = list(stages or [])
        for stage in stages:
            if not isinstance(stage, Stage):
                raise ConfigurationError(f"Rocket stages must be Stage instances, got {type(stage).__name__}")

        self.stack = stages
        self.payload_mass = payload_mass

    @property
    def payload_mass(self) -> float:
        return self._payload_mass

    @payload_mass.setter
    def payload_mass(self, value: float):
        if not value >= 0:
            raise ConfigurationError(f"Payload mass must not be negative, got {value}")
        self._payload_mass = float(value)

    def __repr__(self):
        return f"Rocket(stages={self.stack!r}, payload_mass={self.payload_mass})"

    def with_payload(self, payload: Stage) -> "Rocket":
        """New rocket with ``payload`` stacked on top as the final stage and no extra payload mass."""
        return Rocket(self.stack + [payload], payload_mass=0.0)

    def with_payload_mass(self, payload_mass: float) -> "Rocket":
        return Rocket(self.stack, payload_mass=payload_mass)

    def stages(self) -> Iterator[Stage]:
        """
        Yield the flight sequence, bottom stage first.

        Each stacked stage is wrapped with the wet mass of every stage above
        it plus the payload. Stages that shed parts in flight (boosted stages)
        are followed by their continuation, which keeps the same payload.
        """
        payload_mass = self.payload_mass
        for position, stage in enumerate(self.stack):
            upper_stage_mass = sum(upper.wet_mass() for upper in self.stack[position + 1:])
            current: Optional[Stage] = StageWithPayload(stage, upper_stage_mass + payload_mass)
            while current is not None:
                logger.debug("Flight segment %s: %r", position, current)
                yield current
                current = current.next_stage()

    def flight_sequence(self) -> List[Stage]:
        return list(self.stages())

    def delta_v(self) -> float:
        """Total delta-v over the flight sequence (m/s)."""
        return float(sum(stage.delta_v() for stage in self.stages()))

    def max_g_force(self) -> float:
        """Highest acceleration (g) reached by any segment of the flight sequence."""
        g_forces = np.array([stage.max_g_force() for stage in self.stages()])
        if g_forces.size == 0:
            return 0.0
        if np.isnan(g_forces).any():
            raise DegenerateStageError("Max g-force is undefined for at least one flight segment")
        return float(g_forces.max())

    def set_payload_for_target_deltav(self, target_delta_v: float) -> float:
        """
        Set the payload mass to the largest stepped value that keeps delta-v above a target.

        Payload grows from zero in steps of 10 kg below 50 kg, 50 kg below
        500 kg and 100 kg beyond that, until delta-v drops to the target or
        below. The payload is left at the last value tested before that
        happened, so the result undershoots the true maximum by up to one step.

        Args:
            target_delta_v: Delta-v the rocket must exceed (m/s)

        Returns:
            The payload mass that was set (kg)
        """
        if not target_delta_v > 0:
            raise ValueError(f"Target delta-v must be positive, got {target_delta_v}")

        self.payload_mass = 0.0
        last_mass = 0.0
        while self.delta_v() > target_delta_v:
            last_mass = self.payload_mass
            if self.payload_mass < 50.0:
                self.payload_mass += 10.0
            elif self.payload_mass < 500.0:
                self.payload_mass += 50.0
            else:
                self.payload_mass += 100.0

        logger.debug("Payload search for %.0f m/s stopped at %.0f kg", target_delta_v, last_mass)
        self.payload_mass = last_mass
        return last_mass

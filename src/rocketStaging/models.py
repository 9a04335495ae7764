# Licensed under the PolyForm Noncommercial License 1.0.0
"""Data models and constants for the staging calculator."""

from dataclasses import dataclass, replace
from typing import Dict, Tuple

# Physical constants
g0 = 9.82  # Gravity used for Isp and TWR (m/s^2), kept for compatibility with published tables


class StagingError(ValueError):
    """Base class for invalid rocket configurations and undefined results."""


class ConfigurationError(StagingError):
    """Raised when an engine, stage or rocket is assembled from inconsistent parts."""


class DegenerateStageError(StagingError):
    """Raised when a performance figure is mathematically undefined for a stage."""


@dataclass(frozen=True)
class Fuel:
    """A propellant component.

    Attributes:
        name: Label used when summing propellant requirements
        density: Mass per unit of consumed volume (kg per consumption unit)
    """
    name: str
    density: float

    def __post_init__(self):
        if not self.density > 0:
            raise ConfigurationError(f"Fuel {self.name!r} must have a positive density, got {self.density}")


KEROSENE = Fuel("Kerosene", 0.82)
LIQUID_OXYGEN = Fuel("LqdOxygen", 1.141)

UDMH = Fuel("UDMH", 0.791)
IRFNA_III = Fuel("IRFNA-III", 1.658)
IWFNA = Fuel("IWFNA", 1.513)
LIQUID_HYDROGEN = Fuel("Liquid Hydrogen", 0.07085)

PSPC = Fuel("PSPC", 1.74)
HTPB = Fuel("HTPB", 1.77)

HYDRAZINE = Fuel("Hydrazine", 1.004)
CAVEA_B = Fuel("Cavea-B", 1.501)
AEROZINE50 = Fuel("Aerozine50", 0.9)
NTO = Fuel("NTO", 1.45)


@dataclass(frozen=True)
class Engine:
    """A rocket engine at its nominal operating point.

    Attributes:
        name: Engine designation
        fuel_consumption: Pairs of (Fuel, consumption rate per second)
        isp: Specific impulse (s)
        thrust: Thrust (kN)
        mass: Engine hardware mass (kg), informational only
        burn_time: Nominal burn duration (s)
    """
    name: str
    fuel_consumption: Tuple[Tuple[Fuel, float], ...]
    isp: float
    thrust: float
    mass: float
    burn_time: float

    def __post_init__(self):
        # Accept lists from callers but store a hashable tuple
        object.__setattr__(self, "fuel_consumption", tuple((fuel, rate) for fuel, rate in self.fuel_consumption))

        if not self.burn_time >= 0:
            raise ConfigurationError(f"Engine {self.name!r} has negative burn time {self.burn_time}")

        fuels = [fuel for fuel, _ in self.fuel_consumption]
        if len(set(fuels)) != len(fuels):
            raise ConfigurationError(f"Engine {self.name!r} lists the same fuel more than once")

    def propellant_mass_per_second(self) -> float:
        """Mass of propellant consumed per second of burn (kg/s)."""
        return float(sum(fuel.density * rate for fuel, rate in self.fuel_consumption))

    def propellants_required(self) -> Dict[Fuel, float]:
        """Consumed amount of each fuel over the full burn."""
        return {fuel: rate * self.burn_time for fuel, rate in self.fuel_consumption}

    def propellant_mass_for_full_burn(self) -> float:
        return self.propellant_mass_per_second() * self.burn_time

    def with_burn_time(self, burn_time: float) -> "Engine":
        """Return a copy of this engine that burns for ``burn_time`` seconds.

        Used to tie vernier engines to a sustainer's burn, and to cut the core
        engines of a boosted stage down to their post-separation remainder.
        """
        return replace(self, burn_time=burn_time)

"""Body-type classification for orbital slots."""

from dataclasses import dataclass, field
from typing import Optional

from ..models.enums import GasGiantClass, PlanetType, PlanetZone, RockyType
from ..utils.constants import (
    BELT_BAND_AU,
    BELT_CHANCE,
    GAS_GIANT_CLASS_LIMITS,
    INNER_ZONE_LIMIT_AU,
    MIDDLE_ZONE_LIMIT_AU,
)
from ..utils.physics import equilibrium_temperature
from ..utils.rng import RandomFn

# Chance that a slot in each zone yields a gas or ice giant
GIANT_CHANCE = {
    PlanetZone.INNER: 0.25,
    PlanetZone.MIDDLE: 1.0,
    PlanetZone.OUTER: 0.85,
}

HOT_JUPITER_CLASSES = (GasGiantClass.CLASS_IV, GasGiantClass.CLASS_V)


@dataclass
class PlanetBaseProperties:
    """Outcome of classifying a planet slot."""

    zone: PlanetZone
    is_gas_giant: bool
    density: float  # kg/m^3
    mass_factor: float  # Multiplier on the base Earth-mass roll
    ring_chance: float
    ring_types: list[RockyType] = field(default_factory=list)
    temperature_k: float = 0.0  # Equilibrium temperature estimate
    gas_giant_class: Optional[GasGiantClass] = None
    planet_type: Optional[PlanetType] = None  # Fixed rocky sub-type, if any

    @property
    def is_hot_jupiter(self) -> bool:
        return self.is_gas_giant and self.gas_giant_class in HOT_JUPITER_CLASSES


def is_asteroid_belt_slot(random: RandomFn, distance_au: float) -> bool:
    """15% roll for a belt, honored only inside the 2-10 AU band."""
    roll = random()
    low, high = BELT_BAND_AU
    return roll < BELT_CHANCE and low <= distance_au <= high


def zone_for_distance(distance_au: float) -> PlanetZone:
    if distance_au < INNER_ZONE_LIMIT_AU:
        return PlanetZone.INNER
    if distance_au < MIDDLE_ZONE_LIMIT_AU:
        return PlanetZone.MIDDLE
    return PlanetZone.OUTER


def classify_gas_giant(temperature_k: float, zone: PlanetZone) -> GasGiantClass:
    """Sudarsky class from equilibrium temperature.

    Outer-zone ice giants never rise above CLASS_III, however luminous the
    star.
    """
    classes = list(GasGiantClass)
    gas_giant_class = classes[-1]
    for limit, candidate in zip(GAS_GIANT_CLASS_LIMITS, classes):
        if temperature_k < limit:
            gas_giant_class = candidate
            break
    if zone == PlanetZone.OUTER and gas_giant_class in HOT_JUPITER_CLASSES:
        return GasGiantClass.CLASS_III
    return gas_giant_class


def determine_planet_type(
    random: RandomFn,
    distance_au: float,
    star_temperature_k: float,
    star_radius_m: float,
) -> PlanetBaseProperties:
    """Classify a planet slot by its distance from the parent star.

    Args:
        random: Seeded random source
        distance_au: Orbit radius around the parent star
        star_temperature_k: Parent star's effective temperature
        star_radius_m: Parent star's radius

    Returns:
        Zone, giant/rocky decision, density, mass factor and ring settings
    """
    zone = zone_for_distance(distance_au)
    temperature = equilibrium_temperature(star_radius_m, star_temperature_k, distance_au)
    is_giant = random() < GIANT_CHANCE[zone]

    if zone == PlanetZone.INNER:
        if is_giant:
            base = PlanetBaseProperties(
                zone=zone,
                is_gas_giant=True,
                density=600 + random() * 900,
                mass_factor=15 + random() * 50,
                ring_chance=0.05,
                ring_types=[RockyType.METALLIC, RockyType.DARK_ROCK, RockyType.DUST],
            )
        else:
            base = PlanetBaseProperties(
                zone=zone,
                is_gas_giant=False,
                density=3500 + random() * 2500,
                mass_factor=1.0,
                ring_chance=0.01,
                ring_types=[RockyType.LIGHT_ROCK, RockyType.DARK_ROCK],
            )
    elif zone == PlanetZone.MIDDLE:
        base = PlanetBaseProperties(
            zone=zone,
            is_gas_giant=True,
            density=600 + random() * 900,
            mass_factor=20 + random() * 100,
            ring_chance=0.1,
            ring_types=[RockyType.METALLIC, RockyType.DUST],
        )
    elif is_giant:
        base = PlanetBaseProperties(
            zone=zone,
            is_gas_giant=True,
            density=1200 + random() * 800,
            mass_factor=5 + random() * 20,
            ring_chance=0.2,
            ring_types=[RockyType.ICE, RockyType.ICE_DUST],
        )
    else:
        base = PlanetBaseProperties(
            zone=zone,
            is_gas_giant=False,
            density=2000 + random() * 2000,
            mass_factor=1.0,
            ring_chance=0.15,
            ring_types=[RockyType.ICE, RockyType.ICE_DUST],
            planet_type=PlanetType.ICE,
        )

    base.temperature_k = temperature
    if base.is_gas_giant:
        base.gas_giant_class = classify_gas_giant(temperature, zone)
    return base

"""Payload generation for rocky worlds, moons and gas giants.

Rocky worlds get a composition, an optional atmosphere with clouds and a
procedural surface parameter set. Gas giants get a zone-dependent atmosphere
and class-dependent colors.
"""

import logging
from typing import Optional

from ..models.enums import (
    AtmosphereType,
    GasGiantClass,
    PlanetType,
    PlanetZone,
    SurfaceType,
)
from ..models.properties import (
    AtmosphereProperties,
    CloudProperties,
    GasGiantAtmosphere,
    GasGiantProperties,
    PlanetProperties,
    SurfaceProperties,
)
from ..utils.rng import RandomFn, get_random_in_range, get_random_item

logger = logging.getLogger(__name__)

# Sub-type pool for rocky planets outside the ice zone (weighted by repetition)
ROCKY_SUBTYPES = [
    PlanetType.ROCKY,
    PlanetType.TERRESTRIAL,
    PlanetType.DESERT,
    PlanetType.LAVA,
    PlanetType.BARREN,
    PlanetType.ROCKY,
    PlanetType.TERRESTRIAL,
    PlanetType.BARREN,
]

COMPOSITIONS = {
    PlanetType.ROCKY: ["silicates", "iron", "magnesium"],
    PlanetType.TERRESTRIAL: ["silicates", "iron", "water", "nitrogen"],
    PlanetType.DESERT: ["silicates", "iron oxide", "quartz"],
    PlanetType.LAVA: ["basalt", "sulfur", "molten silicates"],
    PlanetType.BARREN: ["silicates", "regolith"],
    PlanetType.ICE: ["water ice", "methane ice", "silicates"],
    PlanetType.OCEAN: ["water", "silicates"],
}

# Chance of any atmosphere per sub-type; unlisted sub-types use the default
ATMOSPHERE_CHANCE = {
    PlanetType.TERRESTRIAL: 1.0,
    PlanetType.BARREN: 0.0,
    PlanetType.ICE: 0.1,
}
DEFAULT_ATMOSPHERE_CHANCE = 0.6

ATMOSPHERE_GASES = {
    PlanetType.TERRESTRIAL: ["N2", "O2", "Ar"],
    PlanetType.LAVA: ["SO2", "CO2", "N2"],
    PlanetType.ICE: ["N2", "CH4"],
    PlanetType.OCEAN: ["N2", "O2", "H2O"],
}
DEFAULT_ATMOSPHERE_GASES = ["CO2", "N2"]

GLOW_COLORS = {
    PlanetType.TERRESTRIAL: "#87ceeb",
    PlanetType.DESERT: "#e0b080",
    PlanetType.LAVA: "#ff6a00",
    PlanetType.ICE: "#cfe8ff",
}
DEFAULT_GLOW_COLOR = "#c0c0c0"

# (intensity, power, thickness)
GLOW_PARAMETERS = {
    AtmosphereType.THIN: (0.5, 1.5, 0.05),
    AtmosphereType.NORMAL: (1.0, 2.0, 0.1),
    AtmosphereType.DENSE: (1.5, 2.5, 0.15),
}

# (opacity range, coverage range, speed range)
CLOUD_PARAMETERS = {
    AtmosphereType.THIN: ((0.1, 0.3), (0.1, 0.3), (0.5, 1.5)),
    AtmosphereType.NORMAL: ((0.3, 0.6), (0.3, 0.6), (1.0, 2.0)),
    AtmosphereType.DENSE: ((0.6, 0.9), (0.6, 0.95), (1.5, 3.0)),
}

SURFACE_TEMPLATES = {
    PlanetType.ROCKY: {
        "surface_types": [SurfaceType.CRATERED, SurfaceType.MOUNTAINOUS, SurfaceType.CANYONOUS],
        "palettes": [
            ["#3b3027", "#5c4a3a", "#7a6552", "#9c8a76", "#c2b5a3"],
            ["#2e2a26", "#4d453d", "#6e6458", "#8f8576", "#b3aa9c"],
        ],
        "persistence": (0.45, 0.6),
        "lacunarity": (1.8, 2.2),
        "octaves": 6,
        "bump_scale": (0.3, 0.6),
        "roughness": (0.6, 0.9),
        "terrain_type": 2,
        "terrain_amplitude": (0.3, 0.6),
        "terrain_sharpness": (0.5, 0.9),
        "shininess": 10.0,
        "specular_strength": 0.1,
    },
    PlanetType.TERRESTRIAL: {
        "surface_types": [SurfaceType.VARIED, SurfaceType.MOUNTAINOUS, SurfaceType.FLAT],
        "palettes": [
            ["#1a4d7a", "#c2b280", "#2e6b3f", "#6b5a3a", "#f0f0f0"],
            ["#123f66", "#d1c08a", "#3d7a34", "#7a6a4a", "#ffffff"],
        ],
        "persistence": (0.4, 0.55),
        "lacunarity": (1.9, 2.2),
        "octaves": 7,
        "bump_scale": (0.2, 0.4),
        "roughness": (0.4, 0.7),
        "terrain_type": 1,
        "terrain_amplitude": (0.2, 0.5),
        "terrain_sharpness": (0.3, 0.6),
        "shininess": 30.0,
        "specular_strength": 0.3,
    },
    PlanetType.DESERT: {
        "surface_types": [SurfaceType.FLAT, SurfaceType.CANYONOUS],
        "palettes": [
            ["#8a5a2b", "#b07a40", "#d19a5a", "#e3b878", "#f2d9a6"],
            ["#7a4a2a", "#a0643a", "#c2844f", "#d9a56e", "#ecc998"],
        ],
        "persistence": (0.35, 0.5),
        "lacunarity": (1.8, 2.1),
        "octaves": 5,
        "bump_scale": (0.1, 0.3),
        "roughness": (0.7, 0.95),
        "terrain_type": 3,
        "terrain_amplitude": (0.1, 0.3),
        "terrain_sharpness": (0.2, 0.5),
        "shininess": 5.0,
        "specular_strength": 0.05,
    },
    PlanetType.LAVA: {
        "surface_types": [SurfaceType.VOLCANIC],
        "palettes": [
            ["#ff4500", "#c23000", "#5a1a0a", "#2a1a14", "#1a1410"],
            ["#ff7a00", "#d14000", "#6a2010", "#33201a", "#1f1812"],
        ],
        "persistence": (0.5, 0.65),
        "lacunarity": (2.0, 2.4),
        "octaves": 6,
        "bump_scale": (0.4, 0.8),
        "roughness": (0.5, 0.8),
        "terrain_type": 2,
        "terrain_amplitude": (0.4, 0.8),
        "terrain_sharpness": (0.6, 1.0),
        "shininess": 50.0,
        "specular_strength": 0.4,
    },
    PlanetType.BARREN: {
        "surface_types": [SurfaceType.CRATERED, SurfaceType.FLAT],
        "palettes": [
            ["#4a4a4a", "#5e5e5e", "#737373", "#8c8c8c", "#a6a6a6"],
            ["#3d3a36", "#524e49", "#69645d", "#817b73", "#9c968d"],
        ],
        "persistence": (0.4, 0.55),
        "lacunarity": (1.8, 2.1),
        "octaves": 5,
        "bump_scale": (0.3, 0.5),
        "roughness": (0.8, 1.0),
        "terrain_type": 1,
        "terrain_amplitude": (0.2, 0.4),
        "terrain_sharpness": (0.4, 0.7),
        "shininess": 2.0,
        "specular_strength": 0.02,
    },
    PlanetType.ICE: {
        "surface_types": [SurfaceType.ICE_FLATS, SurfaceType.CRATERED],
        "palettes": [
            ["#9ec9e8", "#b8d8ee", "#d0e6f4", "#e6f2fa", "#ffffff"],
            ["#a8c4d6", "#c0d6e4", "#d6e6f0", "#eaf3f8", "#fafdff"],
        ],
        "persistence": (0.35, 0.5),
        "lacunarity": (1.8, 2.0),
        "octaves": 5,
        "bump_scale": (0.1, 0.3),
        "roughness": (0.2, 0.5),
        "terrain_type": 3,
        "terrain_amplitude": (0.1, 0.3),
        "terrain_sharpness": (0.2, 0.5),
        "shininess": 80.0,
        "specular_strength": 0.6,
    },
}
FALLBACK_SURFACE_TYPE = PlanetType.BARREN

# Height thresholds before jitter, lowest to highest elevation
BASE_HEIGHTS = [0.0, 0.25, 0.5, 0.75, 0.9]

GAS_GIANT_ATMOSPHERES = {
    PlanetZone.INNER: (AtmosphereType.VERY_DENSE, ["H2", "He", "Na", "K"], 10.0, 100.0),
    PlanetZone.MIDDLE: (AtmosphereType.NORMAL, ["H2", "He", "CH4", "NH3"], 1.0, 10.0),
    PlanetZone.OUTER: (AtmosphereType.THIN, ["H2", "He", "CH4"], 0.1, 1.0),
}

# (atmosphere color, cloud color) per class
GAS_GIANT_COLORS = {
    GasGiantClass.CLASS_I: ("#d8c8a8", "#f0e6d0"),
    GasGiantClass.CLASS_II: ("#e8e8f0", "#ffffff"),
    GasGiantClass.CLASS_III: ("#5a8ac6", "#8fb3de"),
    GasGiantClass.CLASS_IV: ("#4a3a30", "#7a6050"),
    GasGiantClass.CLASS_V: ("#a04020", "#d07040"),
}


def pick_rocky_subtype(random: RandomFn) -> PlanetType:
    return get_random_item(ROCKY_SUBTYPES, random)


def create_surface_properties(random: RandomFn, planet_type: PlanetType) -> SurfaceProperties:
    """Fill the procedural surface parameters for a rocky sub-type.

    Sub-types without a template fall back to the BARREN template.
    """
    template = SURFACE_TEMPLATES.get(planet_type)
    if template is None:
        logger.warning(
            f"No surface template for {planet_type.value}; "
            f"using {FALLBACK_SURFACE_TYPE.value}"
        )
        template = SURFACE_TEMPLATES[FALLBACK_SURFACE_TYPE]

    heights = [
        min(1.0, max(0.0, h + (random() - 0.5) * 0.1)) if i > 0 else 0.0
        for i, h in enumerate(BASE_HEIGHTS)
    ]
    heights.sort()

    return SurfaceProperties(
        planet_type=planet_type,
        surface_type=get_random_item(template["surface_types"], random),
        roughness=get_random_in_range(*template["roughness"], random),
        persistence=get_random_in_range(*template["persistence"], random),
        lacunarity=get_random_in_range(*template["lacunarity"], random),
        octaves=template["octaves"],
        simple_period=get_random_in_range(2.0, 6.0, random),
        bump_scale=get_random_in_range(*template["bump_scale"], random),
        colors=list(get_random_item(template["palettes"], random)),
        heights=heights,
        shininess=template["shininess"],
        specular_strength=template["specular_strength"],
        terrain_type=template["terrain_type"],
        terrain_amplitude=get_random_in_range(*template["terrain_amplitude"], random),
        terrain_sharpness=get_random_in_range(*template["terrain_sharpness"], random),
    )


def create_atmosphere(
    random: RandomFn, planet_type: PlanetType
) -> Optional[AtmosphereProperties]:
    """Roll an atmosphere for a rocky sub-type, or None."""
    chance = ATMOSPHERE_CHANCE.get(planet_type, DEFAULT_ATMOSPHERE_CHANCE)
    if random() >= chance:
        return None

    if planet_type == PlanetType.ICE:
        atmosphere_type = AtmosphereType.THIN
        pressure = random() * 0.1
    else:
        atmosphere_type = get_random_item(
            [AtmosphereType.THIN, AtmosphereType.NORMAL, AtmosphereType.DENSE], random
        )
        if atmosphere_type == AtmosphereType.THIN:
            pressure = random() * 0.5
        elif atmosphere_type == AtmosphereType.NORMAL:
            pressure = 0.5 + random()
        else:
            pressure = 1.5 + random() * 5

    intensity, power, thickness = GLOW_PARAMETERS[atmosphere_type]
    return AtmosphereProperties(
        type=atmosphere_type,
        pressure=pressure,
        composition=list(ATMOSPHERE_GASES.get(planet_type, DEFAULT_ATMOSPHERE_GASES)),
        glow_color=GLOW_COLORS.get(planet_type, DEFAULT_GLOW_COLOR),
        intensity=intensity,
        power=power,
        thickness=thickness,
    )


def create_clouds(
    random: RandomFn, planet_type: PlanetType, atmosphere: AtmosphereProperties
) -> CloudProperties:
    opacity, coverage, speed = CLOUD_PARAMETERS[atmosphere.type]
    return CloudProperties(
        color="#4a4a4a" if planet_type == PlanetType.LAVA else "#ffffff",
        opacity=get_random_in_range(*opacity, random),
        coverage=get_random_in_range(*coverage, random),
        speed=get_random_in_range(*speed, random),
    )


def create_rocky_properties(
    random: RandomFn,
    planet_type: PlanetType,
    is_moon: bool = False,
    parent_planet: Optional[str] = None,
) -> PlanetProperties:
    """Build the payload of a rocky planet or moon of the given sub-type."""
    atmosphere = create_atmosphere(random, planet_type)
    clouds = create_clouds(random, planet_type, atmosphere) if atmosphere else None
    return PlanetProperties(
        planet_type=planet_type,
        composition=list(COMPOSITIONS.get(planet_type, COMPOSITIONS[FALLBACK_SURFACE_TYPE])),
        surface=create_surface_properties(random, planet_type),
        atmosphere=atmosphere,
        clouds=clouds,
        is_moon=is_moon,
        parent_planet=parent_planet,
    )


def create_gas_giant_properties(
    random: RandomFn, zone: PlanetZone, gas_giant_class: GasGiantClass
) -> GasGiantProperties:
    """Build a gas giant payload; the atmosphere depends on the zone."""
    atmosphere_type, composition, base_pressure, pressure_span = GAS_GIANT_ATMOSPHERES[zone]
    atmosphere_color, cloud_color = GAS_GIANT_COLORS[gas_giant_class]
    return GasGiantProperties(
        gas_giant_class=gas_giant_class,
        atmosphere=GasGiantAtmosphere(
            type=atmosphere_type,
            composition=list(composition),
            pressure=base_pressure + random() * pressure_span,
        ),
        atmosphere_color=atmosphere_color,
        cloud_color=cloud_color,
        cloud_speed=50 + random() * 150,
    )

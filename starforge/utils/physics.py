"""Scalar astrophysics helpers shared by the generators."""

import math

from .constants import AU, C, G, SOLAR_LUMINOSITY, STEFAN_BOLTZMANN


def orbital_period(semi_major_axis_m: float, total_mass_kg: float) -> float:
    """Kepler's third law.

    Args:
        semi_major_axis_m: Semi-major axis in meters
        total_mass_kg: Combined mass of both bodies in kg

    Returns:
        Orbital period in seconds, or 0.0 when either input is not positive
    """
    if semi_major_axis_m <= 0 or total_mass_kg <= 0:
        return 0.0
    return 2 * math.pi * math.sqrt(semi_major_axis_m**3 / (G * total_mass_kg))


def radius_from_density(mass_kg: float, density_kg_m3: float) -> float:
    """Radius of a uniform sphere: cbrt(3m / (4 pi rho))."""
    if mass_kg <= 0 or density_kg_m3 <= 0:
        raise ValueError(
            f"Invalid mass/density: {mass_kg}/{density_kg_m3} (must be > 0)"
        )
    return (3 * mass_kg / (4 * math.pi * density_kg_m3)) ** (1 / 3)


def schwarzschild_radius(mass_kg: float) -> float:
    return 2 * G * mass_kg / C**2


def surface_gravity_log_g(mass_kg: float, radius_m: float) -> float:
    """Surface gravity as log10(g) with g in cm/s^2, the usual stellar unit.

    The Sun is about 4.44.
    """
    if mass_kg <= 0 or radius_m <= 0:
        raise ValueError(
            f"Invalid mass/radius: {mass_kg}/{radius_m} (must be > 0)"
        )
    return math.log10(G * mass_kg / radius_m**2 * 100.0)


def luminosity_watts(radius_m: float, temperature_k: float) -> float:
    """Stefan-Boltzmann luminosity L = 4 pi R^2 sigma T^4."""
    return 4 * math.pi * radius_m**2 * STEFAN_BOLTZMANN * temperature_k**4


def luminosity_solar(radius_m: float, temperature_k: float) -> float:
    """Luminosity in solar units."""
    return luminosity_watts(radius_m, temperature_k) / SOLAR_LUMINOSITY


def equilibrium_temperature(
    star_radius_m: float, star_temperature_k: float, distance_au: float
) -> float:
    """Blackbody equilibrium temperature of a body orbiting a star.

    T = (L / (16 pi sigma d^2)) ** 0.25, ignoring albedo.
    """
    if distance_au <= 0:
        raise ValueError(f"Invalid distance: {distance_au} (must be > 0)")
    distance_m = distance_au * AU
    luminosity = luminosity_watts(star_radius_m, star_temperature_k)
    return (luminosity / (16 * math.pi * STEFAN_BOLTZMANN * distance_m**2)) ** 0.25


def normalize_angle(angle: float) -> float:
    """Wrap an angle into [0, 2 pi)."""
    return angle % (2 * math.pi)

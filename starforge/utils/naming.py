"""Procedural celestial names, unique within one generated system."""

from .rng import RandomFn, get_random_item

_PREFIXES = [
    "Al", "Bel", "Cor", "Del", "Eri", "Fal", "Gal", "Hel", "Ir", "Jan",
    "Kor", "Lyr", "Mir", "Nor", "Or", "Pol", "Quen", "Rho", "Sar", "Tal",
    "Ul", "Vel", "Xan", "Yor", "Zeph", "Ast", "Cen", "Dra", "Sol", "Vor",
]

_SUFFIXES = [
    "aris", "ion", "ara", "enor", "ix", "ona", "us", "eth", "ora", "ax",
    "ine", "oth", "ys", "ea", "ium", "ador", "is", "ante", "eon", "ula",
]

_DESIGNATIONS = [
    "Prime", "Major", "Minor", "Alpha", "Beta", "Gamma", "Delta",
    "Epsilon", "Secundus", "Tertius",
]

_CATALOGUES = ["HD", "GJ", "HR", "TYC", "KOI"]

# Attempts before falling back to a numbered variant of a taken name
_MAX_ATTEMPTS = 20


def generate_celestial_name(random: RandomFn) -> str:
    """Generate a procedural name.

    Three styles: "Aldaris", "Aldaris Beta" and catalogue numbers such as
    "HD-47291".
    """
    style = int(random() * 3)
    base = get_random_item(_PREFIXES, random) + get_random_item(_SUFFIXES, random)
    if style == 0:
        return base
    if style == 1:
        return f"{base} {get_random_item(_DESIGNATIONS, random)}"
    catalogue = get_random_item(_CATALOGUES, random)
    number = 1000 + int(random() * 99000)
    return f"{catalogue}-{number}"


def slugify(name: str) -> str:
    """Lowercase a name and replace spaces for use inside object ids."""
    return name.lower().replace(" ", "-")


class CelestialNamer:
    """Hands out names that are unique within a single system.

    Object ids are derived from names, so uniqueness here keeps ids unique.
    """

    def __init__(self, random: RandomFn):
        self.random = random
        self.used_names: set[str] = set()

    def next_name(self) -> str:
        name = generate_celestial_name(self.random)
        attempts = 1
        while name in self.used_names and attempts < _MAX_ATTEMPTS:
            name = generate_celestial_name(self.random)
            attempts += 1
        if name in self.used_names:
            base = name
            counter = 2
            while f"{base} {counter}" in self.used_names:
                counter += 1
            name = f"{base} {counter}"
        self.used_names.add(name)
        return name

    def reserve(self, name: str) -> str:
        """Reserve a fixed name (e.g. a belt letter designation)."""
        if name in self.used_names:
            counter = 2
            while f"{name} {counter}" in self.used_names:
                counter += 1
            name = f"{name} {counter}"
        self.used_names.add(name)
        return name


def belt_name(index: int) -> str:
    """Belt designation: "Belt A" .. "Belt Z", then "Belt 26", "Belt 27", ..."""
    if 0 <= index < 26:
        return f"Belt {chr(65 + index)}"
    return f"Belt {index}"

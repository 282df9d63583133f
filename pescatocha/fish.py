"""Fish species that live in the pond and the fish they spawn."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional, Protocol


class _RandomSource(Protocol):
    def randint(self, a: int, b: int) -> int: ...


@dataclass
class Fish:
    """A single fish.

    ``reaction_time`` is in milliseconds. ``pond_weight`` is how much room
    the fish takes in the pond. ``fish_id`` and ``money`` are left unset
    for species that never define them.
    """

    species: str = ""
    size: int = 0
    weight: int = 0
    reaction_time: int = 0
    pond_weight: Optional[int] = None
    fish_id: Optional[int] = None
    money: Optional[int] = None


@dataclass(frozen=True)
class Species:
    """A kind of fish; sizes and weights are inclusive ranges."""

    name: str
    size: tuple[int, int]
    weight: tuple[int, int]
    reaction_time: int
    pond_weight: int
    fish_id: Optional[int] = None
    money: Optional[int] = None

    def spawn(self, rng: Optional[_RandomSource] = None) -> Fish:
        """Create a fish of this species with random size and weight."""
        source = rng if rng is not None else random
        return Fish(
            species=self.name,
            size=source.randint(*self.size),
            weight=source.randint(*self.weight),
            reaction_time=self.reaction_time,
            pond_weight=self.pond_weight,
            fish_id=self.fish_id,
            money=self.money,
        )


def _fixed(value: int) -> tuple[int, int]:
    return (value, value)


_SPECIES: dict[str, Species] = {
    s.name: s
    for s in (
        Species("Anchoa", (15, 25), (20, 25), 800, 2, 5, 12),
        Species("Atun", (120, 190), (30, 150), 500, 4, 9, 80),
        Species("Bagre", (80, 90), (1, 2), 600, 2, 5, 67),
        Species("BallenaAzulAntartica", _fixed(2900), _fixed(180000), 1, 8),
        Species("Cachalote", (1550, 1650), (30000, 40000), 100, 12, 7, 470),
        Species("Cangrejo", (150, 180), (8, 13), 500, 1, 3, 111),
        Species("CangrejoRio", (16, 21), (1, 3), 500, 1, 6, 51),
        Species("Carpa", (40, 80), (2, 14), 900, 1, 4, 18),
        Species("Char", (30, 75), (1, 2), 700, 2, 1, 69),
        Species("Esturion", (100, 300), (50, 80), 400, 2, 4, 164),
        Species("Goldfish", (25, 40), (1, 3), 600, 1, 7, 22),
        Species("Koi", (70, 90), (10, 15), 700, 2, 6, 27),
        Species("Lubina", (25, 55), (4, 7), 1100, 1, 2, 16),
        Species("Magikarp", _fixed(90), _fixed(10), 600, 2, 2, 95),
        Species("Mojarra", (18, 25), (1, 2), 1200, 1, 1, 13),
        Species("PezEspada", (80, 220), (40, 240), 300, 4, 8, 220),
        Species("PezGlobo", (3, 15), (1, 10), 550, 3, 8, 32),
        Species("PezPayaso", (7, 12), _fixed(1), 1000, 1, 3, 19),
        Species("PezRape", (20, 100), (27, 46), 200, 2, 6, 247),
        Species("Pirania", (25, 60), (7, 15), 300, 1, 5, 170),
        Species("Rana", (10, 17), (1, 3), 700, 2, 3, 45),
        Species("Salmon", (60, 110), (2, 12), 400, 2, 7, 77),
        Species("TetraNeon", (2, 5), _fixed(1), 900, 1, 1, 21),
        Species("TiburonBlanco", (340, 490), (680, 1100), 50, 6, 8, 600),
        Species("Tortuga", (60, 180), (35, 50), 800, 2, 2, 42),
        Species("Trucha", (30, 70), (12, 22), 650, 1, 4, 58),
    )
}


def species_names() -> tuple[str, ...]:
    """Names of every known species, in catalogue order."""
    return tuple(_SPECIES)


def species(name: str) -> Species:
    """Look up a species by name; raises KeyError for unknown names."""
    try:
        return _SPECIES[name]
    except KeyError:
        raise KeyError(f"unknown species: {name!r}") from None


def create_fish(name: str, rng: Optional[_RandomSource] = None) -> Fish:
    """Spawn a fish of the named species."""
    return species(name).spawn(rng)
"""Таблица видов: все животные отличаются только этими константами и добычей."""

from dataclasses import dataclass

PLANT = "plant"

EAGLE = "eagle"
FOX = "fox"
SCORPION = "scorpion"
GRASSHOPPER = "grasshopper"
SQUIRREL = "squirrel"


@dataclass(frozen=True)
class SpeciesParams:
    name: str
    breeding_age: int            # с какого возраста может размножаться
    max_age: int                 # после этого возраста умирает
    breeding_probability: float
    max_litter_size: int
    food_value: int              # сколько шагов хватает одной добычи
    prey: str                    # вид добычи или PLANT для травоядных

    def __post_init__(self):
        if not 0.0 <= self.breeding_probability <= 1.0:
            raise ValueError(f"{self.name}: breeding_probability must be in [0, 1]")
        if self.max_age <= 0 or self.food_value <= 0 or self.max_litter_size <= 0:
            raise ValueError(f"{self.name}: max_age, food_value, max_litter_size must be > 0")

    @property
    def herbivore(self) -> bool:
        return self.prey == PLANT


SPECIES: dict[str, SpeciesParams] = {
    EAGLE:       SpeciesParams(EAGLE,       6,  43,  0.24, 2, 31, SQUIRREL),
    FOX:         SpeciesParams(FOX,         15, 150, 0.08, 2, 9,  SQUIRREL),
    SCORPION:    SpeciesParams(SCORPION,    4,  41,  0.35, 3, 12, GRASSHOPPER),
    GRASSHOPPER: SpeciesParams(GRASSHOPPER, 3,  45,  0.61, 3, 11, PLANT),
    SQUIRREL:    SpeciesParams(SQUIRREL,    3,  35,  0.51, 3, 8,  PLANT),
}

# Порядок проверки при заселении: хищники верхнего уровня раньше травоядных.
SEEDING_ORDER = [EAGLE, FOX, SCORPION, GRASSHOPPER, SQUIRREL]

CREATION_PROBABILITY = {
    EAGLE:       0.01,
    FOX:         0.02,
    SCORPION:    0.15,
    GRASSHOPPER: 0.35,
    SQUIRREL:    0.31,
    PLANT:       0.65,
}

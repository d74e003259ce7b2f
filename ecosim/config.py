"""Параметры запуска симуляции."""

from dataclasses import dataclass, field
from typing import Optional

from ecosim.species import CREATION_PROBABILITY, SPECIES, SpeciesParams

DEFAULT_DEPTH = 150
DEFAULT_WIDTH = 150


@dataclass
class SimulationConfig:
    depth: int = DEFAULT_DEPTH
    width: int = DEFAULT_WIDTH
    seed: Optional[int] = None
    # вероятность появления вида в клетке при заселении (ключ: вид или PLANT)
    creation_probability: dict[str, float] = field(
        default_factory=lambda: dict(CREATION_PROBABILITY))
    species: dict[str, SpeciesParams] = field(default_factory=lambda: dict(SPECIES))

    def __post_init__(self):
        if self.depth <= 0 or self.width <= 0:
            print("The dimensions must be greater than zero. Using default values.")
            self.depth = DEFAULT_DEPTH
            self.width = DEFAULT_WIDTH
        for name, p in self.creation_probability.items():
            if not 0.0 <= p <= 1.0:
                raise ValueError(f"creation probability for {name} must be in [0, 1], got {p}")

    @property
    def cells(self) -> int:
        return self.depth * self.width

"""Растения: не двигаются, растут и разрастаются на соседние клетки."""

import random
from typing import List, Optional

from ecosim.field import Field, Location
from ecosim.species import PLANT


class Plant:
    """Растение на отдельном поле растений. Гибнет, если съедено или переросло."""

    kind: str = PLANT
    growth_age: int = 2            # с какого размера разрастается
    max_growth: int = 350          # при превышении погибает
    growth_probability: float = 0.91
    max_saplings: int = 4
    seed_size_bound: int = 50      # начальный размер при заселении: [0, 50)

    def __init__(self, field: Field, location: Location, rng: random.Random,
                 random_size: bool = False):
        self.alive = True
        self.field = field
        self.rng = rng
        self.location: Optional[Location] = None
        self.set_location(location)
        self.size = rng.randrange(self.seed_size_bound) if random_size else 0

    def act(self, new_plants: List["Plant"]) -> None:
        if self.location is None:
            return
        self.size += 1
        if self.size > self.max_growth:
            self.set_dead()
            return
        self._spread(new_plants)

    def _spread(self, new_plants: List["Plant"]) -> None:
        if self.size < self.growth_age or self.rng.random() > self.growth_probability:
            return
        free = self.field.free_adjacent_locations(self.location)
        number = self.rng.randrange(self.max_saplings + 1)
        for loc in free[:number]:
            new_plants.append(type(self)(self.field, loc, self.rng))

    def set_location(self, new_location: Location) -> None:
        if self.location is not None:
            self.field.clear(self.location)
        self.location = new_location
        self.field.place(self, new_location)

    def set_dead(self) -> None:
        """Съедено или засохло: освобождаем клетку."""
        self.alive = False
        if self.location is not None:
            self.field.clear(self.location)
            self.location = None

    def __repr__(self) -> str:
        return f"plant(size={self.size})"

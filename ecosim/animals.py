"""
Животные. Все пять видов описаны одним классом Animal, отличия только в SpeciesParams:
возраст размножения, продолжительность жизни, вероятность и размер помёта,
сытность добычи и сам вид добычи.
"""

import random
from typing import List, Optional

from ecosim.field import Field, Location
from ecosim.species import SpeciesParams


class Animal:
    """
    Животное на поле животных.
    food_field: поле, где ищется добыча: то же поле у хищников,
    поле растений у травоядных.
    """

    def __init__(self, species: SpeciesParams, field: Field, location: Location,
                 rng: random.Random, food_field: Optional[Field] = None,
                 random_age: bool = False):
        if species.herbivore and food_field is None:
            raise ValueError(f"{species.name} needs a plant field to graze on")
        self.species = species
        self.kind = species.name
        self.alive = True
        self.field = field
        self.food_field = food_field if food_field is not None else field
        self.rng = rng
        self.location: Optional[Location] = None
        self.set_location(location)
        self.male = bool(rng.getrandbits(1))

        if random_age:
            self.age = rng.randrange(species.max_age)
            self.food_level = rng.randrange(species.food_value)
        else:
            self.age = 0
            self.food_level = species.food_value

    # ── Один шаг ───────────────────────────────────────────────────────────

    def act(self, new_animals: List["Animal"]) -> None:
        """Стареет, голодает, размножается, ест или перемещается: либо умирает."""
        if self.location is None:
            return
        self._increment_age()
        if self.alive:
            self._increment_hunger()
        if not self.alive:
            return

        self._give_birth(new_animals)

        new_location = self._find_food()
        if new_location is None:
            new_location = self.field.free_adjacent_location(self.location)

        if new_location is not None:
            self.set_location(new_location)
        else:
            # Перенаселение
            self.set_dead()

    def _increment_age(self) -> None:
        self.age += 1
        if self.age > self.species.max_age:
            self.set_dead()

    def _increment_hunger(self) -> None:
        self.food_level -= 1
        if self.food_level <= 0:
            self.set_dead()

    def _find_food(self) -> Optional[Location]:
        """Съедает первую живую добычу среди соседей и возвращает её клетку."""
        for where in self.food_field.adjacent_locations(self.location):
            prey = self.food_field.get_object_at(where)
            if prey is None or not prey.alive or prey.kind != self.species.prey:
                continue
            # Травоядный переходит на клетку растения: она должна быть свободна от животных
            if self.food_field is not self.field and self.field.get_object_at(where) is not None:
                continue
            prey.set_dead()
            self.food_level = self.species.food_value
            return where
        return None

    # ── Размножение ────────────────────────────────────────────────────────

    def _meet(self) -> bool:
        """Первый встреченный сородич решает всё: пара только при разном поле."""
        for where in self.field.adjacent_locations(self.location):
            other = self.field.get_object_at(where)
            if other is not None and other.kind == self.kind:
                return other.male != self.male
        return False

    def _give_birth(self, new_animals: List["Animal"]) -> None:
        if not self._meet():
            return
        free = self.field.free_adjacent_locations(self.location)
        births = self._breed()
        for loc in free[:births]:
            young = Animal(self.species, self.field, loc, self.rng,
                           food_field=self.food_field)
            new_animals.append(young)

    def _breed(self) -> int:
        if self.can_breed() and self.rng.random() <= self.species.breeding_probability:
            return self.rng.randrange(self.species.max_litter_size) + 1
        return 0

    def can_breed(self) -> bool:
        return self.age >= self.species.breeding_age

    # ── Положение на поле ──────────────────────────────────────────────────

    def set_location(self, new_location: Location) -> None:
        if self.location is not None:
            self.field.clear(self.location)
        self.location = new_location
        self.field.place(self, new_location)

    def set_dead(self) -> None:
        self.alive = False
        if self.location is not None:
            self.field.clear(self.location)
            self.location = None

    def __repr__(self) -> str:
        sex = "m" if self.male else "f"
        return f"{self.kind}({sex}, age={self.age}, food={self.food_level})"

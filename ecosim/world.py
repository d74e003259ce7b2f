"""Мир симуляции: два поля (животные, растения), заселение и шаги."""

import random
from typing import List, Optional

from ecosim.animals import Animal
from ecosim.config import SimulationConfig
from ecosim.field import Field, Location
from ecosim.plants import Plant
from ecosim.species import PLANT, SEEDING_ORDER
from ecosim.stats import FieldStats, Observer, PopulationHistory
from ecosim.time_cycle import Clock, TimeOfDay

LONG_RUN_STEPS = 750


class Simulator:
    """
    Хранит живые популяции и продвигает их на один шаг за вызов step().
    Генератор случайных чисел один на всю симуляцию: при том же seed
    и той же последовательности вызовов прогон повторяется точно.
    """

    def __init__(self, config: Optional[SimulationConfig] = None,
                 observer: Optional[Observer] = None,
                 rng: Optional[random.Random] = None):
        self.config = config or SimulationConfig()
        self.rng = rng if rng is not None else random.Random(self.config.seed)
        self.observer = observer if observer is not None else PopulationHistory()
        self.field = Field(self.config.depth, self.config.width)
        self.plant_field = Field(self.config.depth, self.config.width)
        self.clock = Clock()
        self.animals: List[Animal] = []
        self.plants: List[Plant] = []
        self.reset()

    @property
    def step_count(self) -> int:
        return self.clock.step

    # ── Заселение ──────────────────────────────────────────────────────────

    def reset(self) -> None:
        """Новое заселение, счётчик шагов в ноль."""
        self.clock.reset()
        self.animals.clear()
        self.plants.clear()
        self._populate()
        self._report()

    def _populate(self) -> None:
        probs = self.config.creation_probability

        self.plant_field.clear_all()
        plant_p = probs.get(PLANT, 0.0)
        for loc in self.plant_field.locations():
            if self.rng.random() <= plant_p:
                self.add_plant(loc, random_size=True)

        # Каскад: на каждую проверку новое число, первый успех занимает клетку.
        order = [name for name in SEEDING_ORDER if name in self.config.species]
        self.field.clear_all()
        for loc in self.field.locations():
            for name in order:
                if self.rng.random() <= probs.get(name, 0.0):
                    self.add_animal(name, loc, random_age=True)
                    break

    def add_animal(self, name: str, location: Location, random_age: bool = False) -> Animal:
        species = self.config.species[name]
        food_field = self.plant_field if species.herbivore else self.field
        animal = Animal(species, self.field, location, self.rng,
                        food_field=food_field, random_age=random_age)
        self.animals.append(animal)
        return animal

    def add_plant(self, location: Location, random_size: bool = False) -> Plant:
        plant = Plant(self.plant_field, location, self.rng, random_size=random_size)
        self.plants.append(plant)
        return plant

    # ── Шаги ───────────────────────────────────────────────────────────────

    def step(self) -> TimeOfDay:
        """Один шаг. Ночью никто не действует, но наблюдатель всё равно получает снимок."""
        time = self.clock.tick()

        if time == TimeOfDay.DAY:
            new_plants: List[Plant] = []
            for plant in self.plants:
                plant.act(new_plants)

            new_animals: List[Animal] = []
            for animal in self.animals:
                animal.act(new_animals)

            # Убираем мёртвых (в том числе съеденных после своего хода), добавляем потомство
            self.plants = [p for p in self.plants if p.alive] + [p for p in new_plants if p.alive]
            self.animals = [a for a in self.animals if a.alive] + [a for a in new_animals if a.alive]

        self._report()
        return time

    def run(self, num_steps: int) -> int:
        """До num_steps шагов или пока наблюдатель не скажет, что всё кончено."""
        done = 0
        while done < num_steps and self.observer.is_viable(self.field):
            self.step()
            done += 1
        return done

    def run_long(self) -> int:
        return self.run(LONG_RUN_STEPS)

    def _report(self) -> None:
        self.observer.report(self.clock.step, self.field)

    # ── Утилиты ────────────────────────────────────────────────────────────

    def is_viable(self) -> bool:
        return self.observer.is_viable(self.field)

    def stats(self) -> dict:
        counts = FieldStats().counts(self.field)
        result = {name: counts.get(name, 0) for name in SEEDING_ORDER}
        result[PLANT] = len(self.plants)
        return result

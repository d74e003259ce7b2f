"""Вспомогательные объекты для тестов: пустой мир и генератор с заданными числами."""

import dataclasses
import random

from ecosim.config import SimulationConfig
from ecosim.species import CREATION_PROBABILITY, SPECIES
from ecosim.world import Simulator


class ScriptedRandom(random.Random):
    """Отдаёт заранее заданные random()/randrange(), дальше: обычный генератор."""

    def __init__(self, doubles=(), ints=(), seed=0):
        super().__init__(seed)
        self.doubles = list(doubles)
        self.ints = list(ints)

    def random(self):
        if self.doubles:
            return self.doubles.pop(0)
        return super().random()

    def randrange(self, *args, **kwargs):
        if self.ints:
            return self.ints.pop(0)
        return super().randrange(*args, **kwargs)


def make_empty_sim(size=10, seed=1, **species_overrides):
    """
    Мир без начального заселения.
    species_overrides: имя вида -> dict полей SpeciesParams для замены.
    """
    species = dict(SPECIES)
    for name, changes in species_overrides.items():
        species[name] = dataclasses.replace(species[name], **changes)
    config = SimulationConfig(
        depth=size, width=size, seed=seed,
        creation_probability={k: 0.0 for k in CREATION_PROBABILITY},
        species=species,
    )
    return Simulator(config)


def population_state(sim):
    animals = [(a.kind, a.male, a.age, a.food_level, a.location, a.alive) for a in sim.animals]
    plants = [(p.size, p.location, p.alive) for p in sim.plants]
    return animals, plants



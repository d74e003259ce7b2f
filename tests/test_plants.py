"""Тесты растений: рост, разрастание, гибель."""

from ecosim.field import Field, Location
from ecosim.plants import Plant
from tests.helpers import ScriptedRandom


class TestPlant:
    def test_grows_each_step(self):
        field = Field(5, 5)
        plant = Plant(field, Location(2, 2), ScriptedRandom())
        assert plant.size == 0
        plant.act([])
        assert plant.size == 1

    def test_seed_size_is_random(self):
        field = Field(5, 5)
        plant = Plant(field, Location(2, 2), ScriptedRandom(ints=[17]), random_size=True)
        assert plant.size == 17

    def test_overgrown_plant_dies(self):
        field = Field(5, 5)
        plant = Plant(field, Location(2, 2), ScriptedRandom())
        plant.size = Plant.max_growth
        plant.act([])
        assert not plant.alive
        assert plant.location is None
        assert field.get_object_at(Location(2, 2)) is None

    def test_spreads_into_free_cells_in_order(self):
        field = Field(5, 5)
        rng = ScriptedRandom(doubles=[0.5], ints=[3])
        plant = Plant(field, Location(2, 2), rng)
        plant.size = 2
        saplings = []
        plant.act(saplings)
        assert [s.location for s in saplings] == [Location(1, 1), Location(1, 2), Location(1, 3)]
        assert all(s.size == 0 for s in saplings)
        assert all(field.get_object_at(s.location) is s for s in saplings)

    def test_spread_truncated_by_free_cells(self):
        field = Field(2, 2)
        rng = ScriptedRandom(doubles=[0.1], ints=[4])
        plant = Plant(field, Location(0, 0), rng)
        Plant(field, Location(0, 1), rng)
        plant.size = 5
        saplings = []
        plant.act(saplings)
        assert [s.location for s in saplings] == [Location(1, 0), Location(1, 1)]

    def test_failed_spread_draw(self):
        field = Field(5, 5)
        rng = ScriptedRandom(doubles=[0.95])
        plant = Plant(field, Location(2, 2), rng)
        plant.size = 10
        saplings = []
        plant.act(saplings)
        assert saplings == []

    def test_small_plant_does_not_draw(self):
        field = Field(5, 5)
        rng = ScriptedRandom(doubles=[0.0])
        plant = Plant(field, Location(2, 2), rng)
        saplings = []
        plant.act(saplings)
        assert saplings == []
        assert rng.doubles == [0.0]  # число не израсходовано

    def test_eaten_plant_does_nothing(self):
        field = Field(5, 5)
        plant = Plant(field, Location(2, 2), ScriptedRandom())
        plant.set_dead()
        plant.act([])
        assert plant.size == 0

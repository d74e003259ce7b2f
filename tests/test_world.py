"""Тесты мира: заселение, день/ночь, потомство, детерминизм, инварианты поля."""

import pytest

from ecosim.config import DEFAULT_DEPTH, DEFAULT_WIDTH, SimulationConfig
from ecosim.field import Location
from ecosim.species import (CREATION_PROBABILITY, EAGLE, FOX, PLANT, SCORPION,
                            SPECIES, SQUIRREL)
from ecosim.time_cycle import Clock, TimeOfDay
from ecosim.world import Simulator
from tests.helpers import make_empty_sim, population_state


def assert_occupancy_consistent(sim):
    for population, field in [(sim.animals, sim.field), (sim.plants, sim.plant_field)]:
        for agent in population:
            assert agent.alive
            assert agent.location is not None
            assert field.get_object_at(agent.location) is agent
        assert len(list(field.occupants())) == len(population)


class TestClock:
    def test_parity(self):
        clock = Clock()
        assert clock.tick() == TimeOfDay.DAY
        assert clock.tick() == TimeOfDay.NIGHT
        assert clock.tick() == TimeOfDay.DAY
        assert clock.step == 3

    def test_reset(self):
        clock = Clock()
        clock.tick()
        clock.reset()
        assert clock.step == 0
        assert clock.is_night


class TestSeeding:
    def test_cascade_priority(self):
        probs = {k: 0.0 for k in CREATION_PROBABILITY}
        probs[EAGLE] = 1.0
        probs[SQUIRREL] = 1.0
        sim = Simulator(SimulationConfig(depth=6, width=6, seed=3, creation_probability=probs))
        assert len(sim.animals) == 36
        assert all(a.kind == EAGLE for a in sim.animals)
        assert sim.plants == []

    def test_later_species_fill_remaining_cells(self):
        probs = {k: 0.0 for k in CREATION_PROBABILITY}
        probs[FOX] = 0.5
        probs[SCORPION] = 1.0
        probs[PLANT] = 1.0
        sim = Simulator(SimulationConfig(depth=8, width=8, seed=3, creation_probability=probs))
        kinds = {a.kind for a in sim.animals}
        assert kinds <= {FOX, SCORPION}
        assert len(sim.animals) == 64
        assert len(sim.plants) == 64

    def test_default_seeding_is_consistent(self):
        sim = Simulator(SimulationConfig(depth=20, width=20, seed=11))
        assert sim.step_count == 0
        assert len(sim.animals) > 0
        assert len(sim.plants) > 0
        assert_occupancy_consistent(sim)

    def test_reset_repopulates(self):
        sim = Simulator(SimulationConfig(depth=15, width=15, seed=5))
        sim.step()
        sim.step()
        sim.reset()
        assert sim.step_count == 0
        assert_occupancy_consistent(sim)
        assert sim.observer.steps[-1] == 0


class TestStepping:
    def test_night_changes_nothing(self):
        sim = Simulator(SimulationConfig(depth=15, width=15, seed=9))
        assert sim.step() == TimeOfDay.DAY
        before = population_state(sim)
        assert sim.step() == TimeOfDay.NIGHT
        assert population_state(sim) == before

    def test_every_step_is_reported(self):
        sim = Simulator(SimulationConfig(depth=10, width=10, seed=2))
        sim.step()
        sim.step()
        assert sim.observer.steps == [0, 1, 2]

    def test_occupancy_invariant_holds(self):
        sim = Simulator(SimulationConfig(depth=25, width=25, seed=21))
        for _ in range(30):
            sim.step()
            assert_occupancy_consistent(sim)

    def test_ages_never_exceed_limits(self):
        sim = Simulator(SimulationConfig(depth=20, width=20, seed=4))
        for _ in range(20):
            sim.step()
            for a in sim.animals:
                assert a.age <= a.species.max_age
                assert a.food_level > 0
            for p in sim.plants:
                assert p.size <= p.max_growth

    def test_predator_eats_and_breeds_end_to_end(self):
        sim = make_empty_sim(**{EAGLE: {"breeding_probability": 1.0}})
        eagle = sim.add_animal(EAGLE, Location(5, 5))
        partner = sim.add_animal(EAGLE, Location(4, 4))
        squirrel = sim.add_animal(SQUIRREL, Location(6, 6))
        eagle.male, partner.male = True, False
        for a in (eagle, partner):
            a.age, a.food_level = 10, 5

        sim.step()

        assert not squirrel.alive
        assert squirrel not in sim.animals
        assert eagle.food_level == SPECIES[EAGLE].food_value
        assert eagle.location == Location(6, 6)
        newborns = [a for a in sim.animals if a not in (eagle, partner)]
        assert len(newborns) >= 1
        # новорождённые не действуют в шаге своего рождения
        assert all(y.age == 0 and y.food_level == SPECIES[EAGLE].food_value for y in newborns)
        assert_occupancy_consistent(sim)

        sim.step()  # ночь
        assert all(y.age == 0 for y in newborns)
        sim.step()  # день: теперь действуют
        assert all(y.age == 1 for y in newborns if y.alive)

    def test_overcrowded_animal_dies_during_step(self, empty_sim):
        eagle = empty_sim.add_animal(EAGLE, Location(5, 5))
        walls = [empty_sim.add_animal(SCORPION, loc)
                 for loc in empty_sim.field.adjacent_locations(Location(5, 5))]
        # орёл добавлен первым и ходит первым: соседи ещё на месте
        empty_sim.step()
        assert not eagle.alive
        assert eagle not in empty_sim.animals
        assert all(w.alive for w in walls)

    def test_plants_act_before_animals(self, empty_sim):
        squirrel = empty_sim.add_animal(SQUIRREL, Location(0, 0))
        plant = empty_sim.add_plant(Location(1, 1))
        plant.size = 0
        empty_sim.step()
        # растение успело вырасти до того, как его съели
        assert plant.size == 1
        assert not plant.alive
        assert squirrel.location == Location(1, 1)


class TestRun:
    def test_not_viable_stops_immediately(self, empty_sim):
        empty_sim.add_animal(EAGLE, Location(0, 0))
        assert empty_sim.run(10) == 0
        assert empty_sim.step_count == 0

    def test_single_step_ignores_viability(self, empty_sim):
        empty_sim.step()
        assert empty_sim.step_count == 1

    def test_runs_requested_steps(self, empty_sim):
        empty_sim.add_animal(EAGLE, Location(0, 0))
        empty_sim.add_animal(FOX, Location(9, 9))
        assert empty_sim.run(3) == 3
        assert empty_sim.step_count == 3

    def test_long_run_stops_when_one_species_left(self, empty_sim):
        empty_sim.add_animal(SCORPION, Location(2, 2))
        assert empty_sim.run_long() == 0


class TestDeterminism:
    def test_same_seed_same_history(self):
        a = Simulator(SimulationConfig(depth=20, width=20, seed=42))
        b = Simulator(SimulationConfig(depth=20, width=20, seed=42))
        assert population_state(a) == population_state(b)
        for _ in range(12):
            a.step()
            b.step()
            assert population_state(a) == population_state(b)
        a.reset()
        b.reset()
        assert population_state(a) == population_state(b)

    def test_different_seed_differs(self):
        a = Simulator(SimulationConfig(depth=20, width=20, seed=1))
        b = Simulator(SimulationConfig(depth=20, width=20, seed=2))
        assert population_state(a) != population_state(b)


class TestConfig:
    def test_bad_dimensions_fall_back_to_defaults(self, capsys):
        config = SimulationConfig(depth=0, width=-3)
        assert (config.depth, config.width) == (DEFAULT_DEPTH, DEFAULT_WIDTH)
        assert "default" in capsys.readouterr().out

    def test_bad_probability(self):
        with pytest.raises(ValueError):
            SimulationConfig(depth=5, width=5, creation_probability={EAGLE: 1.5})

    def test_stats(self, empty_sim):
        empty_sim.add_animal(EAGLE, Location(0, 0))
        empty_sim.add_plant(Location(3, 3))
        s = empty_sim.stats()
        assert s[EAGLE] == 1
        assert s[FOX] == 0
        assert s[PLANT] == 1

import random

import pytest

from pescatocha.fish import Fish, Species, create_fish, species_names


@pytest.mark.parametrize("name", species_names())
def test_spawned_fish_stay_in_species_range(name):
    rng = random.Random(1234)
    for _ in range(200):
        fish = create_fish(name, rng)
        assert fish.species == name
        assert fish.size > 0
        assert fish.weight > 0
        assert fish.reaction_time > 0
        assert fish.pond_weight > 0


def test_species_names_order_and_count():
    names = species_names()
    assert len(names) == 26
    assert names[0] == "Anchoa"
    assert names[-1] == "Trucha"
    assert len(set(names)) == len(names)


def test_magikarp_is_fixed():
    fish = create_fish("Magikarp", random.Random(0))
    assert (fish.size, fish.weight) == (90, 10)
    assert fish.reaction_time == 600
    assert fish.fish_id == 2
    assert fish.money == 95


def test_whale_has_no_id_or_money():
    fish = create_fish("BallenaAzulAntartica", random.Random(0))
    assert fish.size == 2900
    assert fish.weight == 180000
    assert fish.fish_id is None
    assert fish.money is None


def test_anchovy_bounds_are_reached():
    rng = random.Random(7)
    sizes = {create_fish("Anchoa", rng).size for _ in range(2000)}
    assert min(sizes) == 15
    assert max(sizes) == 25


def test_same_seed_gives_same_fish():
    first = create_fish("Atun", random.Random(42))
    second = create_fish("Atun", random.Random(42))
    assert first == second


def test_species_spawn_uses_ranges():
    kind = Species("Test", (3, 3), (4, 4), 100, 1, 9, 5)
    fish = kind.spawn(random.Random(0))
    assert fish == Fish("Test", 3, 4, 100, 1, 9, 5)


def test_default_fish_is_zeroed():
    fish = Fish()
    assert (fish.size, fish.weight, fish.reaction_time) == (0, 0, 0)


def test_unknown_species_raises():
    with pytest.raises(KeyError):
        create_fish("Nemo", random.Random(0))


def test_spawn_without_rng_stays_in_range():
    fish = create_fish("Cachalote")
    assert 1550 <= fish.size <= 1650
    assert 30000 <= fish.weight <= 40000
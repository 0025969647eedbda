import random

import pytest

from PET_constants import Concept
from pet_model import ElementVector, StatSplit
from stat_allocator import allocate_stats, apply_element_bias, concept_weights


VALID_ELEMENTS = [
    ElementVector(fire=10),
    ElementVector(water=3, fire=7),
    ElementVector(earth=5, wind=5),
    ElementVector(water=10),
    ElementVector(),
]


@pytest.mark.parametrize("concept", list(Concept))
@pytest.mark.parametrize("elements", VALID_ELEMENTS)
@pytest.mark.parametrize("total", [0, 1, 3, 7, 99, 100, 101, 1234])
def test_split_always_sums_to_total(concept, elements, total):
    split = allocate_stats(total, concept, elements, rng=random.Random(total))
    assert isinstance(split, StatSplit)
    assert sum(split) == total
    assert all(v >= 0 for v in split)


def test_zero_total_is_all_zero():
    assert allocate_stats(0, Concept.TANK, ElementVector(fire=10)) == StatSplit(0, 0, 0, 0)


def test_tank_small_budget_only_remainder_varies():
    seen = set()
    for seed in range(30):
        split = allocate_stats(3, Concept.TANK, ElementVector(), rng=random.Random(seed))
        assert sum(split) == 3
        seen.add(tuple(split))
    # Every unit is a remainder unit at this budget, so placement varies
    assert len(seen) > 1


def test_remainder_goes_to_drawn_axis(fixed_rng):
    # 100 * (1, 1.3, 1.3, 1) / 4.6 floors to 21, 28, 28, 21 -> 2 left over
    rng = fixed_rng(index=0)
    split = allocate_stats(100, Concept.ATTACK_DEFENSE, ElementVector(), rng=rng)
    assert split == StatSplit(23, 28, 28, 21)
    assert rng.randrange_calls == 2


def test_fire_biases_strength(fixed_rng):
    # Fire 10 adds 0.3 to Strength: (1, 1.6, 1.3, 1) / 4.9 -> 20, 32, 26, 20
    split = allocate_stats(100, Concept.ATTACK_DEFENSE, ElementVector(fire=10), rng=fixed_rng(index=3))
    assert split == StatSplit(20, 32, 26, 22)


def test_element_bias_is_cross_paired():
    biased = apply_element_bias([1.0, 1.0, 1.0, 1.0], ElementVector(earth=2, wind=8))
    # Earth feeds Toughness, Wind feeds Dexterity
    assert biased == pytest.approx([1.0, 1.0, 1.06, 1.24])

    biased = apply_element_bias([1.0, 1.0, 1.0, 1.0], ElementVector(water=3, fire=7))
    assert biased == pytest.approx([1.09, 1.21, 1.0, 1.0])


def test_fixed_concepts_ignore_jitter(fixed_rng):
    assert concept_weights(Concept.TANK, fixed_rng(offset=0.1)) == [1.4, 0.8, 1.4, 1.0]


def test_balanced_weights_jitter_within_bounds(fixed_rng):
    assert concept_weights(Concept.BALANCED, fixed_rng(offset=0.1)) == pytest.approx([1.1] * 4)

    rng = random.Random(5)
    for _ in range(50):
        weights = concept_weights(Concept.BALANCED, rng)
        assert all(0.9 <= w <= 1.1 for w in weights)


def test_unknown_concept_uses_fixed_balanced_row(fixed_rng):
    # Only the balanced concept itself is jittered
    assert concept_weights("sniper", fixed_rng(offset=-0.05)) == [1.0, 1.0, 1.0, 1.0]
    assert concept_weights(None, fixed_rng(offset=0.1)) == [1.0, 1.0, 1.0, 1.0]


def test_unknown_concept_split_is_fixed_apart_from_remainder(fixed_rng):
    # (1, 1.3, 1, 1) / 4.3 * 1000 floors to 232, 302, 232, 232 -> 2 left over
    rng = fixed_rng(index=0, offset=0.1)
    split = allocate_stats(1000, "sniper", ElementVector(fire=10), rng=rng)
    assert split == StatSplit(234, 302, 232, 232)


def test_sheet_labels_accepted(fixed_rng):
    assert concept_weights("탱커형", fixed_rng()) == [1.4, 0.8, 1.4, 1.0]
    assert concept_weights("TANK", fixed_rng()) == [1.4, 0.8, 1.4, 1.0]


def test_negative_total_rejected():
    with pytest.raises(ValueError):
        allocate_stats(-1, Concept.BALANCED, ElementVector(fire=10))


def test_seeded_rng_is_repeatable():
    first = allocate_stats(101, Concept.BALANCED, ElementVector(earth=4, water=6), rng=random.Random(42))
    second = allocate_stats(101, Concept.BALANCED, ElementVector(earth=4, water=6), rng=random.Random(42))
    assert first == second

import random

import pytest

from PET_constants import Concept, Element
from pet_model import BaseStats, ElementVector
from pet_generator import PetGenerator
from base_stats import derive_base_stats
from validation import (
    FormInputError,
    OpposedPair,
    SumMismatch,
    TooManyActiveElements,
)


def _fire_generator(**kwargs) -> PetGenerator:
    generator = PetGenerator(rng=random.Random(3), **kwargs)
    generator.apply_preset("Fire 10")
    return generator


def test_balanced_fire_scenario():
    generator = _fire_generator(total=100, initial_value=30, concept=Concept.BALANCED)
    result = generator.generate()

    assert result.elements == ElementVector(fire=10)
    assert sum(result.split) == 100
    assert all(v >= 0 for v in result.split)
    assert result.base_stats == derive_base_stats(result.split, 30)
    assert all(v >= 0 for v in result.base_stats)
    assert generator.result is result


def test_row_uses_form_fields():
    generator = _fire_generator(name="Slime", temp_id="1201", image_id="100123", capture_difficulty=4, rarity=2)
    fields = generator.generate().enemybase_line.split(",")
    assert fields[0] == "Slime"
    assert fields[6] == "1201"
    assert fields[7] == "30"
    assert fields[14] == "4"
    assert fields[15:19] == ["0", "0", "100", "0"]
    assert fields[34] == "2"
    assert fields[38] == "100123"


def test_blank_fields_use_defaults():
    fields = _fire_generator().generate().enemybase_line.split(",")
    assert fields[0] == "이름"
    assert fields[6] == "9999"
    assert fields[38] == "100000"


def test_failed_generation_keeps_previous_result():
    generator = _fire_generator()
    first = generator.generate()

    generator.clear_elements()
    generator.set_element(Element.WATER, 4)
    with pytest.raises(SumMismatch):
        generator.generate()
    assert generator.result is first


def test_opposed_vector_rejected_at_generate():
    generator = PetGenerator(elements=ElementVector(earth=6, fire=6))
    with pytest.raises(OpposedPair):
        generator.generate()
    assert generator.result is None


def test_rejected_edit_leaves_elements():
    generator = PetGenerator()
    generator.set_element(Element.WATER, 4)
    generator.set_element(Element.EARTH, 6)
    with pytest.raises(TooManyActiveElements):
        generator.set_element(Element.WIND, 5)
    assert generator.elements == ElementVector(earth=6, water=4)


def test_bad_form_fields_rejected():
    generator = _fire_generator(total="lots")
    with pytest.raises(FormInputError):
        generator.generate()

    generator = _fire_generator(rarity=5)
    with pytest.raises(FormInputError):
        generator.generate()


def test_unknown_concept_generates_with_fixed_weights():
    generator = _fire_generator(concept="sniper", total=57)
    assert sum(generator.generate().split) == 57

    for seed in range(20):
        generator = PetGenerator(concept="sniper", total=1000, rng=random.Random(seed))
        generator.apply_preset("Fire 10")
        split = generator.generate().split
        # Floors are 232, 302, 232, 232; two remainder points go on top
        assert 232 <= split.vitality <= 234
        assert 302 <= split.strength <= 304
        assert 232 <= split.toughness <= 234
        assert 232 <= split.dexterity <= 234


def test_same_seed_same_result():
    a = PetGenerator(rng=random.Random(11), concept="밸런스형", total=137)
    b = PetGenerator(rng=random.Random(11), concept="밸런스형", total=137)
    for generator in (a, b):
        generator.apply_preset("Fire 7 Water 3")
    assert a.generate() == b.generate()


def test_zero_total_generates_zero_stats():
    result = _fire_generator(total=0).generate()
    assert result.base_stats == BaseStats(0, 0, 0, 0)


def test_result_summary_and_dict():
    result = _fire_generator(total=100).generate()
    lines = result.summary_lines()
    assert len(lines) == 3
    assert lines[2] == "Elements -> Earth:0 Water:0 Fire:10 Wind:0"

    data = result.to_dict()
    assert data["elements"] == {"earth": 0, "water": 0, "fire": 10, "wind": 0}
    assert sum(data["split"].values()) == 100
    assert data["enemybase_line"] == result.enemybase_line

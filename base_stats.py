"""Level-1 base stats derived from a stat split and the initial value (percent)."""

import math

from PET_constants import BASE_STAT_MATRIX
from pet_model import StatSplit, BaseStats


def stat_coefficients(split: StatSplit, initial_value: int) -> list[float]:
    return [(value * initial_value) / 100 for value in split]


def derive_base_stats(split: StatSplit, initial_value: int) -> BaseStats:
    """
    Combine the per-axis coefficients through BASE_STAT_MATRIX and floor each row.

    Vitality leans on every axis (x4 its own), Strength and Toughness take small
    cross terms, Dexterity is its own coefficient only.
    """
    coefficients = stat_coefficients(split, initial_value)
    return BaseStats.from_values([
        math.floor(sum(weight * coef for weight, coef in zip(row, coefficients)))
        for row in BASE_STAT_MATRIX
    ])

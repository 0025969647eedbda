"""
Stat Allocator - distributes a point budget across the four stat axes.

The split is weighted by the chosen concept and nudged by the element
affinities, floored, and the leftover points are handed out one at a time to
random axes. The result always sums to the budget exactly; which axes receive
the leftover points is random and is not reproducible from the weights.

Pass ``rng=random.Random(seed)`` for repeatable output in tests.
"""

import logging
import math
import random
from typing import List, Optional

from PET_constants import (
    Concept,
    STAT_ORDER,
    CONCEPT_WEIGHTS,
    BALANCED_JITTER,
    ELEMENT_STAT_BIAS,
    ELEMENT_BIAS_FACTOR,
    ELEMENT_TOTAL,
)
from pet_model import ElementVector, StatSplit, parse_concept

logger = logging.getLogger(__name__)


def concept_weights(concept: Concept | str, rng: Optional[random.Random] = None) -> List[float]:
    """Base weights for a concept; unknown concepts use the balanced row without jitter."""
    rng = rng or random
    resolved = parse_concept(concept)
    if resolved is None:
        return list(CONCEPT_WEIGHTS[Concept.BALANCED])
    weights = list(CONCEPT_WEIGHTS[resolved])
    if resolved is Concept.BALANCED:
        weights = [w + rng.uniform(-BALANCED_JITTER, BALANCED_JITTER) for w in weights]
    return weights


def apply_element_bias(weights: List[float], elements: ElementVector) -> List[float]:
    """Add each stat's paired element share (value / 10 * 0.3) to its weight."""
    return [
        w + (elements[ELEMENT_STAT_BIAS[stat]] / ELEMENT_TOTAL) * ELEMENT_BIAS_FACTOR
        for w, stat in zip(weights, STAT_ORDER)
    ]


def allocate_stats(
    total: int,
    concept: Concept | str,
    elements: ElementVector,
    rng: Optional[random.Random] = None,
) -> StatSplit:
    """
    Split ``total`` points into Vitality, Strength, Toughness, Dexterity.

    Args:
        total: non-negative point budget
        concept: Concept or its label
        elements: a validated ElementVector

    Returns:
        StatSplit whose values sum to ``total``
    """
    if total < 0:
        raise ValueError(f"Total stats cannot be negative (got {total})")
    rng = rng or random

    weights = apply_element_bias(concept_weights(concept, rng), elements)
    weight_sum = sum(weights)

    values = [math.floor((w / weight_sum) * total) for w in weights]
    remainder = total - sum(values)
    logger.debug("Weights %s floored to %s, %d point(s) left over", weights, values, remainder)

    while remainder > 0:
        values[rng.randrange(len(values))] += 1
        remainder -= 1

    return StatSplit.from_values(values)

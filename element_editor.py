"""
Interactive element edits.

These are the slider rules the form applies while the user drags one element:
at most two elements active, never an element next to its opposite, and the
total kept at or below 10 by taking the overflow from the other active
elements in Earth, Water, Fire, Wind order.

All functions return a new ElementVector; the input is never modified.
"""

import logging
from typing import Dict

from PET_constants import (
    Element,
    ELEMENT_ORDER,
    ELEMENT_TOTAL,
    ELEMENT_MIN,
    ELEMENT_MAX,
    MAX_ACTIVE_ELEMENTS,
    ELEMENT_PRESETS,
)
from pet_model import ElementVector
from validation import (
    ElementRangeError,
    OpposedEdit,
    TooManyActiveElements,
    FormInputError,
    PetFormValidator,
    validate_elements,
)

logger = logging.getLogger(__name__)


def apply_element_edit(current: ElementVector, element: Element | str, value: int) -> ElementVector:
    """
    Set one element to ``value`` following the slider rules.

    Raises:
        ElementRangeError: value is not a whole number in [0, 10]
        TooManyActiveElements: a third element would become active
        OpposedEdit: the element's opposite is already active
    """
    target = PetFormValidator().validate_element_name(element)
    if isinstance(value, bool) or not isinstance(value, int) or not ELEMENT_MIN <= value <= ELEMENT_MAX:
        raise ElementRangeError(f"{target.value} must be a whole number from {ELEMENT_MIN} to {ELEMENT_MAX} (got {value!r})")

    values: Dict[Element, int] = {e: current[e] for e in ELEMENT_ORDER}
    active = current.active()

    if values[target] == 0 and value > 0 and len(active) >= MAX_ACTIVE_ELEMENTS:
        raise TooManyActiveElements()

    if values[target.opposite] > 0 and value > 0:
        raise OpposedEdit(f"{target.value} cannot be selected while {target.opposite.value} is active.")

    excess = sum(values.values()) + (value - values[target]) - ELEMENT_TOTAL
    if excess > 0:
        for other in ELEMENT_ORDER:
            if other is target or values[other] <= 0 or excess <= 0:
                continue
            reduce = min(values[other], excess)
            values[other] -= reduce
            excess -= reduce
            logger.debug("Took %d from %s to keep the element total at %d", reduce, other.value, ELEMENT_TOTAL)

    values[target] = value
    return ElementVector.from_values([values[e] for e in ELEMENT_ORDER])


def apply_preset(name: str) -> ElementVector:
    """Return the named preset after validating it."""
    if name not in ELEMENT_PRESETS:
        raise FormInputError(f"Unknown preset: {name}. Options: {list(ELEMENT_PRESETS)}")
    return validate_elements(ElementVector.from_dict(ELEMENT_PRESETS[name]))


def clear_elements() -> ElementVector:
    return ElementVector()

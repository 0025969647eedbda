"""
Pet Generator - holds the form state and runs one generation cycle.

A cycle is:
1. Validate the form fields
2. Validate the element vector
3. Allocate the stat split
4. Derive the level-1 base stats
5. Format the enemybase row

Any ValidationError aborts the cycle and leaves the previous result in place.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import Optional

from PET_constants import (
    Concept,
    Element,
    DEFAULT_IMAGE_ID,
    DEFAULT_TOTAL,
    DEFAULT_INITIAL_VALUE,
    DEFAULT_CONCEPT,
)
from pet_model import ElementVector, GenerationResult, parse_concept
from validation import PetFormValidator, validate_elements
from element_editor import apply_element_edit, apply_preset, clear_elements
from stat_allocator import allocate_stats
from base_stats import derive_base_stats
from enemybase_formatter import format_enemybase_line

logger = logging.getLogger(__name__)


@dataclass
class PetGenerator:
    """
    Form state for one pet plus the last successful result.

    Usage:
        generator = PetGenerator(name="Slime", temp_id="1201")
        generator.concept = Concept.TANK
        generator.set_element(Element.WATER, 6)
        generator.set_element(Element.FIRE, 4)
        result = generator.generate()
        print(result.enemybase_line)
    """

    name: str = ""
    temp_id: str = ""
    image_id: str = DEFAULT_IMAGE_ID
    total: int = DEFAULT_TOTAL
    initial_value: int = DEFAULT_INITIAL_VALUE
    concept: Concept | str = DEFAULT_CONCEPT
    elements: ElementVector = field(default_factory=ElementVector)
    capture_difficulty: int = 0
    rarity: int = 0

    result: Optional[GenerationResult] = None
    rng: Optional[random.Random] = field(default=None, repr=False)
    validator: PetFormValidator = field(default_factory=PetFormValidator, repr=False)

    # -------------------------------------------------------------------------
    # Element edits
    # -------------------------------------------------------------------------

    def set_element(self, element: Element | str, value: int) -> ElementVector:
        """Apply a slider edit; raises and keeps the current elements on rejection."""
        self.elements = apply_element_edit(self.elements, element, value)
        return self.elements

    def apply_preset(self, preset_name: str) -> ElementVector:
        self.elements = apply_preset(preset_name)
        return self.elements

    def clear_elements(self) -> ElementVector:
        self.elements = clear_elements()
        return self.elements

    # -------------------------------------------------------------------------
    # Generation
    # -------------------------------------------------------------------------

    def generate(self) -> GenerationResult:
        """Run one cycle and store the result."""
        form = self.validator.validate_form(
            total=self.total,
            initial_value=self.initial_value,
            capture_difficulty=self.capture_difficulty,
            rarity=self.rarity,
            concept=self.concept,
        )
        for warning in form.warnings:
            logger.warning(warning)
        form.raise_for_failures()

        elements = validate_elements(self.elements)
        concept = parse_concept(self.concept)

        split = allocate_stats(self.total, concept or self.concept, elements, rng=self.rng)
        base = derive_base_stats(split, self.initial_value)
        line = format_enemybase_line(
            name=self.name,
            temp_id=self.temp_id,
            initial_value=self.initial_value,
            split=split,
            capture_difficulty=self.capture_difficulty,
            elements=elements,
            rarity=self.rarity,
            image_id=self.image_id,
        )

        self.result = GenerationResult(split=split, base_stats=base, elements=elements, enemybase_line=line)
        logger.debug("Generated %s (%s): %s", self.name or "<unnamed>", concept.value if concept else self.concept, split)
        return self.result

"""
Validation for the pet generator inputs.

Element rules are checked by ElementValidator; the numeric form fields by
PetFormValidator. Each check returns a ValidationResult holding every broken
rule; ``raise_for_failures`` turns the first one into its exception.

Usage:
    from validation import validate_elements, ElementValidator, OpposedPair

    result = ElementValidator().check(vector)
    if not result.valid:
        print(result.errors)

    try:
        vector = validate_elements(vector)
    except OpposedPair as e:
        print(e)
"""

from dataclasses import dataclass, field
from typing import List, Any, Optional

from PET_constants import (
    Element,
    ELEMENT_ORDER,
    ELEMENT_TOTAL,
    ELEMENT_MIN,
    ELEMENT_MAX,
    MAX_ACTIVE_ELEMENTS,
    CAPTURE_DIFFICULTY_MIN,
    CAPTURE_DIFFICULTY_MAX,
    RARITY_MIN,
    RARITY_MAX,
)
from pet_model import ElementVector, parse_concept, parse_element


class ValidationError(ValueError):
    """Base class for every input rule violation; ``str(e)`` is shown to the user."""

    default_message = "Invalid input."

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.default_message)

    @property
    def message(self) -> str:
        return self.args[0]


class SumMismatch(ValidationError):
    default_message = f"Element values must add up to exactly {ELEMENT_TOTAL}."


class OpposedPair(ValidationError):
    default_message = "Opposed elements (Earth/Fire, Water/Wind) cannot be used together."


class TooManyActiveElements(ValidationError):
    default_message = f"At most {MAX_ACTIVE_ELEMENTS} elements can be selected."


class OpposedEdit(ValidationError):
    default_message = "An element cannot be selected while its opposite is active."


class ElementRangeError(ValidationError):
    default_message = f"Element values must be whole numbers from {ELEMENT_MIN} to {ELEMENT_MAX}."


class FormInputError(ValidationError):
    default_message = "Invalid form input."


@dataclass
class ValidationResult:
    """Result of a validation check."""
    valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    failures: List[ValidationError] = field(default_factory=list)

    def add_error(self, message: str):
        """Add an error and mark as invalid."""
        self.errors.append(message)
        self.valid = False

    def add_failure(self, failure: ValidationError):
        """Add a typed error so callers can raise it later."""
        self.failures.append(failure)
        self.add_error(failure.message)

    def add_warning(self, message: str):
        """Add a warning (doesn't affect validity)."""
        self.warnings.append(message)

    def merge(self, other: "ValidationResult"):
        """Merge another result into this one."""
        if not other.valid:
            self.valid = False
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)
        self.failures.extend(other.failures)

    def raise_for_failures(self):
        """Raise the first recorded failure, if any."""
        if self.failures:
            raise self.failures[0]
        if not self.valid:
            raise ValidationError("; ".join(self.errors))

    def __bool__(self) -> bool:
        return self.valid


def _is_whole_number(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class ElementValidator:
    """
    Checks an element vector against the affinity rules.

    Opposed pairs are reported before the sum so a vector such as
    Earth 6 / Fire 6 fails as an opposed pair even though it also
    totals 12.
    """

    def check(self, vector: ElementVector) -> ValidationResult:
        result = ValidationResult(valid=True)

        for element in ELEMENT_ORDER:
            value = vector[element]
            if not _is_whole_number(value) or not ELEMENT_MIN <= value <= ELEMENT_MAX:
                result.add_failure(ElementRangeError(
                    f"{element.value} must be a whole number from {ELEMENT_MIN} to {ELEMENT_MAX} (got {value!r})"
                ))
        if not result.valid:
            return result

        if (vector.earth > 0 and vector.fire > 0) or (vector.water > 0 and vector.wind > 0):
            result.add_failure(OpposedPair())

        if vector.total != ELEMENT_TOTAL:
            result.add_failure(SumMismatch(
                f"Element values must add up to exactly {ELEMENT_TOTAL} (got {vector.total})."
            ))

        return result


def validate_elements(vector: ElementVector) -> ElementVector:
    """
    Validate an element vector before generation.

    Returns the vector unchanged (Earth, Water, Fire, Wind) or raises
    ElementRangeError, OpposedPair or SumMismatch.
    """
    ElementValidator().check(vector).raise_for_failures()
    return vector


class PetFormValidator:
    """Validates the numeric form fields collected by the UI."""

    def validate_form(
        self,
        total: Any,
        initial_value: Any,
        capture_difficulty: Any = 0,
        rarity: Any = 0,
        concept: Any = None,
    ) -> ValidationResult:
        result = ValidationResult(valid=True)

        if not _is_whole_number(total) or total < 0:
            result.add_failure(FormInputError(f"Total stats must be a non-negative whole number (got {total!r})"))

        if not _is_whole_number(initial_value) or initial_value < 0:
            result.add_failure(FormInputError(f"Initial value must be a non-negative whole number (got {initial_value!r})"))

        result.merge(self._validate_bounded("Capture difficulty", capture_difficulty,
                                            CAPTURE_DIFFICULTY_MIN, CAPTURE_DIFFICULTY_MAX))
        result.merge(self._validate_bounded("Rarity", rarity, RARITY_MIN, RARITY_MAX))

        if concept is not None and parse_concept(concept) is None:
            result.add_warning(f"Unknown concept '{concept}', using balanced")

        return result

    def _validate_bounded(self, label: str, value: Any, low: int, high: int) -> ValidationResult:
        result = ValidationResult(valid=True)
        if not _is_whole_number(value) or not low <= value <= high:
            result.add_failure(FormInputError(f"{label} must be a whole number from {low} to {high} (got {value!r})"))
        return result

    def validate_element_name(self, name: Any) -> Element:
        """Resolve an element name, raising FormInputError when unknown."""
        element = parse_element(name)
        if element is None:
            raise FormInputError(f"Unknown element: {name}")
        return element

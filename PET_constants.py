#Constants for the pet / enemybase generator

from enum import Enum


class Element(str, Enum):
    EARTH = "Earth"
    WATER = "Water"
    FIRE = "Fire"
    WIND = "Wind"

    @property
    def opposite(self) -> "Element":
        return OPPOSITE_ELEMENT[self]


class Stat(str, Enum):
    VITALITY = "Vitality"
    STRENGTH = "Strength"
    TOUGHNESS = "Toughness"
    DEXTERITY = "Dexterity"


class Concept(str, Enum):
    ATTACK_DEFENSE = "attack_defense"
    ATTACK_DEXTERITY = "attack_dexterity"
    TANK = "tank"
    DEXTERITY_DEFENSE = "dexterity_defense"
    BALANCED = "balanced"


ELEMENT_ORDER = [Element.EARTH, Element.WATER, Element.FIRE, Element.WIND]
STAT_ORDER = [Stat.VITALITY, Stat.STRENGTH, Stat.TOUGHNESS, Stat.DEXTERITY]

OPPOSITE_ELEMENT = {
    Element.EARTH: Element.FIRE,
    Element.FIRE: Element.EARTH,
    Element.WATER: Element.WIND,
    Element.WIND: Element.WATER,
}

ELEMENT_TOTAL = 10
ELEMENT_MIN = 0
ELEMENT_MAX = 10
MAX_ACTIVE_ELEMENTS = 2

# Scale applied to element values when written to the enemybase row (0-10 -> 0-100)
ELEMENT_ROW_SCALE = 10


# Stat weights in STAT_ORDER
CONCEPT_WEIGHTS = {
    Concept.ATTACK_DEFENSE: (1.0, 1.3, 1.3, 1.0),
    Concept.ATTACK_DEXTERITY: (0.8, 1.5, 0.8, 1.4),
    Concept.TANK: (1.4, 0.8, 1.4, 1.0),
    Concept.DEXTERITY_DEFENSE: (1.2, 0.8, 1.4, 1.2),
    Concept.BALANCED: (1.0, 1.0, 1.0, 1.0),
}

# Only the balanced concept gets a random offset per weight
BALANCED_JITTER = 0.1

# Labels used by the game team's sheets
CONCEPT_ALIASES = {
    "공방형": Concept.ATTACK_DEFENSE,
    "공순형": Concept.ATTACK_DEXTERITY,
    "탱커형": Concept.TANK,
    "순방형": Concept.DEXTERITY_DEFENSE,
    "밸런스형": Concept.BALANCED,
}

# Each stat is pushed by a different element than its namesake
ELEMENT_STAT_BIAS = {
    Stat.VITALITY: Element.WATER,
    Stat.STRENGTH: Element.FIRE,
    Stat.TOUGHNESS: Element.EARTH,
    Stat.DEXTERITY: Element.WIND,
}
ELEMENT_BIAS_FACTOR = 0.3


# Rows: derived vitality, strength, toughness, dexterity.
# Columns: vitality, strength, toughness, dexterity coefficients.
BASE_STAT_MATRIX = (
    (4, 1, 1, 1),
    (0.1, 1, 0.1, 0.05),
    (0.1, 0.1, 1, 0.05),
    (0, 0, 0, 1),
)


ELEMENT_PRESETS = {
    "Earth 10": {Element.EARTH: 10, Element.WATER: 0, Element.FIRE: 0, Element.WIND: 0},
    "Water 10": {Element.EARTH: 0, Element.WATER: 10, Element.FIRE: 0, Element.WIND: 0},
    "Fire 10": {Element.EARTH: 0, Element.WATER: 0, Element.FIRE: 10, Element.WIND: 0},
    "Wind 10": {Element.EARTH: 0, Element.WATER: 0, Element.FIRE: 0, Element.WIND: 10},
    "Fire 7 Water 3": {Element.EARTH: 0, Element.WATER: 3, Element.FIRE: 7, Element.WIND: 0},
}


# Form bounds
CAPTURE_DIFFICULTY_MIN = 0
CAPTURE_DIFFICULTY_MAX = 10
RARITY_MIN = 0
RARITY_MAX = 2

# Form defaults
DEFAULT_IMAGE_ID = "100000"
DEFAULT_TOTAL = 100
DEFAULT_INITIAL_VALUE = 30
DEFAULT_CONCEPT = Concept.BALANCED

# enemybase fallbacks for blank fields
FALLBACK_NAME = "이름"
FALLBACK_TEMP_ID = "9999"

OVERLAY_DURATION_MS = 1500

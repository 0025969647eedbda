from __future__ import annotations

from dataclasses import dataclass, astuple
from typing import Dict, List, Any, Iterator, Tuple

from PET_constants import (
    Element,
    Stat,
    Concept,
    ELEMENT_ORDER,
    STAT_ORDER,
    CONCEPT_ALIASES,
)


def _normalize_key(text: str) -> str:
    return "".join(ch for ch in text.lower() if ch.isalnum())


_CONCEPT_LOOKUP = {_normalize_key(c.value): c for c in Concept}
_CONCEPT_LOOKUP.update({_normalize_key(label): c for label, c in CONCEPT_ALIASES.items()})
_ELEMENT_LOOKUP = {_normalize_key(e.value): e for e in Element}


def parse_concept(label: Concept | str | None) -> Concept | None:
    """Resolve a concept from its enum, value or sheet label. Unknown -> None."""
    if isinstance(label, Concept):
        return label
    if not isinstance(label, str):
        return None
    return _CONCEPT_LOOKUP.get(_normalize_key(label))


def parse_element(name: Element | str) -> Element | None:
    if isinstance(name, Element):
        return name
    return _ELEMENT_LOOKUP.get(_normalize_key(name)) if isinstance(name, str) else None


# --- Value models ---

@dataclass(frozen=True)
class ElementVector:
    earth: int = 0
    water: int = 0
    fire: int = 0
    wind: int = 0

    def __iter__(self) -> Iterator[int]:
        return iter(astuple(self))

    def __getitem__(self, element: Element | str) -> int:
        resolved = parse_element(element)
        if resolved is None:
            raise KeyError(element)
        return getattr(self, resolved.name.lower())

    @property
    def total(self) -> int:
        return sum(self)

    def active(self) -> List[Element]:
        """Elements with a positive value, in element order."""
        return [e for e in ELEMENT_ORDER if self[e] > 0]

    def scaled(self, factor: int) -> Tuple[int, ...]:
        return tuple(v * factor for v in self)

    @classmethod
    def from_values(cls, values) -> "ElementVector":
        earth, water, fire, wind = values
        return cls(earth=earth, water=water, fire=fire, wind=wind)

    @classmethod
    def from_dict(cls, data: Dict[Any, int]) -> "ElementVector":
        # Accepts Element keys or their names ("Earth", "earth")
        values = {e: 0 for e in ELEMENT_ORDER}
        for key, value in data.items():
            element = parse_element(key)
            if element is None:
                raise KeyError(f"Unknown element: {key}")
            values[element] = value
        return cls.from_values([values[e] for e in ELEMENT_ORDER])

    def to_dict(self) -> Dict[str, int]:
        return {e.name.lower(): self[e] for e in ELEMENT_ORDER}


@dataclass(frozen=True)
class StatBlock:
    vitality: int = 0
    strength: int = 0
    toughness: int = 0
    dexterity: int = 0

    def __iter__(self) -> Iterator[int]:
        return iter(astuple(self))

    def __getitem__(self, stat: Stat) -> int:
        return getattr(self, stat.name.lower())

    @property
    def total(self) -> int:
        return sum(self)

    @classmethod
    def from_values(cls, values):
        vitality, strength, toughness, dexterity = values
        return cls(vitality=vitality, strength=strength, toughness=toughness, dexterity=dexterity)

    def to_dict(self) -> Dict[str, int]:
        return {s.name.lower(): self[s] for s in STAT_ORDER}


@dataclass(frozen=True)
class StatSplit(StatBlock):
    """Point budget distributed over the four stat axes."""


@dataclass(frozen=True)
class BaseStats(StatBlock):
    """Level-1 values derived from a StatSplit and the initial value."""


@dataclass(frozen=True)
class GenerationResult:
    split: StatSplit
    base_stats: BaseStats
    elements: ElementVector
    enemybase_line: str

    def summary_lines(self) -> List[str]:
        s, b, e = self.split, self.base_stats, self.elements
        return [
            f"Stat split -> VIT:{s.vitality} STR:{s.strength} TGH:{s.toughness} DEX:{s.dexterity}",
            f"Level 1 base -> VIT:{b.vitality} STR:{b.strength} TGH:{b.toughness} DEX:{b.dexterity}",
            f"Elements -> Earth:{e.earth} Water:{e.water} Fire:{e.fire} Wind:{e.wind}",
        ]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "split": self.split.to_dict(),
            "base_stats": self.base_stats.to_dict(),
            "elements": self.elements.to_dict(),
            "enemybase_line": self.enemybase_line,
        }

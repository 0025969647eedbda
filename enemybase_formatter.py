"""
enemybase row formatter.

The game-data import tool reads the row positionally, so the fixed tokens and
the empty fields around them must stay exactly as they are.

Dependencies:
    pip install jinja2

Usage:
    from enemybase_formatter import format_enemybase_line

    line = format_enemybase_line(
        name="Slime", temp_id="1201", initial_value=30, split=split,
        capture_difficulty=3, elements=elements, rarity=1, image_id="100000",
    )
"""

from typing import Any, Dict, Optional

from jinja2 import Environment, StrictUndefined, Template

from PET_constants import ELEMENT_ROW_SCALE, FALLBACK_NAME, FALLBACK_TEMP_ID
from pet_model import ElementVector, StatSplit


class EnemybaseFormatter:
    """Renders one enemybase row from the generated values."""

    # One line, no trailing newline
    DEFAULT_TEMPLATE = (
        "{{ name }},컁,記,秊,므,制皐,{{ temp_id }},{{ initial_value }},5.0,"
        "{{ split | join(',') }},19,{{ capture_difficulty }},{{ elements | join(',') }},"
        "0,0,0,0,0,0,0,0,0,1,,,,,,{{ rarity }},1,1,5,{{ image_id }},"
        "1,1,,0,500,,0,500,,0,500,,0,500,,0,500,,0"
    )

    def __init__(self, template_string: Optional[str] = None):
        self.env = Environment(autoescape=False, undefined=StrictUndefined)
        self.template: Template = self.env.from_string(template_string or self.DEFAULT_TEMPLATE)

    def build_context(
        self,
        name: str,
        temp_id: Any,
        initial_value: int,
        split: StatSplit,
        capture_difficulty: int,
        elements: ElementVector,
        rarity: int,
        image_id: Any,
    ) -> Dict[str, Any]:
        return {
            "name": name or FALLBACK_NAME,
            "temp_id": temp_id if temp_id not in (None, "") else FALLBACK_TEMP_ID,
            "initial_value": initial_value,
            "split": list(split),
            "capture_difficulty": capture_difficulty,
            "elements": list(elements.scaled(ELEMENT_ROW_SCALE)),
            "rarity": rarity,
            "image_id": "" if image_id is None else image_id,
        }

    def render(self, **fields: Any) -> str:
        return self.template.render(**self.build_context(**fields))


_default_formatter: Optional[EnemybaseFormatter] = None


def format_enemybase_line(
    name: str,
    temp_id: Any,
    initial_value: int,
    split: StatSplit,
    capture_difficulty: int,
    elements: ElementVector,
    rarity: int,
    image_id: Any,
) -> str:
    """Render the enemybase row with the default template."""
    global _default_formatter
    if _default_formatter is None:
        _default_formatter = EnemybaseFormatter()
    return _default_formatter.render(
        name=name,
        temp_id=temp_id,
        initial_value=initial_value,
        split=split,
        capture_difficulty=capture_difficulty,
        elements=elements,
        rarity=rarity,
        image_id=image_id,
    )

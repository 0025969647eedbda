"""
Interactive Pet Generator CLI

Run from the project directory:
    python interactive_generator.py
"""

import os
from typing import List, Optional

from PET_constants import (
    Concept,
    ELEMENT_ORDER,
    ELEMENT_PRESETS,
    CONCEPT_ALIASES,
    CAPTURE_DIFFICULTY_MAX,
    RARITY_MAX,
)
from pet_generator import PetGenerator
from validation import ValidationError


def clear_screen():
    """Clear the terminal screen."""
    os.system('cls' if os.name == 'nt' else 'clear')


def print_header(title: str):
    """Print a section header."""
    print("\n" + "=" * 60)
    print(f"  {title}")
    print("=" * 60)


def print_subheader(title: str):
    """Print a subsection header."""
    print("\n" + "-" * 40)
    print(f"  {title}")
    print("-" * 40)


def get_choice(prompt: str, options: List[str], allow_back: bool = True) -> Optional[str]:
    """
    Present options and get user choice.

    Returns None if user chooses to go back.
    """
    print()
    for i, opt in enumerate(options, 1):
        print(f"  {i}. {opt}")
    if allow_back:
        print(f"  0. Go back")

    while True:
        choice = input(f"\n{prompt} > ").strip()
        if choice == "0" and allow_back:
            return None
        try:
            idx = int(choice) - 1
            if 0 <= idx < len(options):
                return options[idx]
            print(f"  Please enter 1-{len(options)}")
        except ValueError:
            matches = [o for o in options if choice.lower() in o.lower()]
            if len(matches) == 1:
                return matches[0]
            print(f"  Please enter a number 1-{len(options)}")


def get_int(prompt: str, default: int, low: int = 0, high: Optional[int] = None) -> int:
    """Ask for a whole number, keeping the default on blank input."""
    while True:
        raw = input(f"  {prompt} (default: {default}) > ").strip()
        if not raw:
            return default
        try:
            value = int(raw)
        except ValueError:
            print("  Please enter a whole number")
            continue
        if value < low or (high is not None and value > high):
            bound = f"{low}-{high}" if high is not None else f"{low} or more"
            print(f"  Please enter {bound}")
            continue
        return value


def show_elements(generator: PetGenerator):
    e = generator.elements
    print(f"\n  Elements: Earth {e.earth} | Water {e.water} | Fire {e.fire} | Wind {e.wind}  (total {e.total})")


def step_basics(generator: PetGenerator):
    print_subheader("Basics")
    generator.name = input("  Name > ").strip()
    generator.temp_id = input("  Temporary id > ").strip()
    image_id = input(f"  Image id (default: {generator.image_id}) > ").strip()
    if image_id:
        generator.image_id = image_id
    generator.total = get_int("Total stats", generator.total)
    generator.initial_value = get_int("Initial value", generator.initial_value)

    labels = {c.value: c for c in Concept}
    sheet_names = {c: label for label, c in CONCEPT_ALIASES.items()}
    options = [f"{c.value} ({sheet_names[c]})" for c in Concept]
    picked = get_choice("Concept", options, allow_back=False)
    generator.concept = labels[picked.split(" ")[0]]


def step_elements(generator: PetGenerator):
    print_subheader("Elements")
    print("  Pick a preset, or set elements one at a time.")
    while True:
        show_elements(generator)
        options = list(ELEMENT_PRESETS) + ["Set one element", "Clear", "Done"]
        picked = get_choice("Elements", options, allow_back=False)
        try:
            if picked == "Done":
                return
            if picked == "Clear":
                generator.clear_elements()
            elif picked == "Set one element":
                element = get_choice("Element", [e.value for e in ELEMENT_ORDER])
                if element is None:
                    continue
                generator.set_element(element, get_int(element, generator.elements[element], 0, 10))
            else:
                generator.apply_preset(picked)
        except ValidationError as e:
            print(f"\n  ✗ {e}")


def step_capture(generator: PetGenerator):
    print_subheader("Capture")
    generator.capture_difficulty = get_int("Capture difficulty", generator.capture_difficulty, 0, CAPTURE_DIFFICULTY_MAX)
    generator.rarity = get_int("Rarity", generator.rarity, 0, RARITY_MAX)


def show_result(generator: PetGenerator):
    print_subheader("Result")
    for line in generator.result.summary_lines():
        print(f"  {line}")
    print("\n  enemybase:")
    print(f"  {generator.result.enemybase_line}")


def main():
    """Main interactive generator loop."""
    clear_screen()
    print_header("PET GENERATOR - ENEMYBASE ROW")
    print("\n  Type numbers to select options")

    generator = PetGenerator()
    step_basics(generator)
    step_elements(generator)
    step_capture(generator)

    while True:
        try:
            generator.generate()
            show_result(generator)
        except ValidationError as e:
            print(f"\n  ✗ {e}")
            if generator.result is not None:
                print("  (previous result kept)")
            step_elements(generator)
            continue

        again = input("\n  Generate again? (y/n) > ").strip().lower()
        if again != "y":
            break


if __name__ == "__main__":
    main()

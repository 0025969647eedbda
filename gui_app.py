"""
GUI (customtkinter) for the pet generator: fill in the form, set elements with
sliders or presets, and copy the generated enemybase row.

Usage:
    python gui_app.py

Requirements:
    pip install customtkinter jinja2
"""
from __future__ import annotations

import sys
from pathlib import Path

try:
    import customtkinter as ctk
except ImportError as e:  # pragma: no cover - GUI dependency
    raise SystemExit("customtkinter is required. Install with `pip install customtkinter`.") from e

ROOT_DIR = Path(__file__).resolve().parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from PET_constants import (  # noqa: E402
    Concept,
    ELEMENT_ORDER,
    ELEMENT_PRESETS,
    CONCEPT_ALIASES,
    CAPTURE_DIFFICULTY_MAX,
    RARITY_MAX,
    OVERLAY_DURATION_MS,
)
from pet_generator import PetGenerator  # noqa: E402
from validation import ValidationError  # noqa: E402


ELEMENT_COLORS = {
    "Earth": "#a3e635",
    "Water": "#38bdf8",
    "Fire": "#ef4444",
    "Wind": "#facc15",
}

CONCEPT_LABELS = {c: f"{c.value} ({label})" for label, c in CONCEPT_ALIASES.items()}


class Overlay(ctk.CTkFrame):
    """Dark message box that hides itself after OVERLAY_DURATION_MS."""

    def __init__(self, master):
        super().__init__(master, fg_color="#1f1f1f", corner_radius=16)
        self.label = ctk.CTkLabel(self, text="", text_color="white", font=ctk.CTkFont(size=16, weight="bold"))
        self.label.pack(padx=28, pady=14)
        self._hide_job = None

    def show(self, msg: str):
        self.label.configure(text=msg)
        self.place(relx=0.5, rely=0.5, anchor="center")
        self.lift()
        if self._hide_job is not None:
            self.after_cancel(self._hide_job)
        self._hide_job = self.after(OVERLAY_DURATION_MS, self.hide)

    def hide(self):
        self._hide_job = None
        self.place_forget()


class ElementSliders(ctk.CTkFrame):
    def __init__(self, master, on_change):
        super().__init__(master)
        self.on_change = on_change
        self.sliders: dict[str, ctk.CTkSlider] = {}
        self.value_labels: dict[str, ctk.CTkLabel] = {}

        for col, element in enumerate(ELEMENT_ORDER):
            self.columnconfigure(col, weight=1)
            name = element.value
            ctk.CTkLabel(self, text=name, fg_color=ELEMENT_COLORS[name], text_color="white",
                         corner_radius=10).grid(row=0, column=col, padx=6, pady=4, sticky="ew")
            slider = ctk.CTkSlider(self, from_=0, to=10, number_of_steps=10,
                                   command=lambda v, n=name: self.on_change(n, int(round(v))))
            slider.set(0)
            slider.grid(row=1, column=col, padx=6, pady=4, sticky="ew")
            value = ctk.CTkLabel(self, text="0")
            value.grid(row=2, column=col, padx=6)
            self.sliders[name] = slider
            self.value_labels[name] = value

    def show(self, elements):
        for element in ELEMENT_ORDER:
            value = elements[element]
            self.sliders[element.value].set(value)
            self.value_labels[element.value].configure(text=str(value))


class App(ctk.CTk):
    def __init__(self):
        super().__init__()
        self.title("Pet Generator - enemybase")
        self.geometry("900x760")
        self.minsize(820, 700)

        self.generator = PetGenerator()

        form = ctk.CTkFrame(self)
        form.pack(fill="x", padx=12, pady=(12, 6))
        for col in range(3):
            form.columnconfigure(col, weight=1)

        self.var_name = ctk.StringVar(value="")
        self.var_temp_id = ctk.StringVar(value="")
        self.var_image_id = ctk.StringVar(value=self.generator.image_id)
        self.var_total = ctk.StringVar(value=str(self.generator.total))
        self.var_initial = ctk.StringVar(value=str(self.generator.initial_value))
        self.var_concept = ctk.StringVar(value=CONCEPT_LABELS[Concept.BALANCED])

        self._field(form, "Name", self.var_name, 0, 0)
        self._field(form, "Temporary id", self.var_temp_id, 0, 1)
        self._field(form, "Image id", self.var_image_id, 0, 2)
        self._field(form, "Total stats", self.var_total, 2, 0)
        self._field(form, "Initial value", self.var_initial, 2, 1)
        ctk.CTkLabel(form, text="Concept", anchor="w").grid(row=2, column=2, padx=8, sticky="w")
        ctk.CTkOptionMenu(form, variable=self.var_concept, values=list(CONCEPT_LABELS.values())).grid(
            row=3, column=2, padx=8, pady=(0, 8), sticky="ew")

        elements_frame = ctk.CTkFrame(self)
        elements_frame.pack(fill="x", padx=12, pady=6)
        ctk.CTkLabel(elements_frame, text="Elements", font=ctk.CTkFont(weight="bold")).pack(anchor="w", padx=8, pady=(6, 0))
        presets = ctk.CTkFrame(elements_frame, fg_color="transparent")
        presets.pack(fill="x", padx=8, pady=4)
        for preset in ELEMENT_PRESETS:
            ctk.CTkButton(presets, text=preset, width=110,
                          command=lambda p=preset: self._apply_preset(p)).pack(side="left", padx=3)
        ctk.CTkButton(presets, text="Clear", width=80, fg_color="#b91c1c",
                      command=self._clear_elements).pack(side="left", padx=3)
        self.element_sliders = ElementSliders(elements_frame, on_change=self._on_element_change)
        self.element_sliders.pack(fill="x", padx=8, pady=6)

        capture = ctk.CTkFrame(self)
        capture.pack(fill="x", padx=12, pady=6)
        capture.columnconfigure((0, 1), weight=1)
        self.capture_label = self._bounded_slider(capture, "Capture difficulty", CAPTURE_DIFFICULTY_MAX, 0,
                                                  self._on_capture_change)
        self.rarity_label = self._bounded_slider(capture, "Rarity", RARITY_MAX, 1, self._on_rarity_change)

        ctk.CTkButton(self, text="Generate", command=self._generate).pack(fill="x", padx=12, pady=8)

        self.result_label = ctk.CTkLabel(self, text="", justify="left", anchor="w")
        self.result_label.pack(fill="x", padx=16)
        self.output = ctk.CTkTextbox(self, height=110)
        self.output.pack(fill="both", expand=True, padx=12, pady=(4, 12))

        self.overlay = Overlay(self)

    def _field(self, parent, label: str, var: ctk.StringVar, row: int, col: int):
        ctk.CTkLabel(parent, text=label, anchor="w").grid(row=row, column=col, padx=8, pady=(6, 0), sticky="w")
        ctk.CTkEntry(parent, textvariable=var).grid(row=row + 1, column=col, padx=8, pady=(0, 8), sticky="ew")

    def _bounded_slider(self, parent, label: str, maximum: int, col: int, command) -> ctk.CTkLabel:
        ctk.CTkLabel(parent, text=label, font=ctk.CTkFont(weight="bold")).grid(row=0, column=col, padx=8, pady=(6, 0))
        slider = ctk.CTkSlider(parent, from_=0, to=maximum, number_of_steps=maximum,
                               command=lambda v: command(int(round(v))))
        slider.set(0)
        slider.grid(row=1, column=col, padx=8, sticky="ew")
        value = ctk.CTkLabel(parent, text="0")
        value.grid(row=2, column=col, pady=(0, 6))
        return value

    # -------------------------------------------------------------------------
    # Handlers
    # -------------------------------------------------------------------------

    def _show_error(self, err: ValidationError):
        self.overlay.show(str(err))

    def _on_element_change(self, element: str, value: int):
        if value == self.generator.elements[element]:
            return
        try:
            self.generator.set_element(element, value)
        except ValidationError as e:
            self._show_error(e)
        # Snap rejected drags back to the stored values
        self.element_sliders.show(self.generator.elements)

    def _apply_preset(self, preset: str):
        try:
            self.generator.apply_preset(preset)
        except ValidationError as e:
            self._show_error(e)
        self.element_sliders.show(self.generator.elements)

    def _clear_elements(self):
        self.element_sliders.show(self.generator.clear_elements())

    def _on_capture_change(self, value: int):
        self.generator.capture_difficulty = value
        self.capture_label.configure(text=str(value))

    def _on_rarity_change(self, value: int):
        self.generator.rarity = value
        self.rarity_label.configure(text=str(value))

    def _read_form(self):
        self.generator.name = self.var_name.get().strip()
        self.generator.temp_id = self.var_temp_id.get().strip()
        self.generator.image_id = self.var_image_id.get().strip()
        label = self.var_concept.get()
        self.generator.concept = next((c for c, text in CONCEPT_LABELS.items() if text == label), Concept.BALANCED)
        for attr, var in (("total", self.var_total), ("initial_value", self.var_initial)):
            raw = var.get().strip()
            try:
                setattr(self.generator, attr, int(raw))
            except ValueError:
                # Leave the raw text so form validation reports it
                setattr(self.generator, attr, raw)

    def _generate(self):
        self._read_form()
        try:
            result = self.generator.generate()
        except ValidationError as e:
            self._show_error(e)
            return
        self.result_label.configure(text="\n".join(result.summary_lines()))
        self.output.delete("1.0", "end")
        self.output.insert("1.0", result.enemybase_line)


def main():
    ctk.set_appearance_mode("System")
    ctk.set_default_color_theme("blue")
    app = App()
    app.mainloop()


if __name__ == "__main__":
    main()

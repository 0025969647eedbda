import pytest

pytest.importorskip("customtkinter")

from PET_constants import OVERLAY_DURATION_MS  # noqa: E402
from gui_app import Overlay  # noqa: E402


class _Label:
    def __init__(self):
        self.text = None

    def configure(self, text):
        self.text = text


class _FakeOverlay:
    """Records what Overlay.show/hide do to the widget, without a display."""

    def __init__(self):
        self.label = _Label()
        self._hide_job = None
        self.placed = False
        self.scheduled = {}
        self.cancelled = []
        self._next_job = 0

    def place(self, **kwargs):
        self.placed = True

    def place_forget(self):
        self.placed = False

    def lift(self):
        pass

    def after(self, ms, callback):
        self._next_job += 1
        job = f"after#{self._next_job}"
        self.scheduled[job] = (ms, callback)
        return job

    def after_cancel(self, job):
        self.cancelled.append(job)
        self.scheduled.pop(job, None)

    def hide(self):
        Overlay.hide(self)

    def fire(self, job):
        ms, callback = self.scheduled.pop(job)
        callback()


def test_show_schedules_auto_dismiss():
    overlay = _FakeOverlay()
    Overlay.show(overlay, "At most 2 elements can be selected.")

    assert overlay.placed
    assert overlay.label.text == "At most 2 elements can be selected."
    (job, (ms, _)), = overlay.scheduled.items()
    assert ms == OVERLAY_DURATION_MS

    overlay.fire(job)
    assert not overlay.placed
    assert overlay._hide_job is None


def test_second_message_restarts_timer():
    overlay = _FakeOverlay()
    Overlay.show(overlay, "first")
    first_job = overlay._hide_job
    Overlay.show(overlay, "second")

    assert overlay.cancelled == [first_job]
    assert list(overlay.scheduled) == [overlay._hide_job]
    assert overlay.label.text == "second"

"""Widgets of the options screen: hover buttons and volume sliders."""

from __future__ import annotations

from typing import Callable

SIZE_STEP = 5
_SLIDER_OFFSET = 20


def slider_volume(mouse_y: float, slider_y: float, slider_height: float) -> float:
    """Return the volume, clamped to 0..1, for a mouse at ``mouse_y`` on a slider."""
    value = ((slider_y + slider_height) - mouse_y - _SLIDER_OFFSET) / slider_height
    return min(1.0, max(0.0, value))


class HoverButton:
    """A text button whose size grows while hovered and shrinks otherwise.

    ``on_hover`` is called when the mouse enters the button and when it is
    clicked, typically to play the menu sound.
    """

    def __init__(
        self,
        min_size: int,
        max_size: int,
        on_hover: Callable[[], None] | None = None,
    ) -> None:
        if min_size > max_size:
            raise ValueError("min_size must not exceed max_size")
        self.min_size = min_size
        self.max_size = max_size
        self.size = min_size
        self.hovered = False
        self._on_hover = on_hover or (lambda: None)

    def update(self, mouse_over: bool, clicked: bool) -> bool:
        """Advance one frame; return whether the button was clicked."""
        if mouse_over:
            if not self.hovered:
                self._on_hover()
                self.hovered = True
        else:
            if self.size > self.min_size:
                self.size -= SIZE_STEP
            self.hovered = False

        if not self.hovered:
            return False
        if self.size < self.max_size:
            self.size += SIZE_STEP
        if clicked:
            self._on_hover()
            return True
        return False


class VolumeSlider:
    """A vertical volume slider that is dragged with the left mouse button.

    Once a drag starts the slider keeps following the mouse even after it
    leaves the slider, until the button is released.
    """

    def __init__(
        self,
        slider_y: float,
        slider_height: float,
        on_hover: Callable[[], None] | None = None,
        on_change: Callable[[float], None] | None = None,
    ) -> None:
        self.slider_y = slider_y
        self.slider_height = slider_height
        self.hovered = False
        self.dragging = False
        self._on_hover = on_hover or (lambda: None)
        self._on_change = on_change or (lambda volume: None)

    def update(
        self,
        mouse_over: bool,
        mouse_y: float,
        pressed: bool,
        down: bool,
        released: bool,
    ) -> float | None:
        """Advance one frame; return the volume set this frame, if any."""
        if mouse_over:
            if not self.hovered:
                self._on_hover()
                self.hovered = True
        elif not self.dragging:
            self.hovered = False

        if not self.hovered:
            return None

        volume = None
        if pressed:
            self.dragging = True
        if self.dragging and down:
            volume = slider_volume(mouse_y, self.slider_y, self.slider_height)
            self._on_change(volume)
        if released:
            self.dragging = False
        return volume
"""Waiting for the key press that rebinds a control."""

from __future__ import annotations

from dataclasses import dataclass

from blockfall.keybinds import KEY_NULL, Action, KeyBindings


@dataclass(frozen=True)
class _Pending:
    action: Action
    alternate: bool


class BindingCapture:
    """Tracks which binding slot waits for a key and applies the key once pressed.

    Only one slot can wait at a time. Pressing the key already bound to the
    slot unbinds it. After a key is captured, :meth:`consume_just_found`
    reports it once, so the press that set a binding is not also taken as a
    menu command.
    """

    def __init__(self, bindings: KeyBindings) -> None:
        self.bindings = bindings
        self._pending: _Pending | None = None
        self._just_found = False

    @property
    def waiting(self) -> tuple[Action, bool] | None:
        """The slot waiting for a key as ``(action, alternate)``, or ``None``."""
        if self._pending is None:
            return None
        return self._pending.action, self._pending.alternate

    @property
    def is_waiting(self) -> bool:
        """Whether a slot is waiting for a key."""
        return self._pending is not None

    def start(self, action: Action, alternate: bool = False) -> tuple[Action, bool]:
        """Begin waiting for a key for ``action``.

        If a slot is already waiting, it stays selected and is returned.
        """
        if self._pending is None:
            self._pending = _Pending(action, alternate)
        return self._pending.action, self._pending.alternate

    def press(self, key: int) -> int | None:
        """Offer a pressed key to the waiting slot.

        Returns the key code now bound, or ``None`` when nothing was waiting
        or no key was pressed (``KEY_NULL``), in which case waiting goes on.
        """
        pending = self._pending
        if pending is None or key == KEY_NULL:
            return None
        bound = self.bindings.assign(pending.action, key, pending.alternate)
        self._pending = None
        self._just_found = True
        return bound

    def cancel(self) -> None:
        """Stop waiting without changing any binding."""
        self._pending = None

    def consume_just_found(self) -> bool:
        """Return whether a key was just captured, clearing the flag."""
        found = self._just_found
        self._just_found = False
        return found
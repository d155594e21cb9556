"""Per-frame keyboard edge tracking.

The backend dispatches ``KeyDown``/``KeyUp`` events as they arrive. The
keyboard folds them into three sets: keys currently held, keys pressed since
the frame began and keys released since the frame began. The host loop calls
``begin_frame()`` once per frame before polling events, so the edge sets
always describe exactly one frame.
"""

from __future__ import annotations

from bruteroom.input_events import InputEvent, KeyDown, KeySym, KeyUp


class Keyboard:
    def __init__(self) -> None:
        self._held: set[KeySym] = set()
        self._just_pressed: set[KeySym] = set()
        self._just_released: set[KeySym] = set()

    def begin_frame(self) -> None:
        """Forget last frame's edges. Held keys stay held."""
        self._just_pressed.clear()
        self._just_released.clear()

    def dispatch(self, event: InputEvent) -> None:
        match event:
            case KeyDown(sym=sym, repeat=False):
                if sym not in self._held:
                    self._held.add(sym)
                    self._just_pressed.add(sym)
            case KeyUp(sym=sym):
                self._held.discard(sym)
                self._just_released.add(sym)
            case _:
                pass

    def press(self, sym: KeySym) -> None:
        """Shorthand for dispatching a fresh key press."""
        self.dispatch(KeyDown(sym=sym))

    def release(self, sym: KeySym) -> None:
        """Shorthand for dispatching a key release."""
        self.dispatch(KeyUp(sym=sym))

    def pressed(self, sym: KeySym) -> bool:
        return sym in self._held

    def just_pressed(self, sym: KeySym) -> bool:
        return sym in self._just_pressed

    def just_released(self, sym: KeySym) -> bool:
        return sym in self._just_released

    def any_just_pressed(self, syms: frozenset[KeySym]) -> bool:
        return not self._just_pressed.isdisjoint(syms)

    def any_just_released(self, syms: frozenset[KeySym]) -> bool:
        return not self._just_released.isdisjoint(syms)

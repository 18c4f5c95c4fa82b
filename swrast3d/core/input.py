"""
Скрывает GLFW‑callback‑механику клавиатуры.
"""

import glfw


class InputManager:
    """Состояние клавиш + детектор нажатия по фронту."""
    def __init__(self, window):
        self.window = window
        self.keys = {}
        self._previous = {}
        glfw.set_key_callback(self.window, self._key_cb)

    def _key_cb(self, win, key, scancode, action, mods):
        self.keys[key] = action != glfw.RELEASE

    def is_key_pressed(self, key) -> bool:
        return self.keys.get(key, False)

    def was_pressed(self, key) -> bool:
        """True ровно в том кадре, когда клавиша перешла из «отпущена» в «нажата»."""
        pressed = self.is_key_pressed(key)
        prev = self._previous.get(key, False)
        self._previous[key] = pressed
        return pressed and not prev

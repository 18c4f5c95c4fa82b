"""
Окно + GLFW‑контекст с OpenGL; кадр программного рендерера выводится
через glDrawPixels.
"""

import glfw
import numpy as np
from OpenGL import GL

from swrast3d.core.input import InputManager
from swrast3d.utils.logger import logger


def gl_check_error(context: str = ""):
    """Проверить glGetError и вывести в лог, если что‑то не так."""
    err = GL.glGetError()
    if err != GL.GL_NO_ERROR:
        logger.error(f"[Window] OpenGL error 0x{err:04X} [{context}]")


class Window:
    """Окно + GLFW‑контекст."""
    def __init__(self, width: int = 800, height: int = 800, title: str = "SWRast3D"):
        if not glfw.init():
            raise RuntimeError("Failed to initialize GLFW")

        self.handle = glfw.create_window(width, height, title, None, None)
        if not self.handle:
            glfw.terminate()
            raise RuntimeError("Failed to create GLFW window")
        glfw.make_context_current(self.handle)

        self.width, self.height = glfw.get_framebuffer_size(self.handle)
        self.title = title
        self.input = InputManager(self.handle)

        glfw.set_framebuffer_size_callback(self.handle, self._on_resize)
        self.set_vsync(True)
        logger.info(f"[Window] Created {width}x{height} \"{title}\"")

    def _on_resize(self, _win, w, h):
        self.width, self.height = w, h
        GL.glViewport(0, 0, w, h)

    def set_vsync(self, enable: bool = True):
        glfw.swap_interval(1 if enable else 0)

    def should_close(self) -> bool:
        return glfw.window_should_close(self.handle)

    def present(self, framebuffer):
        """Вывести кадр: строки переворачиваются (у GL начало внизу), масштаб – glPixelZoom."""
        rgb = np.ascontiguousarray(framebuffer.to_rgb_array()[::-1])
        GL.glClear(GL.GL_COLOR_BUFFER_BIT)
        GL.glRasterPos2f(-1.0, -1.0)
        GL.glPixelZoom(self.width / framebuffer.width, self.height / framebuffer.height)
        GL.glPixelStorei(GL.GL_UNPACK_ALIGNMENT, 1)
        GL.glDrawPixels(framebuffer.width, framebuffer.height,
                        GL.GL_RGB, GL.GL_UNSIGNED_BYTE, rgb)
        gl_check_error("present")
        glfw.swap_buffers(self.handle)

    def poll_events(self):
        glfw.poll_events()

    def close(self):
        glfw.set_window_should_close(self.handle, True)

    def destroy(self):
        glfw.destroy_window(self.handle)
        glfw.terminate()

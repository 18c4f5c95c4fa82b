# swrast3d/engine.py
# -*- coding: utf-8 -*-
"""
Главный цикл.

* Создаёт окно (glfw + GL‑контекст только для вывода кадра) и программный
  рендерер по конфигу.
* Кадр: ввод → камера → столкновения → сцена → render → present.
* Клавиши: C – режим камеры; WASD/Space/Shift – полёт (свободный режим);
  стрелки – поворот (свободный) или орбита (орбитальный); W/S – zoom
  (орбитальный); O – орбиты; 0‑9 – варп к целям; Esc – выход.
"""
import math
import time
from typing import List, Tuple

import glfw
import numpy as np

from swrast3d.core.timer import Timer
from swrast3d.renderer.pipeline import SoftwareRenderer
from swrast3d.scene import Camera, Node, Scene
from swrast3d.utils import logger, Config, Profiler

ORBIT_STEP = math.pi / 50.0
ZOOM_STEP = 20.0
ROTATE_STEP = 2.0
WARP_COOLDOWN = 1.0

WARP_KEYS = [
    glfw.KEY_0, glfw.KEY_1, glfw.KEY_2, glfw.KEY_3, glfw.KEY_4,
    glfw.KEY_5, glfw.KEY_6, glfw.KEY_7, glfw.KEY_8, glfw.KEY_9,
]


class Engine:
    """
    Главный цикл движка.
    """
    # -----------------------------------------------------------------
    def __init__(self, scene: Scene = None, camera: Camera = None,
                 config_path: str = "config.json"):
        # ---------------------------------------------------------
        # 0️⃣  Конфиг + окно
        # ---------------------------------------------------------
        self.cfg = Config(config_path)
        win_cfg = self.cfg.section("window")
        self.window = self._create_window(
            win_cfg["width"], win_cfg["height"], win_cfg["title"],
        )

        # ---------------------------------------------------------
        # 1️⃣  Рендерер + сцена + камера
        # ---------------------------------------------------------
        self.renderer = SoftwareRenderer.from_config(self.cfg)
        self.scene = scene if scene is not None else Scene()
        self.camera = camera if camera is not None else Camera.from_config(
            np.zeros(3), self.cfg.section("camera"),
        )

        # ---------------------------------------------------------
        # 2️⃣  Варп‑цели, таймер, FPS
        # ---------------------------------------------------------
        self.warp_targets: List[Tuple[Node, float]] = []
        self._last_warp = -math.inf
        self.timer = Timer()
        self.time = 0.0
        self.show_fps = bool(self.cfg.get("show_fps", True))
        self.frame_delay = float(self.cfg.get("frame_delay", 0.0))
        self._last_fps_print = time.time()

    # -----------------------------------------------------------------
    def _create_window(self, w: int, h: int, title: str):
        from swrast3d.window import Window
        return Window(w, h, title)

    def add_warp_target(self, node: Node, safe_distance: float):
        """Цель варпа; клавиша = порядковый номер (0‑9)."""
        self.warp_targets.append((node, safe_distance))

    # -----------------------------------------------------------------
    def handle_input(self, dt: float):
        im = self.window.input
        cam = self.camera

        if im.is_key_pressed(glfw.KEY_ESCAPE):
            self.window.close()
        if im.was_pressed(glfw.KEY_C):
            cam.toggle_free_mode()
        if im.was_pressed(glfw.KEY_O):
            self.scene.show_orbits = not self.scene.show_orbits
            logger.info(f"[Engine] Orbits {'ON' if self.scene.show_orbits else 'OFF'}")

        if cam.free_mode:
            if im.is_key_pressed(glfw.KEY_W):
                cam.move_forward(dt)
            if im.is_key_pressed(glfw.KEY_S):
                cam.move_backward(dt)
            if im.is_key_pressed(glfw.KEY_A):
                cam.move_left(dt)
            if im.is_key_pressed(glfw.KEY_D):
                cam.move_right(dt)
            if im.is_key_pressed(glfw.KEY_SPACE):
                cam.move_up(dt)
            if im.is_key_pressed(glfw.KEY_LEFT_SHIFT):
                cam.move_down(dt)

            if im.is_key_pressed(glfw.KEY_LEFT):
                cam.rotate(-ROTATE_STEP, 0.0)
            if im.is_key_pressed(glfw.KEY_RIGHT):
                cam.rotate(ROTATE_STEP, 0.0)
            if im.is_key_pressed(glfw.KEY_UP):
                cam.rotate(0.0, -ROTATE_STEP)
            if im.is_key_pressed(glfw.KEY_DOWN):
                cam.rotate(0.0, ROTATE_STEP)
        else:
            if im.is_key_pressed(glfw.KEY_RIGHT):
                cam.orbit(ORBIT_STEP, 0.0)
            if im.is_key_pressed(glfw.KEY_LEFT):
                cam.orbit(-ORBIT_STEP, 0.0)
            if im.is_key_pressed(glfw.KEY_UP):
                cam.orbit(0.0, -ORBIT_STEP)
            if im.is_key_pressed(glfw.KEY_DOWN):
                cam.orbit(0.0, ORBIT_STEP)

            if im.is_key_pressed(glfw.KEY_W):
                cam.zoom(-ZOOM_STEP)
            if im.is_key_pressed(glfw.KEY_S):
                cam.zoom(ZOOM_STEP)

        if self.time - self._last_warp > WARP_COOLDOWN:
            for key, (node, safe_distance) in zip(WARP_KEYS, self.warp_targets):
                if im.is_key_pressed(key):
                    cam.warp_to(node.world_position(), safe_distance)
                    self._last_warp = self.time
                    break

    # -----------------------------------------------------------------
    def step(self, dt: float):
        """Один кадр симуляции + отрисовки (без вывода на экран)."""
        self.time += dt
        self.camera.update(dt)
        self.scene.update(dt)
        positions, scales = self.scene.collision_bodies()
        self.camera.check_collision(positions, scales)
        with Profiler("frame"):
            self.renderer.render(self.scene, self.camera, self.time)

    def run(self):
        """Главный цикл."""
        logger.info("[Engine] Engine started")
        while not self.window.should_close():
            dt = self.timer.tick()
            self.window.poll_events()
            self.handle_input(dt)
            self.step(dt)
            self.window.present(self.renderer.framebuffer)

            if self.show_fps:
                now = time.time()
                if now - self._last_fps_print >= 1.0:
                    logger.info(f"[Engine] FPS: {self.timer.fps:.2f}")
                    self._last_fps_print = now
            if self.frame_delay > 0.0:
                time.sleep(self.frame_delay)

        self.shutdown()

    # -----------------------------------------------------------------
    def shutdown(self):
        """Освободить ресурсы и закрыть окно."""
        logger.info("[Engine] Shutting down")
        self.window.destroy()

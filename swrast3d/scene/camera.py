"""
Камера с двумя режимами: орбитальная (сферические координаты вокруг
цели) и свободная (fly‑through с инерцией).

Состояние режима хранится в `camera.state` – это либо `OrbitalState`,
либо `FreeState`. Операции чужого режима ничего не делают.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Sequence, Union

import numpy as np

from swrast3d.math.mat4 import Mat4, normalize
from swrast3d.math.quat import Quat
from swrast3d.utils.logger import logger

PHI_MIN = 0.1
PHI_MAX = math.pi - 0.1


@dataclass
class OrbitalState:
    theta: float = 0.0              # азимут
    phi: float = math.pi / 2.0      # угол от оси +Y (π/2 – горизонт)
    distance: float = 600.0


@dataclass
class FreeState:
    velocity: np.ndarray = field(default_factory=lambda: np.zeros(3))


CameraState = Union[OrbitalState, FreeState]


def _vec3(v) -> np.ndarray:
    return np.array(v, dtype=np.float64).reshape(3)


class Camera:
    """Орбитальная / свободная камера."""

    def __init__(self,
                 target=(0.0, 0.0, 0.0),
                 distance: float = 600.0,
                 up=(0.0, 1.0, 0.0),
                 min_distance: float = 50.0,
                 max_distance: float = 3000.0,
                 movement_speed: float = 50.0,
                 rotation_speed: float = 0.03,
                 damping: float = 0.9,
                 collision_margin: float = 15.0,
                 look_ahead: float = 100.0):
        self.target = _vec3(target)
        self.up = _vec3(up)
        self.position = np.zeros(3)

        self.min_distance = float(min_distance)
        self.max_distance = float(max_distance)
        self.movement_speed = float(movement_speed)
        self.rotation_speed = float(rotation_speed)
        self.damping = float(damping)
        self.collision_margin = float(collision_margin)
        self.look_ahead = float(look_ahead)

        self.state: CameraState = OrbitalState(distance=self._clamp_distance(distance))
        self._update_position()

    @classmethod
    def from_config(cls, target, section: dict) -> "Camera":
        """Создать камеру из секции `camera` конфигурации."""
        return cls(
            target=target,
            distance=section["distance"],
            min_distance=section["min_distance"],
            max_distance=section["max_distance"],
            movement_speed=section["movement_speed"],
            rotation_speed=section["rotation_speed"],
            damping=section["damping"],
            collision_margin=section["collision_margin"],
            look_ahead=section["look_ahead"],
        )

    # -----------------------------------------------------------------
    # свойства
    # -----------------------------------------------------------------
    @property
    def free_mode(self) -> bool:
        return isinstance(self.state, FreeState)

    @property
    def mode(self) -> str:
        return "free" if self.free_mode else "orbital"

    @property
    def velocity(self) -> np.ndarray:
        if self.free_mode:
            return self.state.velocity
        return np.zeros(3)

    @property
    def forward(self) -> np.ndarray:
        return normalize(self.target - self.position)

    @property
    def right(self) -> np.ndarray:
        return normalize(np.cross(self.forward, self.up))

    # -----------------------------------------------------------------
    # вспомогательное
    # -----------------------------------------------------------------
    def _clamp_distance(self, distance: float) -> float:
        return min(max(float(distance), self.min_distance), self.max_distance)

    def _update_position(self):
        """position = target + distance·(sinφ·cosθ, cosφ, sinφ·sinθ)."""
        s = self.state
        offset = np.array([
            math.sin(s.phi) * math.cos(s.theta),
            math.cos(s.phi),
            math.sin(s.phi) * math.sin(s.theta),
        ])
        self.position = self.target + s.distance * offset

    def _adopt_position(self, position: np.ndarray, clamp: bool = True):
        """
        Пересчитать сферические координаты по позиции (орбитальный режим).
        clamp=False сохраняет позицию точно, даже вне [min, max] и [PHI_MIN, PHI_MAX];
        orbit() вернёт φ, а zoom() дистанцию в пределы.
        """
        offset = position - self.target
        d = float(np.linalg.norm(offset))
        if d > 0.0:
            phi = math.acos(max(-1.0, min(1.0, offset[1] / d)))
            theta = math.atan2(offset[2], offset[0])
        else:
            phi, theta = math.pi / 2.0, 0.0
        if not clamp:
            self.state = OrbitalState(theta=theta, phi=phi, distance=d)
            self.position = np.array(position, dtype=np.float64)
            return
        self.state = OrbitalState(
            theta=theta,
            phi=min(max(phi, PHI_MIN), PHI_MAX),
            distance=self._clamp_distance(d),
        )
        self._update_position()

    # -----------------------------------------------------------------
    # орбитальный режим
    # -----------------------------------------------------------------
    def orbit(self, delta_theta: float, delta_phi: float):
        if self.free_mode:
            return
        s = self.state
        s.theta += delta_theta
        s.phi = min(max(s.phi + delta_phi, PHI_MIN), PHI_MAX)
        self._update_position()

    def zoom(self, delta_distance: float):
        if self.free_mode:
            return
        s = self.state
        s.distance = self._clamp_distance(s.distance + delta_distance)
        self._update_position()

    # -----------------------------------------------------------------
    # переключение режимов
    # -----------------------------------------------------------------
    def toggle_free_mode(self):
        """
        В свободный режим: цель переносится на look_ahead вперёд по
        текущему направлению взгляда. Обратно в орбитальный: θ, φ и
        дистанция восстанавливаются из текущих position/target.
        """
        if self.free_mode:
            self._adopt_position(self.position)
        else:
            self.target = self.position + self.forward * self.look_ahead
            self.state = FreeState()
        logger.info(f"[Camera] Mode → {self.mode}")

    # -----------------------------------------------------------------
    # свободный режим: движение
    # -----------------------------------------------------------------
    def _accelerate(self, direction: np.ndarray, delta: float):
        if not self.free_mode:
            return
        self.state.velocity = self.state.velocity + direction * self.movement_speed * delta

    def move_forward(self, delta: float):
        self._accelerate(self.forward, delta)

    def move_backward(self, delta: float):
        self._accelerate(-self.forward, delta)

    def move_left(self, delta: float):
        self._accelerate(-self.right, delta)

    def move_right(self, delta: float):
        self._accelerate(self.right, delta)

    def move_up(self, delta: float):
        self._accelerate(self.up, delta)

    def move_down(self, delta: float):
        self._accelerate(-self.up, delta)

    def rotate(self, delta_x: float, delta_y: float):
        """
        Yaw вокруг мирового up, затем pitch вокруг нового right.

        Если после pitch взгляд оказывается в пределах |cos| >= 0.999 от up,
        шаг pitch отбрасывается целиком (не обрезается): наклон
        останавливается в нескольких градусах от вертикали.
        """
        if not self.free_mode:
            return
        forward = self.forward
        yawed = Quat.from_axis_angle(self.up, delta_x * self.rotation_speed).rotate_vector(forward)

        right = normalize(np.cross(yawed, self.up))
        new_forward = yawed
        if np.linalg.norm(right) > 0.0:
            pitched = normalize(
                Quat.from_axis_angle(right, delta_y * self.rotation_speed).rotate_vector(yawed)
            )
            # взгляд строго вдоль up делает look‑at вырожденным
            if abs(float(np.dot(pitched, normalize(self.up)))) < 0.999:
                new_forward = pitched

        self.target = self.position + normalize(new_forward) * self.look_ahead

    def update(self, delta_time: float):
        """Интегрирование скорости и экспоненциальное затухание."""
        if not self.free_mode:
            return
        step = self.state.velocity * delta_time
        self.position = self.position + step
        self.target = self.target + step
        self.state.velocity = self.state.velocity * self.damping

    # -----------------------------------------------------------------
    # столкновения и варп
    # -----------------------------------------------------------------
    def check_collision(self, body_positions: Sequence, body_scales: Sequence[float]) -> bool:
        """
        Выталкивает камеру из первого найденного тела (радиус = scale·margin).
        Возвращает True, если столкновение было.
        """
        for body_pos, scale in zip(body_positions, body_scales):
            body_pos = _vec3(body_pos)
            offset = self.position - body_pos
            distance = float(np.linalg.norm(offset))
            radius = float(scale) * self.collision_margin
            if distance >= radius:
                continue

            direction = offset / distance if distance > 0.0 else normalize(self.up)
            pushed = body_pos + direction * radius
            if self.free_mode:
                self.position = pushed
                self.target = pushed + direction * self.look_ahead
            else:
                self._adopt_position(pushed, clamp=False)
            logger.debug(f"[Camera] Collision: pushed out to r={radius:.1f}")
            return True
        return False

    def warp_to(self, target_position, safe_distance: float):
        """Мгновенное перемещение к телу."""
        target_position = _vec3(target_position)
        if self.free_mode:
            self.position = target_position + np.array(
                [safe_distance, safe_distance * 0.5, 0.0]
            )
            self.target = target_position
            self.state.velocity = np.zeros(3)
        else:
            self.target = target_position
            self.state.distance = self._clamp_distance(safe_distance)
            self._update_position()
        logger.info(f"[Camera] Warp → {target_position.round(1).tolist()} ({self.mode})")

    # -----------------------------------------------------------------
    def view_matrix(self) -> Mat4:
        return Mat4.look_at(self.position, self.target, self.up)

# -*- coding: utf-8 -*-
"""
Процедурные материалы.

Каждая функция – чистая: color(position, normal, time) -> Color.
Никаких текстур: «шум» строится из сумм и произведений sin/cos от
масштабированных объектных координат. Каналы считаются во float и
приводятся к 8 битам с насыщением (см. Color.from_float).

Здесь же – модель освещения (Ламберт + затухание по расстоянию),
которая считается один раз на треугольник (flat shading).
"""

from __future__ import annotations

import math

import numpy as np

from swrast3d.color import Color, to_byte

AMBIENT = 0.1
STAR_THRESHOLD = 0.995


def _xyz(v):
    return float(v[0]), float(v[1]), float(v[2])


def _length(x: float, y: float, z: float) -> float:
    return math.sqrt(x * x + y * y + z * z)


# -------------------------------------------------------------
# Skybox – звёздное поле
# -------------------------------------------------------------
def hash_noise(x: float, y: float, z: float) -> float:
    """frac(sin(12.9898x + 78.233y + 43.758z) · 43758.5453) ∈ [0, 1)."""
    seed = math.sin(x * 12.9898 + y * 78.233 + z * 43.758) * 43758.5453
    return abs(seed - math.floor(seed))


def skybox_color(position, normal, time: float) -> Color:
    x, y, z = _xyz(position)
    noise = hash_noise(x, y, z)
    twinkle = max(math.sin(time * 2.0 + noise * 10.0) * 0.5 + 0.5, 0.0)

    if noise > STAR_THRESHOLD:
        star_intensity = ((noise - STAR_THRESHOLD) / (1.0 - STAR_THRESHOLD)) * twinkle
        brightness = to_byte(star_intensity * 255.0)
        # чуть желтоватый
        return Color(brightness, brightness, max(brightness - 50, 0))

    return Color.from_float(noise * 10.0, noise * 15.0, noise * 25.0 + 30.0)


# -------------------------------------------------------------
# Star – пульсирующее солнце
# -------------------------------------------------------------
def star_color(position, normal, time: float) -> Color:
    x, y, z = _xyz(position)
    normalized_distance = min(_length(x, y, z) * 0.1, 1.0)
    pulse = math.sin(time * 3.0) * 0.15 + 0.85
    temp_factor = (1.0 - normalized_distance) * pulse

    flare_noise = (
        math.sin(x * 0.1 + time) * math.cos(y * 0.1 + time) + math.sin(z * 0.1)
    ) * 0.2

    intensity = min(max(temp_factor + flare_noise, 0.0), 1.0)

    if intensity > 0.8:
        return Color.from_float(255.0, 255.0, 200.0 * intensity)
    if intensity > 0.5:
        return Color.from_float(255.0, 200.0 * intensity, 100.0 * intensity)
    return Color.from_float(255.0 * intensity, 150.0 * intensity, 50.0)


# -------------------------------------------------------------
# RockyPlanet – рельеф, кратеры, минеральные жилы
# -------------------------------------------------------------
def rocky_planet_color(position, normal, time: float) -> Color:
    x, y, z = _xyz(position)
    nx, ny, nz = _xyz(normal)

    terrain = math.sin(x * 0.05) * math.cos(y * 0.05) + math.sin(z * 0.03)
    height = (terrain + 1.0) * 0.5

    crater = abs(math.sin(x * 0.2) * math.cos(y * 0.15) * math.sin(z * 0.18))
    crater_factor = 0.3 if crater > 0.7 else 1.0

    mineral = (math.sin(x * 0.8 + y * 0.6) + math.cos(z * 0.4)) * 0.5 + 0.5
    roughness = abs(nx + ny + nz) * 0.1 + 0.9

    f = height * crater_factor * roughness

    if mineral > 0.7 and height > 0.6:
        # железистые области
        return Color.from_float(180.0 * f, 100.0 * f, 80.0 * f)
    if height > 0.4:
        # возвышенности
        return Color.from_float(140.0 * f, 120.0 * f, 100.0 * f)
    # низины
    return Color.from_float(90.0 * f, 80.0 * f, 70.0 * f)


# -------------------------------------------------------------
# GasGiant – полосы, штормы
# -------------------------------------------------------------
def gas_giant_color(position, normal, time: float) -> Color:
    x, y, z = _xyz(position)

    latitude = math.sin(y * 0.02) * 0.5 + 0.5
    band = math.sin(y * 0.1 + time * 0.1) * 0.5 + 0.5

    storm = (math.sin(x * 0.03 + time * 0.2) * math.cos(z * 0.03 + time * 0.15) + 1.0) * 0.5
    composition = math.sin((x + z) * 0.01) * 0.3 + 0.7
    depth = min(_length(*_xyz(normal)) * 0.8 + 0.2, 1.0)

    band_intensity = (latitude + band * 0.3) * composition * depth
    storm_intensity = storm * 0.4 + 0.6
    f = band_intensity * storm_intensity

    if band > 0.6:
        return Color.from_float(220.0 * f, 200.0 * f, 170.0 * f)
    if band > 0.3:
        return Color.from_float(160.0 * f, 120.0 * f, 80.0 * f)
    return Color.from_float(200.0 * f, 140.0 * f, 100.0 * f)


# -------------------------------------------------------------
# Spaceship – металл, панели, свечение двигателя
# -------------------------------------------------------------
def spaceship_color(position, normal, time: float) -> Color:
    x, y, z = _xyz(position)
    base_metallic = 0.7

    panel_x = min(math.sin(x * 2.0) * 0.5 + 0.5, 0.9)
    panel_z = min(math.cos(z * 2.0) * 0.5 + 0.5, 0.9)
    panel = (panel_x + panel_z) * 0.3 + 0.7

    wear = math.sin((x + y + z) * 1.5) * 0.1 + 0.9

    engine_glow = math.sin(time * 2.0) * 0.1 + 0.9 if z < -0.5 else 1.0

    normal_factor = min(_length(*_xyz(normal)) * 0.8 + 0.2, 1.0)
    f = base_metallic * panel * wear * engine_glow * normal_factor

    return Color.from_float(180.0 * f, 190.0 * f, 210.0 * f)


# -------------------------------------------------------------
# Orbit – тонкие линии орбит
# -------------------------------------------------------------
def orbit_color(position, normal, time: float) -> Color:
    pulse = math.sin(time * 1.5) * 0.2 + 0.8
    fade = min(_length(*_xyz(position)) * 0.01, 1.0)
    f = 0.3 * pulse * fade
    return Color.from_float(100.0 * f, 200.0 * f, 255.0 * f)


# -------------------------------------------------------------
# Освещение
# -------------------------------------------------------------
def attenuation(distance: float) -> float:
    return 1.0 / (1.0 + 0.0001 * distance + 0.000001 * distance * distance)


def light_intensity(normal, point, light_position, emissive: bool = False) -> float:
    """
    clamp(ambient + max(0, n·l)·attenuation, 0, 1).
    Источник света (emissive) всегда светится на 1.0.
    """
    if emissive:
        return 1.0
    to_light = np.asarray(light_position, dtype=np.float64) - np.asarray(point, dtype=np.float64)
    distance = float(np.linalg.norm(to_light))
    if distance == 0.0:
        return AMBIENT
    diffuse = max(0.0, float(np.dot(normal, to_light / distance)))
    return min(max(AMBIENT + diffuse * attenuation(distance), 0.0), 1.0)


def triangle_intensity(a, b, c, light_position, emissive: bool = False) -> float:
    """Flat‑интенсивность треугольника: нормаль грани + центроид (мировые координаты)."""
    if emissive:
        return 1.0
    a = np.asarray(a, dtype=np.float64)
    b = np.asarray(b, dtype=np.float64)
    c = np.asarray(c, dtype=np.float64)
    n = np.cross(b - a, c - a)
    length = float(np.linalg.norm(n))
    if length == 0.0:
        return AMBIENT
    centroid = (a + b + c) / 3.0
    return light_intensity(n / length, centroid, light_position)

"""
Солнечная система: солнце, четыре каменные планеты, газовый гигант,
луна у третьей планеты, орбиты, звёздное небо и корабль за камерой.

Запуск:  python examples/solar_system.py [ship.obj]
"""
import math
import sys

import numpy as np

import swrast3d as sw
from swrast3d.engine import Engine
from swrast3d.math import normalize
from swrast3d.utils import logger

# имя, радиус орбиты, угловая скорость, масштаб, имя материала
PLANETS = [
    ("Mercury", 150.0, 0.8, 4.0, "rocky_planet"),
    ("Venus", 200.0, 0.6, 6.0, "rocky_planet"),
    ("Earth", 280.0, 0.4, 7.0, "rocky_planet"),
    ("Mars", 350.0, 0.3, 5.5, "rocky_planet"),
    ("Jupiter", 500.0, 0.15, 20.0, "gas_giant"),
]
WARP_DISTANCES = [150.0, 50.0, 60.0, 70.0, 65.0, 120.0]


class Body(sw.Mesh):
    """Небесное тело на круговой орбите вокруг центра (или другого тела)."""
    def __init__(self, vertices, material, orbit_radius=0.0, orbit_speed=0.0,
                 spin_speed=0.5, center=None, **kwargs):
        super().__init__(vertices, material, collidable=True, **kwargs)
        self.orbit_radius = orbit_radius
        self.orbit_speed = orbit_speed
        self.spin_speed = spin_speed
        self.center = center
        self.angle = 0.0

    def on_update(self, dt):
        self.angle += self.orbit_speed * dt
        self.rotation[1] += self.spin_speed * dt
        if self.orbit_radius > 0.0:
            c = self.center.world_position() if self.center is not None else np.zeros(3)
            self.position = np.array([
                c[0] + self.orbit_radius * math.cos(self.angle),
                c[1],
                c[2] + self.orbit_radius * math.sin(self.angle),
            ])


class Ship(sw.Mesh):
    """Корабль чуть впереди и ниже камеры, повёрнут по направлению взгляда."""
    def __init__(self, vertices, camera):
        super().__init__(vertices, sw.Material.SPACESHIP, name="Ship")
        self.camera = camera
        self.scale = 3.0

    def on_update(self, dt):
        cam = self.camera
        forward = cam.forward
        right = cam.right
        up = normalize(np.cross(right, forward))
        self.position = cam.position + forward * 15.0 - up * 3.0 + right * 2.0
        self.rotation[1] = math.atan2(forward[2], forward[0])


def build_scene(engine, ship_vertices):
    scene = engine.scene
    body_mesh = sw.sphere_vertices(1.0, 16)

    sun = scene.add_child(Body(body_mesh, sw.Material.STAR, emissive=True, name="Sun"))
    sun.scale = 60.0
    scene.light = sun
    scene.skybox = sw.Mesh(sw.sphere_vertices(2000.0, 30), sw.Material.SKYBOX, name="Skybox")
    engine.add_warp_target(sun, WARP_DISTANCES[0])

    planets = []
    for (name, radius, speed, scale, material), warp in zip(PLANETS, WARP_DISTANCES[1:]):
        scene.add_child(sw.Mesh(sw.orbital_path((0.0, 0.0, 0.0), radius, 64),
                                sw.Material.ORBIT, topology=sw.Topology.LINE_LOOP,
                                name=f"{name}Orbit"))
        planet = scene.add_child(Body(body_mesh, material, radius, speed, name=name))
        planet.scale = scale
        planets.append(planet)
        engine.add_warp_target(planet, warp)

    moon = scene.add_child(Body(body_mesh, sw.Material.ROCKY_PLANET, 30.0, 2.0,
                                center=planets[2], name="Moon"))
    moon.scale = 2.0

    scene.add_child(Ship(ship_vertices, engine.camera))


if __name__ == "__main__":
    logger.info("Starting solar system demo...")
    engine = Engine()

    if len(sys.argv) > 1:
        ship = sw.load_obj(sys.argv[1])
    else:
        ship = sw.sphere_vertices(1.0, 6)
    build_scene(engine, ship)

    engine.run()

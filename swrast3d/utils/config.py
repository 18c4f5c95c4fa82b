"""
Простой загрузчик/сохранитель конфигурации в формате JSON.
Если файл не найден – создаётся файл с настройками по‑умолчанию.
"""

import copy
import json
from pathlib import Path
from swrast3d.utils.logger import logger

DEFAULT_CONFIG = {
    "window": {"width": 800, "height": 800, "title": "SWRast3D – Solar System"},
    "framebuffer": {"width": 800, "height": 600, "background": 0x000011},
    "camera": {
        "distance": 600.0,
        "min_distance": 50.0,
        "max_distance": 3000.0,
        "movement_speed": 50.0,
        "rotation_speed": 0.03,
        "damping": 0.9,
        "collision_margin": 15.0,
        "look_ahead": 100.0,
    },
    "projection": {"fov_deg": 60.0, "near": 10.0, "far": 5000.0},
    "rasterizer": {"max_triangle_size": 300, "guard_min": -1000, "guard_max": 2000},
    "show_fps": True,
    "frame_delay": 0.016,
}


class Config:
    """Singleton‑подобный объект конфигурации."""
    _instance = None

    def __new__(cls, path: str = "config.json"):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance.path = Path(path)
            cls._instance._load()
        return cls._instance

    @classmethod
    def reset(cls):
        """Забыть текущий экземпляр (следующий Config() перечитает файл)."""
        cls._instance = None

    def _load(self):
        if self.path.is_file():
            try:
                with self.path.open("r", encoding="utf-8") as f:
                    self.data = json.load(f)
                logger.info("[Config] Loaded configuration.")
            except (OSError, ValueError) as exc:
                logger.error(f"[Config] Failed to read config: {exc}")
                self.data = copy.deepcopy(DEFAULT_CONFIG)
                self.save()
        else:
            logger.info("[Config] No config file – creating default.")
            self.data = copy.deepcopy(DEFAULT_CONFIG)
            self.save()

    def save(self):
        try:
            with self.path.open("w", encoding="utf-8") as f:
                json.dump(self.data, f, indent=4)
            logger.info("[Config] Configuration saved.")
        except OSError as exc:
            logger.error(f"[Config] Unable to save config: {exc}")

    def __getitem__(self, key):
        return self.data.get(key, DEFAULT_CONFIG.get(key))

    def __setitem__(self, key, value):
        self.data[key] = value
        self.save()

    def get(self, key, default=None):
        return self.data.get(key, default)

    def section(self, key) -> dict:
        """Секция с подставленными значениями по‑умолчанию для отсутствующих ключей."""
        merged = dict(DEFAULT_CONFIG.get(key, {}))
        merged.update(self.data.get(key, {}))
        return merged

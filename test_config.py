# -*- coding: utf-8 -*-
import json

from swrast3d.utils.config import DEFAULT_CONFIG, Config


def test_missing_file_created_with_defaults(config_path):
    cfg = Config(str(config_path))
    assert config_path.is_file()
    assert json.loads(config_path.read_text(encoding="utf-8")) == DEFAULT_CONFIG
    assert cfg["projection"]["fov_deg"] == 60.0


def test_singleton(config_path):
    assert Config(str(config_path)) is Config("ignored.json")


def test_assignment_persists(config_path):
    cfg = Config(str(config_path))
    cfg["show_fps"] = False
    Config.reset()
    assert Config(str(config_path)).get("show_fps") is False


def test_section_merges_defaults(config_path):
    config_path.write_text(json.dumps({"camera": {"distance": 900.0}}), encoding="utf-8")
    cfg = Config(str(config_path))
    camera = cfg.section("camera")
    assert camera["distance"] == 900.0
    assert camera["damping"] == DEFAULT_CONFIG["camera"]["damping"]
    # отсутствующая секция → значение по‑умолчанию
    assert cfg["rasterizer"] == DEFAULT_CONFIG["rasterizer"]


def test_corrupt_file_falls_back_to_defaults(config_path):
    config_path.write_text("{not json", encoding="utf-8")
    cfg = Config(str(config_path))
    assert cfg.data == DEFAULT_CONFIG

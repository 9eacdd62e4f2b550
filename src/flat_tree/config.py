import os
from pathlib import Path

import yaml

CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "flat_tree.yml"
CONFIG_ENV_VAR = "FLAT_TREE_CONFIG"

DEFAULTS = {
    "paths": {"logs_dir": "logs", "outputs_dir": "outputs"},
    "builder": {"duplicate_ids": "first", "detect_cycles": True},
    "loader": {"id_field": "id", "parent_field": "parent_id", "children_key": "children"},
    "logging": {"level": "INFO", "file": "flat_tree.log", "rotate": False},
    "debug": False,
}


class FTConfig:
    def __init__(self, data):
        self.paths = {**DEFAULTS["paths"], **(data.get("paths") or {})}
        self.builder = {**DEFAULTS["builder"], **(data.get("builder") or {})}
        self.loader = {**DEFAULTS["loader"], **(data.get("loader") or {})}
        self.logging = {**DEFAULTS["logging"], **(data.get("logging") or {})}
        self.debug = data.get("debug", False)


def load_config(path=None) -> 'FTConfig':
    env_path = os.getenv(CONFIG_ENV_VAR, "").strip()
    if path is None and env_path:
        path = env_path

    if path is not None:
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")
    elif CONFIG_PATH.exists():
        path = CONFIG_PATH
    else:
        # Installed outside the source tree: run on defaults
        return FTConfig({})

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return FTConfig(data)

_config_cache = None

def get_config() -> 'FTConfig':
    global _config_cache
    if _config_cache is None:
        _config_cache = load_config()
    return _config_cache


def reset_config() -> None:
    global _config_cache
    _config_cache = None

from __future__ import annotations
from pathlib import Path
import yaml


class Config:
    _instance = None
    _data = None

    def __new__(cls):
        has_instance = cls._instance != None
        cls._instance = cls._instance if has_instance else super().__new__(cls)
        return cls._instance

    def __init__(self):
        already_loaded = self._data != None
        self._data = self._data if already_loaded else self._load_default()

    def __getitem__(self, key: str):
        return self._data.get(key)

    def __contains__(self, key: str) -> bool:
        return key in self._data

    def __repr__(self) -> str:
        return f"Config(keys={list(self._data.keys())})"

    def _load_default(self) -> dict:
        config_path = Path(__file__).parent / "config.yaml"
        return self._merge(self._read(config_path)) if config_path.exists() else self._default_config()

    def _read(self, path: Path) -> dict:
        return yaml.safe_load(path.read_text()) or {}

    def _merge(self, loaded: dict) -> dict:
        merged = self._default_config()
        for section, values in loaded.items():
            base = merged.get(section)
            values = {} if values is None and isinstance(base, dict) else values
            merged[section] = {**base, **values} if isinstance(base, dict) and isinstance(values, dict) else values
        return merged

    def load(self, path: Path | str) -> None:
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")
        self._data = self._merge(self._read(path))

    def reset(self) -> None:
        self._data = self._load_default()

    def _default_config(self) -> dict:
        return {
            'scan': {'use_preprocessing': False, 'preprocessing_threshold': 10000},
            'shell': {
                'title': 'Convex Hull Graham Scan', 'width': 800, 'height': 600,
                'point_radius': 3, 'compute_delay_ms': 500, 'min_points': 3,
                'point_color': 'black', 'hull_color': 'black', 'line_width': 1.0
            },
            'plot': {'figsize': [8, 6], 'dpi': 150, 'margin': 0.05},
            'bench': {'count': 1_000_000, 'seed': 42, 'warmup': 1000},
            'logging': {
                'level': 'INFO',
                'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            }
        }

    def get_nested(self, *keys):
        result = self._data

        try:
            for key in keys:
                result = result[key]
        except (KeyError, TypeError):
            return None

        return result


CFG = Config()

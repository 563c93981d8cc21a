from __future__ import annotations

import yaml

from dataclasses import dataclass
from pathlib import Path

CONFIG_PATH = Path(__file__).parent / "config.yaml"


@dataclass
class QuickHullConfig:
    """
    Settings of the driver program. The stepper itself never sees them.

    seed: random seed for generated input, 0 or None gives a different input every run.
    step_time_ms: delay between two animated steps.
    window_*: size of the drawing area, generated points keep `window_margin` away from its borders.
    """
    seed: int | None = 1
    point_count: int = 1000
    step_time_ms: int = 300
    window_width: int = 1280
    window_height: int = 720
    window_margin: int = 10
    output_path: str = "points.txt"
    screenshot_path: str = "result.png"
    log_level: str = "INFO"

    @property
    def point_x_max(self) -> int:
        return self.window_width - self.window_margin * 2

    @property
    def point_y_max(self) -> int:
        return self.window_height - self.window_margin * 2

    @classmethod
    def from_yaml(cls, path: Path = CONFIG_PATH) -> QuickHullConfig:
        path = Path(path)
        if path.exists():
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
            return cls(**{k: v for k, v in data.items() if k in cls.__dataclass_fields__})
        return cls()

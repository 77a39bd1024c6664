"""Runtime settings.

Resolved in three layers, later ones winning:
  1. defaults below
  2. a YAML file (``PMS_CONFIG`` or ``./pms.yaml``), if present
  3. ``PMS_DATA_DIR`` / ``PMS_LOG_LEVEL`` environment variables
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field, fields
from pathlib import Path

import yaml

from pms.domain.exceptions import ValidationError

# When installed in editable mode the project root is the repo root.
_PROJECT_ROOT = Path(__file__).resolve().parents[3]
DEFAULT_CONFIG_FILE = "pms.yaml"


@dataclass
class Settings:
    data_dir: Path = field(default_factory=lambda: _PROJECT_ROOT / "data")
    log_level: str = "WARNING"
    log_format: str = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"

    @property
    def products_file(self) -> Path:
        return self.data_dir / "products.json"

    @property
    def lock_file(self) -> Path:
        return self.data_dir / "products.json.lock"


def load_settings(config_path: str | Path | None = None) -> Settings:
    settings = Settings()

    path = Path(config_path or os.environ.get("PMS_CONFIG", DEFAULT_CONFIG_FILE))
    if path.exists():
        with path.open(encoding="utf-8") as fh:
            try:
                raw = yaml.safe_load(fh) or {}
            except yaml.YAMLError as exc:
                raise ValidationError(f"Config file {path} is not valid YAML") from exc
        if not isinstance(raw, dict):
            raise ValidationError(f"Config file {path} must contain a mapping")
        known = {f.name for f in fields(Settings)}
        unknown = set(raw) - known
        if unknown:
            raise ValidationError(
                f"Unknown settings in {path}: {', '.join(sorted(unknown))}"
            )
        for key, value in raw.items():
            setattr(settings, key, value)

    if "PMS_DATA_DIR" in os.environ:
        settings.data_dir = os.environ["PMS_DATA_DIR"]
    if "PMS_LOG_LEVEL" in os.environ:
        settings.log_level = os.environ["PMS_LOG_LEVEL"]

    settings.data_dir = Path(settings.data_dir).expanduser()
    settings.log_level = str(settings.log_level).upper()
    return settings

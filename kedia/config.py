from __future__ import annotations

from pathlib import Path
from typing import Dict

import yaml

from kedia.core.categorizer import default_keywords, load_keywords

DEFAULT_CONFIG: Dict[str, object] = {
    "categories_file": None,
    "default_user": "local",
    "log_level": "WARNING",
    "output_dir": "./data",
}

CONFIG_PATH = Path("config.yaml")


def _merge_defaults(current: Dict[str, object], defaults: Dict[str, object]) -> Dict[str, object]:
    """Merge missing default keys into the current config recursively."""
    merged = dict(current)
    for key, value in defaults.items():
        if key not in merged:
            merged[key] = value
        elif isinstance(value, dict) and isinstance(merged[key], dict):
            merged[key] = _merge_defaults(merged[key], value)
    return merged


def load_config(path: Path | str | None = None) -> Dict[str, object]:
    target = Path(path) if path else CONFIG_PATH
    if not target.exists():
        return dict(DEFAULT_CONFIG)
    with target.open("r", encoding="utf-8") as fp:
        data = yaml.safe_load(fp) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file {target} must contain a mapping")
    return _merge_defaults(data, DEFAULT_CONFIG)


def keywords_from_config(config: Dict[str, object]):
    """Return the keyword table named by ``categories_file``, or the packaged one."""
    path = config.get("categories_file")
    if not path:
        return default_keywords()
    return load_keywords(path)

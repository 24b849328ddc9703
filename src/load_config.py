"""Logic for loading and merging configuration files."""

import copy
import logging
from pathlib import Path
from typing import Any

import yaml

from src.deep_merge import deep_merge

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: dict[str, Any] = {
    "templates": {
        "default": {
            "include_date": True,
            "output_source_files": True,
            "use_longname_in_nav": False,
        },
        "classy": {
            "name": "",
            "api_entry": None,
            "show_name": True,
        },
    },
    "opts": {
        "private": False,
        "encoding": "utf-8",
        "readme": None,
        "tutorials": None,
    },
    "source": {
        "include": [],
    },
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML (or JSON) file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            if not isinstance(user_config, dict):
                msg = f"Configuration must be a mapping: {path}"
                raise SystemExit(msg)
            config = deep_merge(config, user_config)
        else:
            logger.warning("Config file %s not found; using defaults", path)
    return config

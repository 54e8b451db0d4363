"""Logic for loading and merging configuration files."""

import copy
import logging
from pathlib import Path
from typing import Any

import yaml

from workspace_resolver.deep_merge import deep_merge
from workspace_resolver.hint import DEFAULT_WORD_PATTERN

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: dict[str, Any] = {
    "workspace": {
        "encoding": "utf-8",
        "include_hidden": False,
    },
    # A user list replaces this one rather than extending it
    "hidden_names": [".git"],
    "hint": {
        "word_pattern": DEFAULT_WORD_PATTERN,
        "exclude_exact_match": True,
    },
    "logging": {
        "level": "WARNING",
    },
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            config = deep_merge(config, user_config)
        else:
            logger.warning("Config file not found: %s. Using defaults.", path)
    return config

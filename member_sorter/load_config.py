"""Logic for loading and merging configuration files."""

import copy
import logging
from pathlib import Path
from typing import Any

import yaml

from member_sorter.config_error import ConfigError
from member_sorter.deep_merge import deep_merge
from member_sorter.language_variant import DEFAULT_LANGUAGES
from member_sorter.sort_options import ACCESS_MODIFIER, DEFAULT_VISIBILITY_ORDER

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = ".member-sort.yml"

DEFAULT_CONFIG: dict[str, Any] = {
    "member_sort": {
        "visibility_order": list(DEFAULT_VISIBILITY_ORDER),
        "sorting_strategy": ACCESS_MODIFIER,
    },
    "languages": dict(DEFAULT_LANGUAGES),
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults.

    Without an explicit path, ``.member-sort.yml`` in the working directory is
    used when present.
    """
    config = copy.deepcopy(DEFAULT_CONFIG)
    p = Path(path) if path else Path(DEFAULT_CONFIG_FILE)
    if not p.exists():
        if path:
            logger.warning("Config file %s not found; using defaults", p)
        return config

    try:
        user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        msg = f"Cannot parse {p}: {exc}"
        raise ConfigError(msg) from exc
    if not isinstance(user_config, dict):
        msg = f"{p} must contain a mapping at the top level"
        raise ConfigError(msg)

    config = deep_merge(config, user_config)
    if not isinstance(config.get("languages"), dict):
        msg = "'languages' must map file extensions to language ids"
        raise ConfigError(msg)
    return config

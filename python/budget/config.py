"""
Budget Configuration Module

Loads display, validation and help settings from YAML.
"""

import logging
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "budget_config.yaml"

DEFAULT_CONFIG: dict[str, Any] = {
    "display": {
        "currency_format": "${:,.2f}",
        "column_padding": 2,
    },
    "validation": {
        "min_year": 1,
        "max_year": 9999,
    },
    "help": {
        "commands": [
            {"command": "budget add <name> <limit>", "description": "Create a new budget"},
            {"command": "budget delete <name>", "description": "Delete an existing budget"},
            {"command": "budget set <name> <limit>", "description": "Change the limit of a budget"},
            {"command": "budget find <keyword>", "description": "Search budget names"},
            {"command": "budget list [<month> <year>]", "description": "Show spending against each budget"},
            {"command": "budget help", "description": "Show this help"},
        ],
    },
}


def default_config_dir() -> Path:
    """Return the directory holding the packaged budget_config.yaml."""
    return Path(__file__).parent


def load_budget_config(config_dir: Path | str | None = None) -> dict:
    """Load budget configuration, filling gaps from the defaults.

    Args:
        config_dir: Path to configuration directory

    Returns:
        Configuration dictionary with every section present
    """
    config_dir = Path(config_dir) if config_dir else default_config_dir()
    config_file = config_dir / CONFIG_FILENAME

    loaded = {}
    if config_file.exists():
        with open(config_file) as f:
            loaded = yaml.safe_load(f) or {}
        logger.debug("Loaded budget config from %s", config_file)
    else:
        logger.debug("No budget config at %s, using defaults", config_file)

    config = {}
    for section, defaults in DEFAULT_CONFIG.items():
        overrides = loaded.get(section) or {}
        config[section] = {**defaults, **overrides}

    return config

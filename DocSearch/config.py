"""
Configuration loading for the search server.
"""
import copy
import json
import logging
import os

logger = logging.getLogger(__name__)

CONFIG_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)), "config.json")

DEFAULT_CONFIG = {
    "stop_words": "",
    "search": {
        "max_result_document_count": 5,
        "relevance_epsilon": 1e-6
    },
    "logging": {
        "level": "WARNING"
    }
}


def merge_config(base, override):
    """
    Recursively merge a (possibly partial) config over a base config.

    Args:
        base: Dictionary with the complete set of keys
        override: Dictionary whose values take precedence

    Returns:
        New merged dictionary; neither argument is modified
    """
    merged = copy.deepcopy(base)
    for key, value in (override or {}).items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_config(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(config_path=None):
    """
    Load configuration from file, falling back to the defaults.

    Args:
        config_path: Path to a JSON config file (defaults to config.json next to the package)

    Returns:
        Complete configuration dictionary
    """
    config_path = config_path or CONFIG_PATH

    if os.path.exists(config_path):
        try:
            with open(config_path, "r", encoding="utf-8") as f:
                return merge_config(DEFAULT_CONFIG, json.load(f))
        except (OSError, ValueError) as e:
            logger.warning("Could not load config %s: %s, using default settings", config_path, e)

    return copy.deepcopy(DEFAULT_CONFIG)

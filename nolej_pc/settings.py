import copy
import os
import logging

import yaml

from nolej_pc.constants import CONFIG_FILE, DEFAULT_SETTINGS

# Retrieve main logger
logger = logging.getLogger("main")


# Cache variable
_cached_settings = None


def merge_settings(settings):
    """Deep merge a settings dict with the defaults"""
    merged_settings = copy.deepcopy(DEFAULT_SETTINGS)
    for section, values in (settings or {}).items():
        if isinstance(values, dict) and section in merged_settings and isinstance(merged_settings[section], dict):
            merged_settings[section].update(values)
        else:
            merged_settings[section] = values
    return merged_settings


def load_settings(force=False, config_file=None):
    global _cached_settings

    if _cached_settings and not force:
        return _cached_settings

    config_file = config_file or CONFIG_FILE
    if os.path.exists(config_file):
        logger.debug(f"Reading configuration file: {config_file}")
        with open(config_file, "r") as yaml_file:
            settings = merge_settings(yaml.safe_load(yaml_file) or {})
    else:
        settings = copy.deepcopy(DEFAULT_SETTINGS)
        os.makedirs(os.path.dirname(config_file), exist_ok=True)
        with open(config_file, "w") as yaml_file:
            yaml.dump(settings, yaml_file)
        logger.info(f"Default configuration written to {config_file}")

    _cached_settings = settings
    return settings


def set_plugin_active(active, config_file=None):
    config_file = config_file or CONFIG_FILE
    settings = load_settings(force=True, config_file=config_file)
    settings["plugin"]["active"] = bool(active)
    with open(config_file, "w") as yaml_file:
        yaml.dump(settings, yaml_file)
    reload_conf(config_file=config_file)


def reload_conf(config_file=None):
    """Reload application settings cache"""
    global _cached_settings
    _cached_settings = None
    return load_settings(force=True, config_file=config_file)

"""
Configuration loader for YAML-based wrapper settings.

Supports loading engine, Graphviz and workspace settings from YAML files
instead of repeating them on the command line.
"""

import copy
import yaml
from pathlib import Path
from typing import Dict, Any

from .. import config as defaults
from ..exceptions import ConfigurationError, ValidationError


DEFAULT_CONFIG: Dict[str, Any] = {
    "engine": {
        "home": defaults.ENGINE_HOME,
        "java_bin": defaults.JAVA_BIN,
        "heap": defaults.HEAP_SIZE,
        "classpath": None,
        "main_class": defaults.MAIN_CLASS,
        "format": defaults.OUTPUT_FORMAT,
    },
    "graphviz": {
        "enabled": False,
        "dot_bin": defaults.DOT_BIN,
        "format": defaults.IMAGE_FORMAT,
    },
    "workspace": {
        "root": None,
    },
    "input": {
        "root": None,
        "files": [],
    },
}

_STRING_KEYS = {
    "engine": ("home", "java_bin", "heap", "main_class", "format"),
    "graphviz": ("dot_bin", "format"),
}


def load_config(config_path: str) -> Dict[str, Any]:
    """
    Load configuration from YAML file.

    Args:
        config_path: Path to YAML configuration file

    Returns:
        Configuration dictionary

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValidationError: If config format is invalid

    Example:
        >>> config = load_config("openie-config.yaml")
        >>> print(config["engine"]["home"])
    """
    config_file = Path(config_path)
    if not config_file.exists():
        raise FileNotFoundError(
            f"Configuration file not found: {config_path}\n"
            f"Create a config file using: openie-wrapper --init-config"
        )

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValidationError(f"Invalid YAML in config file: {e}")

    # An empty file means "all defaults"
    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ValidationError("Config file must contain a YAML dictionary")

    return config


def merge_config(config: Dict[str, Any]) -> Dict[str, Any]:
    """
    Overlay `config` on DEFAULT_CONFIG, section by section.

    Unknown sections are rejected so typos don't silently fall back to defaults.
    """
    merged = copy.deepcopy(DEFAULT_CONFIG)
    for section, values in (config or {}).items():
        if section not in merged:
            raise ConfigurationError(f"Unknown config section: {section}")
        if not isinstance(values, dict):
            raise ConfigurationError(f"Config section '{section}' must be a mapping")
        merged[section].update(values)
    return merged


def validate_config(config: Dict[str, Any]) -> bool:
    """
    Validate a merged configuration.

    Args:
        config: Configuration dictionary as returned by merge_config

    Returns:
        True if valid

    Raises:
        ConfigurationError: If a value has the wrong type
    """
    for section, keys in _STRING_KEYS.items():
        for key in keys:
            value = config[section].get(key)
            if not isinstance(value, str) or not value:
                raise ConfigurationError(f"{section}.{key} must be a non-empty string")

    classpath = config["engine"].get("classpath")
    if classpath is not None and not isinstance(classpath, (str, list)):
        raise ConfigurationError("engine.classpath must be a string or a list of entries")

    if not isinstance(config["graphviz"].get("enabled"), bool):
        raise ConfigurationError("graphviz.enabled must be true or false")

    files = config["input"].get("files")
    if not isinstance(files, list) or not all(isinstance(f, str) for f in files):
        raise ConfigurationError("input.files must be a list of paths")

    for section, key in (("workspace", "root"), ("input", "root")):
        value = config[section].get(key)
        if value is not None and not isinstance(value, str):
            raise ConfigurationError(f"{section}.{key} must be a path string")

    return True


def create_default_config(output_path: str = "openie-config.yaml"):
    """
    Create a default configuration file with all options.

    Args:
        output_path: Where to save the config file

    Example:
        >>> create_default_config("my-config.yaml")
    """
    default_config = copy.deepcopy(DEFAULT_CONFIG)
    default_config["engine"]["classpath"] = list(defaults.CLASSPATH_ENTRIES)
    default_config["input"]["files"] = list(defaults.DEFAULT_INPUT_FILES)

    with open(output_path, "w", encoding="utf-8") as f:
        yaml.dump(default_config, f, default_flow_style=False, sort_keys=False)

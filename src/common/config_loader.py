"""
Configuration Loader

Loads YAML configuration files for site paths, HTTP settings
and the category to tags table.
"""

from pathlib import Path
from typing import Any, Dict, List

import yaml


def _get_config_dir() -> Path:
    """Get the config directory path."""
    # Try relative to this file first
    module_dir = Path(__file__).parent.parent.parent
    config_dir = module_dir / 'config'

    if config_dir.exists():
        return config_dir

    # Try current working directory
    cwd_config = Path.cwd() / 'config'
    if cwd_config.exists():
        return cwd_config

    raise FileNotFoundError(
        f"Config directory not found. Tried: {config_dir}, {cwd_config}"
    )


def load_config(filename: str) -> Dict[str, Any]:
    """
    Load a YAML configuration file.

    Args:
        filename: Name of the config file (e.g., 'site.yaml')

    Returns:
        Parsed YAML content as dictionary

    Raises:
        FileNotFoundError: If config file doesn't exist
    """
    config_path = _get_config_dir() / filename

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f) or {}


def load_category_tags() -> Dict[str, List[str]]:
    """
    Load the category to tags table.

    Returns:
        Dictionary mapping catalog category heading to its tag list

    Example:
        {
            'Developer Tools': ['Developer', 'Tools', 'macOS'],
            'Books': ['Books', 'Learning', 'Programming'],
            ...
        }
    """
    config = load_config('category_tags.yaml')
    return config.get('category_tags', {})


def load_site_settings() -> Dict[str, Any]:
    """
    Load site settings.

    Returns:
        Dictionary with 'paths' (catalog, images_dir, content_dir,
        public_images_path), 'content' (extension, layout) and
        'http' (timeout, user_agent) sections.
    """
    return load_config('site.yaml')

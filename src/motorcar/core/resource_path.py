"""Locate bundled resources such as YAML configuration.

Typical usage:
    from motorcar.core.resource_path import get_config_path

    car_file = get_config_path("cars/compact.yaml")
"""

from pathlib import Path


def get_project_root() -> Path:
    """Return the source checkout root (three levels above this package)."""
    return Path(__file__).parent.parent.parent.parent


def get_resource_path(relative_path: str) -> Path:
    """Return an absolute path for a path relative to the project root."""
    return get_project_root() / relative_path


def get_config_path(config_file: str) -> Path:
    """Return the absolute path of a file under ``config/``.

    Examples:
        >>> get_config_path("settings.yaml").name
        'settings.yaml'
    """
    return get_resource_path(f"config/{config_file}")

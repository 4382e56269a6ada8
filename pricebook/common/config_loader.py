"""
Configuration Loader

Loads YAML configuration files describing the pricing report layout:
column positions, section markers and default names.
"""

from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml

from ..models.layout import DEFAULT_LAYOUT, CatalogLayout, ColumnLayout


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
        filename: Name of the config file (e.g., 'catalog_layout.yaml'),
            or a path to a YAML file anywhere on disk

    Returns:
        Parsed YAML content as dictionary (empty dict for an empty file)

    Raises:
        FileNotFoundError: If config file doesn't exist
    """
    config_path = Path(filename)
    if not config_path.is_file():
        config_path = _get_config_dir() / filename

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f) or {}


def build_column_layout(columns: Optional[Dict[str, int]] = None) -> ColumnLayout:
    """
    Build a column layout from a name -> position mapping.

    Args:
        columns: Partial mapping; missing names keep their default position

    Returns:
        ColumnLayout

    Raises:
        ValueError: If a column name is unknown or a position is not an integer
    """
    if not columns:
        return ColumnLayout()

    known = set(ColumnLayout().as_dict())
    unknown = sorted(set(columns) - known)
    if unknown:
        raise ValueError(f"Unknown column name(s) in layout: {', '.join(unknown)}")

    positions = {}
    for name, position in columns.items():
        if isinstance(position, bool) or not isinstance(position, int):
            raise ValueError(f"Column position for '{name}' must be an integer, got {position!r}")
        positions[name] = position

    return ColumnLayout(**positions)


def build_catalog_layout(config: Optional[Dict[str, Any]] = None) -> CatalogLayout:
    """
    Build a catalog layout from a parsed config dictionary.

    Args:
        config: Parsed YAML content. Keys that are absent keep the
            built-in defaults.

    Returns:
        CatalogLayout

    Example config:
        columns:
          weight: 13
        section_sentinels: ['scsclass']
        header_markers: ['productlinedescription']
        min_fields: 11
    """
    if not config:
        return DEFAULT_LAYOUT

    min_fields = config.get('min_fields', DEFAULT_LAYOUT.min_fields)
    if isinstance(min_fields, bool) or not isinstance(min_fields, int):
        raise ValueError(f"min_fields must be an integer, got {min_fields!r}")

    return CatalogLayout(
        columns=build_column_layout(config.get('columns')),
        min_fields=min_fields,
        section_sentinels=_marker_tuple(config, 'section_sentinels', DEFAULT_LAYOUT.section_sentinels),
        header_markers=_marker_tuple(config, 'header_markers', DEFAULT_LAYOUT.header_markers),
        default_parent_name=_text_setting(config, 'default_parent_name', DEFAULT_LAYOUT.default_parent_name),
        default_family=_text_setting(config, 'default_family', DEFAULT_LAYOUT.default_family),
    )


def _marker_tuple(config: Dict[str, Any], key: str, default: Tuple[str, ...]) -> Tuple[str, ...]:
    """
    Read a list of line markers.

    A single string is one marker; None or an empty list means no markers.

    Raises:
        ValueError: If the value or any entry is not a string
    """
    value = config.get(key, default)
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,)
    if not isinstance(value, (list, tuple)):
        raise ValueError(f"{key} must be a string or a list of strings, got {value!r}")
    for marker in value:
        if not isinstance(marker, str):
            raise ValueError(f"{key} entries must be strings, got {marker!r}")
    return tuple(value)


def _text_setting(config: Dict[str, Any], key: str, default: str) -> str:
    value = config.get(key, default)
    if not isinstance(value, str):
        raise ValueError(f"{key} must be a string, got {value!r}")
    return value


def load_catalog_layout(filename: str = 'catalog_layout.yaml') -> CatalogLayout:
    """
    Load the report layout configuration.

    Returns:
        CatalogLayout built from the YAML file's 'layout' section
    """
    config = load_config(filename)
    return build_catalog_layout(config.get('layout', {}))

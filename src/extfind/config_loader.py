"""Configuration loading for extfind.

Search defaults can be kept in a YAML file and passed with ``--config``.
Values given on the command line always win over the file.  Example::

    extensions: [py, rs]
    ignore: .git,target
    max_depth: 3
    count: true
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

import yaml

DEFAULT_IGNORE = '.git,node_modules,$RECYCLE.BIN,.Trash,.DS_Store'

_LIST_KEYS = ('extensions', 'ignore')


class ConfigError(ValueError):
    """Raised when a configuration file cannot be used."""


def _as_list_string(key: str, value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, list) and all(isinstance(item, (str, int)) for item in value):
        return ','.join(str(item) for item in value)
    raise ConfigError(f'{key} must be a string or a list of strings')


def load_config(path: Path) -> Dict[str, Any]:
    """Load and validate a YAML configuration file.

    Args:
        path: Location of the YAML file.

    Returns:
        A dictionary holding only the keys present in the file.  ``extensions``
        and ``ignore`` are returned as comma-separated strings.

    Raises:
        ConfigError: If the file cannot be read or parsed, or holds unknown
            keys or values of the wrong type.
    """
    try:
        with path.open('r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except OSError as exc:
        raise ConfigError(f'Cannot read config file {path}: {exc}') from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f'Invalid YAML in {path}: {exc}') from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f'Config file {path} must contain a mapping')

    cfg: Dict[str, Any] = {}
    for key, value in data.items():
        if key in _LIST_KEYS:
            cfg[key] = _as_list_string(key, value)
        elif key == 'max_depth':
            if value is not None and (isinstance(value, bool) or not isinstance(value, int) or value < 0):
                raise ConfigError('max_depth must be a non-negative integer or null')
            cfg[key] = value
        elif key == 'count':
            if not isinstance(value, bool):
                raise ConfigError('count must be true or false')
            cfg[key] = value
        elif key == 'verbose':
            if isinstance(value, bool):
                value = int(value)
            if not isinstance(value, int) or value < 0:
                raise ConfigError('verbose must be a non-negative integer')
            cfg[key] = value
        else:
            raise ConfigError(f'Unknown config key: {key}')
    return cfg

"""
Configuration for cyclegraph.

This module defines the default settings of the package and the
``GraphConfig`` class that merges user settings (a dictionary and/or a
JSON file) over them.
"""

import os
import json
import copy
import logging
from typing import Dict, Any, Optional

import numpy as np

logger = logging.getLogger(__name__)

# Default settings
DEFAULT_CONFIG = {
    # Vertex type of new graphs: 'int' or a numpy integer name ('int32', 'uint16', ...)
    'default_dtype': 'int',
    # Raise ValueError for neighbor queries on vertices outside 1..nv
    'check_bounds': False,
    'log_level': 'WARNING',

    'plot': {
        'figsize': [6, 6],
        'node_size': 300,
        'node_color': 'lightblue',
        'edge_color': 'gray',
        'with_labels': True,
    },
}


class GraphConfig:
    """Settings used when building and displaying cycle graphs."""

    def __init__(self, config_dict: Optional[Dict] = None, config_file: Optional[str] = None):
        """
        Initialize the configuration.

        Args:
            config_dict: Dictionary with settings, applied last
            config_file: Path to a JSON file with settings

        Raises:
            FileNotFoundError: If config_file does not exist
            ValueError: If config_file is not valid JSON
        """
        self.config = copy.deepcopy(DEFAULT_CONFIG)

        if config_file:
            if not os.path.exists(config_file):
                raise FileNotFoundError(f"File not found: {config_file}")
            with open(config_file, 'r') as f:
                try:
                    file_config = json.load(f)
                except json.JSONDecodeError as e:
                    raise ValueError(f"Error reading config file {config_file}: {e}") from e
            logger.debug("Loaded configuration from %s", config_file)
            self._merge(file_config)

        if config_dict:
            self._merge(config_dict)

    def _merge(self, overrides: Dict):
        for key, value in overrides.items():
            if isinstance(value, dict) and isinstance(self.config.get(key), dict):
                self.config[key].update(value)
            else:
                self.config[key] = value

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a setting.

        Args:
            key: Name of the setting
            default: Value returned when the setting is missing

        Returns:
            Value of the setting
        """
        return self.config.get(key, default)

    def get_dtype(self) -> type:
        """
        Resolve the configured vertex type.

        Returns:
            ``int`` or a numpy integer type

        Raises:
            ValueError: If the configured name is not an integer type
        """
        name = self.config.get('default_dtype', 'int')
        if name is None or name is int or name == 'int':
            return int
        try:
            dtype = np.dtype(name).type
        except TypeError as e:
            raise ValueError(f"Unknown dtype: {name}") from e
        if not issubclass(dtype, np.integer):
            raise ValueError(f"dtype must be an integer type, got {name}")
        return dtype

    def get_log_level(self) -> int:
        """Numeric logging level of the ``log_level`` setting."""
        level = self.config.get('log_level', 'WARNING')
        if isinstance(level, int):
            return level
        value = logging.getLevelName(str(level).upper())
        if not isinstance(value, int):
            raise ValueError(f"Unknown log level: {level}")
        return value

    def get_plot_config(self) -> Dict:
        """Keyword settings for plot_cycle_graph."""
        return dict(self.config.get('plot', {}))

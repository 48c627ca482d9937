"""
Unified Configuration System
Loads simulation settings from built-in defaults, optionally overridden by
JSON files, and provides structured access to all parameters
"""

import copy
import json
import os
from pathlib import Path
from typing import Dict, Any, Optional
import logging

from src.montyhall.game.errors import InvalidArgumentError

logger = logging.getLogger(__name__)


DEFAULT_CONFIG: Dict[str, Any] = {
    'general': {
        'random_state': None
    },
    'simulation': {
        'default_games': 100,
        'n_workers': 1
    },
    'reporting': {
        'decimals': 2,
        'show_counts': False
    }
}


class UnifiedConfig:
    """
    Configuration for the simulator

    Built-in defaults are always present. A config directory (base.json,
    simulation.json, reporting.json, environments/<environment>.json) or a
    single JSON file is deep-merged on top when given.
    """

    def __init__(self, config_path: Optional[str] = None, environment: str = "prod"):
        """
        Initialize UnifiedConfig

        Args:
            config_path: Optional path to config file/directory. If None, auto-detects
                         and falls back to built-in defaults.
            environment: Environment overrides to load. Default is "prod".
        """
        self.environment = environment
        self.config_path = config_path or self._find_config_path()
        self.config = copy.deepcopy(DEFAULT_CONFIG)
        self.multi_file_mode = False

        if self.config_path is None:
            logger.debug("No configuration files found, using built-in defaults")
        elif os.path.isfile(self.config_path):
            self._deep_update(self.config, self._load_single_config())
        elif os.path.isdir(self.config_path):
            self._deep_update(self.config, self._load_multi_file_config())
            self.multi_file_mode = True
        else:
            raise FileNotFoundError(f"Configuration path not found: {self.config_path}")

        self._cache_config_sections()

    def _find_config_path(self) -> Optional[str]:
        """
        Look for a config directory with base.json next to the working directory
        """
        for candidate in [Path.cwd() / "config", Path.cwd().parent / "config"]:
            if (candidate / "base.json").exists():
                return str(candidate)
        return None

    def _load_single_config(self) -> Dict[str, Any]:
        """
        Load configuration from single JSON file
        """
        try:
            with open(self.config_path, 'r') as f:
                config = json.load(f)

            logger.info(f"Loaded single-file configuration from: {self.config_path}")
            return config

        except json.JSONDecodeError as e:
            logger.error(f"Invalid JSON in configuration file: {e}")
            raise

    def _load_multi_file_config(self) -> Dict[str, Any]:
        """
        Load configuration from multiple JSON files and merge them
        """
        config_dir = Path(self.config_path)
        merged_config = {}

        config_files = [
            "base.json",
            "simulation.json",
            "reporting.json"
        ]

        for config_file in config_files:
            file_path = config_dir / config_file
            if file_path.exists():
                self._deep_update(merged_config, self._read_json(file_path))
                logger.debug(f"Loaded config from: {file_path}")
            else:
                logger.debug(f"Config file not found: {file_path}")

        env_file = config_dir / "environments" / f"{self.environment}.json"
        if env_file.exists():
            self._deep_update(merged_config, self._read_json(env_file))
            logger.info(f"Applied {self.environment} environment overrides from: {env_file}")
        else:
            logger.debug(f"No environment config found for: {self.environment}")

        logger.info(f"Loaded multi-file configuration from: {config_dir} (environment: {self.environment})")
        return merged_config

    @staticmethod
    def _read_json(file_path: Path) -> Dict[str, Any]:
        try:
            with open(file_path, 'r') as f:
                return json.load(f)
        except json.JSONDecodeError as e:
            logger.error(f"Invalid JSON in {file_path}: {e}")
            raise

    def _deep_update(self, base_dict: Dict, update_dict: Dict):
        """
        Deep update nested dictionary
        """
        for key, value in update_dict.items():
            if key in base_dict and isinstance(base_dict[key], dict) and isinstance(value, dict):
                self._deep_update(base_dict[key], value)
            else:
                base_dict[key] = value

    def _cache_config_sections(self):
        """
        Cache frequently accessed configuration sections
        """
        self.general = self.config.get('general', {})
        self.simulation = self.config.get('simulation', {})
        self.reporting = self.config.get('reporting', {})

    # ========================================
    # SECTION ACCESS METHODS
    # ========================================

    def get_section(self, section_name: str, default: Any = None) -> Any:
        """
        Get a configuration section by name

        Args:
            section_name: Name of the configuration section
            default: Default value if section not found

        Returns:
            Configuration section or default value
        """
        return self.config.get(section_name, default)

    def update_config(self, updates: Dict[str, Any]):
        """
        Update configuration with new values

        Args:
            updates: Dictionary of configuration updates
        """
        self._deep_update(self.config, updates)
        self._cache_config_sections()

    def get_config_info(self) -> Dict[str, Any]:
        """
        Get information about the current configuration setup
        """
        return {
            'config_path': self.config_path,
            'multi_file_mode': self.multi_file_mode,
            'environment': self.environment,
            'sections_loaded': list(self.config.keys()),
            'total_sections': len(self.config)
        }

    def validate_config(self) -> 'UnifiedConfig':
        """
        Check simulation values, raise InvalidArgumentError on the first bad one

        Returns:
            self, so calls can be chained
        """
        random_state = self.general.get('random_state')
        if random_state is not None and (isinstance(random_state, bool)
                                         or not isinstance(random_state, int)
                                         or random_state < 0):
            raise InvalidArgumentError(f"general.random_state must be a non-negative integer or null, got {random_state!r}")

        for key in ('default_games', 'n_workers'):
            value = self.simulation.get(key)
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise InvalidArgumentError(f"simulation.{key} must be a positive integer, got {value!r}")

        decimals = self.reporting.get('decimals')
        if isinstance(decimals, bool) or not isinstance(decimals, int) or decimals < 0:
            raise InvalidArgumentError(f"reporting.decimals must be a non-negative integer, got {decimals!r}")

        return self

    def __repr__(self) -> str:
        """String representation of the config"""
        if self.config_path is None:
            mode = "defaults"
        else:
            mode = "multi-file" if self.multi_file_mode else "single-file"
        return f"UnifiedConfig(config_path='{self.config_path}', mode='{mode}', environment='{self.environment}', sections={len(self.config)})"


def get_config(config_path: Optional[str] = None, environment: str = "prod") -> UnifiedConfig:
    """
    Convenience function to get a validated UnifiedConfig instance

    Args:
        config_path: Optional path to config file/directory
        environment: Environment to load

    Returns:
        UnifiedConfig instance
    """
    return UnifiedConfig(config_path, environment).validate_config()

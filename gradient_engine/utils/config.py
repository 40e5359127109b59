"""
Configuration utility for the gradient engine.
"""

import copy
import json
import logging
import os
import threading
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = {
    "bounds": {
        "width": 1,
        "height": 1
    },
    "output": {
        "indent": 2
    },
    "logging": {
        "console_level": "WARNING",
        "log_file": None
    }
}


def get_default_config_path() -> str:
    """
    Get the default config file path.
    
    Returns:
        str: ~/.gradient_engine/config.json
    """
    return os.path.join(os.path.expanduser("~"), ".gradient_engine", "config.json")


class Config:
    """Configuration manager for the gradient engine."""
    
    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize the configuration manager.
        
        Args:
            config_path: Path to the config file
        """
        self.config_path = config_path or get_default_config_path()
        self.config = {}
        self._lock = threading.Lock()
        
        self.load()
        
        logger.debug(f"Configuration initialized (config_path: {self.config_path})")
    
    def load(self) -> None:
        """Load configuration from file, falling back to defaults."""
        self._set_defaults()
        
        if not os.path.exists(self.config_path):
            logger.debug(f"Configuration file not found at {self.config_path}, using defaults")
            return
        
        try:
            with open(self.config_path, 'r') as f:
                loaded = json.load(f)
        except (OSError, ValueError) as e:
            logger.error(f"Error loading configuration: {e}")
            return
        
        if not isinstance(loaded, dict):
            logger.error(f"Configuration in {self.config_path} is not an object, using defaults")
            return
        
        with self._lock:
            _merge(self.config, loaded)
        logger.debug(f"Configuration loaded from {self.config_path}")
    
    def save(self) -> None:
        """Save configuration to file."""
        with self._lock:
            config_copy = copy.deepcopy(self.config)
        
        config_dir = os.path.dirname(self.config_path)
        if config_dir:
            os.makedirs(config_dir, exist_ok=True)
        
        with open(self.config_path, 'w') as f:
            json.dump(config_copy, f, indent=4)
        
        logger.debug(f"Configuration saved to {self.config_path}")
    
    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value.
        
        Args:
            key: Configuration key (can be nested using dots, e.g. 'bounds.width')
            default: Default value if key doesn't exist
            
        Returns:
            Any: Configuration value or default
        """
        with self._lock:
            config = self.config
            parts = key.split('.')
            
            for part in parts[:-1]:
                if part not in config or not isinstance(config[part], dict):
                    return default
                config = config[part]
            
            return config.get(parts[-1], default)
    
    def set(self, key: str, value: Any) -> None:
        """
        Set a configuration value.
        
        Args:
            key: Configuration key (can be nested using dots, e.g. 'bounds.width')
            value: Configuration value
        """
        with self._lock:
            config = self.config
            parts = key.split('.')
            
            for part in parts[:-1]:
                if not isinstance(config.get(part), dict):
                    config[part] = {}
                config = config[part]
            
            config[parts[-1]] = value
    
    def get_all(self) -> Dict[str, Any]:
        """
        Get all configuration values.
        
        Returns:
            Dict[str, Any]: Copy of all configuration values
        """
        with self._lock:
            return copy.deepcopy(self.config)
    
    def _set_defaults(self) -> None:
        """Set default configuration values."""
        with self._lock:
            self.config = copy.deepcopy(DEFAULT_CONFIG)


def _merge(target: Dict[str, Any], source: Dict[str, Any]) -> None:
    """Recursively merge ``source`` into ``target``."""
    for key, value in source.items():
        if isinstance(value, dict) and isinstance(target.get(key), dict):
            _merge(target[key], value)
        else:
            target[key] = value

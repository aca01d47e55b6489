"""Configuration management for the file age check."""

import os
import yaml
from typing import Dict, Any, Optional
from .config_validator import ConfigValidator


class ConfigManager:
    """Manages configuration loading and validation for file age checks."""
    
    DEFAULT_CONFIG_LOCATIONS = [
        "check-file-age.yaml",
        "check-file-age.yml",
        os.path.expanduser("~/.check-file-age/config.yaml"),
        os.path.expanduser("~/.check-file-age/config.yml"),
        "/etc/check-file-age/config.yaml",
        "/etc/check-file-age/config.yml"
    ]
    
    DEFAULTS = {
        'lookback': {
            'max_days_back': 366,
            'max_months_back': 12,
            'max_years_back': 10
        },
        'thresholds': {
            'warn_age': '240',
            'crit_age': '600',
            'warn_size': '0',
            'crit_size': '0'
        },
        'logging': {
            'level': 'WARNING',
            'file': None
        }
    }
    
    def __init__(self, config_path: Optional[str] = None):
        """Initialize configuration manager.
        
        Args:
            config_path: Optional path to config file. If not provided,
                        default locations are searched and built-in
                        defaults apply when none exists.
        """
        self.config_path = config_path
        self.config_data: Dict[str, Any] = {}
        self.validator = ConfigValidator()
        
    def load_config(self) -> Dict[str, Any]:
        """Load configuration from file, falling back to defaults.
        
        Returns:
            Dictionary containing configuration data.
            
        Raises:
            FileNotFoundError: If an explicit config file does not exist.
            ValueError: If config file is invalid.
        """
        config_file = self._find_config_file()
        self.config_data = {}
        
        if config_file:
            try:
                with open(config_file, 'r', encoding='utf-8') as f:
                    self.config_data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in config file {config_file}: {e}")
            except OSError as e:
                raise ValueError(f"Error reading config file {config_file}: {e}")
        
        self.validator.validate(self.config_data)
        self._set_defaults()
        
        return self.config_data
    
    def _find_config_file(self) -> Optional[str]:
        """Find configuration file in default locations.
        
        Returns:
            Path to configuration file, or None when no default file exists.
            
        Raises:
            FileNotFoundError: If an explicit config path does not exist.
        """
        if self.config_path:
            if os.path.exists(self.config_path):
                return self.config_path
            else:
                raise FileNotFoundError(f"Config file not found: {self.config_path}")
        
        for location in self.DEFAULT_CONFIG_LOCATIONS:
            if os.path.exists(location):
                return location
        
        return None
    
    def _set_defaults(self):
        """Set default values for optional configuration parameters."""
        for section, section_defaults in self.DEFAULTS.items():
            if self.config_data.get(section) is None:
                self.config_data[section] = {}
            for key, value in section_defaults.items():
                if self.config_data[section].get(key) is None:
                    self.config_data[section][key] = value
    
    def get_lookback_config(self) -> Dict[str, Any]:
        """Get directory lookback bounds.
        
        Returns:
            Dictionary with max_days_back, max_months_back and max_years_back.
        """
        return self.config_data.get('lookback', {})
    
    def get_thresholds_config(self) -> Dict[str, Any]:
        """Get default threshold strings.
        
        Returns:
            Dictionary with warn_age, crit_age, warn_size and crit_size.
        """
        return self.config_data.get('thresholds', {})
    
    def get_logging_config(self) -> Dict[str, Any]:
        """Get logging configuration.
        
        Returns:
            Logging configuration dictionary.
        """
        return self.config_data.get('logging', {})

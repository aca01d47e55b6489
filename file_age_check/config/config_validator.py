"""Configuration validation for the file age check."""

import logging
from typing import Dict, Any

from ..core.exceptions import ThresholdParseError
from ..core.thresholds import parse_size, parse_time


class ConfigValidator:
    """Validates file age check configuration."""
    
    SECTIONS = ['lookback', 'thresholds', 'logging']
    LOOKBACK_FIELDS = ['max_days_back', 'max_months_back', 'max_years_back']
    TIME_FIELDS = ['warn_age', 'crit_age']
    SIZE_FIELDS = ['warn_size', 'crit_size']
    
    def validate(self, config: Dict[str, Any]) -> None:
        """Validate configuration data.
        
        Args:
            config: Configuration dictionary to validate.
            
        Raises:
            ValueError: If configuration is invalid.
        """
        self._validate_structure(config)
        
        if config.get('lookback'):
            self._validate_lookback(config['lookback'])
        if config.get('thresholds'):
            self._validate_thresholds(config['thresholds'])
        if config.get('logging'):
            self._validate_logging(config['logging'])
    
    def _validate_structure(self, config: Dict[str, Any]) -> None:
        """Validate basic configuration structure.
        
        Raises:
            ValueError: If the document or a section is not a mapping.
        """
        if not isinstance(config, dict):
            raise ValueError("Configuration must be a mapping")
        
        unknown = [section for section in config if section not in self.SECTIONS]
        if unknown:
            raise ValueError(f"Unknown configuration sections: {unknown}")
        
        for section in self.SECTIONS:
            value = config.get(section)
            if value is not None and not isinstance(value, dict):
                raise ValueError(f"Configuration section '{section}' must be a mapping")
    
    def _validate_lookback(self, lookback: Dict[str, Any]) -> None:
        for field in self.LOOKBACK_FIELDS:
            if field not in lookback:
                continue
            value = lookback[field]
            # bool is an int subclass
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ValueError(f"Lookback {field} must be a non-negative integer: {value!r}")
    
    def _validate_thresholds(self, thresholds: Dict[str, Any]) -> None:
        try:
            for field in self.TIME_FIELDS:
                if field in thresholds:
                    parse_time(thresholds[field], field)
            for field in self.SIZE_FIELDS:
                if field in thresholds:
                    parse_size(thresholds[field], field)
        except ThresholdParseError as e:
            raise ValueError(f"Invalid threshold in configuration: {e}")
    
    def _validate_logging(self, logging_config: Dict[str, Any]) -> None:
        level = logging_config.get('level')
        if level is not None and not isinstance(logging.getLevelName(str(level).upper()), int):
            raise ValueError(f"Invalid log level: {level}")

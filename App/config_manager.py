"""Configuration persistence manager for the png-to-hex converter.

This module handles loading and saving of conversion configuration to/from
JSON files.
"""

import json
from dataclasses import asdict, fields, replace
from pathlib import Path
from typing import Optional, Tuple

from models import CONFIG_FILE, ConversionConfig

# camelCase key names accepted for older config files
LEGACY_KEYS = {
    "outputDir": "output_dir",
    "outputExt": "output_ext",
    "bwThreshold": "threshold",
    "batchWidth": "batch_width",
    "batchHeight": "batch_height",
    "previewDir": "preview_dir",
    "previewExt": "preview_ext",
}


class ConfigManager:
    """Handles loading and saving of conversion configuration."""

    def __init__(self, config_path: Path = CONFIG_FILE):
        """Initialize config manager.

        Args:
            config_path: Path to configuration file (defaults to ./png2hex.json)
        """
        self.config_path = Path(config_path)

    def load(self, base: Optional[ConversionConfig] = None) -> ConversionConfig:
        """Load configuration from file, returning defaults if not found.

        Args:
            base: Config whose values are used for keys missing from the
                file (defaults to ConversionConfig())

        Returns:
            ConversionConfig with loaded or default values

        Raises:
            ValueError: If the file exists but can't be read or parsed
        """
        config = base or ConversionConfig()

        if not self.config_path.exists():
            print(f"Warning: Config file {self.config_path} not found, using defaults")
            return config

        try:
            with open(self.config_path, "r") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ValueError(f"Could not load config file {self.config_path}: {e}") from e

        if not isinstance(data, dict):
            raise ValueError(f"Config file {self.config_path} must contain a JSON object")

        known = {f.name for f in fields(ConversionConfig)}
        values = {}
        for key, value in data.items():
            key = LEGACY_KEYS.get(key, key)
            if key in known:
                values[key] = value

        config = replace(config, **values)
        print(f"✓ Loaded configuration from {self.config_path}")
        return config

    def save(self, config: ConversionConfig) -> Tuple[bool, Optional[str]]:
        """Save configuration to file.

        Args:
            config: ConversionConfig to save

        Returns:
            Tuple of (success: bool, error_message: Optional[str])
        """
        try:
            with open(self.config_path, "w") as f:
                json.dump(asdict(config), f, indent=2)
            return True, None
        except OSError as e:
            return False, str(e)

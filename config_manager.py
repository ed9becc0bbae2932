"""Configuration management for the N-Queens counting sweep.

This module provides a thin, explicit wrapper around a JSON configuration file
to centralize sweep settings and the reference solution counts used for
validation.

File format (high-level)
------------------------
- experiment_settings: board sizes to sweep, runs per size, output directory,
  optional run tag and date stamping.
- reference_counts: mapping N -> known number of solutions.

All methods return Python native types; the class does not validate semantics
beyond presence of keys to keep responsibilities minimal.
"""
import json
from pathlib import Path


class ConfigManager:
    """Load, query, and persist the sweep configuration.

    Parameters
    ----------
    config_path : str | os.PathLike, default "config.json"
        Path to the configuration file.
    """

    def __init__(self, config_path="config.json"):
        self.config_path = Path(config_path)
        self.config = self.load_config()

    def load_config(self):
        """Load and parse the JSON configuration file.

        Returns
        -------
        dict
            Root configuration object.
        """
        if not self.config_path.exists():
            raise FileNotFoundError(
                f"Configuration file not found: {self.config_path}\n"
                f"Create it or use the default config.json template"
            )

        with open(self.config_path, 'r') as f:
            return json.load(f)

    def save_config(self):
        """Persist the current in-memory configuration to disk."""
        with open(self.config_path, 'w') as f:
            json.dump(self.config, f, indent=2)

    def get_experiment_settings(self):
        """Return sweep settings (sizes, runs, output dir, naming)."""
        return self.config.get("experiment_settings", {})

    def get_reference_counts(self):
        """Return known solution counts keyed by integer N.

        JSON object keys are strings; they are converted to ints here.
        """
        raw = self.config.get("reference_counts", {})
        return {int(n): int(count) for n, count in raw.items()}

    def update_setting(self, section, key, value):
        """Update a specific setting and persist the change immediately."""
        if section not in self.config:
            self.config[section] = {}
        self.config[section][key] = value
        self.save_config()

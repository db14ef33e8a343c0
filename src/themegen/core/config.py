"""Generator settings read from themegen.ini.

Three keys live in the DEFAULT section: output_path (where the stylesheet
is written, relative to the working directory), log_level, and log_file
(empty means log to the console only). Each can be overridden per run with
a TG_-prefixed environment variable, e.g. TG_OUTPUT_PATH.
"""

import os
from configparser import ConfigParser
from pathlib import Path
from typing import Optional

DEFAULT_CONFIG_NAME = "themegen.ini"

DEFAULTS = {
    "output_path": "public/theme-generated.css",
    "log_level": "INFO",
    "log_file": "",
}


class ConfigManager:
    """Simple configuration manager backed by an INI file.

    Behaviour:
    - Uses a single DEFAULT section for lookups.
    - Falls back to built-in defaults when the file does not exist; the
      file is never created just by loading.
    - Defaults to themegen.ini in the current working directory unless an
      explicit path is provided.
    """

    def __init__(self, config_path: Optional[str] = None) -> None:
        if config_path:
            self.config_path = Path(config_path)
        else:
            self.config_path = Path.cwd() / DEFAULT_CONFIG_NAME

        self.config = ConfigParser()
        self.load()

    def load(self) -> None:
        """Load configuration from disk, filling in defaults."""
        exists = self.config_path.exists()
        if exists:
            self.config.read(self.config_path, encoding="utf-8")

        missing = [key for key in DEFAULTS if key not in self.config["DEFAULT"]]
        for key in missing:
            self.config["DEFAULT"][key] = DEFAULTS[key]

        # Write back new default keys only into a file the user already has
        if exists and missing:
            self.save()

    def get(self, key: str, fallback=None):
        """Get a configuration value.

        Precedence is env > themegen.ini > fallback. Only TG_<KEY> is read
        from the environment; an empty value is ignored.
        """
        val = os.environ.get(f"TG_{key.upper()}")
        if val is not None and val != "":
            return val
        return self.config["DEFAULT"].get(key, fallback)

    def save(self) -> None:
        """Persist current configuration to disk (creates parent directories)."""
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        with self.config_path.open("w", encoding="utf-8") as fh:
            self.config.write(fh)

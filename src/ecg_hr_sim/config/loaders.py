"""Loading Settings from JSON and TOML files."""

import json
import tomllib
from pathlib import Path
from typing import Any

from .._logging import logger
from .models import Settings


class ConfigLoader:
    """Build Settings from configuration files.

    Files hold the same nested structure as the Settings model, for example
    in TOML:

        [signal]
        fs = 500
        duration = 30

        [rate]
        hr_min = 50
        hr_max = 120

        [peaks]
        method = "adaptive"

    Missing sections and keys keep their defaults.

    Examples:
        settings = ConfigLoader.from_file("run.toml")
        settings = ConfigLoader.from_json("run.json")
    """

    @staticmethod
    def from_dict(data: dict[str, Any]) -> Settings:
        """Validate a nested dictionary into Settings.

        Raises:
            ValueError: If an unknown top-level section is present.
            pydantic.ValidationError: If a value has the wrong type.
        """
        unknown = set(data) - set(Settings.model_fields)
        if unknown:
            raise ValueError(f"Unknown configuration sections: {sorted(unknown)}")
        return Settings.model_validate(data)

    @staticmethod
    def from_json(path: str | Path) -> Settings:
        """Load settings from a JSON file.

        Raises:
            FileNotFoundError: If file does not exist
            json.JSONDecodeError: If file is not valid JSON
        """
        path = Path(path)
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
        logger.debug(f"Loaded JSON configuration from {path}")
        return ConfigLoader.from_dict(data)

    @staticmethod
    def from_toml(path: str | Path) -> Settings:
        """Load settings from a TOML file.

        Raises:
            FileNotFoundError: If file does not exist
            tomllib.TOMLDecodeError: If file is not valid TOML
        """
        path = Path(path)
        with path.open("rb") as f:
            data = tomllib.load(f)
        logger.debug(f"Loaded TOML configuration from {path}")
        return ConfigLoader.from_dict(data)

    @staticmethod
    def from_file(path: str | Path) -> Settings:
        """Load settings, choosing the parser from the file extension.

        Raises:
            ValueError: If the extension is neither .json nor .toml
        """
        path = Path(path)
        loaders = {".json": ConfigLoader.from_json, ".toml": ConfigLoader.from_toml}
        try:
            loader = loaders[path.suffix.lower()]
        except KeyError:
            raise ValueError(
                f"Unsupported config file format: {path.suffix}. Only .json and .toml are supported."
            ) from None
        return loader(path)

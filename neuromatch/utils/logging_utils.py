from __future__ import annotations

import logging
import logging.config
from importlib import resources
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

BUNDLED_LOGGING_CONFIG = "logging.yaml"


def default_logging_config() -> Path:
    return Path(str(resources.files("neuromatch.config").joinpath(BUNDLED_LOGGING_CONFIG)))


def setup_logging(config_path: Optional[Path | str] = None, level: str = "INFO") -> None:
    """
    Configure logging from a YAML dictConfig file.

    Without an explicit path the bundled ``logging.yaml`` is used. The
    ``neuromatch`` logger is then set to ``level``.
    """
    config_file = Path(config_path) if config_path else default_logging_config()
    if not config_file.exists():
        raise FileNotFoundError(f"Logging config not found: {config_file}")

    with config_file.open("r", encoding="utf-8") as stream:
        config_dict: Dict[str, Any] = yaml.safe_load(stream)

    log_file = config_dict.get("handlers", {}).get("file", {}).get("filename")
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)

    logging.config.dictConfig(config_dict)
    logging.getLogger("neuromatch").setLevel(level.upper())

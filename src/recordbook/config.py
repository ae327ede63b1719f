"""Environment settings and logging setup. Nothing here runs on import."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_PHONE_REGION = "US"


@dataclass(frozen=True)
class Settings:
    log_level: str = DEFAULT_LOG_LEVEL
    phone_region: str = DEFAULT_PHONE_REGION


def load_settings(env_file: str | Path | None = None) -> Settings:
    """Read settings from the environment, after loading a .env file if one is found.

    An explicit env_file is loaded if it exists; otherwise .env in the working
    directory is tried. Variables already set in the environment win over the file.
    """
    path = Path(env_file) if env_file is not None else Path.cwd() / ".env"
    if path.exists():
        load_dotenv(path)

    level = os.environ.get("RECORDBOOK_LOG_LEVEL", "").strip().upper() or DEFAULT_LOG_LEVEL
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"Unknown log level: {level}")
    region = os.environ.get("RECORDBOOK_PHONE_REGION", DEFAULT_PHONE_REGION).strip().upper()
    return Settings(log_level=level, phone_region=region or DEFAULT_PHONE_REGION)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(format=LOG_FORMAT, level=settings.log_level)

"""Environment-based configuration for the emoji tasks."""

import logging
import os
from pathlib import Path

from .constants import ENV_CATALOGUE_DIR, ENV_EMOJI_JSON, ENV_LOG_LEVEL
from .errors import DataIntegrityError

# The catalogues live at the repository root, beside the package
DEFAULT_CATALOGUE_DIR = Path(__file__).parent.parent


def load_env_file(directory: Path) -> None:
    """Load environment variables from a .env file if it exists.

    Variables already set in the environment win.
    """
    env_path = Path(directory) / '.env'
    if env_path.exists():
        with open(env_path) as f:
            for line in f:
                line = line.strip()
                if line and not line.startswith('#') and '=' in line:
                    key, value = line.split('=', 1)
                    os.environ.setdefault(key.strip(), value.strip())


def catalogue_dir() -> Path:
    """Directory holding the img-*.json catalogues and their images"""
    override = os.environ.get(ENV_CATALOGUE_DIR)
    return Path(override) if override else DEFAULT_CATALOGUE_DIR


def emoji_json_path() -> Path:
    """Path to the emoji-data export for the generate task"""
    path = os.environ.get(ENV_EMOJI_JSON)
    if not path:
        raise DataIntegrityError(f"{ENV_EMOJI_JSON} must be set to the path of emoji-data's emoji.json")
    return Path(path)


def log_level(verbose: bool = False) -> int:
    if verbose:
        return logging.DEBUG
    name = os.environ.get(ENV_LOG_LEVEL, "WARNING").upper()
    return getattr(logging, name, logging.WARNING)

"""Loads the list of AWS profiles to browse from a TOML file"""

import logging
import tomllib
from pathlib import Path

from lambdalog.models.account import AccountContext

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = Path("config.toml")


def load_profiles(path: Path = DEFAULT_CONFIG_FILE) -> list[AccountContext]:
    """Read the [[profiles]] tables of a config file

    A missing or malformed file yields an empty list.
    """
    if not path.is_file():
        logger.info("No profile config at %s", path)
        return []

    try:
        with path.open("rb") as config_file:
            config = tomllib.load(config_file)
    except (OSError, tomllib.TOMLDecodeError):
        logger.warning("Could not read profile config %s", path, exc_info=True)
        return []

    profiles = []
    for entry in config.get("profiles", []):
        try:
            profiles.append(AccountContext(name=str(entry["name"]), region=str(entry["region"])))
        except (KeyError, TypeError):
            logger.warning("Skipping invalid profile entry %r in %s", entry, path)
    logger.info("Loaded %d profiles from %s", len(profiles), path)
    return profiles

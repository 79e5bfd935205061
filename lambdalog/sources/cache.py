"""Durable name-keyed cache of remote listings"""

import json
import logging
import os
import re
import tempfile
from pathlib import Path

from lambdalog.models.account import AccountContext

logger = logging.getLogger(__name__)

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9_.-]")


def default_cache_dir() -> Path:
    """Get the cache directory, following XDG_CACHE_HOME"""
    base = os.environ.get("XDG_CACHE_HOME") or Path.home() / ".cache"
    return Path(base) / "lambdalog"


class JsonFileCache:
    """Stores each cached list as a JSON file named after its kind and context

    Both reads and writes are best-effort: failures are logged and reported
    as a cache miss or ignored.
    """

    def __init__(self, directory: Path) -> None:
        self._directory = directory

    def path_for(self, kind: str, context: AccountContext) -> Path:
        """Get the file holding the names of a kind for a context"""
        parts = (kind, context.name, context.region)
        return self._directory / ("__".join(_UNSAFE_CHARS.sub("_", p) for p in parts) + ".json")

    def read(self, kind: str, context: AccountContext) -> list[str] | None:
        """Read the cached names, or None on a miss"""
        path = self.path_for(kind, context)
        try:
            with path.open(encoding="utf-8") as cache_file:
                names = json.load(cache_file)
        except FileNotFoundError:
            return None
        except (OSError, ValueError):
            logger.warning("Ignoring unreadable cache file %s", path, exc_info=True)
            return None

        if not isinstance(names, list) or not all(isinstance(n, str) for n in names):
            logger.warning("Ignoring malformed cache file %s", path)
            return None
        return names

    def write(self, kind: str, context: AccountContext, names: list[str]) -> None:
        """Replace the cached names"""
        path = self.path_for(kind, context)
        try:
            self._directory.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w", encoding="utf-8", dir=self._directory, suffix=".tmp", delete=False
            ) as tmp:
                json.dump(names, tmp)
            os.replace(tmp.name, path)
        except OSError:
            logger.warning("Could not write cache file %s", path, exc_info=True)


class NullCache:
    """Cache that never has anything"""

    def read(self, kind: str, context: AccountContext) -> list[str] | None:
        """Always a miss"""
        return None

    def write(self, kind: str, context: AccountContext, names: list[str]) -> None:
        """Discard the names"""

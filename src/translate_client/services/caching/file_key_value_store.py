"""File-based key-value store, one file per cache key."""

import os
import tempfile
from pathlib import Path
from typing import Optional
from urllib.parse import quote, unquote

from translate_client.services.caching.key_value_store import KeyValueStore


class FileKeyValueStore(KeyValueStore):
    """
    Stores each value in its own file inside a cache directory.

    Layout:
        <directory>/<percent-encoded key>.json

    Writes go to a temporary file that is then renamed over the target, so a
    reader in another process never sees a half-written entry.
    """

    FILE_SUFFIX = ".json"

    def __init__(self, directory: Path | str):
        self.directory = Path(directory)

    def get(self, key: str) -> Optional[bytes]:
        path = self._get_file_path(key)
        if not path.exists():
            return None
        return path.read_bytes()

    def set(self, key: str, value: bytes) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        path = self._get_file_path(key)
        fd, tmp_name = tempfile.mkstemp(dir=self.directory, prefix=".tmp-")
        try:
            with os.fdopen(fd, "wb") as handle:
                handle.write(value)
            os.replace(tmp_name, path)
        except OSError:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def delete(self, key: str) -> None:
        self._get_file_path(key).unlink(missing_ok=True)

    def list_keys(self) -> list[str]:
        """List cached keys on disk."""
        if not self.directory.exists():
            return []
        return sorted(unquote(p.stem) for p in self.directory.glob(f"*{self.FILE_SUFFIX}"))

    def _get_file_path(self, key: str) -> Path:
        """Get the cache file path for a key. Distinct keys never share a file."""
        safe_key = quote(key, safe="")
        return self.directory / f"{safe_key}{self.FILE_SUFFIX}"

"""
JSON file storage for the catalog.

The whole catalog lives in one JSON file holding an array of item
objects.  ``JsonFileStore`` reads the complete file on every call and
writes the complete file back on every mutation; nothing is cached
between calls, so memory and disk never drift apart.

Writes go to a temporary file in the same directory which is then
moved over the target with ``os.replace``.  Readers therefore see
either the previous file or the new one, never a truncated file, and
need no lock.  Mutations hold the store's lock for the whole
load-modify-write cycle so two concurrent writers cannot lose each
other's changes.  The lock is per process; run a single worker.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
from pathlib import Path
from typing import Any, Callable, List, Optional, TypeVar

from .exceptions import StoreUnavailableError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _reject_constant(token: str) -> Any:
    # NaN and Infinity are not standard JSON.
    raise ValueError(f"Non-standard JSON constant {token}")


def get_data_path(data_file: str) -> Path:
    """Compute the path to the catalog file.

    Absolute paths are used as is; relative paths are resolved against
    the project root (the directory containing ``catalog_api/``).
    """
    path = Path(data_file)
    if path.is_absolute():
        return path
    base_dir = Path(__file__).resolve().parent.parent.parent.parent
    return (base_dir / path).resolve()


class JsonFileStore:
    """Whole-file JSON array store with atomic replace and a mutation lock."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self._lock = threading.Lock()

    def initialize(self, default: Optional[List[dict]] = None) -> None:
        """Create the backing file with ``default`` content if it does not exist."""
        with self._lock:
            if self.path.exists():
                return
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self._write(list(default or []))
            logger.info("Created catalog file %s with %d records", self.path, len(default or []))

    def load(self) -> List[dict]:
        """Read and parse the whole collection.

        A missing file reads as an empty collection.  Unreadable or
        malformed content raises ``StoreUnavailableError``.
        """
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f, parse_constant=_reject_constant)
        except FileNotFoundError:
            return []
        except (OSError, ValueError) as exc:
            logger.error("Failed to read catalog file %s: %s", self.path, exc)
            raise StoreUnavailableError("Catalog data could not be read") from exc
        if not isinstance(data, list) or not all(isinstance(item, dict) for item in data):
            logger.error("Catalog file %s does not contain an array of objects", self.path)
            raise StoreUnavailableError("Catalog data is malformed")
        return data

    def mutate(self, mutator: Callable[[List[dict]], T]) -> T:
        """Run a locked load, ``mutator(items)``, full write cycle.

        ``mutator`` changes the list in place and returns a value which
        is passed back to the caller once the write has succeeded.  If
        ``mutator`` raises, nothing is written.
        """
        with self._lock:
            items = self.load()
            result = mutator(items)
            self._write(items)
            return result

    def _write(self, items: List[Any]) -> None:
        directory = self.path.parent
        tmp_name: Optional[str] = None
        try:
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self.path.name}.", suffix=".tmp", dir=directory
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(items, f, indent=2, ensure_ascii=False, allow_nan=False)
                f.write("\n")
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, self.path)
            tmp_name = None
        except (OSError, TypeError, ValueError) as exc:
            logger.error("Failed to write catalog file %s: %s", self.path, exc)
            raise StoreUnavailableError("Catalog data could not be saved") from exc
        finally:
            if tmp_name is not None:
                try:
                    os.unlink(tmp_name)
                except OSError:
                    logger.warning("Could not remove temporary file %s", tmp_name)

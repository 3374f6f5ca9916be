"""
JSON file persistence for the user collection.

The whole collection is the unit of persistence: every read loads the full
file and every write replaces it. A single lock per storage instance keeps
load-modify-save sequences from interleaving.
"""

from __future__ import annotations

from contextlib import contextmanager
from pathlib import Path
from typing import Iterator
import json
import logging
import os
import tempfile
import threading

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """Base class for persistence failures."""


class StorageParseError(StorageError):
    """Raised when the file exists but does not hold a JSON array of objects."""


class StorageIOError(StorageError):
    """Raised when reading or writing the file fails."""


def _reject_constant(name: str) -> None:
    raise ValueError(f"non-standard JSON constant {name}")


class Transaction:
    """Collection loaded under the storage lock; call ``mark_dirty`` to persist it."""

    def __init__(self, users: list[dict]) -> None:
        self.users = users
        self.dirty = False

    def mark_dirty(self) -> None:
        self.dirty = True


class JsonUserStorage:
    """Loads and saves the full list of user records from a single JSON file."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        self._lock = threading.Lock()

    def load(self) -> list[dict]:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return []
        except OSError as exc:
            raise StorageIOError(f"could not read {self.path}: {exc}") from exc
        try:
            users = json.loads(raw, parse_constant=_reject_constant)
        except ValueError as exc:
            raise StorageParseError(f"{self.path} is not valid JSON: {exc}") from exc
        if not isinstance(users, list):
            raise StorageParseError(f"{self.path} does not contain a JSON array")
        if not all(isinstance(user, dict) for user in users):
            raise StorageParseError(f"{self.path} holds entries that are not JSON objects")
        return users

    def save(self, users: list[dict]) -> None:
        try:
            data = json.dumps(users, ensure_ascii=False, indent=2, allow_nan=False)
        except ValueError as exc:
            raise StorageError(f"could not serialize users: {exc}") from exc
        tmp_name = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self.path.name}.", suffix=".tmp", dir=str(self.path.parent)
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(data)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, self.path)
            tmp_name = None
        except OSError as exc:
            raise StorageIOError(f"could not write {self.path}: {exc}") from exc
        finally:
            if tmp_name is not None:
                try:
                    os.unlink(tmp_name)
                except OSError:
                    logger.warning("could not remove temporary file %s", tmp_name)
        logger.debug("saved %d users to %s", len(users), self.path)

    def snapshot(self) -> list[dict]:
        """Load the collection while no write is in progress."""
        with self._lock:
            return self.load()

    @contextmanager
    def transaction(self) -> Iterator[Transaction]:
        """
        Hold the writer lock across load, caller changes and save.

        The collection is written back only when the block exits without an
        exception and the caller marked it dirty.
        """
        with self._lock:
            tx = Transaction(self.load())
            yield tx
            if tx.dirty:
                self.save(tx.users)

"""Save storage interface, back ends, and the load path.

SaveStorage is the interface between the simulation and whatever medium
holds the save. The simulation only ever asks three things: is there a
record, give me the record, store this record. A missing or unreadable
record is not an error; the caller starts a fresh world instead.

MemoryStorage keeps the record in-process for tests and headless runs.
FileStorage keeps it in a single file on disk.
"""

from __future__ import annotations

import logging
import os
from abc import ABC, abstractmethod
from pathlib import Path

from riverwood.persistence.serialization import (
    SnapshotFormatError,
    SnapshotRecord,
    decode_snapshot,
    encode_snapshot,
    state_from_snapshot,
)
from riverwood.simulation.state import GameState

logger = logging.getLogger(__name__)


class SaveStorage(ABC):
    """Abstract interface for persistent snapshot storage."""

    @abstractmethod
    def has_record(self) -> bool:
        """Whether anything has been stored (valid or not)."""
        ...

    @abstractmethod
    def read_record(self) -> SnapshotRecord | None:
        """Load the stored record.

        Returns:
            The decoded record, or None when nothing is stored or the
            stored bytes do not decode.
        """
        ...

    @abstractmethod
    def write_record(self, record: SnapshotRecord) -> None:
        """Replace the stored record."""
        ...


class MemoryStorage(SaveStorage):
    """In-process storage. Keeps the encoded bytes, not the record object,
    so every write and read goes through the real codec."""

    def __init__(self) -> None:
        self._data: bytes | None = None
        self.write_count = 0

    def has_record(self) -> bool:
        return self._data is not None

    def read_record(self) -> SnapshotRecord | None:
        if self._data is None:
            return None
        try:
            return decode_snapshot(self._data)
        except SnapshotFormatError as exc:
            logger.warning("Discarding stored snapshot: %s", exc)
            return None

    def write_record(self, record: SnapshotRecord) -> None:
        self._data = encode_snapshot(record)
        self.write_count += 1

    @property
    def data(self) -> bytes | None:
        return self._data

    def corrupt_with(self, data: bytes) -> None:
        """Test helper: store raw bytes as if they were a saved record."""
        self._data = data


class FileStorage(SaveStorage):
    """Single-file storage on the local filesystem."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def has_record(self) -> bool:
        return self._path.is_file()

    def read_record(self) -> SnapshotRecord | None:
        try:
            data = self._path.read_bytes()
        except FileNotFoundError:
            return None
        except OSError as exc:
            logger.warning("Could not read save %s: %s", self._path, exc)
            return None
        try:
            return decode_snapshot(data)
        except SnapshotFormatError as exc:
            logger.warning("Discarding save %s: %s", self._path, exc)
            return None

    def write_record(self, record: SnapshotRecord) -> None:
        """Write to a temp file next to the save, then swap it in, so a
        crash mid-write never leaves a torn record behind."""
        data = encode_snapshot(record)
        tmp_path = self._path.with_name(self._path.name + ".tmp")
        try:
            tmp_path.write_bytes(data)
            os.replace(tmp_path, self._path)
        except OSError:
            tmp_path.unlink(missing_ok=True)
            raise


def load_game(storage: SaveStorage, resume: bool, seed: int) -> GameState:
    """Resume from `storage` if asked and possible, else start fresh.

    Args:
        storage: Where saves live.
        resume: Whether to try the stored record at all.
        seed: Seed for the fresh world when nothing is restored.
    """
    if resume and storage.has_record():
        record = storage.read_record()
        if record is not None:
            logger.info("Resuming save from tick %d", record.tick)
            return state_from_snapshot(record)
        logger.info("Stored save is unusable, generating a new world")
    logger.info("New world, seed=%d", seed)
    return GameState(seed=seed)

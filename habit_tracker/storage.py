from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Mapping, Protocol

from pydantic_core import to_jsonable_python

from habit_tracker.config import DATA_DIR_KEY, DEFAULT_DATA_DIR

RECORD_SUFFIX = ".json"


class StorageBackend(Protocol):
    """Key-value store holding independently addressable JSON records."""

    def read_record(self, key: str) -> object | None:
        """Return the decoded record, or ``None`` if it was never written."""

    def write_record(self, key: str, payload: object) -> None:
        """Replace the record stored under ``key``."""


def resolve_data_directory(path: str | Path | None = None, *, env: Mapping[str, str] | None = None) -> Path:
    """Resolve the directory that holds the record files."""

    if path is not None:
        return Path(path).expanduser()

    env_map: Mapping[str, str] = os.environ if env is None else env
    raw_value = env_map.get(DATA_DIR_KEY)
    if raw_value:
        return Path(raw_value).expanduser()
    return DEFAULT_DATA_DIR


def _serialize(payload: object) -> str:
    return json.dumps(payload, default=to_jsonable_python, ensure_ascii=False, sort_keys=True)


class FileStorageBackend:
    """Persist each record as its own JSON file inside one directory."""

    def __init__(self, path: str | Path | None = None) -> None:
        self.directory = resolve_data_directory(path)
        self._fingerprints: dict[str, str] = {}

    def record_path(self, key: str) -> Path:
        return self.directory / f"{key}{RECORD_SUFFIX}"

    def read_record(self, key: str) -> object | None:
        record_path = self.record_path(key)
        if not record_path.exists():
            return None

        with record_path.open("r", encoding="utf-8") as file_handle:
            return json.load(file_handle)

    def write_record(self, key: str, payload: object) -> None:
        serialized = _serialize(payload)
        if self._fingerprints.get(key) == serialized:
            return

        self.directory.mkdir(parents=True, exist_ok=True)
        record_path = self.record_path(key)
        file_descriptor, temp_name = tempfile.mkstemp(dir=self.directory, prefix=f".{key}-", suffix=".tmp")
        try:
            with os.fdopen(file_descriptor, "w", encoding="utf-8") as file_handle:
                file_handle.write(serialized)
            os.replace(temp_name, record_path)
        except BaseException:
            Path(temp_name).unlink(missing_ok=True)
            raise

        self._fingerprints[key] = serialized


class MemoryStorageBackend:
    """Keep records in a dict; used for tests and throwaway sessions."""

    def __init__(self, records: Mapping[str, object] | None = None) -> None:
        self.records: dict[str, str] = {key: _serialize(value) for key, value in (records or {}).items()}

    def read_record(self, key: str) -> object | None:
        raw = self.records.get(key)
        if raw is None:
            return None
        return json.loads(raw)

    def write_record(self, key: str, payload: object) -> None:
        self.records[key] = _serialize(payload)


__all__ = [
    "FileStorageBackend",
    "MemoryStorageBackend",
    "RECORD_SUFFIX",
    "StorageBackend",
    "resolve_data_directory",
]

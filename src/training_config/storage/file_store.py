"""YAML file-backed configuration store."""

from __future__ import annotations

import json
import os
import re
from pathlib import Path
from typing import List, Optional, Type

import yaml
from pydantic import BaseModel

from ..core.exceptions import InvalidArgument, StoreError
from ..core.logging import get_logger
from .base import ModelT, filter_keys, parse_record, validate_key

LOGGER = get_logger(__name__)

_UNSAFE_KEY_CHARS = re.compile(r"[^A-Za-z0-9._-]")
_SUFFIX = ".yaml"


class YamlFileConfigurationStore:
    """Stores one YAML document per key inside ``data_dir``."""

    def __init__(self, data_dir: str | Path) -> None:
        self.data_dir = Path(data_dir).expanduser().resolve()
        try:
            self.data_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise StoreError(
                f"Cannot create configuration directory '{self.data_dir}': {exc}",
                metadata={"data_dir": str(self.data_dir)},
            ) from exc

    def path_for(self, key: str) -> Path:
        """Map ``key`` to its file; keys are used verbatim as file stems."""
        validate_key(key)
        if _UNSAFE_KEY_CHARS.search(key):
            raise InvalidArgument(
                f"Store key '{key}' may only contain letters, digits, '.', '_' and '-'.",
                metadata={"key": key},
            )
        return self.data_dir / f"{key}{_SUFFIX}"

    def load(self, key: str, model: Type[ModelT]) -> Optional[ModelT]:
        path = self.path_for(key)
        if not path.exists():
            LOGGER.debug("store_record_missing", extra={"extra_context": {"key": key, "path": str(path)}})
            return None

        try:
            raw = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise StoreError(
                f"I/O error reading '{key}' from '{path}'. Check file status and permissions: {exc}",
                metadata={"key": key, "path": str(path)},
            ) from exc
        except UnicodeDecodeError as exc:
            raise StoreError(
                f"'{path}' holding '{key}' is not valid UTF-8 text. The file may be corrupted; "
                f"consider deleting it and recreating. Decoder error: {exc}",
                metadata={"key": key, "path": str(path)},
            ) from exc

        if not raw.strip():
            LOGGER.warning("store_record_empty", extra={"extra_context": {"key": key, "path": str(path)}})
            path.unlink(missing_ok=True)
            return None

        try:
            payload = yaml.safe_load(raw)
        except yaml.YAMLError as exc:
            raise StoreError(
                f"Failed to parse YAML for '{key}' in '{path}'. The file may be corrupted; "
                f"consider deleting it and recreating. Parser error: {exc}",
                metadata={"key": key, "path": str(path)},
            ) from exc
        return parse_record(key, payload, model, source=str(path))

    def save(self, key: str, value: BaseModel) -> None:
        path = self.path_for(key)
        if value is None:
            raise InvalidArgument("Cannot store an empty value", metadata={"key": key})
        serializable = json.loads(value.model_dump_json(by_alias=True))
        temp_path = path.with_name(path.name + ".tmp")
        try:
            with temp_path.open("w", encoding="utf-8") as handle:
                yaml.safe_dump(serializable, handle, sort_keys=False)
            os.replace(temp_path, path)
        except OSError as exc:
            temp_path.unlink(missing_ok=True)
            raise StoreError(
                f"I/O error writing '{key}' to '{path}'. Check disk space and permissions: {exc}",
                metadata={"key": key, "path": str(path)},
            ) from exc
        LOGGER.info("store_record_saved", extra={"extra_context": {"key": key, "path": str(path)}})

    def delete(self, key: str) -> None:
        path = self.path_for(key)
        try:
            path.unlink(missing_ok=True)
        except OSError as exc:
            raise StoreError(
                f"I/O error deleting '{key}' from '{path}'. Ensure the file is not in use: {exc}",
                metadata={"key": key, "path": str(path)},
            ) from exc

    def exists(self, key: str) -> bool:
        return self.path_for(key).exists()

    def list_keys(self, pattern: Optional[str] = None) -> List[str]:
        keys = [path.name[: -len(_SUFFIX)] for path in self.data_dir.glob(f"*{_SUFFIX}")]
        return filter_keys(keys, pattern)

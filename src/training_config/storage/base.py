"""Typed key-value persistence for configuration records."""

from __future__ import annotations

import fnmatch
from copy import deepcopy
from typing import Any, Dict, List, Optional, Protocol, Type, TypeVar

from pydantic import BaseModel, ValidationError

from ..core.exceptions import InvalidArgument, StoreError
from ..core.logging import get_logger

LOGGER = get_logger(__name__)

MAX_KEY_LENGTH = 200

ModelT = TypeVar("ModelT", bound=BaseModel)


class ConfigurationStore(Protocol):
    """Minimal surface the configuration service relies on."""

    def load(self, key: str, model: Type[ModelT]) -> Optional[ModelT]: ...

    def save(self, key: str, value: BaseModel) -> None: ...

    def delete(self, key: str) -> None: ...

    def exists(self, key: str) -> bool: ...

    def list_keys(self, pattern: Optional[str] = None) -> List[str]: ...


def validate_key(key: str) -> None:
    if not isinstance(key, str) or not key.strip():
        raise InvalidArgument(
            "Store key cannot be empty. Provide a valid key identifier for data storage.",
            metadata={"key": key},
        )
    if len(key) > MAX_KEY_LENGTH:
        raise InvalidArgument(
            f"Store key '{key}' exceeds maximum length of {MAX_KEY_LENGTH} characters.",
            metadata={"key": key, "length": len(key)},
        )


def filter_keys(keys: List[str], pattern: Optional[str]) -> List[str]:
    if not pattern:
        return sorted(keys)
    return sorted(key for key in keys if fnmatch.fnmatchcase(key, pattern))


def parse_record(key: str, payload: Any, model: Type[ModelT], *, source: str) -> ModelT:
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        raise StoreError(
            f"Stored record '{key}' in {source} does not match the {model.__name__} schema. "
            f"Consider deleting the corrupted record and recreating it. Details: {exc}",
            metadata={"key": key, "source": source},
        ) from exc


class InMemoryConfigurationStore:
    """Store that keeps serialized payloads in a dictionary."""

    def __init__(self) -> None:
        self._records: Dict[str, Dict[str, Any]] = {}

    def load(self, key: str, model: Type[ModelT]) -> Optional[ModelT]:
        validate_key(key)
        payload = self._records.get(key)
        if payload is None:
            LOGGER.debug("store_record_missing", extra={"extra_context": {"key": key}})
            return None
        return parse_record(key, deepcopy(payload), model, source="memory")

    def save(self, key: str, value: BaseModel) -> None:
        validate_key(key)
        if value is None:
            raise InvalidArgument("Cannot store an empty value", metadata={"key": key})
        self._records[key] = value.model_dump(mode="json", by_alias=True)

    def delete(self, key: str) -> None:
        validate_key(key)
        self._records.pop(key, None)

    def exists(self, key: str) -> bool:
        validate_key(key)
        return key in self._records

    def list_keys(self, pattern: Optional[str] = None) -> List[str]:
        return filter_keys(list(self._records), pattern)

"""Exception hierarchy for training configuration handling."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List


@dataclass(eq=False)
class TrainingConfigError(RuntimeError):
    message: str
    code: str = "training_config_error"
    metadata: Dict[str, Any] = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        super().__init__(self.message)
        if self.metadata is None:
            self.metadata = {}

    def to_dict(self) -> Dict[str, Any]:
        return {"code": self.code, "message": self.message, "metadata": self.metadata}


@dataclass(eq=False)
class MissingConfiguration(TrainingConfigError):
    """No stored configuration exists and bootstrapping is disabled."""

    code: str = "missing_configuration"


@dataclass(eq=False)
class HardValidationFailure(TrainingConfigError):
    """The configuration violates one or more hard validation rules."""

    code: str = "hard_validation_failure"

    @property
    def errors(self) -> List[str]:
        return list(self.metadata.get("errors", []))

    @property
    def warnings(self) -> List[str]:
        return list(self.metadata.get("warnings", []))


@dataclass(eq=False)
class InvalidArgument(TrainingConfigError):
    code: str = "invalid_argument"


@dataclass(eq=False)
class StoreError(TrainingConfigError):
    """The backing store could not read or write a record."""

    code: str = "store_error"

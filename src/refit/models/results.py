"""
Execution result data models for Refit Utilities.

This module defines the tri-state envelope every utility returns from a
single execution, along with the failure type reported inside error results.
"""

from typing import Any, Dict, List, Optional
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field, model_validator


class ResultType(Enum):
    """Enumeration of execution result kinds."""
    VALUE = "value"
    WARNING = "warning"
    ERROR = "error"


class UtilityError(Exception):
    """
    Raised (and reported) when a utility fails while executing.

    Failures that happen while releasing resources after a primary failure
    are kept in ``suppressed`` instead of replacing the primary one.
    """

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.message = message
        self.suppressed: List[BaseException] = []
        if cause is not None:
            self.__cause__ = cause

    @property
    def cause(self) -> Optional[BaseException]:
        return self.__cause__

    def add_suppressed(self, exception: BaseException) -> None:
        """Attach a secondary failure without masking this one."""
        self.suppressed.append(exception)


class ExecutionResult(BaseModel):
    """
    Outcome of one utility execution.

    Exactly one of three states holds:

    - VALUE: ``value`` carries the produced payload
    - WARNING: ``warning_message`` explains the condition, ``value`` may still
      carry a (possibly empty) payload
    - ERROR: ``exception`` carries the captured failure, there is no payload

    The envelope itself is frozen. A list payload is handed out as-is, not
    copied, so callers that need to change it should copy it first.

    Attributes:
        type: Kind of result
        utility: Utility instance that produced this result
        value: Payload produced by the utility
        warning_message: Warning message, only for WARNING results
        exception: Captured failure, only for ERROR results
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    type: ResultType = Field(..., description="Kind of result")
    utility: Any = Field(..., description="Utility instance that produced this result")
    value: Any = Field(None, description="Payload produced by the utility")
    warning_message: Optional[str] = Field(None, description="Warning message")
    exception: Optional[BaseException] = Field(None, description="Captured failure")

    @model_validator(mode='after')
    def validate_state(self):
        """Validate that the fields are consistent with the result type."""
        if self.utility is None:
            raise ValueError("Execution result must reference the utility that produced it")

        if self.type == ResultType.VALUE:
            if self.exception is not None or self.warning_message is not None:
                raise ValueError("Value results carry neither an exception nor a warning message")
        elif self.type == ResultType.WARNING:
            if not self.warning_message or not self.warning_message.strip():
                raise ValueError("Warning results require a warning message")
            if self.exception is not None:
                raise ValueError("Warning results cannot carry an exception")
        elif self.type == ResultType.ERROR:
            if self.exception is None:
                raise ValueError("Error results require an exception")
            if self.value is not None:
                raise ValueError("Error results cannot carry a value")

        return self

    def is_value(self) -> bool:
        return self.type == ResultType.VALUE

    def is_warning(self) -> bool:
        return self.type == ResultType.WARNING

    def is_error(self) -> bool:
        return self.type == ResultType.ERROR

    def to_dict(self) -> Dict[str, Any]:
        """Convert the result to a dictionary suitable for display or auditing."""
        return {
            'type': self.type.value,
            'utility': str(self.utility),
            'value': self.value,
            'warning_message': self.warning_message,
            'exception': str(self.exception) if self.exception is not None else None
        }

    def __str__(self) -> str:
        parts = [f"Result: {self.type.value}"]

        if self.is_warning():
            parts.append(f"Warning: {self.warning_message}")
        elif self.is_error():
            parts.append(f"Error: {self.exception}")
        else:
            parts.append(f"Value: {self.value!r}")

        return " | ".join(parts)


def value(utility: Any, payload: Any) -> ExecutionResult:
    """Create a VALUE result."""
    return ExecutionResult(type=ResultType.VALUE, utility=utility, value=payload)


def warning(utility: Any, message: str, payload: Any = None) -> ExecutionResult:
    """Create a WARNING result, optionally still carrying a payload."""
    return ExecutionResult(type=ResultType.WARNING, utility=utility,
                           warning_message=message, value=payload)


def error(utility: Any, failure: BaseException) -> ExecutionResult:
    """Create an ERROR result carrying the captured failure."""
    return ExecutionResult(type=ResultType.ERROR, utility=utility, exception=failure)

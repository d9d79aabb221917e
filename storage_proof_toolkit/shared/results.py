"""
Result types for explicit success/failure tracking in parameter generation.

The pipeline returns a Result instead of raising, so the command surface can
tell a clean "block not found" exit apart from a fatal failure.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Generic, List, Optional, TypeVar

from storage_proof_toolkit.shared.exceptions import (
    ErrorKind,
    ProofParamsException,
)

T = TypeVar("T")


@dataclass
class ProcessingError:
    """
    Represents a single processing error with context.

    Attributes:
        source: Pipeline stage that generated the error (e.g., "block_header")
        message: Human-readable error description
        kind: Failure kind, decides whether the run aborts
        context: Additional context like block number, account, slot
        exception: Original exception if available
    """

    source: str
    message: str
    kind: ErrorKind
    context: Dict[str, Any] = field(default_factory=dict)
    exception: Optional[Exception] = None

    @property
    def is_fatal(self) -> bool:
        return self.kind.is_fatal

    @classmethod
    def from_exception(
        cls,
        source: str,
        exception: Exception,
        context: Optional[Dict[str, Any]] = None,
    ) -> "ProcessingError":
        """Wrap an exception, keeping its kind when it has one."""
        if isinstance(exception, ProofParamsException):
            kind = exception.kind
            message = exception.message
        else:
            kind = ErrorKind.CHAIN_DATA
            message = f"{type(exception).__name__}: {exception}"
        return cls(
            source=source,
            message=message,
            kind=kind,
            context=context or {},
            exception=exception,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "source": self.source,
            "message": self.message,
            "kind": self.kind.value,
            "fatal": self.is_fatal,
            "context": self.context,
        }


@dataclass
class Result(Generic[T]):
    """
    Result type that carries success/failure information.

    Attributes:
        success: Whether the operation succeeded
        data: The result data if successful
        errors: Errors encountered
    """

    success: bool
    data: Optional[T] = None
    errors: List[ProcessingError] = field(default_factory=list)

    @classmethod
    def ok(cls, data: T) -> "Result[T]":
        """Create a successful result with data."""
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, error: ProcessingError) -> "Result[T]":
        """Create a failed result with an error."""
        return cls(success=False, errors=[error])

    @property
    def error(self) -> Optional[ProcessingError]:
        """First error, if any."""
        return self.errors[0] if self.errors else None

    def is_fatal(self) -> bool:
        """Check if result failed with a fatal error."""
        return any(e.is_fatal for e in self.errors)

    def unwrap(self) -> T:
        """Return data, raising the original error for failed results."""
        if self.success:
            return self.data
        error = self.error
        if error is not None and error.exception is not None:
            raise error.exception
        raise RuntimeError("; ".join(self.get_error_messages()))

    def get_error_messages(self) -> List[str]:
        """Get all error messages as strings."""
        return [e.message for e in self.errors]

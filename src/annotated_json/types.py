"""Core type definitions for annotated-json."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Union


# Data tree and wire shapes
JSONValue = Any
DataTree = Dict[str, JSONValue]
ArrayForm = List[JSONValue]
TextInput = Union[str, bytes, bytearray]


class ErrorType(Enum):
    """Enumeration of error types."""
    INPUT = "input"
    STRUCTURE = "structure"
    CONFIG = "config"


@dataclass
class ValidationError:
    """Validation error details."""
    type: ErrorType
    message: str
    location: Optional[str] = None


@dataclass
class ValidationResult:
    """Result of input validation."""
    is_valid: bool
    errors: List[ValidationError]
    warnings: List[str]


class AnnotatedJSONError(ValueError):
    """Base exception for annotated-json errors."""

    def __init__(self, message: str, error_type: ErrorType, context: Optional[Any] = None):
        super().__init__(message)
        self.error_type = error_type
        self.context = context


class InvalidInputError(AnnotatedJSONError):
    """The top-level argument does not have the expected envelope."""

    def __init__(self, message: str, context: Optional[Any] = None):
        super().__init__(message, ErrorType.INPUT, context)


class InvalidAnnotatedJsonError(AnnotatedJSONError):
    """A node inside an array-form sequence has an illegal shape."""

    def __init__(self, message: str = "invalid annotated-json data",
                 context: Optional[Any] = None):
        super().__init__(message, ErrorType.STRUCTURE, context)


# Abstract base classes for interfaces

class AnnotatedJSONInterface(ABC):
    """Abstract interface for the annotated-json codec."""

    @abstractmethod
    def parse(self, data: Union[TextInput, ArrayForm]) -> "AnnotatedDocument":
        """Split array-form into a data tree and an annotation tree."""
        pass

    @abstractmethod
    def render(self, document: Any) -> ArrayForm:
        """Zip a data tree and an annotation tree back into array-form."""
        pass

    @abstractmethod
    def stringify(self, data: Any) -> str:
        """Format array-form (or a parsed document) as text."""
        pass

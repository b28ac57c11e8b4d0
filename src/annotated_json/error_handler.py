"""Envelope validation for annotated-json operations."""

import logging
from collections.abc import Mapping
from typing import Any, Optional

from .models import AnnotatedDocument, AnnotationNode
from .types import ErrorType, ValidationError, ValidationResult

SUPPORTED_LINE_TERMINATORS = ("\n", "\r\n")


class ErrorHandler:
    """
    Validates the outer shape of arguments before any work is done.

    Each check returns a ValidationResult; callers decide whether to
    raise. Node-level shape errors are not reported here, they surface
    from the node decoder.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the error handler.

        Args:
            logger: Optional logger instance for error reporting
        """
        self.logger = logger or logging.getLogger(__name__)

    def validate_input(self, data: Any) -> ValidationResult:
        """
        Validate that a decoded value can be the root of an array-form document.

        Args:
            data: Decoded JSON value

        Returns:
            ValidationResult with validation details
        """
        errors = []

        if not isinstance(data, list):
            errors.append(ValidationError(
                type=ErrorType.INPUT,
                message="data root must be an array",
                location="root"
            ))

        return ValidationResult(is_valid=not errors, errors=errors, warnings=[])

    def is_document(self, data: Any) -> bool:
        """Check whether ``data`` looks like a data/annotations pair."""
        if isinstance(data, AnnotatedDocument):
            return True
        return (isinstance(data, Mapping) and "annotations" in data and
                ("data" in data or "json" in data))

    def validate_document(self, data: Any) -> ValidationResult:
        """
        Validate a render argument.

        Args:
            data: AnnotatedDocument or mapping with ``data`` and ``annotations``

        Returns:
            ValidationResult with validation details
        """
        errors = []
        warnings = []

        if not self.is_document(data):
            errors.append(ValidationError(
                type=ErrorType.INPUT,
                message="cannot render, this does not look like an annotated-json object",
                location="root"
            ))
            return ValidationResult(is_valid=False, errors=errors, warnings=warnings)

        if isinstance(data, AnnotatedDocument):
            tree, annotations = data.data, data.annotations
        else:
            tree = data["data"] if "data" in data else data["json"]
            annotations = data["annotations"]

        if not isinstance(tree, dict):
            errors.append(ValidationError(
                type=ErrorType.INPUT,
                message=f"data tree must be a mapping, got {type(tree).__name__}",
                location="data"
            ))

        if not isinstance(annotations, (AnnotationNode, Mapping)):
            errors.append(ValidationError(
                type=ErrorType.INPUT,
                message=f"annotation tree must be a mapping, got {type(annotations).__name__}",
                location="annotations"
            ))

        return ValidationResult(is_valid=not errors, errors=errors, warnings=warnings)

    def validate_config(self, indent: Any, line_terminator: Any) -> ValidationResult:
        """
        Validate stringify settings.

        Args:
            indent: Indent step in spaces
            line_terminator: Line break sequence

        Returns:
            ValidationResult with validation details
        """
        errors = []
        warnings = []

        if isinstance(indent, bool) or not isinstance(indent, int) or indent < 1:
            errors.append(ValidationError(
                type=ErrorType.CONFIG,
                message=f"indent must be a positive integer, got {indent!r}",
                location="indent"
            ))
        elif indent > 10:
            warnings.append(f"Indent of {indent} spaces is unusually wide.")

        if line_terminator not in SUPPORTED_LINE_TERMINATORS:
            errors.append(ValidationError(
                type=ErrorType.CONFIG,
                message=f"line_terminator must be one of {SUPPORTED_LINE_TERMINATORS!r}, "
                        f"got {line_terminator!r}",
                location="line_terminator"
            ))

        for warning in warnings:
            self.logger.warning(warning)

        return ValidationResult(is_valid=not errors, errors=errors, warnings=warnings)

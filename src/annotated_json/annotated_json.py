"""Main annotated-json codec implementation."""

import logging
from typing import Any, Optional, Union

from .error_handler import ErrorHandler
from .formatter import ArrayFormFormatter
from .models import AnnotatedDocument, AnnotationNode, decode_nodes, encode_nodes
from .parser import AnnotatedJSONParser
from .renderer import AnnotationRenderer
from .types import (
    AnnotatedJSONError,
    AnnotatedJSONInterface,
    ArrayForm,
    InvalidInputError,
    TextInput,
    ValidationResult,
)


class AnnotatedJSON(AnnotatedJSONInterface):
    """
    Main implementation of the annotated-json codec.

    Converts between the comment-carrying array form and a pair of trees:
    a plain data tree callers can edit and an annotation tree that keeps
    comments and ordering so the text can be reproduced exactly.
    """

    def __init__(self, indent: int = 2, line_terminator: str = "\n",
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the codec.

        Args:
            indent: Spaces per nesting level in stringify output
            line_terminator: "\\n" or "\\r\\n", used for every line break
            logger: Optional logger instance

        Raises:
            InvalidInputError: If indent or line_terminator is unsupported
        """
        self.logger = logger or logging.getLogger(__name__)
        self.error_handler = ErrorHandler(self.logger)
        self._check(self.error_handler.validate_config(indent, line_terminator))

        self.indent = indent
        self.line_terminator = line_terminator
        self.parser = AnnotatedJSONParser(self.error_handler, self.logger)
        self.renderer = AnnotationRenderer(self.logger)
        self.formatter = ArrayFormFormatter(indent, line_terminator, self.logger)

    def parse(self, data: Union[TextInput, ArrayForm]) -> AnnotatedDocument:
        """
        Parse array-form into data and annotation trees.

        Args:
            data: JSON text or already decoded array-form

        Returns:
            AnnotatedDocument with ``data`` and ``annotations``
        """
        try:
            return self.parser.parse(data)
        except AnnotatedJSONError as e:
            self.logger.error(f"Parse failed: {e}")
            raise

    def render(self, document: Any) -> ArrayForm:
        """
        Render data and annotation trees back into array-form.

        Args:
            document: AnnotatedDocument, or a mapping with ``data`` (or
                ``json``) and ``annotations`` keys

        Returns:
            Plain JSON list in array form
        """
        try:
            return encode_nodes(self.renderer.render(self._coerce_document(document)))
        except AnnotatedJSONError as e:
            self.logger.error(f"Render failed: {e}")
            raise

    def stringify(self, data: Any, indent: Optional[int] = None,
                  line_terminator: Optional[str] = None) -> str:
        """
        Format array-form, or a document, as text.

        Documents are rendered first. The result ends with exactly one
        line terminator.

        Args:
            data: Array-form list, AnnotatedDocument or data/annotations mapping
            indent: Per-call override of the indent step
            line_terminator: Per-call override of the line terminator

        Returns:
            Formatted text
        """
        try:
            if indent is not None or line_terminator is not None:
                self._check(self.error_handler.validate_config(
                    self.indent if indent is None else indent,
                    self.line_terminator if line_terminator is None else line_terminator
                ))

            if self.error_handler.is_document(data):
                nodes = self.renderer.render(self._coerce_document(data))
            else:
                self._check(self.error_handler.validate_input(data))
                nodes = decode_nodes(data)

            return self.formatter.format(nodes, indent, line_terminator)
        except AnnotatedJSONError as e:
            self.logger.error(f"Stringify failed: {e}")
            raise

    def _coerce_document(self, document: Any) -> AnnotatedDocument:
        self._check(self.error_handler.validate_document(document))
        if isinstance(document, AnnotatedDocument):
            if isinstance(document.annotations, AnnotationNode):
                return document
            document = {"data": document.data, "annotations": document.annotations}
        try:
            return AnnotatedDocument.from_dict(document)
        except ValueError as e:
            raise InvalidInputError(f"malformed annotation tree: {e}", context=document) from e

    @staticmethod
    def _check(result: ValidationResult) -> None:
        if not result.is_valid:
            raise InvalidInputError("; ".join(error.message for error in result.errors))


_default_codec = AnnotatedJSON()


def parse(data: Union[TextInput, ArrayForm]) -> AnnotatedDocument:
    """Parse array-form text or data with the default settings."""
    return _default_codec.parse(data)


def render(document: Any) -> ArrayForm:
    """Render a document back into array-form with the default settings."""
    return _default_codec.render(document)


def stringify(data: Any, indent: Optional[int] = None,
              line_terminator: Optional[str] = None) -> str:
    """Format array-form or a document as text with the default settings."""
    return _default_codec.stringify(data, indent, line_terminator)

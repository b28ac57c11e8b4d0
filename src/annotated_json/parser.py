"""Array-form parser: splits a document into a data tree and an annotation tree."""

import logging
from typing import List, Optional, Sequence, Union

from .error_handler import ErrorHandler
from .models import AnnotatedDocument, AnnotationNode, Comment, Leaf, Node, Section, decode_nodes
from .types import ArrayForm, InvalidInputError, TextInput
from .utils.json_text import JSONText
from .utils.tree_paths import TreePaths


class AnnotatedJSONParser:
    """
    Parser for annotated-json array form.

    Walks each scope left to right, buffering comments until the next
    section or leaf claims them as ``pre``. Comments left over at the end
    of a scope become the ``post`` of the last node in it, or the
    ``inner`` of the scope itself when it has no nodes at all.
    """

    def __init__(self, error_handler: Optional[ErrorHandler] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the parser.

        Args:
            error_handler: Optional ErrorHandler instance
            logger: Optional logger instance
        """
        self.error_handler = error_handler or ErrorHandler()
        self.logger = logger or logging.getLogger(__name__)

    def parse(self, data: Union[TextInput, ArrayForm]) -> AnnotatedDocument:
        """
        Parse array-form into a data tree and an annotation tree.

        Args:
            data: JSON text (str or UTF-8 bytes) or an already decoded value

        Returns:
            AnnotatedDocument holding both trees

        Raises:
            json.JSONDecodeError: If text input is not valid JSON
            ValueError: If text input contains NaN or Infinity
            InvalidInputError: If the root value is not an array
            InvalidAnnotatedJsonError: If any node has an illegal shape
        """
        if isinstance(data, (bytes, bytearray)):
            data = bytes(data).decode("utf-8")
        if isinstance(data, str):
            data = JSONText.loads(data)

        validation_result = self.error_handler.validate_input(data)
        if not validation_result.is_valid:
            raise InvalidInputError(validation_result.errors[0].message)

        nodes = decode_nodes(data)

        document = AnnotatedDocument()
        self._parse_scope(document, nodes, [])

        self.logger.debug(f"Parsed annotated-json document with {len(nodes)} top-level nodes")
        return document

    def _parse_scope(self, document: AnnotatedDocument, nodes: Sequence[Node],
                     path: List[str]) -> None:
        """Workhorse recursive parse of one scope."""
        comments: List[str] = []
        last_path: Optional[List[str]] = None

        for node in nodes:
            if isinstance(node, Comment):
                comments.append(node.text)
                continue

            next_path = TreePaths.append(path, node.name)
            annotation = self._claim(document, next_path)
            if comments:
                annotation.pre = comments
                comments = []

            if isinstance(node, Section):
                TreePaths.data_sub_path(document.data, next_path)
                self._parse_scope(document, node.children, next_path)
            elif isinstance(node, Leaf):
                annotation.value = True
                TreePaths.data_sub_path(document.data, path)[node.name] = node.value

            last_path = next_path

        if comments:
            # a scope without nodes keeps its comments in `inner`; `post` of the
            # scope node already belongs to the enclosing scope
            if last_path is None:
                TreePaths.annotation_sub_path(document.annotations, path).inner = comments
            else:
                TreePaths.annotation_sub_path(document.annotations, last_path).post = comments

    def _claim(self, document: AnnotatedDocument, path: List[str]) -> AnnotationNode:
        """Return the annotation node at ``path``, appending it to its parent if new."""
        if TreePaths.find_annotation(document.annotations, path) is not None:
            self.logger.warning(f"Duplicate key {path[-1]!r} at {'/'.join(path[:-1]) or '<root>'}; "
                                "later entry wins")
        return TreePaths.annotation_sub_path(document.annotations, path)

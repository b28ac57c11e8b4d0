"""Pretty-printer for array-form documents."""

import logging
from typing import List, Optional, Sequence

from .models import Comment, Leaf, Node, Section
from .types import InvalidAnnotatedJsonError
from .utils.json_text import JSONText

_quote = JSONText.quote


class ArrayFormFormatter:
    """
    Formats array-form nodes as text.

    The layout is the exact inverse of what the parser accepts for
    round-trip purposes: every scope opens with ``[`` and a line break,
    children sit one indent step deeper than their scope, siblings are
    separated by ``,`` and a line break, and the closing ``]`` lines up
    with the scope's own indentation. Sections keep their opening
    bracket on the same line as the name. Leaf values use regular
    indented JSON, shifted right to the leaf's column.
    """

    def __init__(self, indent: int = 2, line_terminator: str = "\n",
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the formatter.

        Args:
            indent: Spaces per nesting level
            line_terminator: Sequence used for every line break
            logger: Optional logger instance
        """
        self.indent = indent
        self.line_terminator = line_terminator
        self.logger = logger or logging.getLogger(__name__)

    def format(self, nodes: Sequence[Node], indent: Optional[int] = None,
               line_terminator: Optional[str] = None) -> str:
        """
        Format a root scope as text, ending with one line terminator.

        Args:
            nodes: Root scope nodes
            indent: Override for the configured indent step
            line_terminator: Override for the configured line terminator

        Returns:
            Formatted document text
        """
        indent = self.indent if indent is None else indent
        eol = self.line_terminator if line_terminator is None else line_terminator

        text = self._format_scope(nodes, indent, 0, eol) + eol
        self.logger.debug(f"Formatted {len(nodes)} top-level nodes into {len(text)} characters")
        return text

    def _format_scope(self, nodes: Sequence[Node], indent: int, depth: int, eol: str) -> str:
        white = " " * (indent * depth)
        white1 = white + " " * indent

        parts: List[str] = []
        for node in nodes:
            if isinstance(node, Comment):
                # empty comments stand for blank lines in the source
                blank = eol if node.text == "" else ""
                parts.append(blank + white1 + _quote(node.text))
            elif isinstance(node, Section):
                parts.append(white1 + "[" + _quote(node.name) + ", " +
                             self._format_scope(node.children, indent, depth + 1, eol) + "]")
            elif isinstance(node, Leaf):
                try:
                    value = JSONText.dumps(node.value, indent)
                except ValueError as e:
                    raise InvalidAnnotatedJsonError(str(e), context={"depth": depth, "node": node}) from e
                parts.append(white1 + "{" + _quote(node.name) + ": " +
                             value.replace("\n", eol + white1) + "}")
            else:
                raise InvalidAnnotatedJsonError(context={"depth": depth, "node": node})

        return "[" + eol + ("," + eol).join(parts) + eol + white + "]"

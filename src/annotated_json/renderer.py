"""Renderer: zips a data tree and its annotation tree back into array form."""

import logging
from typing import List, Optional

from .models import AnnotatedDocument, AnnotationNode, Comment, Leaf, Node, Section
from .types import DataTree


class AnnotationRenderer:
    """
    Rebuilds array-form nodes from an AnnotatedDocument.

    Order follows the annotation tree. Values always come from the data
    tree, so edits made to it after parsing show up in the output:
    removed keys disappear and new keys are appended as bare leaves.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)

    def render(self, document: AnnotatedDocument) -> List[Node]:
        """
        Render a document into array-form nodes.

        Args:
            document: Parsed (and possibly edited) document

        Returns:
            List of Comment, Section and Leaf nodes for the root scope
        """
        nodes = self._render_scope(document.annotations, document.data, [])
        self.logger.debug(f"Rendered annotated-json document with {len(nodes)} top-level nodes")
        return nodes

    def _render_scope(self, annotations: AnnotationNode, data: DataTree,
                      path: List[str]) -> List[Node]:
        """Workhorse recursive render of one scope."""
        out: List[Node] = [Comment(text) for text in annotations.inner]
        tracked = set(annotations.keys())

        for name, sub in annotations.sub:
            out.extend(Comment(text) for text in sub.pre)

            if name not in data:
                self.logger.debug(f"Dropping {'/'.join(path + [name])}: no longer in data tree")
            elif sub.value or not isinstance(data[name], dict):
                out.append(Leaf(name, data[name]))
            else:
                out.append(Section(name, self._render_scope(sub, data[name], path + [name])))

            out.extend(Comment(text) for text in sub.post)

        added = [name for name in data if name not in tracked]
        for name in added:
            out.append(Leaf(str(name), data[name]))
        if added:
            self.logger.debug(f"Appended {len(added)} untracked keys at "
                              f"{'/'.join(path) or '<root>'}: {added}")

        return out

"""Path helpers for the data tree and the annotation tree."""

from typing import List, Optional, Sequence

from ..models import AnnotationNode
from ..types import DataTree, InvalidAnnotatedJsonError


class TreePaths:
    """Utility class for addressing nodes by key path."""

    @staticmethod
    def append(path: Sequence[str], key: str) -> List[str]:
        """Return a new path with ``key`` appended; ``path`` is left untouched."""
        return list(path) + [key]

    @staticmethod
    def data_sub_path(tree: DataTree, path: Sequence[str]) -> DataTree:
        """
        Return the mapping at ``path``, creating empty mappings for missing segments.

        Args:
            tree: Root of the data tree
            path: Key segments from the root

        Returns:
            The mapping stored at ``path``

        Raises:
            InvalidAnnotatedJsonError: If a segment already holds a non-mapping value
        """
        node = tree
        for depth, key in enumerate(path):
            if key not in node:
                node[key] = {}
            node = node[key]
            if not isinstance(node, dict):
                raise InvalidAnnotatedJsonError(
                    f"section {key!r} collides with an existing value",
                    context={"path": list(path[:depth + 1])}
                )
        return node

    @staticmethod
    def annotation_sub_path(root: AnnotationNode, path: Sequence[str]) -> AnnotationNode:
        """Return the annotation node at ``path``, creating missing nodes on the way."""
        node = root
        for key in path:
            node = node.get_or_insert(key)
        return node

    @staticmethod
    def find_annotation(root: AnnotationNode, path: Sequence[str]) -> Optional[AnnotationNode]:
        """Return the annotation node at ``path`` without creating anything."""
        node: Optional[AnnotationNode] = root
        for key in path:
            node = node.find(key)
            if node is None:
                return None
        return node

"""Annotation tree model."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple


def _comments(data: Dict[str, Any], key: str) -> List[str]:
    comments = data.get(key) or []
    if not isinstance(comments, list) or not all(isinstance(c, str) for c in comments):
        raise ValueError(f"annotation {key!r} must be a list of strings")
    return list(comments)


@dataclass
class AnnotationNode:
    """
    Comment placement and structure recorded for one path of the data tree.

    Children are kept in ``sub`` as ``(key, node)`` pairs in first-seen
    order; that order, not the data tree's, drives rendering.

    ``post`` holds comments trailing this node in its parent scope.
    ``inner`` holds the comments of a scope that contains no nodes, kept
    apart from ``post`` so the two cannot overwrite each other.
    """

    pre: List[str] = field(default_factory=list)
    post: List[str] = field(default_factory=list)
    inner: List[str] = field(default_factory=list)
    value: bool = False
    sub: List[Tuple[str, "AnnotationNode"]] = field(default_factory=list)

    def find(self, key: str) -> Optional["AnnotationNode"]:
        """Return the first child registered under ``key``, if any."""
        for name, node in self.sub:
            if name == key:
                return node
        return None

    def get_or_insert(self, key: str) -> "AnnotationNode":
        """Return the child under ``key``, appending an empty one if missing."""
        node = self.find(key)
        if node is None:
            node = AnnotationNode()
            self.sub.append((key, node))
        return node

    def keys(self) -> List[str]:
        return [name for name, _ in self.sub]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a plain JSON-serializable mapping."""
        result: Dict[str, Any] = {"pre": list(self.pre)}
        if self.post:
            result["post"] = list(self.post)
        if self.inner:
            result["inner"] = list(self.inner)
        if self.value:
            result["value"] = True
        if self.sub:
            result["sub"] = [[name, node.to_dict()] for name, node in self.sub]
        return result

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AnnotationNode":
        """Create an AnnotationNode from the mapping produced by ``to_dict``."""
        if not isinstance(data, dict):
            raise ValueError("annotation node must be a mapping")

        entries = data.get("sub") or []
        if not isinstance(entries, list):
            raise ValueError("annotation children must be a list")

        sub = []
        for entry in entries:
            if not isinstance(entry, (list, tuple)) or len(entry) != 2:
                raise ValueError("annotation children must be [key, node] pairs")
            sub.append((entry[0], cls.from_dict(entry[1])))

        return cls(
            pre=_comments(data, "pre"),
            post=_comments(data, "post"),
            inner=_comments(data, "inner"),
            value=bool(data.get("value", False)),
            sub=sub,
        )

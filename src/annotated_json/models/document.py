"""Parsed document model: a data tree plus its annotation tree."""

from dataclasses import dataclass, field
from typing import Any, Dict

from .annotation import AnnotationNode
from ..types import DataTree


@dataclass
class AnnotatedDocument:
    """
    Result of parsing array-form.

    ``data`` is a plain nested mapping the caller may edit freely.
    ``annotations`` records comments and ordering and is meant to be
    handed back to render untouched.
    """

    data: DataTree = field(default_factory=dict)
    annotations: AnnotationNode = field(default_factory=AnnotationNode)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a plain mapping with ``data`` and ``annotations`` keys."""
        return {
            "data": self.data,
            "annotations": self.annotations.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AnnotatedDocument":
        """
        Create an AnnotatedDocument from a mapping.

        Accepts ``json`` as an alias for ``data``.

        Raises:
            KeyError: If either half of the pair is missing
        """
        tree = data["data"] if "data" in data else data["json"]
        annotations = data["annotations"]
        if not isinstance(annotations, AnnotationNode):
            annotations = AnnotationNode.from_dict(annotations)
        return cls(data=tree, annotations=annotations)

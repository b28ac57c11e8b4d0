"""Data models for annotated-json."""

from .nodes import Comment, Section, Leaf, Node, decode_node, decode_nodes, encode_nodes
from .annotation import AnnotationNode
from .document import AnnotatedDocument

__all__ = [
    "Comment",
    "Section",
    "Leaf",
    "Node",
    "decode_node",
    "decode_nodes",
    "encode_nodes",
    "AnnotationNode",
    "AnnotatedDocument",
]

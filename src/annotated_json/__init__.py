"""
annotated-json - Round-trip codec for comment-annotated JSON arrays.

Splits the array form into an editable data tree plus an annotation tree,
and renders the pair back into byte-identical text.
"""

from .annotated_json import AnnotatedJSON, parse, render, stringify
from .models import AnnotatedDocument, AnnotationNode, Comment, Leaf, Section
from .types import AnnotatedJSONError, InvalidAnnotatedJsonError, InvalidInputError

__version__ = "1.0.0"
__all__ = [
    "AnnotatedJSON",
    "parse",
    "render",
    "stringify",
    "AnnotatedDocument",
    "AnnotationNode",
    "Comment",
    "Leaf",
    "Section",
    "AnnotatedJSONError",
    "InvalidAnnotatedJsonError",
    "InvalidInputError",
]

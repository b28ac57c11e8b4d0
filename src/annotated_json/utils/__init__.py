"""Utility functions for annotated-json."""

from .json_text import JSONText
from .tree_paths import TreePaths

__all__ = ["JSONText", "TreePaths"]

"""Tests for tree path helpers."""

import pytest
from annotated_json.models import AnnotationNode
from annotated_json.types import InvalidAnnotatedJsonError
from annotated_json.utils import TreePaths


class TestTreePaths:
    """Tests for TreePaths utility class."""

    def test_append_does_not_mutate(self):
        path = ["a"]
        extended = TreePaths.append(path, "b")

        assert extended == ["a", "b"]
        assert path == ["a"]

    def test_data_sub_path_creates_intermediates(self):
        tree = {}
        node = TreePaths.data_sub_path(tree, ["a", "b"])
        node["c"] = 1

        assert tree == {"a": {"b": {"c": 1}}}

    def test_data_sub_path_keeps_existing(self):
        tree = {"a": {"x": 1}}
        TreePaths.data_sub_path(tree, ["a"])["y"] = 2

        assert tree == {"a": {"x": 1, "y": 2}}

    def test_data_sub_path_root(self):
        tree = {"a": 1}
        assert TreePaths.data_sub_path(tree, []) is tree

    def test_data_sub_path_rejects_non_mapping(self):
        tree = {"a": {"b": 5}}

        with pytest.raises(InvalidAnnotatedJsonError, match="collides") as exc:
            TreePaths.data_sub_path(tree, ["a", "b", "c"])

        assert exc.value.context["path"] == ["a", "b"]

    def test_annotation_sub_path_is_idempotent(self):
        root = AnnotationNode()
        first = TreePaths.annotation_sub_path(root, ["a", "b"])
        first.pre = ["note"]
        second = TreePaths.annotation_sub_path(root, ["a", "b"])

        assert first is second
        assert root.keys() == ["a"]
        assert root.find("a").keys() == ["b"]

    def test_find_annotation(self):
        root = AnnotationNode()
        target = TreePaths.annotation_sub_path(root, ["a", "b"])

        assert TreePaths.find_annotation(root, ["a", "b"]) is target
        assert TreePaths.find_annotation(root, []) is root
        assert TreePaths.find_annotation(root, ["a", "missing"]) is None
        assert root.find("a").keys() == ["b"]

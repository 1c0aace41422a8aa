"""Shared fixtures for the texttree test suite."""

from __future__ import annotations

import pytest

from texttree import TreeNode


def make_family_tree() -> TreeNode:
    return TreeNode.with_children(
        "root",
        [
            "Uncle",
            TreeNode.with_children(
                "Parent",
                [
                    TreeNode.with_children("Child 1", ["Grand Child 1"]),
                    TreeNode.with_children(
                        "Child 2",
                        [
                            TreeNode.with_children(
                                "Grand Child 2",
                                [
                                    TreeNode.with_children(
                                        "Great Grand Child 2",
                                        ["Great Great Grand Child 2"],
                                    )
                                ],
                            )
                        ],
                    ),
                ],
            ),
            TreeNode.with_children("Aunt", ["Child 3"]),
        ],
    )


@pytest.fixture
def family_tree() -> TreeNode:
    """The documentation example tree."""
    return make_family_tree()


@pytest.fixture
def small_tree() -> TreeNode:
    """root -> A (A1, A2), B (B1)."""
    return TreeNode.with_children(
        "root",
        [
            TreeNode.with_children("A", ["A1", "A2"]),
            TreeNode.with_children("B", ["B1"]),
        ],
    )


@pytest.fixture
def multiline_tree() -> TreeNode:
    """Two multi-line nodes with children, one open and one last."""
    return TreeNode.with_children(
        "root",
        [
            TreeNode.with_children("Parent\nline two", ["Child"]),
            TreeNode.with_children("Aunt\nsecond", ["Child 3"]),
        ],
    )

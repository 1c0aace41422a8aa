from .core import Anchor, GlyphSet, TreeFormatting
from .node import LabeledNode, TreeNode
from .renderer import RenderResult, TreeRenderer, render, render_lines, to_string
from .sink import WriteResult, print_tree, write_tree

__all__ = [
    "Anchor",
    "GlyphSet",
    "TreeFormatting",
    "LabeledNode",
    "TreeNode",
    "TreeRenderer",
    "RenderResult",
    "WriteResult",
    "render",
    "render_lines",
    "to_string",
    "write_tree",
    "print_tree",
]

from .tree_components import (
    Anchor,
    GlyphSet,
    LabeledNode,
    RenderResult,
    TreeFormatting,
    TreeNode,
    TreeRenderer,
    WriteResult,
    print_tree,
    render,
    render_lines,
    to_string,
    write_tree,
)

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

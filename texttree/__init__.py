from .text_tree import *
from .errors import *

__version__ = "0.1.0"
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
    "TextTreeError",
    "InvalidFormatError",
    "WriteError",
]

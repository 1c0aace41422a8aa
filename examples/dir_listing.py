import os
import sys
from pathlib import Path

from texttree.text_tree import GlyphSet, TreeFormatting, TreeNode, write_tree

P_HOME = "🏠"
P_FOLDER = "📁"
P_FILE = "📄"
P_LINK = "🔗"
P_GONE = "☠️"


class FSEntry:
    def __init__(self, path: Path) -> None:
        self.path = path

    def __str__(self) -> str:
        name = self.path.name or str(self.path)
        if self.path.is_symlink():
            return f"{P_LINK} {name}"
        if self.path.is_file():
            return f"{P_FILE} {name}"
        if self.path.is_dir():
            home = os.environ.get("HOME")
            if home and self.path.resolve() == Path(home).resolve():
                return f"{P_HOME} {name}"
            return f"{P_FOLDER} {name}"
        return f"{P_GONE} {name}"


def make_dir_tree(path: Path) -> TreeNode:
    node = TreeNode(FSEntry(path))
    if path.is_dir() and not path.is_symlink():
        for entry in sorted(path.iterdir()):
            node.add_node(make_dir_tree(entry))
    return node


def main() -> None:
    target = Path(sys.argv[1]) if len(sys.argv) > 1 else Path(".")
    tree = make_dir_tree(target)
    write_tree(tree, sys.stdout, TreeFormatting.dir_tree(GlyphSet.box_chars()), max_lines=200)


if __name__ == "__main__":
    main()

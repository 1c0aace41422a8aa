from rich import print

from texttree.text_tree import GlyphSet, TreeFormatting, TreeNode, to_string


def build_family() -> TreeNode:
    root = TreeNode("root")
    root.add("Uncle")
    parent = root.add("Parent")
    parent.add("Child 1").add("Grand Child 1")
    parent.add("Child 2").add("Grand Child 2").add("Great Grand Child 2").add(
        "Great Great Grand Child 2"
    )
    root.add("Aunt").add("Child 3")
    return root


def main() -> None:
    tree = build_family()
    for formatting in (
        TreeFormatting.dir_tree(GlyphSet.ascii()),
        TreeFormatting.dir_tree(GlyphSet.box_chars()),
        TreeFormatting.dir_tree_left(GlyphSet.box_chars()),
    ):
        print(to_string(tree, formatting), end="\n\n")


if __name__ == "__main__":
    main()

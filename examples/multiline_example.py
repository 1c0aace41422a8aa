from rich.console import Console

from texttree.text_tree import Anchor, TreeFormatting, TreeNode, print_tree


def main() -> None:
    service = TreeNode.with_children(
        "api-gateway\nport 8080\nstatus: healthy",
        [
            TreeNode.with_children("worker-pool\n4 workers", ["queue: jobs", "queue: retries"]),
            TreeNode.with_children("data-store\npostgres 16", ["replica-a", "replica-b"]),
        ],
    )

    console = Console()
    for anchor in Anchor:
        console.rule(f"anchor={anchor.value}")
        print_tree(service, TreeFormatting(glyphs="box", anchor=anchor), console=console)


if __name__ == "__main__":
    main()

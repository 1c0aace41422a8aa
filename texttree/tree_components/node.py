from typing import Any, Generic, Iterable, List, Protocol, Sequence, TypeVar, Union


T = TypeVar("T")


class LabeledNode(Protocol):
    """Anything the renderer can lay out: label lines plus ordered children."""

    @property
    def lines(self) -> Sequence[str]:
        ...

    @property
    def children(self) -> Sequence["LabeledNode"]:
        ...


class TreeNode(Generic[T]):
    def __init__(self, value: T, children: Iterable[Union["TreeNode", Any]] = ()) -> None:
        self.value = value
        self.children: List["TreeNode"] = []
        self.extend(children)

    @classmethod
    def with_children(
        cls, value: T, children: Iterable[Union["TreeNode", Any]]
    ) -> "TreeNode[T]":
        return cls(value, children)

    @property
    def label(self) -> str:
        return str(self.value)

    @property
    def lines(self) -> List[str]:
        return self.label.splitlines() or [""]

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def add(self, value: Any) -> "TreeNode":
        child = TreeNode(value)
        self.children.append(child)
        return child

    def add_node(self, node: "TreeNode") -> "TreeNode":
        if node is self:
            raise ValueError("A node cannot be its own child.")
        self.children.append(node)
        return node

    def extend(self, children: Iterable[Union["TreeNode", Any]]) -> "TreeNode[T]":
        for child in children:
            if isinstance(child, TreeNode):
                self.add_node(child)
            else:
                self.add(child)
        return self

    def render(self, formatting=None, *, max_lines=None):
        from .renderer import render

        return render(self, formatting, max_lines=max_lines)

    def to_string(self, formatting=None) -> str:
        from .renderer import to_string

        return to_string(self, formatting)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TreeNode):
            return NotImplemented
        pending = [(self, other)]
        while pending:
            left, right = pending.pop()
            if left is right:
                continue
            if left.value != right.value or len(left.children) != len(right.children):
                return False
            pending.extend(zip(left.children, right.children))
        return True

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"TreeNode({self.value!r}, children={len(self.children)})"

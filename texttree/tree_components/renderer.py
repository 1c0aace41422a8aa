import logging
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

from .core import Anchor, TreeFormatting
from .node import LabeledNode

logger = logging.getLogger(__name__)


@dataclass
class RenderResult:

    lines: List[str] = field(default_factory=list)
    truncated: bool = False

    @property
    def complete(self) -> bool:
        return not self.truncated

    @property
    def line_count(self) -> int:
        return len(self.lines)

    @property
    def text(self) -> str:
        return "\n".join(self.lines)

    def __str__(self) -> str:
        return self.text


def resolve_limit(max_lines: Optional[int]) -> Optional[int]:
    if max_lines is None:
        return None
    return max(0, max_lines)


class TreeRenderer:
    """Lays out a node tree as directory-listing style text.

    Traversal is depth-first pre-order over an explicit stack. Each stack entry
    carries the "open" flag of every non-root ancestor: open ancestors still
    have a sibling below them and draw a vertical rail, closed ones draw
    blanks.
    """

    def __init__(self, formatting: Optional[TreeFormatting] = None) -> None:
        self.formatting = formatting or TreeFormatting.dir_tree()

    def iter_lines(self, node: LabeledNode) -> Iterator[str]:
        # (node, ancestor open flags, is_last); is_last is None for the root
        stack: List[Tuple[LabeledNode, Tuple[bool, ...], Optional[bool]]] = [(node, (), None)]
        while stack:
            current, ancestry, is_last = stack.pop()
            yield from self._node_lines(current, ancestry, is_last)

            children = list(current.children)
            if not children:
                continue
            child_ancestry = ancestry if is_last is None else ancestry + (not is_last,)
            last_index = len(children) - 1
            for index in range(last_index, -1, -1):
                stack.append((children[index], child_ancestry, index == last_index))

    def render(self, node: LabeledNode, *, max_lines: Optional[int] = None) -> RenderResult:
        limit = resolve_limit(max_lines)
        result = RenderResult()
        for line in self.iter_lines(node):
            if limit is not None and len(result.lines) >= limit:
                result.truncated = True
                logger.debug("Rendering stopped at %d lines", limit)
                break
            result.lines.append(line)
        return result

    def _node_lines(
        self, node: LabeledNode, ancestry: Tuple[bool, ...], is_last: Optional[bool]
    ) -> Iterator[str]:
        fmt = self.formatting
        texts = list(node.lines) or [""]
        has_children = bool(node.children)
        lead = fmt.prefix + "".join(fmt.rail(is_open) for is_open in ancestry)
        gap = fmt.label_gap

        if is_last is None:
            if fmt.anchor is Anchor.BOTTOM and has_children:
                yield f"{lead}{fmt.root_mark()}{gap}{texts[0]}"
                for text in texts[1:]:
                    yield f"{lead}{fmt.blank()}{gap}{text}"
            else:
                for text in texts:
                    yield lead + text
            return

        first = fmt.connector(is_last)
        rest = fmt.rail(not is_last)
        if fmt.anchor is Anchor.BOTTOM:
            # only the first line carries the branch point toward the children
            first += fmt.junction(has_children)
            rest += fmt.blank()

        yield f"{lead}{first}{gap}{texts[0]}"
        for text in texts[1:]:
            yield f"{lead}{rest}{gap}{text}"


def render(
    node: LabeledNode,
    formatting: Optional[TreeFormatting] = None,
    *,
    max_lines: Optional[int] = None,
) -> RenderResult:
    return TreeRenderer(formatting).render(node, max_lines=max_lines)


def render_lines(node: LabeledNode, formatting: Optional[TreeFormatting] = None) -> List[str]:
    return list(TreeRenderer(formatting).iter_lines(node))


def to_string(
    node: LabeledNode,
    formatting: Optional[TreeFormatting] = None,
    *,
    max_lines: Optional[int] = None,
) -> str:
    return render(node, formatting, max_lines=max_lines).text

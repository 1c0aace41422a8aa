import logging
import os
from dataclasses import dataclass
from typing import Callable, Optional

from rich.console import Console

from ..errors import WriteError
from .core import TreeFormatting
from .node import LabeledNode
from .renderer import TreeRenderer, resolve_limit

logger = logging.getLogger(__name__)


@dataclass
class WriteResult:
    line_count: int = 0
    truncated: bool = False

    @property
    def complete(self) -> bool:
        return not self.truncated


def _console_writer(console: Console) -> Callable[[str], None]:
    def emit(line: str) -> None:
        console.print(
            line,
            markup=False,
            highlight=False,
            emoji=False,
            crop=False,
            soft_wrap=True,
        )

    return emit


def _stream_writer(stream) -> Callable[[str], None]:
    def emit(line: str) -> None:
        stream.write(line)
        stream.write("\n")

    return emit


def _stream(
    node: LabeledNode,
    emit: Callable[[str], None],
    formatting: Optional[TreeFormatting],
    max_lines: Optional[int],
) -> WriteResult:
    limit = resolve_limit(max_lines)
    result = WriteResult()
    for line in TreeRenderer(formatting).iter_lines(node):
        if limit is not None and result.line_count >= limit:
            result.truncated = True
            logger.debug("Writing stopped at %d lines", limit)
            break
        try:
            emit(line)
        except Exception as exc:
            logger.debug("Sink rejected line %d: %s", result.line_count + 1, exc)
            raise WriteError(
                f"Failed to write tree line {result.line_count + 1}: {exc}"
            ) from exc
        result.line_count += 1
    return result


def write_tree(
    node: LabeledNode,
    sink,
    formatting: Optional[TreeFormatting] = None,
    *,
    max_lines: Optional[int] = None,
) -> WriteResult:
    """Stream the rendered tree to ``sink`` one line at a time.

    ``sink`` may be a rich ``Console``, a filesystem path, a text stream with
    ``write`` or a callable taking each line. Any exception raised by the sink
    while writing is re-raised as ``WriteError`` chained to the original;
    lines already written are left in place.
    """
    if isinstance(sink, Console):
        return _stream(node, _console_writer(sink), formatting, max_lines)

    if isinstance(sink, (str, os.PathLike)):
        try:
            with open(sink, "w", encoding="utf-8") as handle:
                return _stream(node, _stream_writer(handle), formatting, max_lines)
        except OSError as exc:
            raise WriteError(f"Failed to write tree to {os.fspath(sink)}: {exc}") from exc

    if hasattr(sink, "write"):
        result = _stream(node, _stream_writer(sink), formatting, max_lines)
        flush = getattr(sink, "flush", None)
        if flush is not None:
            try:
                flush()
            except (OSError, ValueError) as exc:
                raise WriteError(f"Failed to flush tree output: {exc}") from exc
        return result

    if callable(sink):
        return _stream(node, sink, formatting, max_lines)

    raise TypeError("sink must be a Console, a path, a writable stream or a callable")


def print_tree(
    node: LabeledNode,
    formatting: Optional[TreeFormatting] = None,
    *,
    console: Optional[Console] = None,
    max_lines: Optional[int] = None,
) -> WriteResult:
    if console is None:
        console = Console()
    return write_tree(node, console, formatting, max_lines=max_lines)

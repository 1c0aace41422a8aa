from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union

from wcwidth import wcwidth

from ..errors import InvalidFormatError


class Anchor(Enum):

    TOP = "top"
    BOTTOM = "bottom"


def _char_width(char: str) -> int:
    return max(wcwidth(char), 1)


def _display_width(text: str) -> int:
    return sum(_char_width(char) for char in text)


def _fit(text: str, width: int, pad: str = " ") -> str:
    """Cut ``text`` to ``width`` display columns, padding with ``pad``."""
    parts = []
    used = 0
    for char in text:
        char_width = _char_width(char)
        if used + char_width > width:
            break
        parts.append(char)
        used += char_width
    return "".join(parts) + pad * (width - used)


@dataclass(frozen=True)
class GlyphSet:
    """Connector glyphs.

    ``branch``, ``corner``, ``vertical`` and ``fill`` are required. The
    down-facing glyphs mark where children leave a node under the bottom
    anchor and fall back to ``vertical`` when unset. ``space`` pads columns
    and ``label_gap`` separates connectors from label text.
    """

    branch: str = "+"
    corner: str = "'"
    vertical: str = "|"
    fill: str = "--"
    down_tee: Optional[str] = None
    down_angle: Optional[str] = None
    space: str = " "
    label_gap: str = " "

    def __post_init__(self) -> None:
        for name in ("branch", "corner", "vertical", "fill", "down_tee", "down_angle", "space", "label_gap"):
            value = getattr(self, name)
            if value is None and name in ("down_tee", "down_angle"):
                continue
            if not isinstance(value, str):
                raise InvalidFormatError(f"{name} glyph must be a string.")
            if not value:
                raise InvalidFormatError(f"{name} glyph must not be empty.")
            if "\n" in value or "\r" in value:
                raise InvalidFormatError(f"{name} glyph must not contain line breaks.")
        if len(self.space) != 1 or _char_width(self.space) != 1:
            raise InvalidFormatError("space glyph must be a single one-column character.")

    @classmethod
    def ascii(cls) -> "GlyphSet":
        return cls(down_tee=",", down_angle="+")

    @classmethod
    def box_chars(cls) -> "GlyphSet":
        return cls(
            branch="├",
            corner="└",
            vertical="│",
            fill="──",
            down_tee="┬",
            down_angle="┌",
        )

    @classmethod
    def for_style(cls, style: str) -> "GlyphSet":
        key = style.lower().strip()
        if key in {"ascii", "plain"}:
            return cls.ascii()
        if key in {"box", "line", "unicode"}:
            return cls.box_chars()
        raise InvalidFormatError(f"Unknown glyph style: {style}")


@dataclass(frozen=True)
class TreeFormatting:
    """Glyphs, anchor policy and column width used to lay out a tree.

    ``indent_width`` is the number of display columns taken by every
    connector arm and every ancestor column. ``prefix`` is written before
    each output line.
    """

    glyphs: Union[GlyphSet, str] = field(default_factory=GlyphSet.ascii)
    anchor: Union[Anchor, str] = Anchor.TOP
    indent_width: int = 3
    prefix: str = ""

    def __post_init__(self) -> None:
        glyphs = self.glyphs
        if isinstance(glyphs, str):
            glyphs = GlyphSet.for_style(glyphs)
        elif not isinstance(glyphs, GlyphSet):
            raise InvalidFormatError("glyphs must be a GlyphSet instance or a style name.")
        object.__setattr__(self, "glyphs", glyphs)

        anchor = self.anchor
        if not isinstance(anchor, Anchor):
            try:
                anchor = Anchor(str(anchor).lower().strip())
            except ValueError as exc:
                raise InvalidFormatError(f"Unknown anchor: {self.anchor}") from exc
        object.__setattr__(self, "anchor", anchor)

        if isinstance(self.indent_width, bool) or not isinstance(self.indent_width, int):
            raise InvalidFormatError("indent_width must be an integer.")
        if self.indent_width < 1:
            raise InvalidFormatError("indent_width must be at least 1.")

        if not isinstance(self.prefix, str):
            raise InvalidFormatError("prefix must be a string.")
        if "\n" in self.prefix or "\r" in self.prefix:
            raise InvalidFormatError("prefix must not contain line breaks.")

        for name in ("branch", "corner", "vertical"):
            if _char_width(getattr(glyphs, name)[0]) > self.indent_width:
                raise InvalidFormatError(
                    f"{name} glyph is wider than indent_width={self.indent_width}."
                )
        if anchor is Anchor.BOTTOM:
            for name, value in (
                ("down_tee", self.down_tee),
                ("down_angle", self.down_angle),
                ("fill", glyphs.fill),
            ):
                if _char_width(value[0]) > 1:
                    raise InvalidFormatError(f"{name} glyph must fit in one column.")

    @classmethod
    def dir_tree(cls, glyphs: Union[GlyphSet, str, None] = None) -> "TreeFormatting":
        return cls(glyphs=glyphs or GlyphSet.ascii(), anchor=Anchor.TOP, indent_width=3)

    @classmethod
    def dir_tree_left(cls, glyphs: Union[GlyphSet, str, None] = None) -> "TreeFormatting":
        return cls(glyphs=glyphs or GlyphSet.ascii(), anchor=Anchor.BOTTOM, indent_width=3)

    @property
    def down_tee(self) -> str:
        return self.glyphs.down_tee or self.glyphs.vertical

    @property
    def down_angle(self) -> str:
        return self.glyphs.down_angle or self.glyphs.vertical

    @property
    def label_gap(self) -> str:
        return self.glyphs.label_gap

    def blank(self, width: int = 1) -> str:
        return self.glyphs.space * width

    def connector(self, is_last: bool) -> str:
        head = self.glyphs.corner if is_last else self.glyphs.branch
        arm = head
        while _display_width(arm) < self.indent_width:
            arm += self.glyphs.fill
        return _fit(arm, self.indent_width, self.glyphs.space)

    def rail(self, is_open: bool) -> str:
        if is_open:
            return _fit(self.glyphs.vertical, self.indent_width, self.glyphs.space)
        return self.blank(self.indent_width)

    def junction(self, has_children: bool) -> str:
        if has_children:
            return _fit(self.down_tee, 1, self.glyphs.space)
        return _fit(self.glyphs.fill, 1, self.glyphs.space)

    def root_mark(self) -> str:
        return _fit(self.down_angle, 1, self.glyphs.space)

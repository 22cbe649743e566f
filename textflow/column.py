"""Single-column word wrapping.

A Column owns one block of text, split into paragraphs at embedded
newlines, together with a width and indents. Iterating a Column yields its
wrapped lines lazily; every iteration starts from the top with its own
cursor, so a Column can be walked any number of times.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Optional, TextIO

from .breaks import is_whitespace, measure_line
from .constants import LayoutConstants

logger = logging.getLogger(__name__)


class LayoutError(ValueError):
    """Raised when a block is configured so that it cannot be laid out."""


@dataclass
class CursorPosition:
    paragraph_index: int = 0
    character_index: int = 0

    def __lt__(self, other):
        if self.paragraph_index != other.paragraph_index:
            return self.paragraph_index < other.paragraph_index
        return self.character_index < other.character_index

    def __ge__(self, other):
        return not self < other


def write_lines(lines: Iterable[str], stream: TextIO) -> None:
    """Write lines to stream separated by newlines, without a trailing one."""
    first = True
    for line in lines:
        if first:
            first = False
        else:
            stream.write("\n")
        stream.write(line)


class ColumnIterator:
    """Forward-only cursor over the wrapped lines of a Column."""

    def __init__(self, column: "Column"):
        column.validate()
        self._column = column
        self._paragraphs = column.paragraphs
        self._end = CursorPosition(len(self._paragraphs), 0)
        self.position = CursorPosition()
        self._length = 0
        self._needs_hyphen = False
        # An entirely empty text still renders as one blank line
        self._blank_pending = self._paragraphs == ("",)
        self._settle()

    def __iter__(self):
        return self

    def __next__(self) -> str:
        if self._blank_pending:
            self._blank_pending = False
            return ""
        if self.at_end():
            raise StopIteration
        line = self._render()
        self._advance()
        return line

    def at_end(self) -> bool:
        return not self._blank_pending and self.position >= self._end

    def _paragraph(self) -> str:
        return self._paragraphs[self.position.paragraph_index]

    def _current_indent(self) -> int:
        initial = self._column.initial_indent
        if initial is not None and self.position == CursorPosition(0, 0):
            return initial
        return self._column.indent

    def _render(self) -> str:
        start = self.position.character_index
        text = self._paragraph()[start:start + self._length]
        if self._needs_hyphen:
            text += LayoutConstants.HYPHEN
        return " " * self._current_indent() + text

    def _measure(self) -> None:
        paragraph = self._paragraph()
        pos = self.position.character_index
        budget = self._column.width - self._current_indent()
        self._length, self._needs_hyphen = measure_line(paragraph, pos, budget)
        if self._needs_hyphen:
            if self._length <= 0:
                raise LayoutError(
                    LayoutConstants.NO_ROOM_FOR_HYPHEN_MESSAGE.format(paragraph[pos:], budget)
                )
            logger.debug(f"Hyphenating paragraph {self.position.paragraph_index} at offset {pos}")

    def _settle(self) -> None:
        """Skip exhausted and empty paragraphs, then measure the next line."""
        while self.position < self._end:
            if self.position.character_index < len(self._paragraph()):
                self._measure()
                return
            self.position = CursorPosition(self.position.paragraph_index + 1, 0)

    def _advance(self) -> None:
        paragraph = self._paragraph()
        pos = self.position.character_index + self._length
        # Whitespace between lines is consumed, never emitted
        while pos < len(paragraph) and is_whitespace(paragraph[pos]):
            pos += 1
        self.position = CursorPosition(self.position.paragraph_index, pos)
        self._settle()


class Column:
    """A block of text wrapped to a fixed width.

    Configuration setters return the column so calls can be chained:

        Column("some text").set_width(20).set_indent(2)
    """

    def __init__(self, text: str):
        self._paragraphs: tuple[str, ...] = tuple(text.split("\n"))
        self._width: int = LayoutConstants.DEFAULT_WIDTH
        self._indent: int = 0
        self._initial_indent: Optional[int] = None

    @property
    def paragraphs(self) -> tuple[str, ...]:
        return self._paragraphs

    @property
    def width(self) -> int:
        return self._width

    @property
    def indent(self) -> int:
        return self._indent

    @property
    def initial_indent(self) -> Optional[int]:
        return self._initial_indent

    def set_width(self, width: int) -> "Column":
        if width <= 0:
            raise LayoutError(LayoutConstants.WIDTH_NOT_POSITIVE_MESSAGE.format(width))
        self._width = width
        return self

    def set_indent(self, indent: int) -> "Column":
        if indent < 0:
            raise LayoutError(LayoutConstants.NEGATIVE_INDENT_MESSAGE.format("Indent", indent))
        self._indent = indent
        return self

    def set_initial_indent(self, initial_indent: Optional[int]) -> "Column":
        """Set the indent of the first line only; None falls back to indent."""
        if initial_indent is not None and initial_indent < 0:
            raise LayoutError(
                LayoutConstants.NEGATIVE_INDENT_MESSAGE.format("Initial indent", initial_indent)
            )
        self._initial_indent = initial_indent
        return self

    def validate(self) -> None:
        """Check that both indents leave room for text within the width."""
        checks = [("indent", self._indent)]
        if self._initial_indent is not None:
            checks.append(("initial indent", self._initial_indent))
        for name, value in checks:
            if self._width <= value:
                logger.debug(f"Rejecting column layout: width {self._width}, {name} {value}")
                raise LayoutError(
                    LayoutConstants.INDENT_TOO_WIDE_MESSAGE.format(self._width, name, value)
                )

    def __iter__(self) -> ColumnIterator:
        return ColumnIterator(self)

    def lines(self) -> list[str]:
        return list(self)

    def line_count(self) -> int:
        return sum(1 for _ in self)

    def write_to(self, stream: TextIO) -> None:
        write_lines(self, stream)

    def __str__(self) -> str:
        return "\n".join(self)

    def __repr__(self) -> str:
        return (
            f"Column(paragraphs={self._paragraphs!r}, width={self._width}, "
            f"indent={self._indent}, initial_indent={self._initial_indent})"
        )

    def __add__(self, other):
        from .columns import Columns
        return Columns([self]).__add__(other)

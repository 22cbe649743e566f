"""Side-by-side layout of wrapped columns.

Columns combines Column and Spacer blocks into rows. Row i holds the i-th
line of every block, each padded to its block's width so that later blocks
stay aligned even after a shorter block has run out of lines.
"""

from typing import Iterable, Iterator, Optional, TextIO, Union

from .column import Column, LayoutError, write_lines
from .constants import LayoutConstants


class Spacer:
    """A fixed-width run of blank columns, one empty line tall.

    Past its single line a spacer keeps padding every row to its width.
    """

    def __init__(self, width: int):
        if width < 0:
            raise LayoutError(
                LayoutConstants.NEGATIVE_INDENT_MESSAGE.format("Spacer width", width)
            )
        self._width = width

    @property
    def width(self) -> int:
        return self._width

    def __iter__(self) -> Iterator[str]:
        yield ""

    def line_count(self) -> int:
        return 1

    def __repr__(self) -> str:
        return f"Spacer({self._width})"

    def __add__(self, other):
        return Columns([self]).__add__(other)


Block = Union[Column, Spacer]


def _merge_row(cells: list[tuple[Optional[str], int]]) -> str:
    """Join one row of (line, width) cells; line is None past a block's end.

    Empty and missing lines both become padding, which is only written
    when text follows it, so rows carry no trailing blanks.
    """
    row = []
    padding = ""
    for line, width in cells:
        if not line:
            padding += " " * width
            continue
        row.append(padding)
        row.append(line)
        padding = " " * (width - len(line)) if len(line) < width else ""
    return "".join(row)


class Columns:
    """An ordered, flat sequence of blocks laid out left to right."""

    def __init__(self, blocks: Optional[Iterable[Block]] = None):
        self._blocks: list[Block] = []
        for block in blocks or []:
            self._append(block)

    @property
    def blocks(self) -> tuple[Block, ...]:
        return tuple(self._blocks)

    @property
    def width(self) -> int:
        return sum(block.width for block in self._blocks)

    def _append(self, block) -> None:
        if isinstance(block, Columns):
            self._blocks.extend(block._blocks)
        elif isinstance(block, (Column, Spacer)):
            self._blocks.append(block)
        else:
            raise TypeError(f"Cannot lay out {type(block).__name__} as a column")

    def __add__(self, other):
        if not isinstance(other, (Columns, Column, Spacer)):
            return NotImplemented
        combined = Columns(self._blocks)
        combined._append(other)
        return combined

    def __iadd__(self, other):
        if not isinstance(other, (Columns, Column, Spacer)):
            return NotImplemented
        self._append(other)
        return self

    def __iter__(self) -> Iterator[str]:
        cursors = [iter(block) for block in self._blocks]
        widths = [block.width for block in self._blocks]
        while True:
            lines = [next(cursor, None) for cursor in cursors]
            if all(line is None for line in lines):
                return
            yield _merge_row(list(zip(lines, widths)))

    def lines(self) -> list[str]:
        return list(self)

    def line_count(self) -> int:
        return max((block.line_count() for block in self._blocks), default=0)

    def write_to(self, stream: TextIO) -> None:
        write_lines(self, stream)

    def __str__(self) -> str:
        return "\n".join(self)

    def __repr__(self) -> str:
        return f"Columns({self._blocks!r})"

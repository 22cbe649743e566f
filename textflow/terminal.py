"""Console output for laid-out text using Blessed."""

import logging
import sys
from typing import Optional, TextIO, Union

import blessed

from .column import Column
from .columns import Columns, Spacer
from .constants import LayoutConstants

logger = logging.getLogger(__name__)


def terminal_width(terminal: Optional[blessed.Terminal] = None) -> int:
    """Return the terminal width in columns, or a fallback if it is unknown."""
    term = terminal or blessed.Terminal()
    try:
        width = term.width
    except (OSError, ValueError) as e:
        logger.warning(f"Could not read terminal size: {e}")
        return LayoutConstants.CONSOLE_FALLBACK_WIDTH
    if not width or width <= 1:
        logger.warning(
            f"Terminal reported width {width!r}, using {LayoutConstants.CONSOLE_FALLBACK_WIDTH}"
        )
        return LayoutConstants.CONSOLE_FALLBACK_WIDTH
    return width


def fit_to_terminal(column: Column, terminal: Optional[blessed.Terminal] = None) -> Column:
    """Wrap column one short of the terminal width so lines never auto-wrap."""
    return column.set_width(terminal_width(terminal) - 1)


def echo(block: Union[Column, Columns, Spacer], file: Optional[TextIO] = None) -> None:
    """Print each line of a laid-out block."""
    out = file or sys.stdout
    for line in block:
        print(line, file=out)

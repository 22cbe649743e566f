"""textflow - Word wrapping and side-by-side column layout for plain text."""

from .column import Column, ColumnIterator, CursorPosition, LayoutError
from .columns import Columns, Spacer
from .constants import LayoutConstants

__all__ = [
    'Column',
    'ColumnIterator',
    'Columns',
    'CursorPosition',
    'LayoutConstants',
    'LayoutError',
    'Spacer',
]

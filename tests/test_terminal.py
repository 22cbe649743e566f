"""Tests for the console output helpers."""

import io
import logging
from unittest.mock import Mock, PropertyMock

from textflow import Column, Spacer
from textflow.terminal import echo, fit_to_terminal, terminal_width


def create_mock_terminal(width):
    term = Mock()
    term.width = width
    return term


def test_terminal_width_reads_blessed_terminal():
    assert terminal_width(create_mock_terminal(120)) == 120


def test_terminal_width_falls_back_when_unknown(caplog):
    with caplog.at_level(logging.WARNING, logger="textflow.terminal"):
        assert terminal_width(create_mock_terminal(0)) == 80
    assert "width" in caplog.text


def test_terminal_width_falls_back_on_os_error(caplog):
    term = Mock()
    type(term).width = PropertyMock(side_effect=OSError("not a tty"))
    with caplog.at_level(logging.WARNING, logger="textflow.terminal"):
        assert terminal_width(term) == 80
    assert "not a tty" in caplog.text


def test_fit_to_terminal_leaves_last_column_free():
    col = Column("some text")
    assert fit_to_terminal(col, create_mock_terminal(50)) is col
    assert col.width == 49


def test_echo_prints_each_line():
    buf = io.StringIO()
    echo(Column("alpha beta").set_width(6), file=buf)
    assert buf.getvalue() == "alpha\nbeta\n"


def test_echo_combined_layout():
    buf = io.StringIO()
    echo(Column("a b").set_width(2) + Spacer(1) + Column("c").set_width(2), file=buf)
    assert buf.getvalue() == "a  c\nb\n"

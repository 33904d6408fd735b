"""Wrap strategies: the fragments written before and after another fragment."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO


@dataclass(frozen=True)
class NoWrap:
    """Pass-through: nothing before, nothing after."""


@dataclass(frozen=True)
class Delimited:
    """Fixed opening and closing text, e.g. double quotes."""

    open: str
    close: str


@dataclass(frozen=True)
class FunctionCallWrap:
    """Function-call syntax: ``name(`` ... ``)``."""

    name: str


Wrap = NoWrap | Delimited | FunctionCallWrap

NO_WRAP = NoWrap()
DOUBLE_QUOTE = Delimited(open='"', close='"')


def quote_wrap(case_sensitive: bool) -> Wrap:
    """Identifiers are quoted only in case-sensitive mode."""
    return DOUBLE_QUOTE if case_sensitive else NO_WRAP


def aggregate_wrap(aggregate: str | None) -> Wrap:
    """Wrap in a function call when an aggregate name is present."""
    return FunctionCallWrap(name=aggregate) if aggregate else NO_WRAP


def write_open(buf: StringIO, wrap: Wrap) -> None:
    match wrap:
        case NoWrap():
            pass
        case Delimited(open=text):
            buf.write(text)
        case FunctionCallWrap(name=name):
            buf.write(name)
            buf.write("(")
        case _:
            raise ValueError(f"Unknown wrap strategy: {type(wrap).__name__}")


def write_close(buf: StringIO, wrap: Wrap) -> None:
    match wrap:
        case NoWrap():
            pass
        case Delimited(close=text):
            buf.write(text)
        case FunctionCallWrap():
            buf.write(")")
        case _:
            raise ValueError(f"Unknown wrap strategy: {type(wrap).__name__}")

"""Composable text emitters. Every emitter renders itself into a shared buffer."""

from __future__ import annotations

from dataclasses import dataclass, field
from io import StringIO
from typing import Protocol

from starsql.emit.wrap import NO_WRAP, Wrap, write_close, write_open

INDENT_UNIT = "    "


class Emitter(Protocol):
    def write(self, buf: StringIO) -> None: ...


@dataclass(frozen=True)
class Text:
    """Literal text."""

    text: str

    def write(self, buf: StringIO) -> None:
        buf.write(self.text)


@dataclass(frozen=True)
class Wrapped:
    """Another emitter surrounded by a wrap strategy."""

    wrap: Wrap
    content: Emitter

    def write(self, buf: StringIO) -> None:
        write_wrapped(buf, self.wrap, self.content)


@dataclass(frozen=True)
class Identifier:
    """``namespace.identifier``, or the bare identifier without a namespace.

    Namespace and identifier are wrapped independently with the same strategy.
    """

    identifier: str
    namespace: str | None = None
    wrap: Wrap = NO_WRAP

    def write(self, buf: StringIO) -> None:
        if self.namespace:
            write_wrapped(buf, self.wrap, Text(self.namespace))
            buf.write(".")
        write_wrapped(buf, self.wrap, Text(self.identifier))


@dataclass
class Separator:
    """Writes nothing the first time, then the separator on every later call."""

    join: Emitter
    first: bool = field(default=True)

    @classmethod
    def of(cls, text: str) -> Separator:
        return cls(join=Text(text))

    def write(self, buf: StringIO) -> None:
        if self.first:
            self.first = False
        else:
            self.join.write(buf)


@dataclass(frozen=True)
class Indent:
    """``level`` repetitions of a fixed four-space unit."""

    level: int = 1

    def write(self, buf: StringIO) -> None:
        buf.write(INDENT_UNIT * self.level)


def write_wrapped(buf: StringIO, wrap: Wrap, content: Emitter) -> None:
    write_open(buf, wrap)
    content.write(buf)
    write_close(buf, wrap)


def write_all(buf: StringIO, *emitters: Emitter) -> None:
    for emitter in emitters:
        emitter.write(buf)


def render(emitter: Emitter) -> str:
    """Render a single emitter into a fresh buffer and return the text."""
    buf = StringIO()
    emitter.write(buf)
    return buf.getvalue()

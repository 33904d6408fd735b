"""Text emitter framework used to render SQL fragments."""

from starsql.emit.emitters import (
    Emitter,
    Identifier,
    Indent,
    Separator,
    Text,
    Wrapped,
    render,
    write_all,
    write_wrapped,
)
from starsql.emit.wrap import (
    DOUBLE_QUOTE,
    NO_WRAP,
    Delimited,
    FunctionCallWrap,
    NoWrap,
    Wrap,
    aggregate_wrap,
    quote_wrap,
)

__all__ = [
    "DOUBLE_QUOTE",
    "NO_WRAP",
    "Delimited",
    "Emitter",
    "FunctionCallWrap",
    "Identifier",
    "Indent",
    "NoWrap",
    "Separator",
    "Text",
    "Wrap",
    "Wrapped",
    "aggregate_wrap",
    "quote_wrap",
    "render",
    "write_all",
    "write_wrapped",
]

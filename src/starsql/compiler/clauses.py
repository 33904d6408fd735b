"""Clause emitters for the SELECT list, JOIN lines and GROUP BY block."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from io import StringIO

from starsql.compiler.joins import JoinStep
from starsql.emit.emitters import Identifier, Indent, Separator, Text, write_all, write_wrapped
from starsql.emit.wrap import DOUBLE_QUOTE, aggregate_wrap, quote_wrap
from starsql.models.query import RenderOptions, Select


@dataclass(frozen=True)
class SelectItem:
    """``[aggregate(]table.column[)] [as "alias"]``"""

    select: Select
    options: RenderOptions

    def write(self, buf: StringIO) -> None:
        column = Identifier(
            identifier=self.select.column,
            namespace=self.select.table,
            wrap=quote_wrap(self.options.case_sensitive),
        )
        write_wrapped(buf, aggregate_wrap(self.select.aggregate), column)
        if self.select.alias:
            buf.write(" as ")
            # Aliases are always quoted, whatever the case-sensitivity.
            write_wrapped(buf, DOUBLE_QUOTE, Text(self.select.alias))


@dataclass(frozen=True)
class JoinClause:
    """A ``join target on target.pk = base.fk`` line, preceded by a newline."""

    step: JoinStep
    options: RenderOptions

    def write(self, buf: StringIO) -> None:
        wrap = quote_wrap(self.options.case_sensitive)
        buf.write("\njoin ")
        Identifier(identifier=self.step.to_table, wrap=wrap).write(buf)
        buf.write(" on ")
        Identifier(
            identifier=self.step.to_primary_key,
            namespace=self.step.to_table,
            wrap=wrap,
        ).write(buf)
        buf.write(" = ")
        Identifier(
            identifier=self.step.fk_column,
            namespace=self.step.from_table,
            wrap=wrap,
        ).write(buf)


@dataclass(frozen=True)
class GroupByClause:
    """Groups by every non-aggregate select when grouping is required."""

    selects: Sequence[Select]
    options: RenderOptions

    def should_write(self) -> bool:
        if self.options.force_group_by:
            return True
        return any(s.is_aggregate for s in self.selects)

    def write(self, buf: StringIO) -> None:
        if not self.should_write():
            return
        buf.write("\ngroup by\n")
        comma = Separator.of(",\n")
        indent = Indent(1)
        wrap = quote_wrap(self.options.case_sensitive)
        for s in self.selects:
            if s.is_aggregate:
                continue
            write_all(buf, comma, indent, Identifier(identifier=s.column, namespace=s.table, wrap=wrap))

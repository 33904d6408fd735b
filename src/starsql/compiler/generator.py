"""SQL generator: sequences the clause emitters into a complete SELECT statement."""

from __future__ import annotations

import logging
from io import StringIO

from starsql.compiler.clauses import GroupByClause, JoinClause, SelectItem
from starsql.compiler.joins import JoinStep, infer_join_steps
from starsql.emit.emitters import Identifier, Indent, Separator, write_all
from starsql.emit.wrap import quote_wrap
from starsql.models.query import RenderOptions, Select
from starsql.models.schema import Database

logger = logging.getLogger("starsql.generator")


class SQLGenerator:
    """Builds ``select``/``from``/``join``/``group by`` SQL over a star schema.

    The base (from) table defaults to the table of the first appended select
    unless it was set explicitly beforehand. Rendering does not mutate state.
    """

    def __init__(
        self,
        database: Database,
        options: RenderOptions | None = None,
        from_table: str | None = None,
    ) -> None:
        self._database = database
        self._options = options or RenderOptions()
        self._from_table = from_table or None
        self._selects: list[Select] = []

    @property
    def database(self) -> Database:
        return self._database

    @property
    def options(self) -> RenderOptions:
        return self._options

    @property
    def from_table(self) -> str | None:
        return self._from_table

    @from_table.setter
    def from_table(self, name: str) -> None:
        self._from_table = name or None

    @property
    def selects(self) -> tuple[Select, ...]:
        return tuple(self._selects)

    def add_select(self, select: Select) -> None:
        if self._from_table is None:
            self._from_table = select.table
        self._selects.append(select)

    def join_steps(self) -> list[JoinStep]:
        """The joins inferred for the current base table."""
        return infer_join_steps(
            self._database,
            self._from_table or "",
            strict=self._options.strict_references,
        )

    def write(self, buf: StringIO, steps: list[JoinStep] | None = None) -> None:
        """Render the statement into ``buf``.

        ``steps`` are join steps already obtained from :meth:`join_steps`;
        when omitted they are inferred here.
        """
        # Resolve joins up front so a strict lookup failure writes nothing.
        if steps is None:
            steps = self.join_steps()
        joins = [JoinClause(step, self._options) for step in steps]

        buf.write("select\n")
        comma = Separator.of(",\n")
        indent = Indent(1)
        for s in self._selects:
            write_all(buf, comma, indent, SelectItem(s, self._options))

        buf.write("\nfrom ")
        from_ = Identifier(
            identifier=self._from_table or "",
            wrap=quote_wrap(self._options.case_sensitive),
        )
        group_by = GroupByClause(self.selects, self._options)
        write_all(buf, from_, *joins, group_by)

        logger.debug(
            "Rendered query on '%s': %d columns, %d joins, group by=%s",
            self._from_table,
            len(self._selects),
            len(joins),
            group_by.should_write(),
        )

    def render(self) -> str:
        buf = StringIO()
        self.write(buf)
        return buf.getvalue()

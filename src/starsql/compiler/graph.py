"""Schema graph: tables as nodes, foreign keys as edges. Uses networkx for diagnostics."""

from __future__ import annotations

from dataclasses import dataclass

import networkx as nx

from starsql.models.schema import Database


@dataclass
class DanglingForeignKey:
    """A foreign key whose target table is not registered."""

    table: str
    column: str
    target: str


class SchemaGraph:
    """Directed multigraph of tables; one edge per foreign key, keyed by column."""

    def __init__(self, database: Database) -> None:
        self._graph: nx.MultiDiGraph[str] = nx.MultiDiGraph()
        self._build(database)

    def _build(self, database: Database) -> None:
        for table in database.tables:
            self._graph.add_node(table.name, registered=True)

        for table in database.tables:
            for fk in table.foreign_keys:
                if fk.target not in self._graph:
                    self._graph.add_node(fk.target, registered=False)
                self._graph.add_edge(table.name, fk.target, key=fk.column)

    @property
    def graph(self) -> nx.MultiDiGraph[str]:
        return self._graph

    def direct_targets(self, table: str) -> list[str]:
        """Tables referenced by ``table``'s foreign keys, in registration order."""
        if table not in self._graph:
            return []
        return list(dict.fromkeys(v for _, v in self._graph.out_edges(table)))

    def reachable_from_base(self, base: str) -> set[str]:
        """Tables a query on ``base`` can reference: the base and its direct targets."""
        return {base, *self.direct_targets(base)}

    def unresolved_targets(self) -> list[DanglingForeignKey]:
        dangling: list[DanglingForeignKey] = []
        for u, v, key in self._graph.edges(keys=True):
            if not self._graph.nodes[v]["registered"]:
                dangling.append(DanglingForeignKey(table=u, column=key, target=v))
        return dangling

    def detect_cycles(self) -> list[list[str]]:
        """Detect cyclic foreign-key chains, including self-references."""
        try:
            return list(nx.simple_cycles(self._graph))
        except nx.NetworkXError:
            return []

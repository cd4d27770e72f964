# catalog/db/query.py
"""
Filtered list queries.

A ListQuery starts from `SELECT <columns> FROM <table>` and collects equality
predicates one by one. Values always travel as bound parameters; they are
never spliced into the SQL text. All predicates are AND-combined.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from sqlalchemy import and_, func, select
from sqlalchemy.engine import Dialect
from sqlalchemy.sql import Select
from sqlalchemy.sql.schema import Table


@dataclass(frozen=True)
class Predicate:
    column: str
    value: Any
    case_insensitive: bool = False


class ListQuery:
    def __init__(self, table: Table, columns: Sequence[str]):
        self.table = table
        self.columns = tuple(columns)
        self.predicates: List[Predicate] = []

    def where_equals(
        self, column: str, value: Optional[str], case_insensitive: bool = False
    ) -> "ListQuery":
        # absent or empty request parameters add nothing
        if value is None or value == "":
            return self
        if column not in self.table.c:
            raise KeyError(f"{self.table.name} has no column {column!r}")
        self.predicates.append(Predicate(column, value, case_insensitive))
        return self

    def _clause(self, predicate: Predicate):
        column = self.table.c[predicate.column]
        if predicate.case_insensitive:
            return func.lower(column) == func.lower(predicate.value)
        return column == predicate.value

    def statement(self) -> Select:
        stmt = select(*(self.table.c[name] for name in self.columns))
        if self.predicates:
            stmt = stmt.where(and_(*(self._clause(p) for p in self.predicates)))
        return stmt

    def compile(self, dialect: Optional[Dialect] = None) -> Tuple[str, Dict[str, Any]]:
        """Return the SQL text and its bound parameters."""
        compiled = self.statement().compile(dialect=dialect)
        return str(compiled), dict(compiled.params)


def build_list_query(
    table: Table,
    columns: Sequence[str],
    filters: Iterable[Tuple[str, Optional[str], bool]],
    dialect: Optional[Dialect] = None,
) -> Tuple[str, Dict[str, Any]]:
    query = ListQuery(table, columns)
    for column, value, case_insensitive in filters:
        query.where_equals(column, value, case_insensitive)
    return query.compile(dialect)

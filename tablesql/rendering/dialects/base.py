"""
tablesql - Dialect-aware schema SQL rendering
Copyright © 2025 Ilona Tag

This file is part of tablesql.

tablesql is free software: you can redistribute it and/or modify
it under the terms of the GNU Affero General Public License as
published by the Free Software Foundation, either version 3 of
the License, or (at your option) any later version.

tablesql is distributed in the hope that it will be useful,
but WITHOUT ANY WARRANTY; without even the implied warranty of
MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
GNU Affero General Public License for more details.

You should have received a copy of the GNU Affero General Public License
along with tablesql. If not, see <https://www.gnu.org/licenses/>.

Contact: <https://github.com/elevata-labs/elevata>.
"""

from __future__ import annotations

import logging
import math
from abc import ABC, abstractmethod
from contextlib import contextmanager
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Iterator

from ..errors import MalformedStatement
from ..quote import DOUBLE_QUOTE, Quote
from ..writer import SqlWriter
from ...schema.column import (
  AutoIncrement, Check, ColumnDef, ColumnSpec, Default, Extra, Generated,
  NotNull, Null, PrimaryKey, UniqueKey,
)
from ...schema.table import (
  TableAlterStatement, TableCreateStatement, TableDropOpt, TableDropStatement,
  TableRef, TableRenameStatement,
)
from ...schema.types import ColumnType

log = logging.getLogger(__name__)


class SchemaDialect(ABC):
  """
  Base interface for schema (DDL) dialects.

  Implementations lower the dialect-neutral schema model into SQL text.
  Every prepare_* method appends to a caller supplied SqlWriter and
  leaves it untouched when rendering fails.
  """

  DIALECT_NAME = "base"
  # Human readable name used in error messages.
  DISPLAY_NAME = "Base"

  # ---------------------------------------------------------------------------
  # Capabilities (can be overridden by concrete dialects)
  # ---------------------------------------------------------------------------
  @property
  def supports_modify_column(self) -> bool:
    """Whether ALTER TABLE can change the definition of an existing column."""
    # Dialects must explicitly opt in by overriding this property.
    return False

  @property
  def supports_foreign_key_alter(self) -> bool:
    """Whether foreign keys can be added to / dropped from existing tables."""
    return False

  @property
  def supports_multiple_alter_options(self) -> bool:
    """Whether one ALTER TABLE statement may carry several actions."""
    return False

  # -------------------------------------------------------------------------
  # Identifier quoting
  # -------------------------------------------------------------------------
  def quote(self) -> Quote:
    return DOUBLE_QUOTE

  def quote_ident(self, name: str) -> str:
    """
    Quote an identifier (schema, table, column) according to the dialect.
    """
    return self.quote().quote(name)

  def render_table_identifier(self, table: TableRef) -> str:
    """
    Render a table reference with optional schema.

      TableRef("customer", "main") -> "main"."customer"
      TableRef("customer")         -> "customer"
    """
    name_sql = self.quote_ident(table.name)
    if table.schema:
      return f"{self.quote_ident(table.schema)}.{name_sql}"
    return name_sql

  # ---------------------------------------------------------------------------
  # Literal Rendering
  # ---------------------------------------------------------------------------
  def render_literal(self, value: Any) -> str:
    """
    Render a Python value as a SQL literal (used for DEFAULT clauses).
    Dialects may override this if they need special handling.
    """
    if value is None:
      return "NULL"

    if isinstance(value, bool):
      return "TRUE" if value else "FALSE"

    if isinstance(value, int):
      return str(value)

    if isinstance(value, float):
      if not math.isfinite(value):
        raise MalformedStatement(f"Non-finite float {value!r} has no SQL literal form")
      return repr(value)

    if isinstance(value, Decimal):
      if not value.is_finite():
        raise MalformedStatement(f"Non-finite decimal {value!r} has no SQL literal form")
      return str(value)

    if isinstance(value, datetime):
      return f"'{value.isoformat(sep=' ')}'"

    if isinstance(value, date):
      return f"'{value.isoformat()}'"

    if isinstance(value, (bytes, bytearray)):
      return f"X'{bytes(value).hex().upper()}'"

    # treat everything else as string
    s = str(value).replace("'", "''")
    return f"'{s}'"

  # -------------------------------------------------------------------------
  # Output staging
  # -------------------------------------------------------------------------
  @contextmanager
  def staged(self, sql: SqlWriter) -> Iterator[SqlWriter]:
    """
    Yield a private buffer and copy it into `sql` only when the block
    completes. A failing render never leaves partial SQL in `sql`.
    """
    buf = SqlWriter()
    yield buf
    sql.write(buf.getvalue())

  # ---------------------------------------------------------------------------
  # Columns
  # ---------------------------------------------------------------------------
  @abstractmethod
  def prepare_column_type(self, column_type: ColumnType, sql: SqlWriter) -> None:
    """Write the dialect's type keyword for `column_type`."""
    raise NotImplementedError

  def column_spec_auto_increment_keyword(self) -> str:
    raise NotImplementedError(
      f"{self.__class__.__name__} does not implement column_spec_auto_increment_keyword()"
    )

  def prepare_column_def(self, column_def: ColumnDef, sql: SqlWriter) -> None:
    """
    Generic column definition: name, type and modifiers in the order
    they were attached.
    """
    with self.staged(sql) as buf:
      buf.write(self.quote_ident(column_def.name))

      if column_def.types is not None:
        buf.write(" ")
        self.prepare_column_type(column_def.types, buf)

      for column_spec in column_def.spec:
        buf.write(" ")
        self.prepare_column_spec(column_spec, buf)

  def prepare_column_spec(self, column_spec: ColumnSpec, sql: SqlWriter) -> None:
    if isinstance(column_spec, Null):
      sql.write("NULL")
    elif isinstance(column_spec, NotNull):
      sql.write("NOT NULL")
    elif isinstance(column_spec, Default):
      sql.write(f"DEFAULT {self.render_literal(column_spec.value)}")
    elif isinstance(column_spec, AutoIncrement):
      sql.write(self.column_spec_auto_increment_keyword())
    elif isinstance(column_spec, UniqueKey):
      sql.write("UNIQUE")
    elif isinstance(column_spec, PrimaryKey):
      sql.write("PRIMARY KEY")
    elif isinstance(column_spec, Check):
      sql.write(f"CHECK ({column_spec.expr})")
    elif isinstance(column_spec, Generated):
      kind = "STORED" if column_spec.stored else "VIRTUAL"
      sql.write(f"GENERATED ALWAYS AS ({column_spec.expr}) {kind}")
    elif isinstance(column_spec, Extra):
      sql.write(column_spec.sql)
    else:
      raise TypeError(f"Unknown column spec: {column_spec!r}")

  # ---------------------------------------------------------------------------
  # Tables
  # ---------------------------------------------------------------------------
  def prepare_table_ref(self, table: TableRef, sql: SqlWriter) -> None:
    sql.write(self.render_table_identifier(table))

  def prepare_table_create_statement(self, create: TableCreateStatement, sql: SqlWriter) -> None:
    """
    CREATE TABLE [IF NOT EXISTS] <table> ( <column-def>, ... )
    """
    if create.table is None:
      raise MalformedStatement("No table name found for CREATE TABLE")
    if not create.columns:
      raise MalformedStatement(
        f"CREATE TABLE {create.table.name!r} requires at least one column"
      )

    with self.staged(sql) as buf:
      buf.write("CREATE TABLE ")
      if create.if_not_exists:
        buf.write("IF NOT EXISTS ")
      self.prepare_table_ref(create.table, buf)
      buf.write(" ( ")
      for i, column_def in enumerate(create.columns):
        if i:
          buf.write(", ")
        self.prepare_column_def(column_def, buf)
      buf.write(" )")

  def prepare_table_drop_statement(self, drop: TableDropStatement, sql: SqlWriter) -> None:
    """
    DROP TABLE [IF EXISTS] <table>, ... [<drop-opt> ...]
    """
    if not drop.tables:
      raise MalformedStatement("No table found for DROP TABLE")

    with self.staged(sql) as buf:
      buf.write("DROP TABLE ")
      if drop.if_exists:
        buf.write("IF EXISTS ")
      for i, table in enumerate(drop.tables):
        if i:
          buf.write(", ")
        self.prepare_table_ref(table, buf)
      for drop_opt in drop.options:
        self.prepare_table_drop_opt(drop_opt, buf)

  def prepare_table_drop_opt(self, drop_opt: TableDropOpt, sql: SqlWriter) -> None:
    # Each option writes its own leading space so dialects can render nothing.
    sql.write(f" {drop_opt.value}")

  @abstractmethod
  def prepare_table_alter_statement(self, alter: TableAlterStatement, sql: SqlWriter) -> None:
    raise NotImplementedError

  @abstractmethod
  def prepare_table_rename_statement(self, rename: TableRenameStatement, sql: SqlWriter) -> None:
    raise NotImplementedError

  # ---------------------------------------------------------------------------
  # Entry point
  # ---------------------------------------------------------------------------
  def render(self, node: object) -> str:
    """
    Render any supported schema node and return the SQL text.

    Raises the errors from tablesql.rendering.errors when the node cannot
    be expressed in this dialect, and TypeError for unknown node types.
    """
    sql = SqlWriter()

    if isinstance(node, ColumnType):
      self.prepare_column_type(node, sql)
    elif isinstance(node, ColumnDef):
      self.prepare_column_def(node, sql)
    elif isinstance(node, TableCreateStatement):
      self.prepare_table_create_statement(node, sql)
    elif isinstance(node, TableAlterStatement):
      self.prepare_table_alter_statement(node, sql)
    elif isinstance(node, TableRenameStatement):
      self.prepare_table_rename_statement(node, sql)
    elif isinstance(node, TableDropStatement):
      self.prepare_table_drop_statement(node, sql)
    else:
      raise TypeError(
        f"{self.__class__.__name__} cannot render {node.__class__.__name__}"
      )

    rendered = sql.getvalue()
    log.debug("%s rendered %s: %s", self.DIALECT_NAME, node.__class__.__name__, rendered)
    return rendered

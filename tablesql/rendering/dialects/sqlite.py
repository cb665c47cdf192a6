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
from typing import Optional, Tuple

from .base import SchemaDialect
from ..errors import MalformedStatement, UnsupportedCapability, UnsupportedType
from ..writer import SqlWriter
from ...schema.column import AutoIncrement, ColumnDef, PrimaryKey
from ...schema.table import (
  AddColumn, AddForeignKey, DropColumn, DropForeignKey, ModifyColumn,
  RenameColumn, TableAlterOption, TableAlterStatement, TableDropOpt,
  TableRenameStatement,
)
from ...schema.types import (
  Array, BigInteger, BigUnsigned, Binary, Bit, Blob, Boolean, Char, Cidr,
  ColumnType, Custom, Date, DateTime, Decimal, Double, Enum, Float, Inet,
  Integer, Interval, Json, JsonBinary, MacAddr, Money, SmallInteger,
  SmallUnsigned, String, Text, Time, Timestamp, TimestampWithTimeZone,
  TinyInteger, TinyUnsigned, Unsigned, Uuid, VarBinary, VarBit, Year,
)

log = logging.getLogger(__name__)

# Types SQLite has no storage class for. Rendering them is an error.
UNSUPPORTED_TYPES: Tuple[type, ...] = (Array, Cidr, Inet, MacAddr, Year, Bit, VarBit)

_TEXT_TYPES = (Char, String)
_INTEGER_TYPES = (
  TinyInteger, SmallInteger, Integer, BigInteger,
  TinyUnsigned, SmallUnsigned, Unsigned, BigUnsigned,
)
_REAL_TYPES = (Float, Double)
_TEMPORAL_TYPES = (DateTime, Timestamp, TimestampWithTimeZone, Time)

# ALTER TABLE actions SQLite cannot express, with the reason reported.
_UNSUPPORTED_ALTER_OPTIONS = {
  ModifyColumn: "modifying table column",
  AddForeignKey: "modification of foreign key constraints to existing tables",
  DropForeignKey: "modification of foreign key constraints to existing tables",
}


def _with_param(keyword: str, param: Optional[int]) -> str:
  if param is None:
    return keyword
  return f"{keyword}({param})"


def _with_pair(keyword: str, pair: Optional[Tuple[int, int]]) -> str:
  if pair is None:
    return keyword
  precision, scale = pair
  return f"{keyword}({precision}, {scale})"


class SqliteDialect(SchemaDialect):
  """
  Schema dialect for SQLite.

  Assumptions:
  - Identifiers are quoted with double quotes.
  - Logical types collapse into SQLite's storage classes
    (text, integer, real, blob) plus binary/boolean type names.
  - ALTER TABLE supports exactly one action per statement and no
    column modification or foreign key changes.
  - AUTOINCREMENT is only legal directly after PRIMARY KEY.
  """

  DIALECT_NAME = "sqlite"
  DISPLAY_NAME = "Sqlite"

  # ---------------------------------------------------------------------------
  # Literals
  # ---------------------------------------------------------------------------
  def render_literal(self, value):
    # SQLite stores booleans as integers.
    if isinstance(value, bool):
      return "1" if value else "0"
    return super().render_literal(value)

  # ---------------------------------------------------------------------------
  # Column definition
  # ---------------------------------------------------------------------------
  def column_spec_auto_increment_keyword(self) -> str:
    return "AUTOINCREMENT"

  def prepare_column_def(self, column_def: ColumnDef, sql: SqlWriter) -> None:
    """
    "<name>" [<type>] [<spec> ...] [PRIMARY KEY] [AUTOINCREMENT]

    PRIMARY KEY and AUTOINCREMENT are written last, in that order, no
    matter where they were attached. Everything else keeps its order.
    """
    with self.staged(sql) as buf:
      buf.write(self.quote_ident(column_def.name))

      if column_def.types is not None:
        buf.write(" ")
        self.prepare_column_type(column_def.types, buf)

      is_primary_key = False
      is_auto_increment = False

      for column_spec in column_def.spec:
        if isinstance(column_spec, PrimaryKey):
          is_primary_key = True
          continue
        if isinstance(column_spec, AutoIncrement):
          is_auto_increment = True
          continue
        buf.write(" ")
        self.prepare_column_spec(column_spec, buf)

      if is_primary_key:
        buf.write(" ")
        self.prepare_column_spec(PrimaryKey(), buf)
      if is_auto_increment:
        buf.write(" ")
        self.prepare_column_spec(AutoIncrement(), buf)

  # ---------------------------------------------------------------------------
  # Column type mapping
  # ---------------------------------------------------------------------------
  def map_column_type(self, column_type: ColumnType) -> str:
    """
    Map a logical column type to the SQLite type string.

    Raises:
        UnsupportedType: for types that only exist in other engines.
    """
    if isinstance(column_type, UNSUPPORTED_TYPES):
      raise UnsupportedType(column_type.type_name, self.DISPLAY_NAME)

    if isinstance(column_type, _TEXT_TYPES):
      return _with_param("text", column_type.length)
    if isinstance(column_type, Text):
      return "text"

    if isinstance(column_type, _INTEGER_TYPES):
      return _with_param("integer", column_type.length)

    if isinstance(column_type, _REAL_TYPES):
      return _with_param("real", column_type.precision)
    if isinstance(column_type, Decimal):
      return _with_pair("real", column_type.precision)

    if isinstance(column_type, _TEMPORAL_TYPES):
      return _with_param("text", column_type.precision)
    if isinstance(column_type, Date):
      return "text"

    if isinstance(column_type, Interval):
      log.warning(
        "Interval columns are not supported by SQLite; rendering %r as 'unsupported'.",
        column_type,
      )
      return "unsupported"

    if isinstance(column_type, Binary):
      blob_size = column_type.blob_size
      if isinstance(blob_size, Blob) and blob_size.length is not None:
        return f"binary({blob_size.length})"
      return "blob"
    if isinstance(column_type, VarBinary):
      if column_type.length is not None:
        return f"binary({column_type.length})"
      return "blob"

    if isinstance(column_type, Boolean):
      return "boolean"
    if isinstance(column_type, Money):
      return _with_pair("integer", column_type.precision)
    if isinstance(column_type, (Json, JsonBinary)):
      return "text"
    if isinstance(column_type, Uuid):
      # canonical 36 character string form
      return "text(36)"
    if isinstance(column_type, Enum):
      return "text"
    if isinstance(column_type, Custom):
      return column_type.name

    # New ColumnType variants must be classified above.
    raise UnsupportedType(column_type.__class__.__name__, self.DISPLAY_NAME)

  def prepare_column_type(self, column_type: ColumnType, sql: SqlWriter) -> None:
    sql.write(self.map_column_type(column_type))

  # ---------------------------------------------------------------------------
  # DROP TABLE
  # ---------------------------------------------------------------------------
  def prepare_table_drop_opt(self, drop_opt: TableDropOpt, sql: SqlWriter) -> None:
    # SQLite does not support table drop options
    pass

  # ---------------------------------------------------------------------------
  # ALTER TABLE
  # ---------------------------------------------------------------------------
  def _single_alter_option(self, alter: TableAlterStatement) -> TableAlterOption:
    """
    Validate the option list before anything is written and return the
    only option. SQLite runs exactly one action per ALTER TABLE.
    """
    if not alter.options:
      raise MalformedStatement("No alter option found")

    if len(alter.options) > 1:
      names = ", ".join(o.capability for o in alter.options)
      raise MalformedStatement(
        f"Sqlite supports a single alter option per ALTER TABLE statement, "
        f"got {len(alter.options)} ({names}). Split it into one statement per option."
      )

    option = alter.options[0]
    reason = _UNSUPPORTED_ALTER_OPTIONS.get(type(option))
    if reason is not None:
      raise UnsupportedCapability(option.capability, self.DISPLAY_NAME, reason)

    return option

  def prepare_table_alter_statement(self, alter: TableAlterStatement, sql: SqlWriter) -> None:
    """
    ALTER TABLE [<table> ]ADD COLUMN <column-def>
    ALTER TABLE [<table> ]RENAME COLUMN <from> TO <to>
    ALTER TABLE [<table> ]DROP COLUMN <name>
    """
    option = self._single_alter_option(alter)

    with self.staged(sql) as buf:
      buf.write("ALTER TABLE ")
      if alter.table is not None:
        self.prepare_table_ref(alter.table, buf)
        buf.write(" ")

      if isinstance(option, AddColumn):
        # SQLite has no ADD COLUMN IF NOT EXISTS; the flag is ignored.
        buf.write("ADD COLUMN ")
        self.prepare_column_def(option.column, buf)
      elif isinstance(option, RenameColumn):
        buf.write("RENAME COLUMN ")
        buf.write(self.quote_ident(option.from_name))
        buf.write(" TO ")
        buf.write(self.quote_ident(option.to_name))
      elif isinstance(option, DropColumn):
        buf.write("DROP COLUMN ")
        buf.write(self.quote_ident(option.name))
      else:
        raise UnsupportedCapability(option.capability, self.DISPLAY_NAME)

  # ---------------------------------------------------------------------------
  # RENAME TABLE
  # ---------------------------------------------------------------------------
  def prepare_table_rename_statement(self, rename: TableRenameStatement, sql: SqlWriter) -> None:
    """
    ALTER TABLE <from> RENAME TO <to>

    Either name may be missing; the keywords are written regardless.
    """
    with self.staged(sql) as buf:
      buf.write("ALTER TABLE ")
      if rename.from_name is not None:
        self.prepare_table_ref(rename.from_name, buf)
      buf.write(" RENAME TO ")
      if rename.to_name is not None:
        self.prepare_table_ref(rename.to_name, buf)

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

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from .column import ColumnDef


@dataclass(frozen=True)
class TableRef:
  """Reference to a table, optionally qualified by a schema."""
  name: str
  schema: Optional[str] = None


class TableDropOpt(Enum):
  RESTRICT = "RESTRICT"
  CASCADE = "CASCADE"


# ---------------------------------------------------------------------------
# ALTER TABLE options
# ---------------------------------------------------------------------------
class TableAlterOption:
  """Marker base class for a single ALTER TABLE action."""

  @property
  def capability(self) -> str:
    return self.__class__.__name__


@dataclass(frozen=True)
class AddColumn(TableAlterOption):
  column: ColumnDef
  if_not_exists: bool = False


@dataclass(frozen=True)
class ModifyColumn(TableAlterOption):
  column: ColumnDef


@dataclass(frozen=True)
class RenameColumn(TableAlterOption):
  from_name: str
  to_name: str


@dataclass(frozen=True)
class DropColumn(TableAlterOption):
  name: str


@dataclass(frozen=True)
class AddForeignKey(TableAlterOption):
  """
  Add a foreign key constraint to an existing table.
  Only the parts needed to identify the constraint are modelled.
  """
  name: Optional[str] = None
  columns: Tuple[str, ...] = ()
  ref_table: Optional[TableRef] = None
  ref_columns: Tuple[str, ...] = ()


@dataclass(frozen=True)
class DropForeignKey(TableAlterOption):
  name: str


# ---------------------------------------------------------------------------
# Statements
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class TableAlterStatement:
  table: Optional[TableRef] = None
  options: Tuple[TableAlterOption, ...] = ()


@dataclass(frozen=True)
class TableRenameStatement:
  from_name: Optional[TableRef] = None
  to_name: Optional[TableRef] = None


@dataclass(frozen=True)
class TableCreateStatement:
  table: Optional[TableRef] = None
  columns: Tuple[ColumnDef, ...] = ()
  if_not_exists: bool = False


@dataclass(frozen=True)
class TableDropStatement:
  tables: Tuple[TableRef, ...] = ()
  options: Tuple[TableDropOpt, ...] = ()
  if_exists: bool = False


# ---------------------------------------------------------------------------
# Convenience constructors
# ---------------------------------------------------------------------------

def table(name: str, schema: Optional[str] = None) -> TableRef:
  """Helper for creating a TableRef."""
  return TableRef(name=name, schema=schema)


def alter_table(table_ref: Optional[TableRef], *options: TableAlterOption) -> TableAlterStatement:
  """Helper for creating a TableAlterStatement."""
  return TableAlterStatement(table=table_ref, options=tuple(options))


def rename_table(from_name: Optional[str], to_name: Optional[str]) -> TableRenameStatement:
  """Helper for renaming an unqualified table."""
  return TableRenameStatement(
    from_name=TableRef(from_name) if from_name else None,
    to_name=TableRef(to_name) if to_name else None,
  )

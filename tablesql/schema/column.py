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
from typing import Optional, Tuple

from .types import ColumnType


class ColumnSpec:
  """Marker base class for column modifiers (constraints and attributes)."""
  pass


@dataclass(frozen=True)
class Null(ColumnSpec):
  pass


@dataclass(frozen=True)
class NotNull(ColumnSpec):
  pass


@dataclass(frozen=True)
class Default(ColumnSpec):
  """DEFAULT <literal>; the value is rendered by the dialect's literal rules."""
  value: object


@dataclass(frozen=True)
class AutoIncrement(ColumnSpec):
  pass


@dataclass(frozen=True)
class UniqueKey(ColumnSpec):
  pass


@dataclass(frozen=True)
class PrimaryKey(ColumnSpec):
  pass


@dataclass(frozen=True)
class Check(ColumnSpec):
  """CHECK (<expr>); `expr` is already-valid SQL for the target engine."""
  expr: str


@dataclass(frozen=True)
class Generated(ColumnSpec):
  """GENERATED ALWAYS AS (<expr>) STORED | VIRTUAL"""
  expr: str
  stored: bool = False


@dataclass(frozen=True)
class Extra(ColumnSpec):
  """Raw SQL appended to the column definition as-is."""
  sql: str


@dataclass(frozen=True)
class ColumnDef:
  """
  A single column definition: name, optional type and an ordered
  sequence of modifiers.

  The order of `spec` is kept as given. Dialects may move individual
  modifiers when their syntax requires it (see SqliteDialect).
  """
  name: str
  types: Optional[ColumnType] = None
  spec: Tuple[ColumnSpec, ...] = ()


def column(name: str, types: Optional[ColumnType] = None, *spec: ColumnSpec) -> ColumnDef:
  """Helper for creating a ColumnDef."""
  return ColumnDef(name=name, types=types, spec=tuple(spec))

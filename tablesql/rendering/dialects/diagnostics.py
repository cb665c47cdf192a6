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

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List

from . import get_active_dialect, get_available_dialect_names
from .base import SchemaDialect
from ..errors import SqlRenderError, UnsupportedType
from ...schema.column import AutoIncrement, NotNull, PrimaryKey, column
from ...schema.types import (
  ALL_COLUMN_TYPES, Array, Custom, Enum, Integer, Text,
)


@dataclass
class DialectDiagnostics:
  """Simple snapshot of a dialect's capabilities and behaviour."""

  name: str
  class_name: str
  supports_modify_column: bool
  supports_foreign_key_alter: bool
  supports_multiple_alter_options: bool

  auto_increment_keyword: str
  sample_column_def: str

  supported_types: List[str] = field(default_factory=list)
  unsupported_types: List[str] = field(default_factory=list)

  def to_dict(self) -> Dict[str, Any]:
    """Return a JSON-serializable representation."""
    return asdict(self)


def _sample_instance(type_cls: type):
  # Types with required fields need a representative value.
  if type_cls is Enum:
    return Enum(name="status", variants=("active", "inactive"))
  if type_cls is Custom:
    return Custom(name="citext")
  if type_cls is Array:
    return Array(element_type=Text())
  return type_cls()


def probe_column_types(dialect: SchemaDialect) -> tuple[list[str], list[str]]:
  """
  Render one instance of every ColumnType variant and split the variant
  names into (supported, unsupported).
  """
  supported: list[str] = []
  unsupported: list[str] = []

  for type_cls in ALL_COLUMN_TYPES:
    try:
      dialect.render(_sample_instance(type_cls))
    except UnsupportedType:
      unsupported.append(type_cls.__name__)
    else:
      supported.append(type_cls.__name__)

  return sorted(supported), sorted(unsupported)


def collect_dialect_diagnostics(dialect: SchemaDialect) -> DialectDiagnostics:
  """Collect a minimal set of diagnostics for a single dialect instance."""
  supported, unsupported = probe_column_types(dialect)

  try:
    auto_increment_keyword = dialect.column_spec_auto_increment_keyword()
  except NotImplementedError:
    auto_increment_keyword = ""

  try:
    sample_column_def = dialect.render(
      column("id", Integer(), PrimaryKey(), AutoIncrement(), NotNull())
    )
  except (SqlRenderError, NotImplementedError) as exc:
    sample_column_def = f"<error: {exc}>"

  return DialectDiagnostics(
    name=getattr(dialect, "DIALECT_NAME", dialect.__class__.__name__.lower()),
    class_name=dialect.__class__.__name__,
    supports_modify_column=dialect.supports_modify_column,
    supports_foreign_key_alter=dialect.supports_foreign_key_alter,
    supports_multiple_alter_options=dialect.supports_multiple_alter_options,
    auto_increment_keyword=auto_increment_keyword,
    sample_column_def=sample_column_def,
    supported_types=supported,
    unsupported_types=unsupported,
  )


def snapshot_all_dialects() -> Dict[str, DialectDiagnostics]:
  """
  Build diagnostics for all registered dialects.

  The keys of the result dict are dialect names as returned by
  get_available_dialect_names().
  """
  result: Dict[str, DialectDiagnostics] = {}

  for name in get_available_dialect_names():
    dialect = get_active_dialect(name)
    result[name] = collect_dialect_diagnostics(dialect)

  return result

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
from typing import List, Optional, Type

import yaml

from tablesql.config import profiles
from tablesql.rendering.dialects.base import SchemaDialect
from tablesql.rendering.dialects.sqlite import SqliteDialect
from tablesql.utils.env import env_str

"""
Schema SQL dialects.

Each dialect implements SchemaDialect and knows how to render column
types, column definitions and table statements into concrete SQL.
"""

log = logging.getLogger(__name__)

# Registry of known dialects.
_DIALECT_REGISTRY: dict[str, Type[SchemaDialect]] = {
  "sqlite": SqliteDialect,
}

DEFAULT_DIALECT = "sqlite"


def get_available_dialect_names() -> List[str]:
  return sorted(_DIALECT_REGISTRY)


def _resolve_dialect_name(explicit: Optional[str] = None) -> str:
  """
  Resolve a dialect name from (in order):

  1. explicit argument
  2. environment variables (TABLESQL_SQL_DIALECT, TABLESQL_DIALECT)
  3. active profile.default_dialect
  4. hard fallback 'sqlite'
  """
  # 1) Explicit argument
  if explicit:
    return explicit.lower()

  # 2) Env overrides
  env_name = env_str("TABLESQL_SQL_DIALECT") or env_str("TABLESQL_DIALECT")
  if env_name:
    return env_name.lower()

  # 3) Profile.default_dialect
  try:
    profile = profiles.load_profile()
    if profile.default_dialect:
      return profile.default_dialect.lower()
  except (FileNotFoundError, KeyError, ValueError, yaml.YAMLError) as exc:
    log.warning("No usable profile for dialect resolution (%s); using %s.", exc, DEFAULT_DIALECT)

  # 4) Hard fallback
  return DEFAULT_DIALECT


def get_active_dialect(name: Optional[str] = None) -> SchemaDialect:
  """
  Return an instance of the active SchemaDialect.

  Resolution order:
    - `name` argument (if provided)
    - TABLESQL_SQL_DIALECT / TABLESQL_DIALECT env vars
    - active profile's `default_dialect`
    - hard fallback 'sqlite'

  Raises:
      ValueError: if the resolved name is not registered.
  """
  dialect_name = _resolve_dialect_name(name)

  try:
    dialect_cls = _DIALECT_REGISTRY[dialect_name]
  except KeyError as exc:
    available = ", ".join(get_available_dialect_names())
    raise ValueError(
      f"Unknown SQL dialect: {dialect_name!r}. "
      f"Available dialects: {available}."
    ) from exc

  log.debug("Using SQL dialect %s (%s).", dialect_name, dialect_cls.__name__)
  return dialect_cls()

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

import pytest

from tablesql.rendering.dialects.sqlite import SqliteDialect
from tablesql.rendering.writer import SqlWriter


@pytest.fixture
def dialect():
  """Provide a fresh SqliteDialect instance."""
  return SqliteDialect()


@pytest.fixture
def sink():
  """Caller-owned output sink that already holds some text."""
  sql = SqlWriter()
  sql.write("-- prefix\n")
  return sql


@pytest.fixture(autouse=True)
def clear_tablesql_env(monkeypatch):
  """Ensure tablesql env vars are clean by default."""
  for key in (
    "TABLESQL_SQL_DIALECT",
    "TABLESQL_DIALECT",
    "TABLESQL_PROFILE",
    "TABLESQL_PROFILES_PATH",
  ):
    monkeypatch.delenv(key, raising=False)
  yield

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

"""
Rendering errors.

All of them are deterministic translation failures: the input cannot be
expressed in the target dialect. They subclass ValueError so callers that
already guard dialect calls with `except ValueError` keep working.
"""


class SqlRenderError(ValueError):
  """Base class for all errors raised while rendering schema SQL."""
  pass


class UnsupportedType(SqlRenderError):
  """A logical column type has no representation in the dialect."""

  def __init__(self, type_name: str, dialect: str) -> None:
    self.type_name = type_name
    self.dialect = dialect
    super().__init__(f"{type_name} is not available in {dialect}.")


class UnsupportedCapability(SqlRenderError):
  """A statement or alter option cannot be expressed by the dialect."""

  def __init__(self, capability: str, dialect: str, detail: str | None = None) -> None:
    self.capability = capability
    self.dialect = dialect
    msg = f"{dialect} does not support {capability}"
    if detail:
      msg += f": {detail}"
    super().__init__(msg)


class MalformedStatement(SqlRenderError):
  """A structural invariant of the statement is violated."""

  def __init__(self, reason: str) -> None:
    self.reason = reason
    super().__init__(reason)

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

from typing import List


class SqlWriter:
  """
  Append-only SQL text buffer.

  Dialects only ever call write(); callers read the finished statement
  via getvalue() or str().
  """

  def __init__(self) -> None:
    self._parts: List[str] = []

  def write(self, text: str) -> None:
    self._parts.append(text)

  def getvalue(self) -> str:
    return "".join(self._parts)

  def is_empty(self) -> bool:
    return not any(self._parts)

  def __str__(self) -> str:
    return self.getvalue()

  def __repr__(self) -> str:
    return f"SqlWriter({self.getvalue()!r})"

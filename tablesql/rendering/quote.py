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


@dataclass(frozen=True)
class Quote:
  """
  Identifier quoting style, e.g. Quote('"', '"') or Quote('[', ']').

  quote() is a pure function of (identifier, style). A closing quote
  character inside the identifier is escaped by doubling it.
  """
  left: str = '"'
  right: str = '"'

  def quote(self, name: str) -> str:
    escaped = name.replace(self.right, self.right * 2)
    return f"{self.left}{escaped}{self.right}"


DOUBLE_QUOTE = Quote('"', '"')
BACKTICK = Quote("`", "`")
BRACKETS = Quote("[", "]")

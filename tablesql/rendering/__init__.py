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

"""
Schema SQL rendering.

SqlWriter collects output, Quote turns names into quoted identifiers and
the dialects in tablesql.rendering.dialects lower the schema model to SQL.
"""

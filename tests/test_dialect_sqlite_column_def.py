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

import itertools
from datetime import date, datetime
from decimal import Decimal

import pytest

from tablesql.rendering.errors import MalformedStatement, UnsupportedType
from tablesql.schema.column import (
  AutoIncrement, Check, ColumnDef, Default, Extra, Generated, NotNull, Null,
  PrimaryKey, UniqueKey, column,
)
from tablesql.schema.types import Array, Integer, String, Text


def test_primary_key_autoincrement_column(dialect):
  col = column("id", Integer(), PrimaryKey(), AutoIncrement(), NotNull())
  assert dialect.render(col) == '"id" integer NOT NULL PRIMARY KEY AUTOINCREMENT'


def test_autoincrement_attached_before_primary_key_is_still_last(dialect):
  col = column("id", Integer(), AutoIncrement(), NotNull(), PrimaryKey())
  assert dialect.render(col) == '"id" integer NOT NULL PRIMARY KEY AUTOINCREMENT'


def test_primary_key_is_moved_to_the_end(dialect):
  col = column("code", String(8), PrimaryKey(), NotNull(), UniqueKey())
  assert dialect.render(col) == '"code" text(8) NOT NULL UNIQUE PRIMARY KEY'


def test_autoincrement_without_primary_key(dialect):
  col = column("n", Integer(), AutoIncrement(), NotNull())
  assert dialect.render(col) == '"n" integer NOT NULL AUTOINCREMENT'


def test_repeated_primary_key_is_written_once(dialect):
  col = column("id", Integer(), PrimaryKey(), PrimaryKey())
  assert dialect.render(col) == '"id" integer PRIMARY KEY'


_OTHER_SPECS = [NotNull(), UniqueKey(), Default(0)]


@pytest.mark.parametrize(
  "spec",
  list(itertools.permutations(_OTHER_SPECS + [PrimaryKey(), AutoIncrement()])),
)
def test_deferred_clauses_for_any_attachment_order(dialect, spec):
  sql = dialect.render(ColumnDef(name="id", types=Integer(), spec=spec))

  pk_pos = sql.index("PRIMARY KEY")
  ai_pos = sql.index("AUTOINCREMENT")

  assert sql.endswith("PRIMARY KEY AUTOINCREMENT")
  assert pk_pos < ai_pos

  # Non-deferred specs keep their relative order and precede PRIMARY KEY.
  others = [s for s in spec if s in _OTHER_SPECS]
  rendered = {NotNull(): "NOT NULL", UniqueKey(): "UNIQUE", Default(0): "DEFAULT 0"}
  positions = [sql.index(rendered[s]) for s in others]
  assert positions == sorted(positions)
  assert all(p < pk_pos for p in positions)


def test_column_without_type(dialect):
  assert dialect.render(column("x", None, NotNull())) == '"x" NOT NULL'


def test_column_name_only(dialect):
  assert dialect.render(column("x")) == '"x"'


def test_column_name_with_quote_is_escaped(dialect):
  assert dialect.render(column('we"ird', Text())) == '"we""ird" text'


@pytest.mark.parametrize(
  "value, expected",
  [
    (None, "DEFAULT NULL"),
    (True, "DEFAULT 1"),
    (False, "DEFAULT 0"),
    (42, "DEFAULT 42"),
    (1.5, "DEFAULT 1.5"),
    (Decimal("9.99"), "DEFAULT 9.99"),
    ("it's", "DEFAULT 'it''s'"),
    (date(2025, 1, 2), "DEFAULT '2025-01-02'"),
    (datetime(2025, 1, 2, 3, 4, 5), "DEFAULT '2025-01-02 03:04:05'"),
  ],
)
def test_default_literals(dialect, value, expected):
  assert dialect.render(column("c", None, Default(value))) == f'"c" {expected}'


def test_other_specs_render_in_attachment_order(dialect):
  col = column(
    "age",
    Integer(),
    Null(),
    Check("age >= 0"),
    Extra("COLLATE BINARY"),
  )
  assert dialect.render(col) == '"age" integer NULL CHECK (age >= 0) COLLATE BINARY'


@pytest.mark.parametrize(
  "stored, kind",
  [(True, "STORED"), (False, "VIRTUAL")],
)
def test_generated_column(dialect, stored, kind):
  col = column("total", Integer(), Generated("price * qty", stored=stored))
  assert dialect.render(col) == f'"total" integer GENERATED ALWAYS AS (price * qty) {kind}'


def test_failed_column_def_leaves_sink_untouched(dialect, sink):
  col = column("tags", Array(Text()), NotNull())

  with pytest.raises(UnsupportedType):
    dialect.prepare_column_def(col, sink)

  assert sink.getvalue() == "-- prefix\n"


def test_prepare_column_def_appends_to_sink(dialect, sink):
  dialect.prepare_column_def(column("id", Integer(), PrimaryKey()), sink)
  assert sink.getvalue() == '-- prefix\n"id" integer PRIMARY KEY'


def test_unknown_column_spec_raises_type_error(dialect):
  with pytest.raises(TypeError):
    dialect.render(ColumnDef(name="x", spec=(object(),)))


def test_bytes_default_renders_hex_blob_literal(dialect):
  assert dialect.render(column("raw", None, Default(b"\x00\xffA"))) == "\"raw\" DEFAULT X'00FF41'"
  assert dialect.render_literal(bytearray(b"ab")) == "X'6162'"


@pytest.mark.parametrize(
  "value",
  [float("nan"), float("inf"), float("-inf"), Decimal("NaN"), Decimal("Infinity")],
)
def test_non_finite_default_is_rejected(dialect, sink, value):
  with pytest.raises(MalformedStatement):
    dialect.prepare_column_def(column("ratio", None, Default(value)), sink)

  assert sink.getvalue() == "-- prefix\n"

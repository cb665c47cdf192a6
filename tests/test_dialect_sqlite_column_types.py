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
SQLite column type mapping.

Every logical type collapses into one of SQLite's storage classes;
types that only exist in other engines must be rejected, never
silently downgraded.
"""

import logging

import pytest

from tablesql.rendering.dialects.sqlite import UNSUPPORTED_TYPES
from tablesql.rendering.errors import SqlRenderError, UnsupportedType
from tablesql.schema.types import (
  ALL_COLUMN_TYPES, Array, BigInteger, BigUnsigned, Binary, Bit, Blob,
  Boolean, Char, Cidr, ColumnType, Custom, Date, DateTime, Decimal, Double,
  Enum, Float, Inet, Integer, Interval, Json, JsonBinary, LongBlob, MacAddr,
  Money, SmallInteger, SmallUnsigned, String, Text, Time, Timestamp,
  TimestampWithTimeZone, TinyBlob, TinyInteger, TinyUnsigned, Unsigned,
  Uuid, VarBinary, VarBit, Year,
)


@pytest.mark.parametrize(
  "column_type, expected",
  [
    (Char(), "text"),
    (Char(10), "text(10)"),
    (String(), "text"),
    (String(255), "text(255)"),
    (Text(), "text"),

    (TinyInteger(), "integer"),
    (TinyInteger(3), "integer(3)"),
    (SmallInteger(6), "integer(6)"),
    (Integer(), "integer"),
    (Integer(11), "integer(11)"),
    (BigInteger(), "integer"),
    (TinyUnsigned(), "integer"),
    (SmallUnsigned(5), "integer(5)"),
    (Unsigned(), "integer"),
    (BigUnsigned(20), "integer(20)"),

    (Float(), "real"),
    (Float(24), "real(24)"),
    (Double(), "real"),
    (Double(53), "real(53)"),
    (Decimal(), "real"),
    (Decimal((10, 2)), "real(10, 2)"),

    (DateTime(), "text"),
    (DateTime(3), "text(3)"),
    (Timestamp(), "text"),
    (Timestamp(6), "text(6)"),
    (TimestampWithTimeZone(), "text"),
    (TimestampWithTimeZone(6), "text(6)"),
    (Time(), "text"),
    (Time(0), "text(0)"),
    (Date(), "text"),

    (Binary(), "blob"),
    (Binary(Blob(16)), "binary(16)"),
    (Binary(TinyBlob()), "blob"),
    (Binary(LongBlob()), "blob"),
    (VarBinary(32), "binary(32)"),
    (VarBinary(), "blob"),

    (Boolean(), "boolean"),
    (Money(), "integer"),
    (Money((19, 4)), "integer(19, 4)"),
    (Json(), "text"),
    (JsonBinary(), "text"),
    (Uuid(), "text(36)"),
    (Enum("mood", ("happy", "sad")), "text"),
    (Custom("citext"), "citext"),
  ],
)
def test_sqlite_column_type_mapping(dialect, column_type, expected):
  assert dialect.render(column_type) == expected


def test_custom_type_is_not_quoted(dialect):
  assert dialect.render(Custom("my type")) == "my type"


def test_interval_renders_unsupported_marker_and_warns(dialect, caplog):
  with caplog.at_level(logging.WARNING, logger="tablesql.rendering.dialects.sqlite"):
    assert dialect.render(Interval("DAY TO SECOND", 3)) == "unsupported"

  assert "Interval" in caplog.text


@pytest.mark.parametrize(
  "column_type, type_name",
  [
    (Array(Integer()), "Array"),
    (Cidr(), "Cidr"),
    (Inet(), "Inet"),
    (MacAddr(), "MacAddr"),
    (Year(), "Year"),
    (Year(4), "Year"),
    (Bit(1), "Bit"),
    (VarBit(64), "VarBit"),
  ],
)
def test_other_dialect_types_raise_unsupported_type(dialect, column_type, type_name):
  with pytest.raises(UnsupportedType) as excinfo:
    dialect.render(column_type)

  assert excinfo.value.type_name == type_name
  assert excinfo.value.dialect == "Sqlite"
  assert str(excinfo.value) == f"{type_name} is not available in Sqlite."


def test_unsupported_type_is_a_value_error(dialect):
  with pytest.raises(ValueError):
    dialect.render(Cidr())
  assert issubclass(UnsupportedType, SqlRenderError)


def test_unsupported_type_leaves_sink_untouched(dialect, sink):
  with pytest.raises(UnsupportedType):
    dialect.prepare_column_type(MacAddr(), sink)

  assert sink.getvalue() == "-- prefix\n"


def test_prepare_column_type_appends_to_sink(dialect, sink):
  dialect.prepare_column_type(Uuid(), sink)
  assert sink.getvalue() == "-- prefix\ntext(36)"


def test_all_column_types_lists_every_variant():
  declared = {
    c for c in ColumnType.__subclasses__()
    if c.__module__ == "tablesql.schema.types"
  }
  assert declared == set(ALL_COLUMN_TYPES)


def test_every_column_type_is_classified(dialect):
  """
  Each variant either renders or raises UnsupportedType, and the
  rejected ones are exactly the other-engine types.
  """
  samples = {
    Enum: Enum("e"),
    Custom: Custom("c"),
    Array: Array(Text()),
  }
  rejected = set()

  for type_cls in ALL_COLUMN_TYPES:
    instance = samples.get(type_cls) or type_cls()
    try:
      rendered = dialect.render(instance)
    except UnsupportedType:
      rejected.add(type_cls)
    else:
      assert isinstance(rendered, str) and rendered

  assert rejected == set(UNSUPPORTED_TYPES)


def test_type_rendering_is_deterministic_and_pure(dialect):
  column_type = Decimal((12, 4))
  before = Decimal((12, 4))

  first = dialect.render(column_type)
  second = dialect.render(column_type)

  assert first == second == "real(12, 4)"
  assert column_type == before


def test_unknown_column_type_subclass_is_rejected(dialect):
  class Geometry(ColumnType):
    pass

  with pytest.raises(UnsupportedType) as excinfo:
    dialect.render(Geometry())

  assert excinfo.value.type_name == "Geometry"

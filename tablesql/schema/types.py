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

from dataclasses import dataclass, field
from typing import Optional, Tuple

"""
Dialect-neutral column types.

Every logical type is a small frozen dataclass. Dialects lower them to
their own type keywords in prepare_column_type(); nothing in here knows
about a concrete engine.

Parameters follow one convention:
  - length:     Optional[int]              e.g. VARCHAR(100)
  - precision:  Optional[int]              e.g. TIMESTAMP(3), FLOAT(24)
  - precision:  Optional[Tuple[int, int]]  e.g. DECIMAL(10, 2)
"""


class ColumnType:
  """Marker base class for all logical column types."""

  @property
  def type_name(self) -> str:
    return self.__class__.__name__


# ---------------------------------------------------------------------------
# Blob sizes (used by Binary)
# ---------------------------------------------------------------------------
class BlobSize:
  """Marker base class for binary storage sizes."""
  pass


@dataclass(frozen=True)
class TinyBlob(BlobSize):
  pass


@dataclass(frozen=True)
class Blob(BlobSize):
  length: Optional[int] = None


@dataclass(frozen=True)
class MediumBlob(BlobSize):
  pass


@dataclass(frozen=True)
class LongBlob(BlobSize):
  pass


# ---------------------------------------------------------------------------
# Character types
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class Char(ColumnType):
  length: Optional[int] = None


@dataclass(frozen=True)
class String(ColumnType):
  length: Optional[int] = None


@dataclass(frozen=True)
class Text(ColumnType):
  pass


# ---------------------------------------------------------------------------
# Integer types
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class TinyInteger(ColumnType):
  length: Optional[int] = None


@dataclass(frozen=True)
class SmallInteger(ColumnType):
  length: Optional[int] = None


@dataclass(frozen=True)
class Integer(ColumnType):
  length: Optional[int] = None


@dataclass(frozen=True)
class BigInteger(ColumnType):
  length: Optional[int] = None


@dataclass(frozen=True)
class TinyUnsigned(ColumnType):
  length: Optional[int] = None


@dataclass(frozen=True)
class SmallUnsigned(ColumnType):
  length: Optional[int] = None


@dataclass(frozen=True)
class Unsigned(ColumnType):
  length: Optional[int] = None


@dataclass(frozen=True)
class BigUnsigned(ColumnType):
  length: Optional[int] = None


# ---------------------------------------------------------------------------
# Floating / fixed point
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class Float(ColumnType):
  precision: Optional[int] = None


@dataclass(frozen=True)
class Double(ColumnType):
  precision: Optional[int] = None


@dataclass(frozen=True)
class Decimal(ColumnType):
  """Fixed point number; precision is a (precision, scale) pair."""
  precision: Optional[Tuple[int, int]] = None


@dataclass(frozen=True)
class Money(ColumnType):
  precision: Optional[Tuple[int, int]] = None


# ---------------------------------------------------------------------------
# Temporal types
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class DateTime(ColumnType):
  precision: Optional[int] = None


@dataclass(frozen=True)
class Timestamp(ColumnType):
  precision: Optional[int] = None


@dataclass(frozen=True)
class TimestampWithTimeZone(ColumnType):
  precision: Optional[int] = None


@dataclass(frozen=True)
class Time(ColumnType):
  precision: Optional[int] = None


@dataclass(frozen=True)
class Date(ColumnType):
  pass


@dataclass(frozen=True)
class Interval(ColumnType):
  """
  Postgres-style interval, e.g. INTERVAL DAY TO SECOND(3).
  `fields` is kept as free text ("YEAR TO MONTH", "DAY", ...).
  """
  fields: Optional[str] = None
  precision: Optional[int] = None


# ---------------------------------------------------------------------------
# Binary, boolean, documents, identifiers
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class Binary(ColumnType):
  blob_size: BlobSize = field(default_factory=Blob)


@dataclass(frozen=True)
class VarBinary(ColumnType):
  length: Optional[int] = None


@dataclass(frozen=True)
class Boolean(ColumnType):
  pass


@dataclass(frozen=True)
class Json(ColumnType):
  pass


@dataclass(frozen=True)
class JsonBinary(ColumnType):
  pass


@dataclass(frozen=True)
class Uuid(ColumnType):
  pass


@dataclass(frozen=True)
class Enum(ColumnType):
  """Enumeration type. Member values are carried for dialects that need them."""
  name: str
  variants: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Custom(ColumnType):
  """Opaque type, rendered verbatim by every dialect."""
  name: str


# ---------------------------------------------------------------------------
# Types that only exist in some engines (Postgres / MySQL)
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class Array(ColumnType):
  element_type: ColumnType


@dataclass(frozen=True)
class Cidr(ColumnType):
  pass


@dataclass(frozen=True)
class Inet(ColumnType):
  pass


@dataclass(frozen=True)
class MacAddr(ColumnType):
  pass


@dataclass(frozen=True)
class Year(ColumnType):
  length: Optional[int] = None


@dataclass(frozen=True)
class Bit(ColumnType):
  length: Optional[int] = None


@dataclass(frozen=True)
class VarBit(ColumnType):
  length: Optional[int] = None


# Every ColumnType variant. Dialect tests walk this tuple so a new
# variant cannot be added without classifying it per dialect.
ALL_COLUMN_TYPES: Tuple[type, ...] = (
  Char, String, Text,
  TinyInteger, SmallInteger, Integer, BigInteger,
  TinyUnsigned, SmallUnsigned, Unsigned, BigUnsigned,
  Float, Double, Decimal, Money,
  DateTime, Timestamp, TimestampWithTimeZone, Time, Date, Interval,
  Binary, VarBinary, Boolean,
  Json, JsonBinary, Uuid, Enum, Custom,
  Array, Cidr, Inet, MacAddr, Year, Bit, VarBit,
)

"""Typed positional parameters for stored procedure calls.

Every argument handed to a procedure carries its semantic SQL type so that the
value can be range checked before the round trip and bound with the matching
SQLAlchemy type. UUIDs travel as their 16 raw bytes (``BINARY(16)`` columns).
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timezone
from decimal import Decimal
from enum import Enum
from uuid import UUID

from sqlalchemy import (
    BigInteger,
    Boolean,
    Date,
    DateTime,
    Float,
    Integer,
    LargeBinary,
    Numeric,
    SmallInteger,
    String,
    bindparam,
)
from sqlalchemy.sql.elements import BindParameter
from sqlalchemy.types import TypeEngine

from pocketbook.core.errors import ValidationError


class SqlType(str, Enum):
    """Semantic types a procedure parameter can be bound as."""

    I8 = "i8"
    I16 = "i16"
    I32 = "i32"
    I64 = "i64"
    U8 = "u8"
    U16 = "u16"
    U32 = "u32"
    U64 = "u64"
    F32 = "f32"
    F64 = "f64"
    BOOL = "bool"
    STRING = "string"
    BYTES = "bytes"
    DATE = "date"
    DATETIME = "datetime"
    DATETIME_UTC = "datetime_utc"
    UUID = "uuid"
    DECIMAL = "decimal"


_INT_RANGES: dict[SqlType, tuple[int, int]] = {
    SqlType.I8: (-(2**7), 2**7 - 1),
    SqlType.I16: (-(2**15), 2**15 - 1),
    SqlType.I32: (-(2**31), 2**31 - 1),
    SqlType.I64: (-(2**63), 2**63 - 1),
    SqlType.U8: (0, 2**8 - 1),
    SqlType.U16: (0, 2**16 - 1),
    SqlType.U32: (0, 2**32 - 1),
    SqlType.U64: (0, 2**64 - 1),
}

_SQLALCHEMY_TYPES: dict[SqlType, TypeEngine] = {
    SqlType.I8: SmallInteger(),
    SqlType.I16: SmallInteger(),
    SqlType.I32: Integer(),
    SqlType.I64: BigInteger(),
    SqlType.U8: SmallInteger(),
    SqlType.U16: Integer(),
    SqlType.U32: BigInteger(),
    SqlType.U64: Numeric(20, 0),
    SqlType.F32: Float(precision=24),
    SqlType.F64: Float(precision=53),
    SqlType.BOOL: Boolean(),
    SqlType.STRING: String(),
    SqlType.BYTES: LargeBinary(),
    SqlType.DATE: Date(),
    SqlType.DATETIME: DateTime(),
    SqlType.DATETIME_UTC: DateTime(),
    SqlType.UUID: LargeBinary(16),
    SqlType.DECIMAL: Numeric(asdecimal=True),
}


def uuid_to_bytes(value: UUID) -> bytes:
    return value.bytes


def bytes_to_uuid(value: bytes) -> UUID:
    if len(value) != 16:
        raise ValueError(f"expected 16 bytes, got {len(value)}")
    return UUID(bytes=bytes(value))


def _reject(sql_type: SqlType, value: object, reason: str) -> ValidationError:
    return ValidationError(f"cannot bind {value!r} as {sql_type.value}: {reason}")


def _coerce(sql_type: SqlType, value: object) -> object:
    """Validate ``value`` for ``sql_type`` and return the driver-level value."""

    if sql_type in _INT_RANGES:
        if isinstance(value, bool) or not isinstance(value, int):
            raise _reject(sql_type, value, "not an integer")
        low, high = _INT_RANGES[sql_type]
        if not low <= value <= high:
            raise _reject(sql_type, value, f"outside {low}..{high}")
        return value
    if sql_type in (SqlType.F32, SqlType.F64):
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise _reject(sql_type, value, "not a number")
        return float(value)
    if sql_type is SqlType.BOOL:
        if not isinstance(value, bool):
            raise _reject(sql_type, value, "not a boolean")
        return value
    if sql_type is SqlType.STRING:
        if not isinstance(value, str):
            raise _reject(sql_type, value, "not a string")
        return value
    if sql_type is SqlType.BYTES:
        if not isinstance(value, (bytes, bytearray, memoryview)):
            raise _reject(sql_type, value, "not a byte sequence")
        return bytes(value)
    if sql_type is SqlType.DATE:
        if isinstance(value, datetime) or not isinstance(value, date):
            raise _reject(sql_type, value, "not a date")
        return value
    if sql_type is SqlType.DATETIME:
        if not isinstance(value, datetime):
            raise _reject(sql_type, value, "not a datetime")
        return value
    if sql_type is SqlType.DATETIME_UTC:
        if not isinstance(value, datetime):
            raise _reject(sql_type, value, "not a datetime")
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc).replace(tzinfo=None)
        return value
    if sql_type is SqlType.UUID:
        if isinstance(value, UUID):
            return uuid_to_bytes(value)
        if isinstance(value, (bytes, bytearray)) and len(value) == 16:
            return bytes(value)
        raise _reject(sql_type, value, "not a UUID")
    if sql_type is SqlType.DECIMAL:
        if isinstance(value, bool) or not isinstance(value, (Decimal, int)):
            raise _reject(sql_type, value, "not an exact decimal")
        return Decimal(value)
    raise _reject(sql_type, value, "unsupported type")  # pragma: no cover


@dataclass(frozen=True, slots=True)
class ProcedureParam:
    """A single positional argument together with its semantic type."""

    sql_type: SqlType
    value: object
    nullable: bool = False

    def __post_init__(self) -> None:
        if self.value is None and not self.nullable:
            raise _reject(self.sql_type, None, "value is required")
        if self.value is not None:
            _coerce(self.sql_type, self.value)

    @property
    def bind_value(self) -> object:
        """Return the value as handed to the database driver."""

        if self.value is None:
            return None
        return _coerce(self.sql_type, self.value)

    def bind(self, name: str) -> BindParameter:
        """Return a typed SQLAlchemy bind parameter called ``name``."""

        return bindparam(name, value=self.bind_value, type_=_SQLALCHEMY_TYPES[self.sql_type])


def uuid(value: UUID) -> ProcedureParam:
    return ProcedureParam(SqlType.UUID, value)


def optional_uuid(value: UUID | None) -> ProcedureParam:
    return ProcedureParam(SqlType.UUID, value, nullable=True)


def text(value: str) -> ProcedureParam:
    return ProcedureParam(SqlType.STRING, value)


def optional_text(value: str | None) -> ProcedureParam:
    return ProcedureParam(SqlType.STRING, value, nullable=True)


def boolean(value: bool) -> ProcedureParam:
    return ProcedureParam(SqlType.BOOL, value)


def u8(value: int) -> ProcedureParam:
    return ProcedureParam(SqlType.U8, value)


def optional_u32(value: int | None) -> ProcedureParam:
    return ProcedureParam(SqlType.U32, value, nullable=True)


def decimal(value: Decimal) -> ProcedureParam:
    return ProcedureParam(SqlType.DECIMAL, value)


def optional_decimal(value: Decimal | None) -> ProcedureParam:
    return ProcedureParam(SqlType.DECIMAL, value, nullable=True)


def day(value: date) -> ProcedureParam:
    return ProcedureParam(SqlType.DATE, value)


def meta_user(value: UUID | None) -> ProcedureParam:
    """Trailing audit parameter naming the identity behind the call."""

    return optional_uuid(value)


__all__ = [
    "ProcedureParam",
    "SqlType",
    "boolean",
    "bytes_to_uuid",
    "day",
    "decimal",
    "meta_user",
    "optional_decimal",
    "optional_text",
    "optional_u32",
    "optional_uuid",
    "text",
    "u8",
    "uuid",
    "uuid_to_bytes",
]

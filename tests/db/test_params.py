"""Tests for typed procedure parameters."""
from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from decimal import Decimal
from uuid import uuid4

import pytest

from pocketbook.core.errors import ValidationError
from pocketbook.db import params
from pocketbook.db.params import ProcedureParam, SqlType, bytes_to_uuid, uuid_to_bytes


def test_uuid_binds_as_sixteen_raw_bytes() -> None:
    identity = uuid4()

    param = params.uuid(identity)

    assert param.bind_value == identity.bytes
    assert bytes_to_uuid(uuid_to_bytes(identity)) == identity


def test_meta_user_is_nullable() -> None:
    assert params.meta_user(None).bind_value is None

    identity = uuid4()
    assert params.meta_user(identity).bind_value == identity.bytes


def test_required_parameter_rejects_none() -> None:
    with pytest.raises(ValidationError):
        params.text(None)  # type: ignore[arg-type]


@pytest.mark.parametrize(
    ("sql_type", "value"),
    [
        (SqlType.U8, 256),
        (SqlType.U8, -1),
        (SqlType.I8, 128),
        (SqlType.I16, -(2**15) - 1),
        (SqlType.U32, 2**32),
        (SqlType.I64, 2**63),
    ],
)
def test_integer_width_and_sign_are_enforced(sql_type: SqlType, value: int) -> None:
    with pytest.raises(ValidationError):
        ProcedureParam(sql_type, value)


def test_integer_bounds_are_inclusive() -> None:
    assert ProcedureParam(SqlType.U8, 255).bind_value == 255
    assert ProcedureParam(SqlType.I8, -128).bind_value == -128
    assert ProcedureParam(SqlType.U64, 2**64 - 1).bind_value == 2**64 - 1


def test_booleans_are_not_integers() -> None:
    with pytest.raises(ValidationError):
        ProcedureParam(SqlType.I32, True)
    with pytest.raises(ValidationError):
        ProcedureParam(SqlType.BOOL, 1)


def test_decimal_rejects_floats() -> None:
    with pytest.raises(ValidationError):
        params.decimal(1.5)  # type: ignore[arg-type]

    assert params.decimal(Decimal("1.0850")).bind_value == Decimal("1.0850")


def test_date_rejects_datetime() -> None:
    with pytest.raises(ValidationError):
        params.day(datetime(2024, 1, 1))

    assert params.day(date(2024, 1, 1)).bind_value == date(2024, 1, 1)


def test_utc_datetime_is_normalised_to_naive_utc() -> None:
    paris = timezone(timedelta(hours=2))
    value = datetime(2024, 5, 1, 14, 0, tzinfo=paris)

    bound = ProcedureParam(SqlType.DATETIME_UTC, value).bind_value

    assert bound == datetime(2024, 5, 1, 12, 0)


def test_bind_produces_named_parameter() -> None:
    bind = params.optional_u32(20).bind("p3")

    assert bind.key == "p3"
    assert bind.value == 20

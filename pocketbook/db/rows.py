"""Typed access to procedure result rows."""
from __future__ import annotations

from datetime import date, datetime, timezone
from decimal import Decimal, InvalidOperation
from typing import Any, Callable, Iterable, Mapping, Sequence, TypeVar
from uuid import UUID

from pocketbook.core.errors import MappingError

from .params import bytes_to_uuid

E = TypeVar("E", covariant=True)


def column_index_map(columns: Iterable[str]) -> dict[str, int]:
    """Map lower-cased column names to their position in a row."""

    return {str(name).lower(): index for index, name in enumerate(columns)}


class RowReader:
    """Read named, typed values out of a single result row.

    Lookups are case-insensitive; every failed lookup or conversion raises a
    :class:`MappingError` naming the column.
    """

    __slots__ = ("_row", "_columns")

    def __init__(self, row: Sequence[Any], columns: Mapping[str, int]) -> None:
        self._row = row
        self._columns = columns

    def raw(self, column: str) -> Any:
        index = self._columns.get(column.lower())
        if index is None or index >= len(self._row):
            raise MappingError(column, "a present column", "column missing from result")
        return self._row[index]

    def _required(self, column: str, expected: str) -> Any:
        value = self.raw(column)
        if value is None:
            raise MappingError(column, expected, "unexpected NULL")
        return value

    def text(self, column: str) -> str:
        return self._to_text(column, self._required(column, "string"))

    def optional_text(self, column: str) -> str | None:
        value = self.raw(column)
        return None if value is None else self._to_text(column, value)

    def integer(self, column: str) -> int:
        value = self._required(column, "integer")
        if isinstance(value, bool):
            return int(value)
        if isinstance(value, int):
            return value
        if isinstance(value, Decimal) and value == value.to_integral_value():
            return int(value)
        raise MappingError(column, "integer", f"got {type(value).__name__}")

    def boolean(self, column: str) -> bool:
        value = self._required(column, "boolean")
        if isinstance(value, bool):
            return value
        if isinstance(value, int) and value in (0, 1):
            return bool(value)
        if isinstance(value, (bytes, bytearray)) and len(value) == 1:
            return value[0] != 0
        raise MappingError(column, "boolean", f"got {value!r}")

    def decimal(self, column: str) -> Decimal:
        return self._to_decimal(column, self._required(column, "decimal"))

    def optional_decimal(self, column: str) -> Decimal | None:
        value = self.raw(column)
        return None if value is None else self._to_decimal(column, value)

    def date(self, column: str) -> date:
        value = self._required(column, "date")
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, date):
            return value
        if isinstance(value, str):
            try:
                return date.fromisoformat(value)
            except ValueError as exc:
                raise MappingError(column, "date", str(exc)) from exc
        raise MappingError(column, "date", f"got {type(value).__name__}")

    def datetime(self, column: str) -> datetime:
        return self._to_datetime(column, self._required(column, "datetime"))

    def optional_datetime(self, column: str) -> datetime | None:
        value = self.raw(column)
        return None if value is None else self._to_datetime(column, value)

    def uuid(self, column: str) -> UUID:
        return self._to_uuid(column, self._required(column, "uuid"))

    def optional_uuid(self, column: str) -> UUID | None:
        value = self.raw(column)
        return None if value is None else self._to_uuid(column, value)

    @staticmethod
    def _to_text(column: str, value: Any) -> str:
        if isinstance(value, str):
            return value
        if isinstance(value, (bytes, bytearray)):
            try:
                return bytes(value).decode("utf-8")
            except UnicodeDecodeError as exc:
                raise MappingError(column, "string", str(exc)) from exc
        raise MappingError(column, "string", f"got {type(value).__name__}")

    @staticmethod
    def _to_decimal(column: str, value: Any) -> Decimal:
        if isinstance(value, Decimal):
            return value
        if isinstance(value, bool):
            raise MappingError(column, "decimal", "got bool")
        if isinstance(value, (int, str, float)):
            try:
                return Decimal(str(value))
            except InvalidOperation as exc:
                raise MappingError(column, "decimal", f"got {value!r}") from exc
        raise MappingError(column, "decimal", f"got {type(value).__name__}")

    @staticmethod
    def _to_datetime(column: str, value: Any) -> datetime:
        if isinstance(value, str):
            try:
                value = datetime.fromisoformat(value)
            except ValueError as exc:
                raise MappingError(column, "datetime", str(exc)) from exc
        if not isinstance(value, datetime):
            raise MappingError(column, "datetime", f"got {type(value).__name__}")
        # Store timestamps are UTC without an offset
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)

    @staticmethod
    def _to_uuid(column: str, value: Any) -> UUID:
        if isinstance(value, UUID):
            return value
        try:
            if isinstance(value, (bytes, bytearray)):
                return bytes_to_uuid(bytes(value))
            if isinstance(value, str):
                return UUID(value)
        except ValueError as exc:
            raise MappingError(column, "uuid", str(exc)) from exc
        raise MappingError(column, "uuid", f"got {type(value).__name__}")


RowMapper = Callable[[RowReader], E]


__all__ = ["RowMapper", "RowReader", "column_index_map"]

"""Request-scoped fields, such as the caller id, appended to every log line."""
from __future__ import annotations

import contextvars
import logging
from contextlib import contextmanager
from typing import Iterator

_fields: contextvars.ContextVar[dict[str, object]] = contextvars.ContextVar(
    "pocketbook_log_fields", default={}
)


class LogContext:
    """Bind fields for the current request task.

    Each request runs in its own task, so bindings never leak between
    concurrent callers. ``None`` values are dropped.
    """

    def bind(self, **values: object) -> None:
        _fields.set({**_fields.get(), **_present(values)})

    def clear(self) -> None:
        _fields.set({})

    def as_dict(self) -> dict[str, object]:
        return dict(_fields.get())

    @contextmanager
    def scope(self, **values: object) -> Iterator[None]:
        token = _fields.set({**_fields.get(), **_present(values)})
        try:
            yield
        finally:
            _fields.reset(token)


def _present(values: dict[str, object]) -> dict[str, object]:
    return {key: value for key, value in values.items() if value is not None}


class ContextFilter(logging.Filter):
    """Render bound fields into ``record.context`` as ``key=value`` pairs.

    Records that already carry a context (rendered before crossing the log
    queue) are left untouched.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "context"):
            fields = _fields.get()
            record.context = "".join(f"{key}={value} " for key, value in fields.items())
        return True


log_context = LogContext()

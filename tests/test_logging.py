import logging

import pytest

from pocketbook.core.log import log_context, timeit
from pocketbook.core.log.context import ContextFilter


def _record() -> logging.LogRecord:
    return logging.LogRecord("pocketbook.test", logging.INFO, __file__, 1, "hello", None, None)


def test_context_fields_render_in_bind_order() -> None:
    with log_context.scope(user_id="42", procedure="proc_people_list", skipped=None):
        record = _record()
        ContextFilter().filter(record)

    assert record.context == "user_id=42 procedure=proc_people_list "
    assert log_context.as_dict() == {}


def test_context_rendered_before_the_queue_is_kept() -> None:
    record = _record()
    record.context = "user_id=7 "

    ContextFilter().filter(record)

    assert record.context == "user_id=7 "


def test_timeit_logs_duration_and_count(caplog) -> None:
    logger = logging.getLogger("pocketbook.test.timing")
    caplog.set_level(logging.DEBUG, logger="pocketbook.test.timing")

    with timeit("[CACHE] [GET] person:1", logger=logger, unit="hits") as trip:
        trip.set_count(1)

    assert "[CACHE] [GET] person:1 took" in caplog.text
    assert "(1 hits)" in caplog.text


def test_timeit_reports_failures(caplog) -> None:
    logger = logging.getLogger("pocketbook.test.timing")
    caplog.set_level(logging.DEBUG, logger="pocketbook.test.timing")

    with pytest.raises(RuntimeError):
        with timeit("[REPOSITORY] [CALL PROCEDURE] proc_user_list", logger=logger):
            raise RuntimeError("boom")

    assert caplog.records[-1].levelno == logging.WARNING
    assert "failed after" in caplog.records[-1].getMessage()

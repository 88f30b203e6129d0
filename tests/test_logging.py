"""
Tests for the structured log line formatter.
"""

from __future__ import annotations

import logging

from staybook.main import ContextFormatter


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord("staybook.test", logging.INFO, __file__, 1, "Field updated", None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_known_extras_are_appended():
    formatter = ContextFormatter("%(levelname)s:%(name)s:%(message)s")
    line = formatter.format(_record(form_id="f1", field="cvv", status="idle"))
    assert line == "INFO:staybook.test:Field updated | form_id=f1 field=cvv status=idle"


def test_unknown_and_empty_extras_are_skipped():
    formatter = ContextFormatter("%(message)s")
    line = formatter.format(_record(card_number="4111", reason=""))
    assert line == "Field updated"

"""
Tests : politique sur les exceptions non gérées (log critique puis arrêt du process).
"""

import logging
import threading

import pytest

from todo_api.core import logging_config


@pytest.fixture
def terminations(monkeypatch):
    calls = []
    monkeypatch.setattr(logging_config, "_terminate", lambda: calls.append(True))
    return calls


def test_loop_exception_is_logged_then_terminates(terminations, caplog):
    context = {"message": "Task exception was never retrieved", "exception": RuntimeError("boom")}
    with caplog.at_level(logging.CRITICAL, logger=logging_config.__name__):
        logging_config.handle_loop_exception(None, context)
    assert terminations == [True]
    record = caplog.records[-1]
    assert "Task exception was never retrieved" in record.getMessage()
    assert record.exc_info[0] is RuntimeError

def test_loop_error_without_exception_still_terminates(terminations, caplog):
    with caplog.at_level(logging.CRITICAL, logger=logging_config.__name__):
        logging_config.handle_loop_exception(None, {"message": "callback failed"})
    assert terminations == [True]
    assert caplog.records[-1].exc_info is None

def test_thread_exception_terminates(terminations, caplog):
    try:
        raise ValueError("worker died")
    except ValueError as e:
        args = threading.ExceptHookArgs((ValueError, e, e.__traceback__, threading.current_thread()))
    with caplog.at_level(logging.CRITICAL, logger=logging_config.__name__):
        logging_config._log_uncaught_in_thread(args)
    assert terminations == [True]
    assert "Uncaught exception in thread" in caplog.records[-1].getMessage()

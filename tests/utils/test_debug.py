"""Tests for the logging helpers."""

import importlib
import logging

import pytest

from catalogsearch.utils import debug as dbg


@pytest.fixture()
def debug_on(monkeypatch):
    """Reload utils.debug with CATALOGSEARCH_DEBUG=1."""
    monkeypatch.setenv("CATALOGSEARCH_DEBUG", "1")
    importlib.reload(dbg)
    yield dbg
    monkeypatch.delenv("CATALOGSEARCH_DEBUG")
    importlib.reload(dbg)


def test_logf_formats_when_debug_on(debug_on, caplog):
    with caplog.at_level(logging.DEBUG, logger="catalogsearch"):
        debug_on.logf("GET %s", "https://search.example.com/search")
    assert "GET https://search.example.com/search" in caplog.text


def test_logf_without_args(debug_on, caplog):
    # A lone format string is logged verbatim, including stray percent signs
    with caplog.at_level(logging.DEBUG, logger="catalogsearch"):
        debug_on.logf("100% done")
    assert "100% done" in caplog.text


def test_debug_silent_by_default(monkeypatch, caplog):
    monkeypatch.delenv("CATALOGSEARCH_DEBUG", raising=False)
    importlib.reload(dbg)
    with caplog.at_level(logging.DEBUG, logger="catalogsearch"):
        dbg.logf("GET %s", "x")
    assert "GET x" not in caplog.text

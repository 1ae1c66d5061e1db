import os, sys
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

import io
import time

import utils


def test_log_with_time(monkeypatch):
    monkeypatch.setattr(utils, "start_time", 0)
    out = io.StringIO()
    monkeypatch.setattr('sys.stdout', out)
    utils.log_with_time('Test message', color='')
    assert 'Test message' in out.getvalue()


def test_log_with_time_sets_start(monkeypatch):
    monkeypatch.setattr(utils, "start_time", None)
    out = io.StringIO()
    monkeypatch.setattr('sys.stdout', out)
    utils.log_with_time('first')
    assert utils.start_time is not None
    assert '[00:00.' in out.getvalue()


def test_vlog_respects_verbose(monkeypatch):
    monkeypatch.setattr(utils, "start_time", time.time())
    out = io.StringIO()
    monkeypatch.setattr('sys.stdout', out)
    monkeypatch.setattr(utils, "VERBOSE", False)
    utils.vlog('hidden')
    assert out.getvalue() == ''
    monkeypatch.setattr(utils, "VERBOSE", True)
    utils.vlog('shown', t0=time.time())
    assert 'shown (took ' in out.getvalue()

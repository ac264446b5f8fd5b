import logging

import pytest
from stats_service import config
from stats_service.observability.recorder import (
    RECORDS_LOGGER,
    FileRecorder,
    LogRecorder,
    get_recorder,
)

def test_file_recorder_appends_timestamped_entries(tmp_path):
    path = tmp_path / "records" / "results.log"
    recorder = FileRecorder(path)
    recorder.record('{"operation":"mean","value":2.0}')
    recorder.record("second")
    entries = path.read_text(encoding="utf-8").split("\n\n")
    assert entries[-1] == ""
    first_ts, first_content = entries[0].split("\n")
    assert first_content == '{"operation":"mean","value":2.0}'
    assert first_ts.startswith("20") and "T" in first_ts
    assert entries[1].split("\n")[1] == "second"

def test_file_recorder_propagates_write_errors(tmp_path):
    with pytest.raises(OSError):
        FileRecorder(tmp_path).record("content")  # tmp_path is a directory

def test_log_recorder_logs_content(caplog):
    caplog.set_level(logging.INFO, logger="records.test")
    LogRecorder(logging.getLogger("records.test")).record("hello")
    assert any(r.name == "records.test" and r.getMessage() == "hello" for r in caplog.records)

def test_log_recorder_default_logger():
    assert LogRecorder().logger.name == RECORDS_LOGGER

def test_get_recorder_follows_config(monkeypatch, tmp_path):
    monkeypatch.setattr(config, "RECORD_FILE", None)
    assert isinstance(get_recorder(), LogRecorder)
    monkeypatch.setattr(config, "RECORD_FILE", str(tmp_path / "out.log"))
    assert isinstance(get_recorder(), FileRecorder)

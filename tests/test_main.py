import json
import logging
import sys

import pytest

import main
from app.config import Mode, SessionConfig


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    hook = sys.excepthook
    yield
    sys.excepthook = hook
    for h in root.handlers:
        if h not in handlers:
            h.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_setup_logging_writes_file(tmp_path, restore_logging):
    log_file = tmp_path / "run.log"
    main.setup_logging(logging.DEBUG, str(log_file))
    logging.getLogger("services.session").info("hello from test")
    for h in logging.getLogger().handlers:
        h.flush()
    text = log_file.read_text(encoding="utf-8")
    assert "| INFO | services.session | hello from test" in text


def test_replay_types_the_whole_text():
    cfg = SessionConfig(Mode.WORDS, 1, "cat", tick_ms=20)
    result = main.replay(cfg, cps=10)
    assert result is not None
    assert result.accuracy == 100.0
    assert result.mode == "words"


def test_replay_stops_at_time_ceiling():
    cfg = SessionConfig(Mode.TIME, 2, "x" * 500, tick_ms=20)
    result = main.replay(cfg, cps=1)
    assert result.elapsed == 2
    assert result.progress < 100.0


def test_main_prints_result_json(tmp_path, capsys, restore_logging):
    path = tmp_path / "session.json"
    path.write_text(json.dumps({"mode": "words", "mode_option": 1, "text": "ab", "tick_ms": 20}))
    assert main.main(["--config", str(path), "--cps", "10", "--log-level", "WARNING"]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out["accuracy"] == 100.0
    assert out["modeOption"] == 1


def test_main_rejects_bad_config(tmp_path, restore_logging):
    path = tmp_path / "session.json"
    path.write_text(json.dumps({"mode": "zen", "mode_option": 1, "text": "ab"}))
    assert main.main(["--config", str(path)]) == 2

# main.py
from __future__ import annotations
import argparse
import json
import logging
import sys
from typing import Optional, Sequence

from PySide6.QtCore import QCoreApplication, QEventLoop, QTimer

from app.config import SessionConfig, load_session_config
from app.errors import ConfigError
from app.state import SessionResult
from services.session import TypingSession


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> None:
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        handlers=handlers,
        force=True,
    )

    # Log any uncaught exceptions rather than silently dying
    def excepthook(exctype, value, tb):
        logging.critical("Unhandled exception", exc_info=(exctype, value, tb))

    sys.excepthook = excepthook


def replay(config: SessionConfig, cps: float = 5.0) -> Optional[SessionResult]:
    """
    Run a session headless with a scripted typist that types the reference
    text perfectly at `cps` characters per clock tick.
    """
    app = QCoreApplication.instance() or QCoreApplication(sys.argv[:1])  # noqa: F841
    session = TypingSession(config)
    loop = QEventLoop()

    typist = QTimer(session)
    typist.setInterval(max(1, int(config.tick_ms / max(cps, 0.001))))
    typed = [0]

    def type_next():
        typed[0] += 1
        session.handle_input(config.text[: typed[0]])

    def on_done(_result):
        typist.stop()
        loop.quit()

    typist.timeout.connect(type_next)
    session.completed.connect(on_done)

    session.start()
    if not session.is_completed:
        typist.start()
        loop.exec()
    session.teardown()
    return session.result


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Replay a typing session headless.")
    parser.add_argument("--config", required=True, help="session JSON (mode, mode_option, text)")
    parser.add_argument("--cps", type=float, default=5.0, help="characters typed per tick")
    parser.add_argument("--log-level", default="INFO")
    parser.add_argument("--log-file", default=None)
    args = parser.parse_args(argv)

    setup_logging(getattr(logging, str(args.log_level).upper(), logging.INFO), args.log_file)

    try:
        config = load_session_config(args.config)
    except ConfigError as e:
        logging.error("%s", e)
        return 2

    result = replay(config, cps=args.cps)
    if result is None:
        logging.error("session did not complete")
        return 1
    print(json.dumps(result.to_dict(), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())

# tests/test_logging_setup.py

from __future__ import annotations

import logging
from pathlib import Path

from logging_setup import setup_logging


def _file_handlers() -> list:
    return [h for h in logging.getLogger().handlers if isinstance(h, logging.FileHandler)]


def test_repeated_setup_closes_previous_handlers(tmp_path: Path) -> None:
    root = logging.getLogger()
    saved = list(root.handlers)
    try:
        setup_logging(log_file=tmp_path / "first.log")
        [first] = _file_handlers()
        assert first.stream is not None

        setup_logging(log_file=tmp_path / "second.log")

        # FileHandler.close() drops its stream
        assert first.stream is None
        assert first not in root.handlers
        [second] = _file_handlers()
        assert Path(second.baseFilename) == (tmp_path / "second.log").resolve()
    finally:
        for h in list(root.handlers):
            root.removeHandler(h)
            h.close()
        for h in saved:
            root.addHandler(h)


def test_file_handler_receives_debug(tmp_path: Path) -> None:
    root = logging.getLogger()
    saved = list(root.handlers)
    log_file = tmp_path / "logs" / "tazu.log"
    try:
        setup_logging(log_file=log_file)
        logging.getLogger("storage").debug("Saved %d task(s)", 3)
        for h in root.handlers:
            h.flush()
        assert "DEBUG storage: Saved 3 task(s)" in log_file.read_text(encoding="utf-8")
    finally:
        for h in list(root.handlers):
            root.removeHandler(h)
            h.close()
        for h in saved:
            root.addHandler(h)

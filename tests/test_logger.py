# tests/test_logger.py
import importlib
import os
import subprocess
import sys

from loguru import logger

import menusearch.logger
from menusearch.config import Settings
from menusearch.logger import configure_logging
from menusearch.scoring.evaluator import fuzzy_match
from menusearch.scoring.ranking import Ranker

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

HOST_SCRIPT = """
from loguru import logger
calls = []
logger.add(lambda message: calls.append(message), level="INFO")
import menusearch
logger.info("host message")
print("HOST_HANDLER_CALLS", len(calls))
"""


class TestLibraryLogging:
    """La bibliothèque ne touche pas aux handlers Loguru de l'application hôte."""

    def test_host_handlers_survive_import(self):
        out = subprocess.run(
            [sys.executable, "-c", HOST_SCRIPT],
            cwd=ROOT, capture_output=True, text=True, check=True,
        )
        assert "HOST_HANDLER_CALLS 1" in out.stdout

    def test_host_handler_survives_reload(self):
        calls = []
        handler_id = logger.add(lambda message: calls.append(message), level="INFO")
        try:
            importlib.reload(menusearch.logger)
            logger.info("host message")
        finally:
            logger.remove(handler_id)
        assert len(calls) == 1

    def test_library_is_silent_by_default(self):
        messages = []
        handler_id = logger.add(lambda message: messages.append(message), level="DEBUG")
        try:
            Ranker().rank([{"name": "Pizza"}], "piza", lambda i: [i["name"]])
            try:
                fuzzy_match("pizza", "Pizza", 2)
            except ValueError:
                pass
        finally:
            logger.remove(handler_id)
        assert messages == []

    def test_configure_logging_writes_files(self, tmp_path):
        config = Settings(_env_file=None, LOG_DIR=str(tmp_path), LOG_LEVEL="DEBUG")
        try:
            configure_logging(config)
            Ranker().rank([{"name": "Pizza"}], "piza", lambda i: [i["name"]])
        finally:
            # Ferme les fichiers et rend la main aux autres tests
            logger.remove()
            logger.add(sys.stderr)
            logger.disable("menusearch")

        with open(tmp_path / "debug.log", encoding="utf-8") as f:
            assert "Ranked 1 items" in f.read()

import logging
from pathlib import Path

import pytest

from src.custom_data_structures.Trie.Trie import Trie

CONFIG_TEMPLATE = """
# Self-check configuration
log_file = {log_file}
log_level = {log_level}
stop_on_failure = {stop_on_failure}
"""


@pytest.fixture
def empty_trie():
    return Trie()


@pytest.fixture
def write_config(tmp_path):
    """Returns a helper writing a config file into `tmp_path`."""

    def _write(
        log_level: str = "info",
        stop_on_failure: str = "no",
        log_file: Path = tmp_path / "logs" / "selfcheck.log",
    ) -> Path:
        config_path = tmp_path / "config.txt"
        config_path.write_text(
            CONFIG_TEMPLATE.format(
                log_file=log_file,
                log_level=log_level,
                stop_on_failure=stop_on_failure,
            ),
            encoding="utf-8",
        )
        return config_path

    return _write


@pytest.fixture
def restore_root_logger():
    """Puts the root logger's handlers and level back after the test."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level

    yield root_logger

    for handler in root_logger.handlers[:]:
        if handler not in handlers:
            root_logger.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root_logger.handlers:
            root_logger.addHandler(handler)
    root_logger.setLevel(level)

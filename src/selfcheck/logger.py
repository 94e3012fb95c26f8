"""Structured logging of self-check runs (timestamp, check, outcome)."""

import logging
import logging.handlers
from pathlib import Path

LOG_FILE_PATH = Path(__file__).parent.parent.parent / "logs/selfcheck.log"
_LOG_LEVEL = logging.INFO

LOG_FORMAT = (
    "level=%(levelname)s | time=%(asctime)s | process=%(process)d | "
    "thread=%(thread)d | module=%(module)s | funcName=%(funcName)s | "
    "lineno=%(lineno)d | message=%(message)s"
)


def setup_logging(
    log_file_path: Path = LOG_FILE_PATH,
    level: int = _LOG_LEVEL,
) -> logging.Handler:
    """Configure the root logger to write into a rotating log file.

    Any handler already attached to the root logger is removed first,
    so calling this more than once doesn't duplicate records.

    Args:
        log_file_path (Path): The file the records are written to, its
        parent directory is created if missing.
        level (int): The level of the root logger.

    Returns:
        logging.Handler: The installed file handler.

    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    log_file_path.parent.mkdir(parents=True, exist_ok=True)

    file_handler = logging.handlers.RotatingFileHandler(
        log_file_path,
        maxBytes=10 * 1024 * 1024,
        backupCount=5,
        encoding="utf-8",
    )
    formatter = logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    return file_handler


def log(
    time_stamp: str,
    check_name: str,
    passed: bool,
    execution_time_ms: float,
) -> None:
    """Log the details of a check execution using the configured
    logging system.

    Args:
        time_stamp (str): The timestamp of the check execution.
        check_name (str): The name of the check.
        passed (bool): Whether the check passed.
        execution_time_ms (float): The execution time in milliseconds.

    """
    logging.info(
        "Timestamp: %s, Check: '%s', Result: %s, Execution Time: %.2f ms",
        time_stamp,
        check_name,
        "PASSED" if passed else "FAILED",
        execution_time_ms,
    )

"""Configuration parser for the self-check runner."""

import logging
from pathlib import Path
from typing import cast


class ConfigBoolParsingError(Exception):
    """Raised when the parsing of bool strings in
    the config file was not successful.
    """


class ConfigLogLevelParsingError(Exception):
    """Raised when the log level in the config file is not a known one."""


class ConfigNotFoundError(Exception):
    """Raised when any of the configuration settings is not provided."""


LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}


class SelfCheckConfig:
    """A class to save self-check configuration settings."""

    def __init__(
        self,
        log_file: Path,
        log_level: int,
        stop_on_failure: bool,
    ) -> None:
        """Initialize the self-check configuration.

        Args:
            log_file (Path): The path of the file the check logs go to.
            log_level (int): The logging level, e.g. `logging.INFO`.
            stop_on_failure (bool): Whether to stop after the first
            failing check.

        """
        self.log_file = log_file
        self.log_level = log_level
        self.stop_on_failure = stop_on_failure

    def __repr__(self) -> str:
        """Return a string representation of the configuration object.

        Returns:
            str: A formatted string representing the configuration settings.

        """
        return f"""
                Self-check configuration settings:
                Log file: {self.log_file}
                Log level: {logging.getLevelName(self.log_level)}
                Stop on failure: {"YES" if self.stop_on_failure else "NO"}
            """


def parse_bool(key: str, val: str) -> bool:
    """Parse given values into boolean ones (True or False).

    Args:
        key (str): The key to parse the boolean for.
        val (str): The value to be parsed to boolean.

    Raises:
        ConfigBoolParsingError: If an error occured
        while parsing the value to boolean.

    Returns:
        bool: True or False depending on the output of the parser.

    """
    if val.strip().lower() in {"true", "1", "yes"}:
        return True
    if val.strip().lower() in {"false", "0", "no"}:
        return False

    raise ConfigBoolParsingError(
        f"Invalid boolean value for key '{key}' in the configuration file. "
        "Expected 'true', 'false', '1', '0', 'yes', or 'no' "
        "(case-insensitive).",
    )


def parse_log_level(key: str, val: str) -> int:
    """Parse a log level name into its `logging` constant.

    Args:
        key (str): The key to parse the level for.
        val (str): The level name, case-insensitive.

    Raises:
        ConfigLogLevelParsingError: If the name is not a known level.

    Returns:
        int: The matching `logging` level.

    """
    level = LOG_LEVELS.get(val.strip().lower())
    if level is None:
        raise ConfigLogLevelParsingError(
            f"Invalid log level for key '{key}' in the configuration file. "
            f"Expected one of {', '.join(repr(name) for name in LOG_LEVELS)} "
            "(case-insensitive).",
        )
    return level


def load_config_file(config_file_path: Path) -> SelfCheckConfig:
    """Load and parse the configuration file.

    A relative `log_file` is resolved against the directory of the
    config file, not the working directory.

    Args:
        config_file_path (Path): Path to the config file.

    Raises:
        ConfigNotFoundError: If required settings are missing.
        FileNotFoundError: If the config file does not exist.

    Returns:
        SelfCheckConfig: Parsed config object.

    """
    if not config_file_path.exists():
        raise FileNotFoundError(
            f"Missing required configuration file: '{config_file_path}'. "
            "Please ensure the file exists and the path is correct.",
        )

    # Initialize variables for required config values
    log_file = log_level = stop_on_failure = None

    with config_file_path.open("r", encoding="utf-8") as file:
        for line in file:
            line = line.strip()

            # Skip blank lines and comments
            if not line or line.startswith("#"):
                continue

            key, sep, value = line.partition("=")
            if sep != "=":
                continue

            key = key.strip().lower()
            value = value.strip()

            if key == "log_file":
                log_file = Path(value)
                # Relative log paths are anchored at the config file
                if not log_file.is_absolute():
                    log_file = config_file_path.parent / log_file
            elif key == "log_level":
                log_level = parse_log_level("log_level", value)
            elif key == "stop_on_failure":
                stop_on_failure = parse_bool("stop_on_failure", value)

    required = {
        "log_file": log_file,
        "log_level": log_level,
        "stop_on_failure": stop_on_failure,
    }

    for key, val in required.items():
        if val is None:
            raise ConfigNotFoundError(
                f"Missing required configuration: '{key}'. "
                "Please ensure the config file includes a valid line for "
                f"'{key}'.",
            )

    return SelfCheckConfig(
        cast("Path", log_file),
        cast("int", log_level),
        cast("bool", stop_on_failure),
    )

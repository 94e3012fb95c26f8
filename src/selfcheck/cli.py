"""Command-line entry point running the trie self-checks."""

import argparse
import logging
from pathlib import Path
from typing import Optional

from .checks import ALL_CHECKS, run_checks
from .config import load_config_file
from .logger import setup_logging

CONFIG_PATH = Path(__file__).parent.parent.parent / "config.txt"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Run the keyed trie self-checks.",
    )
    parser.add_argument(
        "--config_path",
        type=str,
        default=str(CONFIG_PATH),
        help="Optional path to the config file.",
        required=False,
    )
    parser.add_argument(
        "--check",
        action="append",
        choices=list(ALL_CHECKS),
        help="Run only the named check, may be given more than once.",
        required=False,
    )
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Run the self-checks.

    Args:
        argv (Optional[list[str]]): The command-line arguments, defaults
        to `sys.argv[1:]`.

    Returns:
        int: 0 if every executed check passed, 1 otherwise.

    """
    args = build_parser().parse_args(argv)

    config = load_config_file(Path(args.config_path))
    setup_logging(config.log_file, config.log_level)
    logging.info("Loaded configuration: %r", config)

    names = args.check or list(ALL_CHECKS)
    results = run_checks(
        [(name, ALL_CHECKS[name]) for name in names],
        stop_on_failure=config.stop_on_failure,
    )

    for result in results:
        status = "PASSED" if result.passed else "FAILED"
        line = f"[SELFCHECK] {result.name}: {status}"
        if result.message:
            line += f" ({result.message})"
        print(line)

    failed = [result for result in results if not result.passed]
    print(
        f"[SELFCHECK] {len(results) - len(failed)}/{len(results)} "
        "checks passed.",
    )

    return 1 if failed else 0

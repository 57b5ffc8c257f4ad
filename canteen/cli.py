"""Command-line entry point for the bootstrap launcher.

Every argument is forwarded to Java, so there is no argument parser here.
Settings come from the environment (see config.py).
"""

import logging
import sys
from typing import List, Optional

from .config import ConfigError, load_config
from .errors import BootstrapError
from .invocation import build_invocation
from .java import find_java
from .launcher import launch

logger = logging.getLogger(__name__)

# Exit status for failures of the launcher itself (not of the Java process)
EXIT_BOOTSTRAP_FAILURE = 1


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the launcher.

    By default, logging does not output to console, so a successful run
    shows only what Java prints. In verbose mode, DEBUG-level logs are
    shown on stderr.
    """
    # Remove any existing handlers to avoid duplicates
    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    if verbose:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(logging.DEBUG)
        console_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S"
            )
        )
        root_logger.addHandler(console_handler)
        root_logger.setLevel(logging.DEBUG)
    else:
        # No console handler added, so nothing appears on console
        root_logger.setLevel(logging.WARNING)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point.

    Args:
        argv: Full argument vector including argument 0. If None, uses
            sys.argv

    Returns:
        Java's exit status, or EXIT_BOOTSTRAP_FAILURE if the launcher
        itself failed. Does not return when Java replaces this process.
    """
    if argv is None:
        argv = sys.argv
    if not argv:
        # The jar path is argument 0, so there is nothing to launch without it
        print("Error: missing argument 0 (the launcher path)", file=sys.stderr)
        return EXIT_BOOTSTRAP_FAILURE
    self_path, forwarded = argv[0], argv[1:]

    try:
        config = load_config()
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_BOOTSTRAP_FAILURE

    setup_logging(config.verbose)
    logger.debug(
        f"Launching {self_path!r} with {len(forwarded)} argument(s), "
        f"mode={config.launch_mode}, java_home_fallback={config.java_home_fallback}"
    )

    try:
        java = find_java(java_home_fallback=config.java_home_fallback)
        invocation = build_invocation(java, self_path, forwarded)
        return launch(invocation, config.launch_mode)
    except BootstrapError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_BOOTSTRAP_FAILURE


if __name__ == "__main__":
    sys.exit(main())

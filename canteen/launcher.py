"""Running the Java invocation.

Two strategies are available. On Unix the launcher replaces its own process
image with Java ("exec"), so Java keeps the launcher's pid, environment and
standard streams. Where that is not possible (Windows) Java runs as a child
process sharing the launcher's standard streams ("spawn"), and the launcher
exits with the child's status.
"""

import logging
import os
import signal
import subprocess
import sys
from typing import Any, Dict

from .errors import BootstrapExecutionError
from .invocation import Invocation

logger = logging.getLogger(__name__)

# argv[0] handed to Java when replacing the process image
JAVA_ARGV0 = "java"

# Python ignores these at startup and an ignored disposition survives exec.
# subprocess.Popen resets them for spawned children (restore_signals=True).
RESET_SIGNALS = tuple(
    getattr(signal, name) for name in ("SIGPIPE", "SIGXFSZ") if hasattr(signal, name)
)


def is_windows() -> bool:
    """Check if running on Windows."""
    return sys.platform.startswith('win')


def is_unix() -> bool:
    """Check if running on Unix (Linux, macOS, etc.)."""
    return not is_windows()


def _flush_std_streams() -> None:
    """Flush Python-level buffers before the process image goes away."""
    for stream in (sys.stdout, sys.stderr):
        if stream is None:
            continue
        try:
            stream.flush()
        except (OSError, ValueError):
            # Closed or broken stream; nothing left to flush
            pass


def _reset_signals() -> Dict[int, Any]:
    """Set RESET_SIGNALS back to SIG_DFL, returning the previous handlers."""
    previous = {}
    for signum in RESET_SIGNALS:
        previous[signum] = signal.signal(signum, signal.SIG_DFL)
    return previous


def _restore_signals(previous: Dict[int, Any]) -> None:
    for signum, handler in previous.items():
        signal.signal(signum, handler)


def exec_java(invocation: Invocation) -> None:
    """Replace the current process with Java.

    The environment is inherited unchanged. SIGPIPE and SIGXFSZ are reset
    to their defaults first, so Java starts with the same signal state as a
    spawned child would. Never returns on success.

    Raises:
        BootstrapExecutionError: If the exec call fails
    """
    argv = invocation.argv(JAVA_ARGV0)
    logger.debug(f"Replacing process with {invocation.java} {argv[1:]}")
    _flush_std_streams()
    previous = _reset_signals()
    try:
        os.execv(invocation.java, argv)
    except OSError as e:
        _restore_signals(previous)
        raise BootstrapExecutionError(f"Bootstrap execution error: {e}") from e


def spawn_java(invocation: Invocation) -> int:
    """Run Java as a child process and wait for it.

    stdin, stdout and stderr are inherited, not piped, so the child reads
    and writes the launcher's own streams directly.

    Returns:
        The child's exit status

    Raises:
        BootstrapExecutionError: If the child cannot be started, or it
            terminated without an exit code (killed by a signal)
    """
    argv = invocation.argv(invocation.java)
    logger.debug(f"Spawning {argv}")
    try:
        process = subprocess.Popen(argv)
    except OSError as e:
        raise BootstrapExecutionError(f"Bootstrap execution error: {e}") from e

    while True:
        try:
            returncode = process.wait()
            break
        except KeyboardInterrupt:
            # The child shares our console and got the interrupt as well;
            # its own handling decides the exit status
            logger.debug("Interrupted, waiting for java to exit")

    if returncode < 0:
        raise BootstrapExecutionError(
            f"Bootstrap execution error: java terminated by signal {-returncode}"
        )

    logger.debug(f"java exited with status {returncode}")
    return returncode


def launch(invocation: Invocation, mode: str) -> int:
    """Run the invocation with the given launch mode.

    Args:
        invocation: The Java invocation to run
        mode: "exec" or "spawn" (see config.resolve_launch_mode)

    Returns:
        Java's exit status (spawn mode only; exec mode never returns)

    Raises:
        BootstrapExecutionError: If Java could not be run
        ValueError: If mode is not "exec" or "spawn"
    """
    if mode == "exec":
        exec_java(invocation)
        raise BootstrapExecutionError("Bootstrap execution error: exec returned without replacing the process")
    if mode == "spawn":
        return spawn_java(invocation)
    raise ValueError(f"Unsupported launch mode: {mode}")

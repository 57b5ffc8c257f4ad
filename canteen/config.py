"""Launcher settings read from the environment.

The launcher forwards every command-line argument to Java, so it has no
flags of its own. Its few settings come from CANTEEN_* environment variables
instead. Those variables are left in place and reach the Java process along
with the rest of the environment.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .launcher import is_windows

JAVA_HOME_FALLBACK_VAR = "CANTEEN_JAVA_HOME_FALLBACK"
LAUNCH_MODE_VAR = "CANTEEN_LAUNCH_MODE"
VERBOSE_VAR = "CANTEEN_VERBOSE"

LAUNCH_MODES = ("auto", "exec", "spawn")

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


class ConfigError(Exception):
    """Raised when a CANTEEN_* environment variable has an invalid value."""
    pass


@dataclass(frozen=True)
class LauncherConfig:
    """Launcher settings.

    Attributes:
        java_home_fallback: Fall back to JAVA_HOME when java is not on PATH.
            Disabling this gives the strict PATH-only launcher.
        launch_mode: "exec" replaces the process image, "spawn" runs Java as
            a child and waits for it, "auto" picks by platform.
        verbose: Show DEBUG-level logs on stderr.
    """
    java_home_fallback: bool = True
    launch_mode: str = "auto"
    verbose: bool = False


def parse_bool(name: str, value: str) -> bool:
    """Parse a boolean environment value.

    Args:
        name: Variable name (for error messages)
        value: Raw value from the environment

    Returns:
        The parsed boolean

    Raises:
        ConfigError: If the value is not a recognised boolean spelling
    """
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ConfigError(
        f"Invalid value for {name}: expected boolean "
        f"(1/0, true/false, yes/no, on/off), got '{value}'"
    )


def resolve_launch_mode(mode: str) -> str:
    """Map a configured launch mode to the concrete one to use.

    Args:
        mode: One of "auto", "exec", "spawn"

    Returns:
        "exec" or "spawn"

    Raises:
        ConfigError: If mode is unknown, or "exec" is requested on Windows
    """
    if mode not in LAUNCH_MODES:
        raise ConfigError(
            f"Invalid value for {LAUNCH_MODE_VAR}: "
            f"must be one of 'auto', 'exec', 'spawn', got '{mode}'"
        )
    if mode == "auto":
        return "spawn" if is_windows() else "exec"
    if mode == "exec" and is_windows():
        raise ConfigError(
            f"Invalid value for {LAUNCH_MODE_VAR}: "
            "'exec' is not supported on Windows, use 'spawn' or 'auto'"
        )
    return mode


def load_config(environ: Optional[Mapping[str, str]] = None) -> LauncherConfig:
    """Load launcher settings from the environment.

    Unset and empty variables take their defaults.

    Args:
        environ: Environment mapping to read. If None, uses os.environ

    Returns:
        Validated LauncherConfig with a concrete launch mode

    Raises:
        ConfigError: If any variable holds an invalid value
    """
    if environ is None:
        environ = os.environ

    defaults = LauncherConfig()

    java_home_fallback = defaults.java_home_fallback
    raw = environ.get(JAVA_HOME_FALLBACK_VAR, "")
    if raw.strip():
        java_home_fallback = parse_bool(JAVA_HOME_FALLBACK_VAR, raw)

    verbose = defaults.verbose
    raw = environ.get(VERBOSE_VAR, "")
    if raw.strip():
        verbose = parse_bool(VERBOSE_VAR, raw)

    mode = defaults.launch_mode
    raw = environ.get(LAUNCH_MODE_VAR, "")
    if raw.strip():
        mode = raw.strip().lower()

    return LauncherConfig(
        java_home_fallback=java_home_fallback,
        launch_mode=resolve_launch_mode(mode),
        verbose=verbose,
    )

"""Java runtime resolution.

Java is looked up on PATH first. When that fails and the JAVA_HOME fallback
is enabled, the executable is taken from JAVA_HOME/bin/java instead.
"""

import logging
import os
import shutil
import stat
from typing import Mapping, Optional

from .errors import (
    JavaHomeMissingError,
    JavaHomeNotDirectoryError,
    JavaHomeUnsetError,
    JavaNotOnPathError,
)

logger = logging.getLogger(__name__)

JAVA_EXECUTABLE = "java"
JAVA_HOME_VAR = "JAVA_HOME"


def find_java_on_path(search_path: Optional[str] = None) -> Optional[str]:
    """Search the process search path for a java executable.

    Args:
        search_path: PATH-style string to search. If None, uses the PATH of
            the current process.

    Returns:
        Path to java if found, None otherwise
    """
    return shutil.which(JAVA_EXECUTABLE, path=search_path)


def java_from_home(java_home: str) -> str:
    """Return the java executable inside a JAVA_HOME directory.

    Only JAVA_HOME itself is checked. Whether bin/java exists is left to
    the execution step, which reports it as an execution error.

    Raises:
        JavaHomeMissingError: If java_home cannot be stat'ed
        JavaHomeNotDirectoryError: If java_home is not a directory
    """
    try:
        st = os.stat(java_home)
    except OSError as e:
        raise JavaHomeMissingError(f"Java not found in JAVA_HOME: {e}") from e

    if not stat.S_ISDIR(st.st_mode):
        raise JavaHomeNotDirectoryError(f"JAVA_HOME is not a directory: {java_home}")

    return os.path.join(java_home, "bin", JAVA_EXECUTABLE)


def find_java(
    java_home_fallback: bool = True,
    environ: Optional[Mapping[str, str]] = None,
) -> str:
    """Resolve the Java executable to launch.

    PATH always takes precedence over JAVA_HOME. JAVA_HOME is consulted
    only when java is not on PATH and java_home_fallback is True.

    Args:
        java_home_fallback: Whether to fall back to JAVA_HOME
        environ: Environment mapping providing PATH and JAVA_HOME. If None,
            uses os.environ

    Returns:
        Path to the Java executable

    Raises:
        JavaNotOnPathError: If java is not on PATH and the fallback is disabled
        JavaHomeUnsetError: If java is not on PATH and JAVA_HOME is not set
        JavaHomeMissingError: If JAVA_HOME cannot be inspected
        JavaHomeNotDirectoryError: If JAVA_HOME is not a directory
    """
    if environ is None:
        environ = os.environ

    # shutil.which falls back to os.defpath when PATH is missing entirely,
    # so pass an explicit empty string to keep "no PATH" meaning "no search"
    java = find_java_on_path(environ.get("PATH", ""))
    if java is not None:
        logger.debug(f"Found java on PATH: {java}")
        return java

    if not java_home_fallback:
        raise JavaNotOnPathError("Java not found in PATH")

    java_home = environ.get(JAVA_HOME_VAR)
    if java_home is None:
        raise JavaHomeUnsetError("Java not found in PATH and JAVA_HOME not set")

    java = java_from_home(java_home)
    logger.debug(f"java not on PATH, using JAVA_HOME: {java}")
    return java

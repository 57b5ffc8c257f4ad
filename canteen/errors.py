"""Exception classes for bootstrap errors.

This module defines the exception hierarchy used by the launcher. The base
BootstrapError class lets the CLI catch every launcher failure with a single
handler, while the subclasses keep a distinct diagnostic for each cause.
"""


class BootstrapError(Exception):
    """Base exception for launcher errors.

    All launcher-specific exceptions inherit from this class. Every one of
    them is fatal: the CLI reports the message and exits non-zero.
    """
    pass


class JavaResolutionError(BootstrapError):
    """Raised when no Java executable can be located.

    This is the base class for resolution errors. Subclasses distinguish
    between the search path miss and the different JAVA_HOME problems.
    """
    pass


class JavaNotOnPathError(JavaResolutionError):
    """Raised when java is not on PATH and the JAVA_HOME fallback is disabled."""
    pass


class JavaHomeUnsetError(JavaResolutionError):
    """Raised when java is not on PATH and JAVA_HOME is not set."""
    pass


class JavaHomeMissingError(JavaResolutionError):
    """Raised when JAVA_HOME is set but the path cannot be inspected."""
    pass


class JavaHomeNotDirectoryError(JavaResolutionError):
    """Raised when JAVA_HOME points at something other than a directory."""
    pass


class BootstrapExecutionError(BootstrapError):
    """Raised when Java could not be started or its exit status is unknown.

    This covers:
    - The executable could not be spawned or exec'd
    - The child terminated without a conventional exit code (e.g. a signal)
    """
    pass


__all__ = [
    'BootstrapError',
    'JavaResolutionError',
    'JavaNotOnPathError',
    'JavaHomeUnsetError',
    'JavaHomeMissingError',
    'JavaHomeNotDirectoryError',
    'BootstrapExecutionError',
]

"""Building the ``java -jar <self> <args>`` invocation."""

from dataclasses import dataclass
from typing import List, Sequence, Tuple

DOT_SLASH = "./"


@dataclass(frozen=True)
class Invocation:
    """A Java invocation, built once per run.

    Attributes:
        java: Path to the Java executable.
        args: Arguments after argv[0]: "-jar", the jar path, then the
            forwarded arguments in their original order.
    """
    java: str
    args: Tuple[str, ...]

    def argv(self, argv0: str) -> List[str]:
        """Return the full argument vector, with argv0 as argument 0."""
        return [argv0, *self.args]


def jar_path(self_path: str) -> str:
    """Return the jar argument for the launcher's own invocation name.

    Exactly one leading "./" is removed. The path is not made absolute and
    symlinks are not resolved.
    """
    if self_path.startswith(DOT_SLASH):
        return self_path[len(DOT_SLASH):]
    return self_path


def build_invocation(java: str, self_path: str, forwarded: Sequence[str]) -> Invocation:
    """Build the invocation that runs self_path as a jar.

    Args:
        java: Resolved Java executable
        self_path: Argument 0 of the launcher process
        forwarded: Remaining launcher arguments, passed through untouched

    Returns:
        Invocation equivalent to ``java -jar <self_path> <forwarded...>``
    """
    return Invocation(java=java, args=("-jar", jar_path(self_path), *forwarded))

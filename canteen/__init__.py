"""Bootstrap launcher that re-runs itself as ``java -jar <self>``."""

__version__ = "0.1.0"

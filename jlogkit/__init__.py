"""Logging levels, log records, one-time error reporting and log file name patterns."""

__version__ = "0.1.0"
__all__ = ["levels", "errors", "records", "filepattern"]
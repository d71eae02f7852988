"""Package version, kept in one place for the User-Agent header."""

__version__ = "1.0.0"

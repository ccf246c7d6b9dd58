"""Package version, embedded in the default User-Agent header."""

__version__ = "0.3.0"

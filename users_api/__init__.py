"""JSON-file backed users API."""

__version__ = "1.0.0"

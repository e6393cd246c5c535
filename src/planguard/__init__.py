"""planguard: pre-deletion guard for planning solution data objects."""

__version__ = "0.1.0"

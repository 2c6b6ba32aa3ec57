"""Cost tracker: a cost ledger with cached monthly per-category reports."""

__version__ = "0.1.0"

"""Enumerations for domain models."""

from enum import Enum


class CostCategory(str, Enum):
    """Fixed set of cost categories.

    Member order is the canonical report order.
    """

    FOOD = "food"
    EDUCATION = "education"
    HEALTH = "health"
    HOUSING = "housing"
    SPORTS = "sports"


class LogLevel(str, Enum):
    """Severity levels accepted by the log collector."""

    DEBUG = "debug"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"

"""Configuration package."""

from cost_tracker.config.settings import (
    Settings,
    TeamMember,
    get_settings,
    set_settings,
    reset_settings,
)
from cost_tracker.config.logging_config import setup_logging

__all__ = [
    "Settings",
    "TeamMember",
    "get_settings",
    "set_settings",
    "reset_settings",
    "setup_logging",
]

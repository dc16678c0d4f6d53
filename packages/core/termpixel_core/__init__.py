"""Core app services for settings, logging and performance budgeting."""

from .config import AppConfig, config_path, load_config, save_config
from .logging_setup import configure_logging, get_logger, install_crash_hooks
from .performance import BudgetStatus, PerformanceController, PerformanceTargets

__all__ = [
    "AppConfig",
    "BudgetStatus",
    "PerformanceController",
    "PerformanceTargets",
    "config_path",
    "configure_logging",
    "get_logger",
    "install_crash_hooks",
    "load_config",
    "save_config",
]

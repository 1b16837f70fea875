# src/patternkit/config/defaults.py
from enum import Enum


class LogLevel(str, Enum):
    """Log level enumeration."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogRenderer(str, Enum):
    """Log renderer enumeration."""
    CONSOLE = "console"
    JSON = "json"


DEFAULT_MEAL_STEPS = ["main_course", "side_dish", "drink"]

DEFAULT_CONFIG = {
    # Logging configuration
    "logging": {
        "level": "${PATTERNKIT_LOG_LEVEL:INFO}",
        "renderer": "${PATTERNKIT_LOG_RENDERER:console}",
        "logger_name": "patternkit",
    },

    # Composite tree rendering
    "composite": {
        "indent": "${PATTERNKIT_DESCRIBE_INDENT:2}",
        "indent_char": " ",
    },

    # Stepwise assembly
    "builder": {
        "default_steps": DEFAULT_MEAL_STEPS,
    },
}

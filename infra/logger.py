"""
Centralized Logging Configuration

Provides structured logging for the environment loader with:
- Component-specific loggers
- Consistent formatting
- Load timing
- Validation error tracking

Only variable and field names are logged, never their values.
"""

import logging
import sys
from typing import List, Optional


# ═══════════════════════════════════════════════════════════════════════════════
# LOGGER CONFIGURATION
# ═══════════════════════════════════════════════════════════════════════════════

def setup_logging(level: str = "INFO", log_file: Optional[str] = None):
    """
    Configure logging for the entire application.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file path to write logs to
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    console_formatter = logging.Formatter(
        fmt="%(asctime)s | %(name)-15s | %(levelname)-8s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    file_formatter = logging.Formatter(
        fmt="%(asctime)s | %(name)s | %(levelname)s | %(filename)s:%(lineno)d | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(console_formatter)

    root_logger = logging.getLogger()

    # Prevent duplicate logs if setup_logging() is called again
    if root_logger.handlers:
        root_logger.handlers.clear()

    root_logger.setLevel(log_level)
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(log_level)
        file_handler.setFormatter(file_formatter)
        root_logger.addHandler(file_handler)


# ═══════════════════════════════════════════════════════════════════════════════
# COMPONENT LOGGERS
# ═══════════════════════════════════════════════════════════════════════════════

# Initialize logging (main() reconfigures it from app.config)
setup_logging(level="INFO")

logger_loader = logging.getLogger("env.loader")
logger_validator = logging.getLogger("env.validator")
logger_api = logging.getLogger("env.api")


# ═══════════════════════════════════════════════════════════════════════════════
# STRUCTURED LOGGING HELPERS
# ═══════════════════════════════════════════════════════════════════════════════

class LogContext:
    """Helper for consistent structured logging"""

    @staticmethod
    def format_dict(data: dict) -> str:
        """Format dictionary for logging"""
        return " | ".join(f"{k}={v}" for k, v in data.items())

    @staticmethod
    def format_names(names: List[str]) -> str:
        return ",".join(names) if names else "-"

    @staticmethod
    def format_timing(duration_seconds: float) -> str:
        """Format timing information"""
        return f"{duration_seconds * 1000:.2f}ms"


# ═══════════════════════════════════════════════════════════════════════════════
# LOGGING UTILITIES
# ═══════════════════════════════════════════════════════════════════════════════

def log_load_start(schema_name: str, variables: List[str]):
    """Log the start of an environment load"""
    context = {"schema": schema_name, "variables": LogContext.format_names(variables)}
    logger_loader.info(f"LOAD_START | {LogContext.format_dict(context)}")


def log_env_file(path: str, loaded: bool, override: bool):
    """Log the outcome of reading a .env file"""
    context = {"path": path, "loaded": loaded, "override": override}
    logger_loader.debug(f"ENV_FILE | {LogContext.format_dict(context)}")


def log_missing_variables(variables: List[str]):
    """Log variables absent from the environment"""
    if variables:
        logger_loader.debug(f"MISSING_VARIABLES | names={LogContext.format_names(variables)}")


def log_validation_error(field: str, reasons: List[str], source: Optional[str] = None):
    """Log validation error"""
    context = {"field": field, "reasons": "; ".join(reasons)}
    if source:
        context["source"] = source
    logger_validator.error(f"VALIDATION_ERROR | {LogContext.format_dict(context)}")


def log_load_complete(fields: List[str], duration_seconds: float):
    """Log a successful environment load"""
    context = {
        "fields": LogContext.format_names(fields),
        "duration": LogContext.format_timing(duration_seconds)
    }
    logger_loader.info(f"LOAD_COMPLETE | {LogContext.format_dict(context)}")


def log_load_failed(fields: List[str], duration_seconds: float):
    """Log a failed environment load"""
    context = {
        "invalid": LogContext.format_names(fields),
        "duration": LogContext.format_timing(duration_seconds)
    }
    logger_loader.error(f"LOAD_FAILED | {LogContext.format_dict(context)}")

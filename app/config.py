"""
Application Configuration

Centralized constants for how the runtime environment is loaded and
how the application logs. The environment values themselves are
declared in core/schema.py and loaded by core/loader.py.
"""

from typing import Optional


# ═══════════════════════════════════════════════════════════════════════════════
# .ENV FILE
# ═══════════════════════════════════════════════════════════════════════════════

# Path of the local env-definition file, relative to the working directory
ENV_FILE_PATH: str = ".env"

# Load ENV_FILE_PATH into the process environment before reading variables
LOAD_ENV_FILE: bool = True

# Let .env values replace variables already set in the process environment
ENV_FILE_OVERRIDE: bool = False


# ═══════════════════════════════════════════════════════════════════════════════
# LOGGING CONFIGURATION
# ═══════════════════════════════════════════════════════════════════════════════

# Log level for the application
LOG_LEVEL: str = "INFO"  # DEBUG, INFO, WARNING, ERROR, CRITICAL

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Enable file logging
ENABLE_FILE_LOGGING: bool = False

# Log file path
LOG_FILE_PATH: str = "runtime/logs/env.log"


# ═══════════════════════════════════════════════════════════════════════════════
# HELPER FUNCTIONS
# ═══════════════════════════════════════════════════════════════════════════════

def get_log_file() -> Optional[str]:
    """Log file path, or None when file logging is disabled"""
    return LOG_FILE_PATH if ENABLE_FILE_LOGGING else None


def validate_config():
    """Validate configuration on startup"""
    assert LOG_LEVEL in VALID_LOG_LEVELS, f"Invalid LOG_LEVEL: {LOG_LEVEL}"
    assert not LOAD_ENV_FILE or ENV_FILE_PATH, "ENV_FILE_PATH required when LOAD_ENV_FILE is set"
    assert not ENABLE_FILE_LOGGING or LOG_FILE_PATH, "LOG_FILE_PATH required when file logging is enabled"

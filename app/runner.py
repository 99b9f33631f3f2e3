"""
Startup Runner

Receives the validated environment from main() and reports what the
application will run with. Nothing here reads the process environment
directly.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel

from core.schema import ENV_SOURCES, get_source_name
from infra.logger import logger_api


def summarize_environment(env: BaseModel, sources: Optional[Dict[str, str]] = None) -> List[str]:
    """
    One line per validated field.

    Example:
        "API_URL (NEXT_PUBLIC_API_URL) = https://api.example.com"
    """
    source_map = ENV_SOURCES if sources is None else sources
    return [
        f"{name} ({get_source_name(name, source_map)}) = {value}"
        for name, value in env.model_dump().items()
    ]


def run(env: BaseModel, sources: Optional[Dict[str, str]] = None) -> List[str]:
    """Log the startup summary and return it"""
    lines = summarize_environment(env, sources)
    logger_api.info(f"ENV_READY | fields={len(lines)}")
    return lines

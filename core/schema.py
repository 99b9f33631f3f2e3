"""
Environment Schema

Declares the variables the application requires at startup and where
each one is read from in the process environment.
"""

from typing import Dict

from pydantic import BaseModel, ConfigDict, Field


# ═══════════════════════════════════════════════════════════════════════════════
# SCHEMA
# ═══════════════════════════════════════════════════════════════════════════════

class EnvSchema(BaseModel):
    """
    Validated runtime environment.

    Strict so that only real strings pass, frozen so the record cannot
    change once startup has produced it.

    Attributes:
        API_URL: Base URL of the backend API
    """
    model_config = ConfigDict(frozen=True, strict=True)

    API_URL: str = Field(
        ...,
        min_length=1,
        description="Base URL of the backend API",
        examples=["https://api.example.com"]
    )


# ═══════════════════════════════════════════════════════════════════════════════
# VARIABLE SOURCES
# ═══════════════════════════════════════════════════════════════════════════════

# Logical field name -> environment variable it is read from.
# Fields missing here are read from the variable with the same name.
ENV_SOURCES: Dict[str, str] = {
    "API_URL": "NEXT_PUBLIC_API_URL",
}


def get_source_name(field_name: str, sources: Dict[str, str] = ENV_SOURCES) -> str:
    """Environment variable name for a schema field"""
    return sources.get(field_name, field_name)

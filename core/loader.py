"""
Environment Loader

Produces the validated runtime environment at startup, or fails with a
single error describing every missing or invalid variable.

Flow:
1. Optionally load a .env file into the environment
2. Read each schema field from its source variable
3. Validate all fields together
4. Return the typed record, or raise ConfigurationInvalid
"""

import time
from typing import Dict, MutableMapping, Optional, Type

from pydantic import BaseModel

from app.config import ENV_FILE_OVERRIDE, ENV_FILE_PATH, LOAD_ENV_FILE
from core.errors import ConfigurationInvalid
from core.schema import ENV_SOURCES, EnvSchema, get_source_name
from core.validator import PydanticValidator, Validator
from infra.env import load_env_file, missing_variables, read_raw_environment
from infra.logger import (
    log_env_file,
    log_load_complete,
    log_load_failed,
    log_load_start,
    log_missing_variables,
    log_validation_error,
)


class EnvironmentLoader:
    """
    Reads, validates and returns the runtime environment.

    Every collaborator is injectable so tests and alternate entry points
    can supply their own schema, variable sources, validator or
    environment mapping.

    Attributes:
        schema: Pydantic model describing the required fields
        sources: Field name -> environment variable name
        validator: Callable mapping raw values to a ValidationResult
        env_file: Path of the .env file loaded before reading
        load_env_file: Whether to load env_file at all
        override_env: Let .env values replace variables already set
        environ: Mapping to read from (None means the process environment)
    """

    def __init__(
        self,
        schema: Type[BaseModel] = EnvSchema,
        sources: Optional[Dict[str, str]] = None,
        validator: Optional[Validator] = None,
        env_file: str = ENV_FILE_PATH,
        load_env_file: bool = LOAD_ENV_FILE,
        override_env: bool = ENV_FILE_OVERRIDE,
        environ: Optional[MutableMapping[str, str]] = None
    ):
        self.schema = schema
        source_map = ENV_SOURCES if sources is None else sources
        self.sources = {
            name: get_source_name(name, source_map) for name in schema.model_fields
        }
        self.validator = validator or PydanticValidator(schema)
        self.env_file = env_file
        self.load_env_file = load_env_file
        self.override_env = override_env
        self.environ = environ

    def load(self) -> BaseModel:
        """
        Load and validate the environment.

        Returns:
            Frozen instance of the schema holding every validated field

        Raises:
            ConfigurationInvalid: If any field is missing or invalid
        """
        start = time.time()
        log_load_start(self.schema.__name__, list(self.sources.values()))

        if self.load_env_file and self.env_file:
            loaded = load_env_file(self.env_file, self.environ, override=self.override_env)
            log_env_file(self.env_file, loaded, self.override_env)

        raw = read_raw_environment(self.sources, self.environ)
        log_missing_variables(missing_variables(self.sources.values(), self.environ))

        result = self.validator(raw)

        if not result.success:
            fields = [(error.name, error.reasons) for error in result.errors]
            for name, reasons in fields:
                log_validation_error(name, reasons, source=self.sources.get(name))
            log_load_failed([name for name, _ in fields], time.time() - start)
            raise ConfigurationInvalid(fields)

        log_load_complete(list(self.sources), time.time() - start)
        return result.data


def load_environment(**options) -> BaseModel:
    """
    Build a loader with the given options and run it once.

    Accepts the same keyword arguments as EnvironmentLoader.
    """
    return EnvironmentLoader(**options).load()

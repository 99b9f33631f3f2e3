import os
from typing import Dict, Iterable, List, MutableMapping, Optional

from dotenv import dotenv_values, load_dotenv


def _target(environ: Optional[MutableMapping[str, str]]) -> MutableMapping[str, str]:
    return os.environ if environ is None else environ


def load_env_file(
    path: str,
    environ: Optional[MutableMapping[str, str]] = None,
    override: bool = False
) -> bool:
    """
    Load KEY=VALUE pairs from a .env file into the environment.

    A missing file is not an error. Existing variables are kept unless
    override is set.

    Args:
        path: Path to the .env file
        environ: Mapping to load into (defaults to the process environment)
        override: Let file values replace variables that are already set

    For an injected mapping, ${VAR} references in the file are still
    expanded from the process environment, as python-dotenv does.

    Returns:
        True if the file declared at least one key, as load_dotenv reports
    """
    if not os.path.isfile(path):
        return False

    if environ is None or environ is os.environ:
        return load_dotenv(dotenv_path=path, override=override)

    values = dotenv_values(path)
    for key, value in values.items():
        # Keys without a value are declared but never set, like load_dotenv
        if value is None:
            continue
        if override or key not in environ:
            environ[key] = value
    return bool(values)


def read_raw_environment(
    sources: Dict[str, str],
    environ: Optional[MutableMapping[str, str]] = None
) -> Dict[str, str]:
    """
    Capture the raw value of each source variable, keyed by field name.

    Variables that are not set are left out of the result.
    """
    env = _target(environ)
    return {field: env[name] for field, name in sources.items() if name in env}


def missing_variables(
    names: Iterable[str],
    environ: Optional[MutableMapping[str, str]] = None
) -> List[str]:
    env = _target(environ)
    return [name for name in names if name not in env]

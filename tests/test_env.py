"""
Test suite for process environment access (.env loading, raw capture)
"""

import os
import sys
import tempfile
from pathlib import Path
from unittest.mock import patch

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from infra.env import load_env_file, missing_variables, read_raw_environment


SOURCES = {"API_URL": "NEXT_PUBLIC_API_URL", "AUTH_URL": "NEXT_PUBLIC_AUTH_URL"}


def test_read_raw_environment_omits_absent():
    """Unset variables are absent, not empty."""

    print("Testing read_raw_environment...")

    environ = {"NEXT_PUBLIC_API_URL": "https://api.example.com", "OTHER": "x"}

    assert read_raw_environment(SOURCES, environ) == {"API_URL": "https://api.example.com"}
    assert missing_variables(SOURCES.values(), environ) == ["NEXT_PUBLIC_AUTH_URL"]

    print("✓ read_raw_environment tests passed")


def test_read_raw_environment_defaults_to_process():
    with patch.dict(os.environ, {"NEXT_PUBLIC_AUTH_URL": "https://auth.example.com"}, clear=True):
        raw = read_raw_environment(SOURCES)

    assert raw == {"AUTH_URL": "https://auth.example.com"}


def test_load_env_file_missing_returns_false():
    environ = {}

    assert load_env_file("/nonexistent/dir/.env", environ) is False
    assert environ == {}


def test_load_env_file_parses_key_value_lines():
    """Comments, blank lines, quotes and export prefixes are handled."""

    content = (
        "# local settings\n"
        "\n"
        "NEXT_PUBLIC_API_URL='https://file.example.com'\n"
        "export NEXT_PUBLIC_AUTH_URL=https://auth.example.com\n"
    )

    with tempfile.TemporaryDirectory() as tmp:
        path = os.path.join(tmp, ".env")
        with open(path, "w") as f:
            f.write(content)

        environ = {"NEXT_PUBLIC_AUTH_URL": "https://kept.example.com"}
        assert load_env_file(path, environ) is True

    assert environ == {
        "NEXT_PUBLIC_API_URL": "https://file.example.com",
        "NEXT_PUBLIC_AUTH_URL": "https://kept.example.com",
    }


def test_load_env_file_override_replaces_existing():
    with tempfile.TemporaryDirectory() as tmp:
        path = os.path.join(tmp, ".env")
        with open(path, "w") as f:
            f.write("NEXT_PUBLIC_API_URL=https://file.example.com\n")

        environ = {"NEXT_PUBLIC_API_URL": "https://api.example.com"}
        load_env_file(path, environ, override=True)

    assert environ["NEXT_PUBLIC_API_URL"] == "https://file.example.com"


def test_load_env_file_value_less_keys():
    """Keys without a value count as loaded but are never set."""

    with tempfile.TemporaryDirectory() as tmp:
        path = os.path.join(tmp, ".env")
        with open(path, "w") as f:
            f.write("NEXT_PUBLIC_API_URL\n")

        environ = {}
        assert load_env_file(path, environ) is True
        assert environ == {}

        with patch.dict(os.environ, {}, clear=True):
            assert load_env_file(path) is True
            assert "NEXT_PUBLIC_API_URL" not in os.environ


def run_all_tests():
    """Run all test functions."""
    print("\n" + "="*60)
    print("Running Environment Access Tests")
    print("="*60 + "\n")

    test_read_raw_environment_omits_absent()
    test_read_raw_environment_defaults_to_process()
    test_load_env_file_missing_returns_false()
    test_load_env_file_parses_key_value_lines()
    test_load_env_file_override_replaces_existing()
    test_load_env_file_value_less_keys()

    print("\n" + "="*60)
    print("✅ ALL TESTS PASSED!")
    print("="*60 + "\n")


if __name__ == "__main__":
    run_all_tests()

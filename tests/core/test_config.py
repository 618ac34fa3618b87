import os
import subprocess
import sys
from pathlib import Path

import pytest
from pydantic import ValidationError
from mapiter.core.config import DEFAULT_DEPTH, DEFAULT_SEPARATOR, Settings


def test_defaults():
    settings = Settings.load(environ={})
    assert settings.LOG_LEVEL == "INFO"
    assert "%(message)s" in settings.LOG_FORMAT


def test_function_defaults():
    assert DEFAULT_SEPARATOR == ","
    assert DEFAULT_DEPTH == 1


def test_prefixed_environment_wins():
    settings = Settings.load(
        environ={"MAPITER_LOG_LEVEL": "debug", "LOG_LEVEL": "ERROR"}
    )
    assert settings.LOG_LEVEL == "DEBUG"


def test_generic_log_level_is_ignored():
    settings = Settings.load(environ={"LOG_LEVEL": "trace"})
    assert settings.LOG_LEVEL == "INFO"


def test_custom_format():
    settings = Settings.load(environ={"MAPITER_LOG_FORMAT": "%(levelname)s %(message)s"})
    assert settings.LOG_FORMAT == "%(levelname)s %(message)s"


def test_unknown_level_is_rejected():
    with pytest.raises(ValidationError):
        Settings(LOG_LEVEL="chatty")


def test_import_ignores_generic_log_level():
    env = dict(os.environ, LOG_LEVEL="trace")
    env.pop("MAPITER_LOG_LEVEL", None)
    src = Path(__file__).resolve().parents[2] / "src"
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(src), env.get("PYTHONPATH")]))

    result = subprocess.run(
        [sys.executable, "-c", "import mapiter"],
        env=env,
        capture_output=True,
        text=True,
    )
    assert result.returncode == 0, result.stderr
